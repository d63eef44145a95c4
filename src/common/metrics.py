from dataclasses import dataclass
from typing import Dict
import time

@dataclass
class IngestionMetrics:
    """Ingestion run metrics"""
    records_seen: int
    records_accepted: int
    records_rejected: int
    elapsed_seconds: float
    
    @property
    def acceptance_rate(self) -> float:
        return self.records_accepted / self.records_seen if self.records_seen else 0.0
    
    def to_dict(self) -> Dict:
        return {
            'records_seen': self.records_seen,
            'records_accepted': self.records_accepted,
            'records_rejected': self.records_rejected,
            'elapsed_seconds': self.elapsed_seconds,
            'acceptance_rate': self.acceptance_rate
        }


class MetricsCollector:
    """Collects ingestion counters"""
    
    def __init__(self):
        self.records_accepted = 0
        self.records_rejected = 0
        self.start_time = time.time()
    
    def record_accepted(self):
        self.records_accepted += 1
    
    def record_rejected(self):
        self.records_rejected += 1
    
    def get_metrics(self) -> IngestionMetrics:
        return IngestionMetrics(
            records_seen=self.records_accepted + self.records_rejected,
            records_accepted=self.records_accepted,
            records_rejected=self.records_rejected,
            elapsed_seconds=time.time() - self.start_time
        )
