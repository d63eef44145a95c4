from dataclasses import dataclass, field
from typing import List

@dataclass
class SourceConfig:
    path: str = "data/collisions.csv"
    skip_header: bool = True
    encoding: str = "utf-8"

@dataclass
class ReportConfig:
    top_k: int = 3
    vehicle_types: List[str] = field(default_factory=lambda: ["taxi", "bus", "bicycle", "fire truck", "ambulance"])

@dataclass
class LoggingConfig:
    level: str = "INFO"

@dataclass
class AppConfig:
    source: SourceConfig = field(default_factory=SourceConfig)
    report: ReportConfig = field(default_factory=ReportConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
