from omegaconf import DictConfig, OmegaConf
from pydantic import ValidationError
from typing import Dict, Optional

from ..domain import CollisionSource
from ..infrastructure.csv_source import CSVCollisionSource
from .aggregator import ZipAggregator
from .report_service import CollisionReportService
from ...common.exceptions import ConfigurationError
from ...common.logging import log_execution_time, setup_logger
from ...common.metrics import IngestionMetrics, MetricsCollector
from ...common.schemas import ReportSettings, SourceSettings

logger = setup_logger(__name__)

class ReportApplicationBuilder:
    """
    Builder pattern for constructing the collision report application.
    Centralizes component instantiation and wiring.
    """
    
    def __init__(self, config: DictConfig):
        self.config = config
        self.metrics_collector = MetricsCollector()
        report_cfg = config.get('report')
        report_values = OmegaConf.to_container(report_cfg, resolve=True) if report_cfg is not None else {}
        try:
            self.report_settings = ReportSettings(**report_values)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid report configuration: {e}") from e
        
        # Components
        self.source: Optional[CollisionSource] = None
        self.aggregator: Optional[ZipAggregator] = None
        self.service: Optional[CollisionReportService] = None

    def build_source(self) -> 'ReportApplicationBuilder':
        if 'source' not in self.config:
            raise ConfigurationError("Missing required config key: source")
        try:
            settings = SourceSettings(**OmegaConf.to_container(self.config.source, resolve=True))
        except ValidationError as e:
            raise ConfigurationError(f"Invalid source configuration: {e}") from e
        logger.info(f"Opening source: {settings.path}")
        self.source = CSVCollisionSource(
            settings.path,
            skip_header=settings.skip_header,
            encoding=settings.encoding
        )
        return self

    def build_service(self) -> 'ReportApplicationBuilder':
        self.aggregator = ZipAggregator(metrics_collector=self.metrics_collector)
        self.service = CollisionReportService(
            self.aggregator,
            vehicle_types=self.report_settings.vehicle_types
        )
        return self

    @log_execution_time(logger)
    def load(self) -> IngestionMetrics:
        """
        Feeds every record of the source to the service.
        """
        if not self.source:
            self.build_source()
        if not self.service:
            self.build_service()
        
        for record in self.source:
            self.service.add(record)
        
        metrics = self.metrics_collector.get_metrics()
        logger.info(
            f"Loaded {metrics.records_accepted} collisions into {len(self.aggregator)} zip codes "
            f"({metrics.records_rejected} records rejected)"
        )
        return metrics

    def get_components(self) -> Dict:
        """Returns built components for external use"""
        return {
            'source': self.source,
            'aggregator': self.aggregator,
            'service': self.service,
            'metrics_collector': self.metrics_collector
        }
