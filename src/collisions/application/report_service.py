from typing import Optional, Sequence

from .aggregator import ZipAggregator
from .ranker import top_k
from .scanners import VEHICLE_TYPES, scan_hours, scan_vehicle_types
from ..domain.ranking import Direction, Metric
from ..presentation.formatters import (
    format_casualty_ranking,
    format_collision_ranking,
    format_hourly_stats,
    format_vehicle_type_stats,
)

class CollisionReportService:
    """
    Text reports over the collisions of one aggregator.
    """
    def __init__(self, aggregator: Optional[ZipAggregator] = None,
                 vehicle_types: Sequence[str] = VEHICLE_TYPES):
        self.aggregator = aggregator if aggregator is not None else ZipAggregator()
        self.vehicle_types = tuple(vehicle_types)

    def add(self, record: Sequence[str]) -> bool:
        return self.aggregator.add(record)

    def zip_codes_with_most_collisions(self, k: int) -> str:
        rows = top_k(self.aggregator.groups(), k, Metric.COLLISIONS, Direction.DESCENDING)
        return format_collision_ranking(rows)

    def zip_codes_with_least_collisions(self, k: int) -> str:
        rows = top_k(self.aggregator.groups(), k, Metric.COLLISIONS, Direction.ASCENDING)
        return format_collision_ranking(rows)

    def zip_codes_with_most_cyclist_incidents(self, k: int) -> str:
        rows = top_k(self.aggregator.groups(), k, Metric.CYCLIST_SEVERITY, Direction.DESCENDING)
        return format_casualty_ranking(rows, "cyclists")

    def zip_codes_with_most_person_incidents(self, k: int) -> str:
        rows = top_k(self.aggregator.groups(), k, Metric.PERSON_SEVERITY, Direction.DESCENDING)
        return format_casualty_ranking(rows, "persons")

    def vehicle_type_stats(self) -> str:
        stats = scan_vehicle_types(self.aggregator.collisions(), self.vehicle_types)
        return format_vehicle_type_stats(stats)

    def hourly_stats(self) -> str:
        return format_hourly_stats(scan_hours(self.aggregator.collisions()))
