from typing import Dict, Iterator, Optional, Sequence

from ..domain.entities import Collision, ZipGroup
from ..domain.protocols import RecordParser
from ..infrastructure.record_parser import CollisionRecordParser
from ...common.exceptions import RecordParseError
from ...common.logging import setup_logger
from ...common.metrics import MetricsCollector

logger = setup_logger(__name__)

class ZipAggregator:
    """
    Groups collisions by zip code and keeps running totals per zip.
    Groups are kept in the order their zip was first seen.
    """
    def __init__(self, parser: Optional[RecordParser] = None,
                 metrics_collector: Optional[MetricsCollector] = None):
        self.parser = parser or CollisionRecordParser()
        self.metrics_collector = metrics_collector
        self._groups: Dict[str, ZipGroup] = {}

    def add(self, record: Sequence[str]) -> bool:
        """
        Parse a raw record and add it. Returns False, leaving the state
        untouched, when the record is malformed.
        """
        try:
            collision = self.parser.parse(record)
        except RecordParseError as e:
            logger.debug(f"Rejected record: {e}")
            if self.metrics_collector:
                self.metrics_collector.record_rejected()
            return False

        self.add_collision(collision)
        if self.metrics_collector:
            self.metrics_collector.record_accepted()
        return True

    def add_collision(self, collision: Collision) -> ZipGroup:
        group = self._groups.get(collision.zip_code)
        if group is None:
            group = ZipGroup(zip_code=collision.zip_code)
            self._groups[collision.zip_code] = group
        group.add(collision)
        return group

    def groups(self) -> Iterator[ZipGroup]:
        return iter(self._groups.values())

    def collisions(self) -> Iterator[Collision]:
        for group in self._groups.values():
            yield from group

    def get(self, zip_code: str) -> Optional[ZipGroup]:
        return self._groups.get(zip_code)

    @property
    def total_collisions(self) -> int:
        return sum(group.total_collisions for group in self._groups.values())

    def __len__(self) -> int:
        return len(self._groups)

    def __contains__(self, zip_code: object) -> bool:
        return zip_code in self._groups
