"""
Ranking metrics and directions for zip groups.
"""
from enum import Enum
from typing import Callable, Dict, Tuple

from .entities import ZipGroup

RankKey = Tuple[int, int]

class Direction(str, Enum):
    ASCENDING = "asc"
    DESCENDING = "desc"

class Metric(str, Enum):
    """
    Value a zip group is ranked by. Severity metrics rank by
    injured + killed and break ties by killed.
    """
    COLLISIONS = "collisions"
    PERSON_SEVERITY = "persons"
    CYCLIST_SEVERITY = "cyclists"

    def rank_key(self, group: ZipGroup) -> RankKey:
        return _RANK_KEYS[self](group)

def _collisions_key(group: ZipGroup) -> RankKey:
    return group.total_collisions, 0

def _person_severity_key(group: ZipGroup) -> RankKey:
    return (
        group.total_persons_injured + group.total_persons_killed,
        group.total_persons_killed,
    )

def _cyclist_severity_key(group: ZipGroup) -> RankKey:
    return (
        group.total_cyclists_injured + group.total_cyclists_killed,
        group.total_cyclists_killed,
    )

_RANK_KEYS: Dict[Metric, Callable[[ZipGroup], RankKey]] = {
    Metric.COLLISIONS: _collisions_key,
    Metric.PERSON_SEVERITY: _person_severity_key,
    Metric.CYCLIST_SEVERITY: _cyclist_severity_key,
}
