"""
Top-k ranking of zip groups.

A query for k groups returns at least k groups: every group whose primary
metric value equals the value at rank k is included as well, so a zip is
never left out of a report while another zip with the same value is shown.
"""
from dataclasses import dataclass
from typing import Iterable, List, Union

from ..domain.entities import RankedZip, ZipGroup
from ..domain.ranking import Direction, Metric
from ...common.exceptions import InvalidRankingArgument
from ...common.logging import log_execution_time, setup_logger

logger = setup_logger(__name__)

@dataclass(frozen=True)
class RankingQuery:
    """
    Parameters of a single ranking request.
    """
    k: int
    metric: Metric = Metric.COLLISIONS
    direction: Direction = Direction.DESCENDING

    def __post_init__(self):
        if isinstance(self.k, bool) or not isinstance(self.k, int):
            raise InvalidRankingArgument(f"k must be an integer, got {self.k!r}")
        if self.k < 0:
            raise InvalidRankingArgument(f"k must be non-negative, got {self.k}")
        try:
            object.__setattr__(self, "metric", Metric(self.metric))
            object.__setattr__(self, "direction", Direction(self.direction))
        except ValueError as e:
            raise InvalidRankingArgument(str(e)) from e

@log_execution_time(logger)
def rank(groups: Iterable[ZipGroup], query: RankingQuery) -> List[RankedZip]:
    if query.k == 0:
        return []

    keyed = [(query.metric.rank_key(group), group) for group in groups]
    # list.sort is stable, also with reverse=True, so fully tied groups
    # keep their insertion order
    keyed.sort(key=lambda item: item[0], reverse=query.direction is Direction.DESCENDING)

    if query.k < len(keyed):
        boundary = keyed[query.k - 1][0][0]
        cutoff = query.k
        # Sorted by primary value first, so ties with the boundary are contiguous
        while cutoff < len(keyed) and keyed[cutoff][0][0] == boundary:
            cutoff += 1
        keyed = keyed[:cutoff]

    return [
        RankedZip(zip_code=group.zip_code, value=key[0], secondary=key[1])
        for key, group in keyed
    ]

def top_k(groups: Iterable[ZipGroup], k: int,
          metric: Union[Metric, str] = Metric.COLLISIONS,
          direction: Union[Direction, str] = Direction.DESCENDING) -> List[RankedZip]:
    """
    Returns the k highest (or lowest) ranked zip groups plus every group
    tied with the k-th one on the primary metric value.

    :raises InvalidRankingArgument: if k is negative
    """
    return rank(groups, RankingQuery(k=k, metric=metric, direction=direction))
