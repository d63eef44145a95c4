"""
Domain module initialization.
"""
from .entities import (
    Collision,
    ZipGroup,
    RankedZip
)
from .ranking import Metric, Direction, RankKey
from .protocols import RecordParser, CollisionSource
