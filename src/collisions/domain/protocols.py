"""
Domain protocols for the collision reports module.
"""
from typing import Iterator, List, Protocol, Sequence
from .entities import Collision

class RecordParser(Protocol):
    """
    Protocol for turning a raw field list into a Collision.
    Raises RecordParseError on malformed input.
    """
    def parse(self, record: Sequence[str]) -> Collision:
        ...

class CollisionSource(Protocol):
    """
    Protocol for producers of raw collision records.
    """
    def __iter__(self) -> Iterator[List[str]]:
        ...
