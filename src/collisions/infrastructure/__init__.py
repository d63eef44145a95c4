"""
Infrastructure module initialization.
"""
from .record_parser import CollisionRecordParser, RECORD_FIELDS, RECORD_LENGTH
from .csv_source import CSVCollisionSource

__all__ = [
    "CollisionRecordParser",
    "CSVCollisionSource",
    "RECORD_FIELDS",
    "RECORD_LENGTH"
]
