"""
Parser for positional collision records.
"""
from typing import Dict, Sequence

from pydantic import ValidationError

from ..domain.entities import Collision
from ...common.exceptions import RecordParseError

# Position of each used column in a raw record. Columns 4-7 (location and
# street names) and 16-17 (contributing factors) are not used.
RECORD_FIELDS: Dict[str, int] = {
    "date": 0,
    "time": 1,
    "borough": 2,
    "zip_code": 3,
    "persons_injured": 8,
    "persons_killed": 9,
    "pedestrians_injured": 10,
    "pedestrians_killed": 11,
    "cyclists_injured": 12,
    "cyclists_killed": 13,
    "motorists_injured": 14,
    "motorists_killed": 15,
    "unique_key": 18,
    "vehicle_code_1": 19,
    "vehicle_code_2": 20,
}

RECORD_LENGTH = 21

class CollisionRecordParser:
    """
    Validates a list of string fields and builds a Collision.
    """

    def parse(self, record: Sequence[str]) -> Collision:
        try:
            size = len(record)
        except TypeError as e:
            raise RecordParseError(f"Record is not a field list: {record!r}") from e
        if size < RECORD_LENGTH:
            raise RecordParseError(f"Expected {RECORD_LENGTH} fields, got {size}")

        values = {}
        for name, index in RECORD_FIELDS.items():
            value = record[index]
            if not isinstance(value, str):
                raise RecordParseError(f"Field '{name}' is not a string: {value!r}")
            values[name] = value.strip()

        try:
            return Collision(**values)
        except ValidationError as e:
            raise RecordParseError(f"Invalid collision record: {e}") from e
