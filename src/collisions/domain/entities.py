"""
Domain entities for the collision reports module.
"""
import re
from dataclasses import dataclass, field
from typing import Iterator, List

from pydantic import BaseModel, ConfigDict, Field, field_validator

COUNT_FIELDS = (
    "persons_injured", "persons_killed",
    "pedestrians_injured", "pedestrians_killed",
    "cyclists_injured", "cyclists_killed",
    "motorists_injured", "motorists_killed",
)

class Collision(BaseModel):
    """
    A single validated vehicle collision.
    """
    date: str = Field("", description="Date of the collision")
    time: str = Field("", description="Time of the collision, HH:MM")
    borough: str = Field("", description="Borough name")
    zip_code: str = Field(..., pattern=r"^[0-9]{5}$", description="Five digit zip code, used as grouping key")
    persons_injured: int = Field(0, ge=0)
    persons_killed: int = Field(0, ge=0)
    pedestrians_injured: int = Field(0, ge=0)
    pedestrians_killed: int = Field(0, ge=0)
    cyclists_injured: int = Field(0, ge=0)
    cyclists_killed: int = Field(0, ge=0)
    motorists_injured: int = Field(0, ge=0)
    motorists_killed: int = Field(0, ge=0)
    unique_key: str = Field("", description="Identifier of the record in the source dataset")
    vehicle_code_1: str = Field("", description="Type of the first vehicle involved")
    vehicle_code_2: str = Field("", description="Type of the second vehicle involved")

    model_config = ConfigDict(frozen=True)

    @field_validator(*COUNT_FIELDS, mode="before")
    @classmethod
    def validate_count(cls, v: object) -> object:
        # ASCII digits only, no sign, separator or decimal point
        if isinstance(v, str) and not re.fullmatch(r"[0-9]+", v):
            raise ValueError(f"Count must be a non-negative integer, got {v!r}")
        if isinstance(v, bool) or not isinstance(v, (int, str)):
            raise ValueError(f"Count must be an integer, got {v!r}")
        return v

    def involves_vehicle(self, vehicle_type: str) -> bool:
        """Case-insensitive match against either vehicle code."""
        wanted = vehicle_type.casefold()
        return (
            self.vehicle_code_1.casefold() == wanted
            or self.vehicle_code_2.casefold() == wanted
        )

@dataclass
class ZipGroup:
    """
    All collisions sharing one zip code, with running totals.
    """
    zip_code: str
    collisions: List[Collision] = field(default_factory=list)
    total_collisions: int = 0
    total_persons_injured: int = 0
    total_persons_killed: int = 0
    total_cyclists_injured: int = 0
    total_cyclists_killed: int = 0

    def add(self, collision: Collision) -> None:
        if collision.zip_code != self.zip_code:
            raise ValueError(
                f"Collision zip {collision.zip_code} does not belong to group {self.zip_code}"
            )
        self.collisions.append(collision)
        self.total_collisions += 1
        self.total_persons_injured += collision.persons_injured
        self.total_persons_killed += collision.persons_killed
        self.total_cyclists_injured += collision.cyclists_injured
        self.total_cyclists_killed += collision.cyclists_killed

    def __iter__(self) -> Iterator[Collision]:
        return iter(self.collisions)

    def __len__(self) -> int:
        return self.total_collisions

@dataclass(frozen=True)
class RankedZip:
    """
    One row of a ranking result.
    """
    zip_code: str
    value: int
    secondary: int = 0 # killed count for severity metrics
