from typing import List
from pydantic import BaseModel, Field, field_validator

class SourceSettings(BaseModel):
    """
    Validated settings of the collisions CSV input.
    """
    path: str = Field(..., min_length=1, description="Path to the collisions CSV file")
    skip_header: bool = Field(True, description="Whether the first row is a header")
    encoding: str = Field("utf-8", description="File encoding")

class ReportSettings(BaseModel):
    """
    Validated settings of the generated reports.
    """
    top_k: int = Field(3, ge=0, description="Number of zip codes in ranked reports")
    vehicle_types: List[str] = Field(
        default_factory=lambda: ["taxi", "bus", "bicycle", "fire truck", "ambulance"],
        description="Vehicle types reported as a share of all collisions"
    )

    @field_validator('vehicle_types')
    @classmethod
    def normalize_vehicle_types(cls, v: List[str]) -> List[str]:
        cleaned = [vehicle_type.strip().lower() for vehicle_type in v]
        if any(not vehicle_type for vehicle_type in cleaned):
            raise ValueError('Vehicle types must not be blank')
        return cleaned
