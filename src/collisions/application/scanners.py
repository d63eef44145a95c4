"""
Single-pass reductions over every collision: vehicle type shares and
the hourly distribution.
"""
import re
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Sequence

from ..domain.entities import Collision

VEHICLE_TYPES = ("taxi", "bus", "bicycle", "fire truck", "ambulance")
HOURS_PER_DAY = 24

@dataclass
class VehicleTypeStats:
    total_collisions: int
    counts: Dict[str, int] = field(default_factory=dict)

    @property
    def has_data(self) -> bool:
        return self.total_collisions > 0

    def percentages(self) -> Optional[Dict[str, float]]:
        """Share of collisions per vehicle type, None when there is no data."""
        if not self.has_data:
            return None
        return {
            vehicle_type: 100.0 * count / self.total_collisions
            for vehicle_type, count in self.counts.items()
        }

@dataclass
class HourlyStats:
    total_collisions: int
    counts: List[int] = field(default_factory=lambda: [0] * HOURS_PER_DAY)
    skipped: int = 0 # collisions with an unreadable time

    @property
    def has_data(self) -> bool:
        return self.total_collisions > 0

    def percentages(self) -> Optional[List[float]]:
        if not self.has_data:
            return None
        return [100.0 * count / self.total_collisions for count in self.counts]

def scan_vehicle_types(collisions: Iterable[Collision],
                       vehicle_types: Sequence[str] = VEHICLE_TYPES) -> VehicleTypeStats:
    counts = {vehicle_type: 0 for vehicle_type in vehicle_types}
    total = 0
    for collision in collisions:
        total += 1
        for vehicle_type in vehicle_types:
            if collision.involves_vehicle(vehicle_type):
                counts[vehicle_type] += 1
    return VehicleTypeStats(total_collisions=total, counts=counts)

def extract_hour(time: str) -> Optional[int]:
    """
    Hour from a "HH:MM" style string, or None if it cannot be read.
    """
    if not time or ":" not in time:
        return None
    token = time[:time.index(":")].strip()
    if not re.fullmatch(r"[0-9]+", token):
        return None
    hour = int(token)
    if not 0 <= hour < HOURS_PER_DAY:
        return None
    return hour

def scan_hours(collisions: Iterable[Collision]) -> HourlyStats:
    stats = HourlyStats(total_collisions=0)
    for collision in collisions:
        stats.total_collisions += 1
        hour = extract_hour(collision.time)
        if hour is None:
            stats.skipped += 1
            continue
        stats.counts[hour] += 1
    return stats
