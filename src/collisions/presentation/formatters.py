"""
Text rendering of report results.
"""
from typing import Iterable

from ..application.scanners import HourlyStats, VehicleTypeStats
from ..domain.entities import RankedZip

NO_DATA = "    no data\n"
HISTOGRAM_SCALE = 240 # bars drawn for 100% of collisions

def format_collision_ranking(rows: Iterable[RankedZip]) -> str:
    return "".join(
        "    %5s  %5d collisions\n" % (row.zip_code, row.value)
        for row in rows
    )

def format_casualty_ranking(rows: Iterable[RankedZip], casualty: str) -> str:
    """
    Lines of "zip  hurt (killed) <casualty> hurt", where hurt counts
    injured plus killed.
    """
    return "".join(
        "    %5s  %5d (%3d killed ) %s hurt\n" % (row.zip_code, row.value, row.secondary, casualty)
        for row in rows
    )

def format_vehicle_type_stats(stats: VehicleTypeStats) -> str:
    percentages = stats.percentages()
    if percentages is None:
        return NO_DATA
    return "".join(
        "    %-11s %5.2f%%\n" % (vehicle_type, percentage)
        for vehicle_type, percentage in percentages.items()
    )

def format_hourly_stats(stats: HourlyStats) -> str:
    percentages = stats.percentages()
    if percentages is None:
        return NO_DATA
    lines = []
    for hour, (count, percentage) in enumerate(zip(stats.counts, percentages)):
        bars = "|" * int(count / stats.total_collisions * HISTOGRAM_SCALE)
        lines.append("%3d h  %5.1f%% %s\n" % (hour, percentage, bars))
    return "".join(lines)
