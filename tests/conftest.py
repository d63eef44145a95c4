import pytest
from src.collisions.domain.entities import Collision
from src.collisions.application.aggregator import ZipAggregator

def build_record(zip_code="10001", time="8:30", persons_injured="0", persons_killed="0",
                 cyclists_injured="0", cyclists_killed="0", vehicle_code_1="PASSENGER VEHICLE",
                 vehicle_code_2="", unique_key="1"):
    """Raw 21-field record in the positional order of the collisions dataset."""
    return [
        "07/04/2015", time, "MANHATTAN", zip_code,
        "40.75", "-73.99", "W 34 STREET", "8 AVENUE",
        persons_injured, persons_killed, "0", "0",
        cyclists_injured, cyclists_killed, "0", "0",
        "Unspecified", "Unspecified",
        unique_key, vehicle_code_1, vehicle_code_2,
    ]

@pytest.fixture
def make_record():
    return build_record

@pytest.fixture
def make_collision():
    def _make(zip_code="10001", **fields):
        return Collision(zip_code=zip_code, **fields)
    return _make

@pytest.fixture
def populated_aggregator(make_collision):
    """
    A:10, B:10, C:8, D:5 collisions, added in that order.
    """
    aggregator = ZipAggregator()
    for zip_code, count in (("11111", 10), ("22222", 10), ("33333", 8), ("44444", 5)):
        for _ in range(count):
            aggregator.add_collision(make_collision(zip_code))
    return aggregator
