import csv
import pytest
from src.collisions.infrastructure.csv_source import CSVCollisionSource
from src.collisions.application.aggregator import ZipAggregator
from src.common.exceptions import SourceError

HEADER = [
    "DATE", "TIME", "BOROUGH", "ZIP CODE", "LATITUDE", "LONGITUDE", "ON STREET NAME",
    "CROSS STREET NAME", "PERSONS INJURED", "PERSONS KILLED", "PEDESTRIANS INJURED",
    "PEDESTRIANS KILLED", "CYCLISTS INJURED", "CYCLISTS KILLED", "MOTORISTS INJURED",
    "MOTORISTS KILLED", "VEHICLE 1 FACTOR", "VEHICLE 2 FACTOR", "UNIQUE KEY",
    "VEHICLE 1 TYPE", "VEHICLE 2 TYPE",
]

@pytest.fixture
def collisions_csv(tmp_path, make_record):
    path = tmp_path / "collisions.csv"
    rows = [
        make_record(zip_code="10001", vehicle_code_1="TAXI"),
        make_record(zip_code="10001", vehicle_code_1="SPORT UTILITY / STATION WAGON"),
        make_record(zip_code="", unique_key="3"),
        make_record(zip_code="11201", vehicle_code_2="BICYCLE, E-BIKE"),
    ]
    with open(path, mode='w', newline='') as f:
        writer = csv.writer(f)
        writer.writerow(HEADER)
        writer.writerows(rows)
        f.write("\n")
    return path

def test_reads_rows_without_header(collisions_csv):
    rows = list(CSVCollisionSource(collisions_csv))
    assert len(rows) == 4
    assert rows[0][3] == "10001"
    assert rows[1][19] == "SPORT UTILITY / STATION WAGON"
    assert rows[3][20] == "BICYCLE, E-BIKE"

def test_keeps_header_when_asked(collisions_csv):
    rows = list(CSVCollisionSource(collisions_csv, skip_header=False))
    assert rows[0] == HEADER

def test_source_is_reiterable(collisions_csv):
    source = CSVCollisionSource(collisions_csv)
    assert list(source) == list(source)

def test_missing_file(tmp_path):
    with pytest.raises(SourceError):
        CSVCollisionSource(tmp_path / "missing.csv")

def test_feeding_aggregator(collisions_csv):
    aggregator = ZipAggregator()
    results = [aggregator.add(row) for row in CSVCollisionSource(collisions_csv)]

    assert results == [True, True, False, True]
    assert aggregator.get("10001").total_collisions == 2
    assert aggregator.get("11201").total_collisions == 1
