from src.collisions.application.report_service import CollisionReportService

def add_many(service, make_record, zip_code, count, **fields):
    for _ in range(count):
        assert service.add(make_record(zip_code=zip_code, **fields))

def test_most_and_least_collisions(make_record):
    service = CollisionReportService()
    add_many(service, make_record, "11111", 3)
    add_many(service, make_record, "22222", 3)
    add_many(service, make_record, "33333", 2)
    add_many(service, make_record, "44444", 1)

    assert service.zip_codes_with_most_collisions(1) == (
        "    11111      3 collisions\n"
        "    22222      3 collisions\n"
    )
    assert service.zip_codes_with_least_collisions(2) == (
        "    44444      1 collisions\n"
        "    33333      2 collisions\n"
    )

def test_casualty_reports(make_record):
    service = CollisionReportService()
    service.add(make_record(zip_code="11111", persons_injured="3", persons_killed="1", cyclists_injured="2"))
    service.add(make_record(zip_code="22222", persons_injured="2", persons_killed="2", cyclists_killed="1"))

    assert service.zip_codes_with_most_person_incidents(1) == (
        "    22222      4 (  2 killed ) persons hurt\n"
        "    11111      4 (  1 killed ) persons hurt\n"
    )
    assert service.zip_codes_with_most_cyclist_incidents(1) == (
        "    11111      2 (  0 killed ) cyclists hurt\n"
    )

def test_malformed_records_are_dropped(make_record):
    service = CollisionReportService()
    assert service.add(make_record(zip_code="")) is False
    assert service.zip_codes_with_most_collisions(3) == ""

def test_reports_without_data():
    service = CollisionReportService()
    assert service.vehicle_type_stats() == "    no data\n"
    assert service.hourly_stats() == "    no data\n"
    assert service.zip_codes_with_least_collisions(2) == ""

def test_vehicle_and_hourly_reports(make_record):
    service = CollisionReportService(vehicle_types=["taxi", "bicycle"])
    service.add(make_record(time="9:10", vehicle_code_1="TAXI"))
    service.add(make_record(time="9:50", vehicle_code_2="Bicycle"))

    assert service.vehicle_type_stats() == (
        "    taxi        50.00%\n"
        "    bicycle     50.00%\n"
    )
    assert "  9 h  100.0% " + "|" * 240 in service.hourly_stats().splitlines()

def test_reports_over_existing_aggregator(populated_aggregator):
    service = CollisionReportService(populated_aggregator)
    assert service.zip_codes_with_most_collisions(3) == (
        "    11111     10 collisions\n"
        "    22222     10 collisions\n"
        "    33333      8 collisions\n"
    )
