from __future__ import annotations

from datetime import date, datetime

from src.worktime_tracker.worktime_tracker.reports.service import ReportService, filter_entries


def _seed(entries_repo, make_time_entry):
    d1, d2 = date(2026, 2, 1), date(2026, 2, 2)
    for e in [
        make_time_entry(1, "john@example.com", "John Smith", d1, (8, 0), hours=7.5),
        make_time_entry(2, "jane@example.com", "Jane Doe", d1, (9, 0), hours=8.25),
        make_time_entry(3, "john@example.com", "John Smith", d2, (8, 30), hours=4.0),
        make_time_entry(4, "john@example.com", "John Smith", d2, (13, 0), closed=False),
    ]:
        entries_repo.add(e)


def test_report_total_equals_sum_of_filtered_entries(entries_repo, make_time_entry):
    _seed(entries_repo, make_time_entry)

    report = ReportService(entries_repo).build_report()

    assert len(report.rows) == 4
    assert report.total_hours == 19.75
    assert report.total_label == "19.75"


def test_filter_by_user_is_exact_match(entries_repo, make_time_entry):
    _seed(entries_repo, make_time_entry)
    entries_repo.add(make_time_entry(5, "john@example.com.au", "Other John", date(2026, 2, 1), (8, 0), hours=1.0))

    report = ReportService(entries_repo).build_report(user_filter="john@example.com")

    assert {r["user_email"] for r in report.rows} == {"john@example.com"}
    assert report.total_hours == 11.5


def test_filter_by_user_and_date(entries_repo, make_time_entry):
    _seed(entries_repo, make_time_entry)

    report = ReportService(entries_repo).build_report(user_filter="john@example.com", date_filter="2026-02-01")

    assert [r["id"] for r in report.rows] == [1]
    assert report.total_label == "7.50"


def test_rows_sorted_newest_date_then_latest_clock_in(entries_repo, make_time_entry):
    _seed(entries_repo, make_time_entry)

    report = ReportService(entries_repo).build_report()

    assert [r["id"] for r in report.rows] == [4, 3, 2, 1]


def test_placeholders_for_missing_fields(entries_repo, make_time_entry):
    _seed(entries_repo, make_time_entry)

    report = ReportService(entries_repo).build_report(date_filter="2026-02-02")
    open_row = report.rows[0]

    assert open_row["clock_out"] == "Active"
    assert open_row["break_start"] == "-"
    assert open_row["break_end"] == "-"
    assert open_row["total_hours"] == "0.00"
    assert open_row["date"] == "Feb 2, 2026"


def test_filter_options(entries_repo, make_time_entry):
    _seed(entries_repo, make_time_entry)

    report = ReportService(entries_repo).build_report()

    assert report.users == [
        {"email": "john@example.com", "name": "John Smith"},
        {"email": "jane@example.com", "name": "Jane Doe"},
    ]
    assert report.dates == ["2026-02-02", "2026-02-01"]


def test_empty_store_gives_zero_total(entries_repo):
    report = ReportService(entries_repo).build_report()

    assert report.rows == []
    assert report.total_label == "0.00"


def test_filter_entries_does_not_match_partial_dates(make_time_entry):
    entries = [make_time_entry(1, "a@x.io", "A", date(2026, 2, 1), (8, 0), hours=1.0)]

    assert filter_entries(entries, date_filter="2026-02") == []
    assert filter_entries(entries, date_filter="2026-02-01")[0].clock_in == datetime(2026, 2, 1, 8, 0)
