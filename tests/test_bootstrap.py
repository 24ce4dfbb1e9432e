from pathlib import Path

from src.worktime_tracker.worktime_tracker.database.bootstrap import iter_sql_statements

SCHEMA = Path(__file__).resolve().parents[1] / "database" / "schema.sql"


def test_splitter_keeps_semicolons_inside_quotes():
    sql = "INSERT INTO t VALUES ('a;b');\n-- comment; here\nSELECT 1;"

    assert list(iter_sql_statements(sql)) == ["INSERT INTO t VALUES ('a;b')", "SELECT 1"]


def test_schema_declares_single_open_entry_key():
    statements = list(iter_sql_statements(SCHEMA.read_text(encoding="utf-8")))

    time_entries = next(s for s in statements if "CREATE TABLE IF NOT EXISTS time_entries" in s)
    assert "UNIQUE KEY uq_time_entries_open (user_email, work_date, open_marker)" in time_entries
