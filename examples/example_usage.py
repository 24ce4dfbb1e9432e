"""Example: use the service layer directly (no Flask).

Controllers are a thin layer; the clock and report rules live in services.
"""

import importlib

from config import get_settings_module

from src.worktime_tracker.worktime_tracker.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)

    print("john@example.com:", container.clock_service.status("john@example.com").label)

    report = container.report_service.build_report()
    for row in report.rows[:5]:
        print(row["date"], row["user_name"], row["clock_in"], row["clock_out"], row["total_hours"])
    print("Total hours:", report.total_label)


if __name__ == "__main__":
    main()
