from __future__ import annotations

import csv
import io

from flask import Flask, render_template, request
from werkzeug.utils import secure_filename

from ..common.datetime_utils import parse_iso_date
from ..common.decorators import login_required
from ..container import Container
from ..core.constants import FILTER_ALL

CSV_FIELDS = [
    "work_date",
    "user_name",
    "user_email",
    "clock_in",
    "break_start",
    "break_end",
    "clock_out",
    "total_hours",
]


def register(app: Flask, container: Container) -> None:
    def _filters() -> tuple[str, str]:
        user_filter = (request.args.get("user") or FILTER_ALL).strip() or FILTER_ALL
        date_filter = (request.args.get("date") or FILTER_ALL).strip() or FILTER_ALL
        if date_filter != FILTER_ALL:
            try:
                date_filter = parse_iso_date(date_filter).isoformat()
            except ValueError:
                date_filter = FILTER_ALL
        return user_filter, date_filter

    @app.route("/reports", methods=["GET"], endpoint="reports")
    @login_required
    def reports():
        user_filter, date_filter = _filters()
        data = container.report_service.build_report(user_filter=user_filter, date_filter=date_filter)
        return render_template("reports.html", report=data, active_page="reports")

    @app.route("/reports.csv", methods=["GET"], endpoint="reports_csv")
    @login_required
    def reports_csv():
        user_filter, date_filter = _filters()
        data = container.report_service.build_report(user_filter=user_filter, date_filter=date_filter)

        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=CSV_FIELDS, extrasaction="ignore")
        writer.writeheader()
        for row in data.rows:
            writer.writerow(row)
        writer.writerow({"work_date": "Total", "total_hours": data.total_label})

        filename = secure_filename(f"time_report_{user_filter}_{date_filter}.csv".replace("@", "_at_"))
        return app.response_class(
            out.getvalue().encode("utf-8-sig"),
            mimetype="text/csv",
            headers={"Content-Disposition": f'attachment; filename="{filename}"'},
        )
