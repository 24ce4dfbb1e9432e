from __future__ import annotations

from flask import Flask, flash, jsonify, redirect, render_template, session, url_for

from ..common.datetime_utils import format_long_date, format_time, now_local
from ..common.decorators import api_login_required, login_required
from ..container import Container
from ..core.constants import ACTIVE_PLACEHOLDER
from ..core.enums import ClockStatus
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container) -> None:
    clock = container.clock_service

    def _run_transition(action, success_message, action_name):
        try:
            entry = action(session["user_email"])
            flash(success_message(entry), "success")
        except ValidationError as e:
            flash(str(e), "warning")
        except Exception:
            app.logger.exception("%s failed for %s", action_name, session.get("user_email"))
            flash("An error occurred. Please try again.", "danger")
        return redirect(url_for("dashboard"))

    @app.route("/dashboard", endpoint="dashboard")
    @login_required
    def dashboard():
        now = now_local()
        email = session["user_email"]
        current = clock.current_entry(email, today=now.date())
        status = current.status if current else ClockStatus.OUT
        entries = clock.today_entries(email, today=now.date())

        return render_template(
            "dashboard.html",
            name=session.get("user_name"),
            today_label=format_long_date(now.date()),
            time_label=format_time(now),
            status=status,
            current_entry=current,
            entries=entries,
            format_time=format_time,
            active_placeholder=ACTIVE_PLACEHOLDER,
            active_page="dashboard",
        )

    @app.route("/clock/in", methods=["POST"], endpoint="clock_in")
    @login_required
    def clock_in():
        return _run_transition(
            lambda email: clock.clock_in(user_email=email, user_name=session.get("user_name") or email),
            lambda e: f"You clocked in at {format_time(e.clock_in)}",
            "Clock in",
        )

    @app.route("/clock/break/start", methods=["POST"], endpoint="start_break")
    @login_required
    def start_break():
        return _run_transition(
            clock.start_break,
            lambda e: f"Your break started at {format_time(e.break_start)}",
            "Start break",
        )

    @app.route("/clock/break/end", methods=["POST"], endpoint="end_break")
    @login_required
    def end_break():
        return _run_transition(
            clock.end_break,
            lambda e: f"Your break ended at {format_time(e.break_end)}",
            "End break",
        )

    @app.route("/clock/out", methods=["POST"], endpoint="clock_out")
    @login_required
    def clock_out():
        return _run_transition(
            clock.clock_out,
            lambda e: f"You clocked out at {format_time(e.clock_out)}. Total hours: {e.total_hours:.2f}",
            "Clock out",
        )

    @app.route("/api/clock/status", methods=["GET"], endpoint="api_clock_status")
    @api_login_required
    def api_clock_status():
        entry = clock.current_entry(session["user_email"])
        return jsonify(
            {
                "success": True,
                "status": entry.status.value if entry else "out",
                "entry": entry.to_dict() if entry else None,
            }
        )
