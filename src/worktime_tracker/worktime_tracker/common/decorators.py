from __future__ import annotations

from functools import wraps

from flask import flash, jsonify, redirect, session, url_for


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_email" not in session:
            flash("Please log in to continue.", "warning")
            return redirect(url_for("login"))
        return view(*args, **kwargs)

    return wrapper


def api_login_required(view):
    """Like login_required, but answers with a JSON 401 instead of a redirect."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_email" not in session:
            return jsonify({"success": False, "message": "Not logged in"}), 401
        return view(*args, **kwargs)

    return wrapper
