from __future__ import annotations

from datetime import date

from flask import Flask, flash, redirect, render_template, request, session, url_for

from ..container import Container
from ..core.exceptions import AuthenticationError


def register(app: Flask, container: Container) -> None:
    app.jinja_env.globals["current_year"] = lambda: date.today().year

    @app.route("/", endpoint="index")
    def index():
        if "user_email" in session:
            return redirect(url_for("dashboard"))
        return render_template("index.html")

    @app.route("/login", methods=["GET", "POST"], endpoint="login")
    def login():
        if "user_email" in session:
            return redirect(url_for("dashboard"))

        email = ""
        if request.method == "POST":
            email = request.form.get("email", "")
            password = request.form.get("password", "")
            remember = request.form.get("remember_me")

            try:
                s_user = container.auth_service.authenticate(email, password)

                session.permanent = bool(remember)
                session["user_email"] = s_user.email
                session["user_name"] = s_user.name

                flash(f"Welcome back, {s_user.name}!", "success")
                return redirect(url_for("dashboard"))
            except AuthenticationError as e:
                flash(str(e), "danger")
            except Exception:
                app.logger.exception("Login failed unexpectedly")
                flash("An error occurred. Please try again.", "danger")

        return render_template("login.html", email=email)

    @app.route("/forgot-password", methods=["POST"], endpoint="forgot_password")
    def forgot_password():
        flash("Please contact your administrator to reset your password.", "info")
        return redirect(url_for("login"))

    @app.route("/logout", endpoint="logout")
    def logout():
        session.clear()
        flash("You have been logged out.", "info")
        return redirect(url_for("login"))
