from __future__ import annotations

import logging
from datetime import timedelta

from flask import Flask, flash, redirect, render_template, request, url_for

from ..container import Container
from ..core.constants import DEFAULT_SESSION_DAYS
from ..core.exceptions import ConsoleError
from .session import clear_login, current_admin, current_token, store_login

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    app.permanent_session_lifetime = timedelta(days=DEFAULT_SESSION_DAYS)

    @app.context_processor
    def inject_admin():
        return {"current_admin": current_admin()}

    @app.route("/", endpoint="index")
    def index():
        if current_token():
            return redirect(url_for("admin_members"))
        return redirect(url_for("login"))

    @app.route("/admin/login", methods=["GET", "POST"], endpoint="login")
    def login():
        if current_token() and current_admin() is not None:
            return redirect(url_for("admin_members"))

        email = ""
        if request.method == "POST":
            email = request.form.get("email", "")
            password = request.form.get("password", "")
            remember = bool(request.form.get("remember_me"))

            try:
                result = container.auth_service.login(email, password)
                store_login(result.token, result.admin, remember=remember)
                flash(f"Welcome back, {result.admin.first_name}!", "success")
                return redirect(url_for("admin_members"))
            except ConsoleError as e:
                flash(str(e), "danger")
            except Exception as e:
                logger.exception("Login failed unexpectedly")
                if bool(app.config.get("DEBUG", False)):
                    flash(f"System error during login: {e}", "danger")
                else:
                    flash("System error during login", "danger")

        return render_template("login.html", email=email)

    @app.route("/admin/logout", endpoint="logout")
    def logout():
        clear_login()
        flash("You have been logged out.", "info")
        return redirect(url_for("login"))
