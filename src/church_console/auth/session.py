"""Flask-session storage for the API token and the logged-in administrator."""
from __future__ import annotations

from functools import wraps
from typing import Optional

from flask import flash, redirect, session, url_for

from .model import SessionAdmin

TOKEN_KEY = "api_token"
ADMIN_KEY = "admin"


def current_token() -> Optional[str]:
    return session.get(TOKEN_KEY)


def current_admin() -> Optional[SessionAdmin]:
    data = session.get(ADMIN_KEY)
    if not data:
        return None
    try:
        return SessionAdmin.from_api(data)
    except ValueError:
        return None


def store_login(token: str, admin: SessionAdmin, *, remember: bool = False) -> None:
    session.permanent = remember
    session[TOKEN_KEY] = token
    session[ADMIN_KEY] = admin.to_session()


def clear_login() -> None:
    session.pop(TOKEN_KEY, None)
    session.pop(ADMIN_KEY, None)


def force_login(message: str = "Your session has expired. Please log in again."):
    """Drop the stale token and send the administrator back to the login page."""
    clear_login()
    flash(message, "warning")
    return redirect(url_for("login"))


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if not current_token() or current_admin() is None:
            flash("Please log in to continue.", "warning")
            return redirect(url_for("login"))
        return view(*args, **kwargs)

    return wrapper
