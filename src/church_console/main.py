from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from .attendance.controller import register as register_attendance
from .auth.controller import register as register_auth
from .auth.session import current_token
from .config import get_settings_module
from .container import Container, build_container
from .core.logging import setup_logging
from .members.controller import register as register_members
from .reports.controller import register as register_reports

logger = logging.getLogger(__name__)


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["API_BASE_URL"] = getattr(settings, "API_BASE_URL")

    setup_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    logger.info("settings=%s api=%s", settings_module, app.config["API_BASE_URL"])

    if container is None:
        container = build_container(
            api_base_url=app.config["API_BASE_URL"],
            token_provider=current_token,
            timeout=float(getattr(settings, "API_TIMEOUT", 15)),
            debounce_ms=int(getattr(settings, "FILTER_DEBOUNCE_MS", 500)),
            church_url=getattr(settings, "CHURCH_URL", ""),
        )

    app.config["FILTER_DEBOUNCE_MS"] = container.debounce_ms

    register_auth(app, container)
    register_members(app, container)
    register_attendance(app, container)
    register_reports(app, container)

    return app
