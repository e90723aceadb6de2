from __future__ import annotations

from flask import Flask, render_template, request

from ..auth.session import force_login, login_required
from ..common.datetime_utils import format_datetime
from ..container import Container
from ..core.constants import ATTENDANCE_FILTER_FIELDS
from ..core.enums import ServiceType
from ..listing.filters import FilterCriteria
from .model import service_label
from .view import build_attendance_view


def register(app: Flask, container: Container) -> None:
    app.jinja_env.filters["format_datetime"] = format_datetime

    @app.route("/admin/attendance", endpoint="admin_attendance")
    @login_required
    def admin_attendance():
        view = build_attendance_view(container.attendance_service, debounce_ms=container.debounce_ms)
        view.load(FilterCriteria.from_args(ATTENDANCE_FILTER_FIELDS, request.args).as_dict())
        if view.login_required:
            return force_login()

        mode = request.args.get("mode", "stats")
        if mode not in {"stats", "table"}:
            mode = "stats"

        return render_template(
            "admin/attendance/list.html",
            view=view,
            records=view.items,
            total=view.extras.get("total", 0),
            by_service=view.extras.get("by_service", []),
            filters=view.filters.as_dict(),
            filter_params=view.filters.to_query_params(),
            has_filters=not view.filters.is_empty(),
            service_types=[(s.value, service_label(s.value)) for s in ServiceType],
            mode=mode,
            active_page="admin_attendance",
        )
