from __future__ import annotations

import io
from datetime import date

from flask import Flask, flash, redirect, request, send_file, url_for

from ..auth.session import current_admin, force_login, login_required
from ..container import Container
from ..core.constants import MEMBER_FILTER_FIELDS
from ..listing.filters import FilterCriteria
from ..members.view import build_member_view
from .qr import build_qr_png


def register(app: Flask, container: Container) -> None:
    def _export(fmt: str):
        filters = FilterCriteria.from_args(MEMBER_FILTER_FIELDS, request.args)
        view = build_member_view(container.member_service, current_admin().role, auto_reload=False)
        if not view.load(filters.as_dict()):
            if view.login_required:
                return force_login()
            if view.notice is not None:
                flash(view.notice.text, view.notice.level.value)
            return redirect(url_for("admin_members", **filters.to_query_params()))

        stamp = date.today().strftime("%Y%m%d")
        if fmt == "xlsx":
            out = container.export_service.members_excel(view.items, filename=f"members_{stamp}.xlsx")
        else:
            out = container.export_service.members_csv(view.items, filename=f"members_{stamp}.csv")
        return send_file(io.BytesIO(out.content), mimetype=out.mimetype, as_attachment=True, download_name=out.filename)

    @app.route("/admin/reports/members.xlsx", endpoint="export_members_xlsx")
    @login_required
    def export_members_xlsx():
        return _export("xlsx")

    @app.route("/admin/reports/members.csv", endpoint="export_members_csv")
    @login_required
    def export_members_csv():
        return _export("csv")

    @app.route("/qr.png", endpoint="church_qr")
    def church_qr():
        png = build_qr_png(container.church_url or request.host_url)
        return send_file(io.BytesIO(png), mimetype="image/png", download_name="church-qr.png")
