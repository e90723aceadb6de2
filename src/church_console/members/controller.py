from __future__ import annotations

from flask import Flask, flash, redirect, render_template, request, url_for

from ..auth.session import current_admin, force_login, login_required
from ..common.datetime_utils import format_date
from ..container import Container
from ..core.constants import MEMBER_FILTER_FIELDS, YEAR_GROUPS
from ..core.enums import MembershipStatus, Ministry, ViewMode
from ..listing.filters import FilterCriteria
from ..listing.view import ListManagementView
from .helpers import MINISTRY_LABELS, ministry_badge, ministry_label, status_badge
from .model import Member
from .view import build_member_view, patch_from_form


def register(app: Flask, container: Container) -> None:
    app.jinja_env.filters["format_date"] = format_date
    app.jinja_env.filters["status_badge"] = status_badge
    app.jinja_env.filters["ministry_badge"] = ministry_badge
    app.jinja_env.filters["ministry_label"] = ministry_label

    def _member_view() -> ListManagementView[Member]:
        admin = current_admin()
        # Every mutation is followed by a redirect, which reloads the list.
        return build_member_view(
            container.member_service,
            admin.role,
            debounce_ms=container.debounce_ms,
            auto_reload=False,
        )

    def _filter_params() -> dict:
        return FilterCriteria.from_args(MEMBER_FILTER_FIELDS, request.args).to_query_params()

    def _back_to_list():
        return redirect(url_for("admin_members", **_filter_params()))

    def _flash_notice(view: ListManagementView[Member]) -> None:
        if view.notice is not None:
            flash(view.notice.text, view.notice.level.value)

    def _open_member(view: ListManagementView[Member], member_id: str):
        """Fetch one member for a surface; returns (member, response-if-failed)."""
        detail = view.view_details(member_id)
        if view.login_required:
            return None, force_login()
        if detail.record is None:
            flash(detail.error or "Member not found", "danger")
            return None, _back_to_list()
        return detail.record, None

    @app.route("/admin/members", endpoint="admin_members")
    @login_required
    def admin_members():
        view = _member_view()
        try:
            view.set_view_mode(ViewMode(request.args.get("view", ViewMode.TABLE.value)))
        except ValueError:
            view.set_view_mode(ViewMode.TABLE)

        view.load(FilterCriteria.from_args(MEMBER_FILTER_FIELDS, request.args).as_dict())
        if view.login_required:
            return force_login()

        return render_template(
            "admin/members/list.html",
            view=view,
            members=view.items,
            filters=view.filters.as_dict(),
            filter_params=view.filters.to_query_params(),
            has_filters=not view.filters.is_empty(),
            ministries=[(m.value, MINISTRY_LABELS[m.value]) for m in Ministry],
            statuses=[s.value for s in MembershipStatus],
            year_groups=YEAR_GROUPS,
            active_page="admin_members",
        )

    @app.route("/admin/members/<member_id>", endpoint="member_details")
    @login_required
    def member_details(member_id: str):
        view = _member_view()
        member, failed = _open_member(view, member_id)
        if failed is not None:
            return failed
        return render_template(
            "admin/members/details.html",
            member=member,
            filter_params=_filter_params(),
            active_page="admin_members",
        )

    @app.route("/admin/members/<member_id>/edit", methods=["GET", "POST"], endpoint="edit_member")
    @login_required
    def edit_member(member_id: str):
        view = _member_view()
        member, failed = _open_member(view, member_id)
        if failed is not None:
            return failed

        view.begin_edit(member)
        form_values = member.to_api()

        if request.method == "POST":
            patch = patch_from_form(request.form, current_admin().role)
            if view.edit(member, patch):
                _flash_notice(view)
                return _back_to_list()
            if view.login_required:
                return force_login()
            _flash_notice(view)
            form_values.update(patch)

        return render_template(
            "admin/members/edit.html",
            member=member,
            form=form_values,
            ministries=[(m.value, MINISTRY_LABELS[m.value]) for m in Ministry],
            statuses=[s.value for s in MembershipStatus],
            year_groups=YEAR_GROUPS,
            filter_params=_filter_params(),
            active_page="admin_members",
        )

    @app.route("/admin/members/<member_id>/delete", methods=["GET", "POST"], endpoint="delete_member")
    @login_required
    def delete_member(member_id: str):
        view = _member_view()
        member, failed = _open_member(view, member_id)
        if failed is not None:
            return failed

        view.request_delete(member)

        if request.method == "POST":
            if request.form.get("confirm") != "yes":
                view.close_surface()
                return _back_to_list()
            ok = view.confirm_delete()
            if not ok and view.login_required:
                return force_login()
            _flash_notice(view)
            return _back_to_list()

        return render_template(
            "admin/members/delete.html",
            member=member,
            filter_params=_filter_params(),
            active_page="admin_members",
        )
