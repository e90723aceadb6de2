"""Example: use the service layer without Flask.

Goal: show that controllers are a thin layer; the list screen logic lives in
``ListManagementView`` and the services, so it can run from a plain script.
"""

import importlib
import os

from church_console.config import get_settings_module
from church_console.container import build_container
from church_console.core.enums import AdminRole
from church_console.members.view import build_member_view


def main():
    settings = importlib.import_module(get_settings_module())
    token = os.environ["CHURCH_API_TOKEN"]
    container = build_container(api_base_url=settings.API_BASE_URL, token_provider=lambda: token)

    view = build_member_view(container.member_service, AdminRole.CLERK)
    view.apply_filter_change("ministry", "FOJ")
    view.apply_filter_change("search", "ann")
    view.flush_pending_reload()

    if view.notice:
        print(view.notice.level.value, view.notice.text)
    for member in view.items:
        print(member.id, member.full_name, member.membership_status)


if __name__ == "__main__":
    main()
