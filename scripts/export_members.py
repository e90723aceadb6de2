"""Export the member directory to an Excel file.

Note: logs in with ADMIN_EMAIL / ADMIN_PASSWORD against the configured
church API, then writes ``exports/members_<timestamp>.xlsx``.
"""

from __future__ import annotations

import argparse
import importlib
import os
from datetime import datetime
from pathlib import Path

from church_console.config import get_settings_module
from church_console.container import build_container
from church_console.core.constants import MEMBER_FILTER_FIELDS
from church_console.core.exceptions import ConsoleError


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    for name in MEMBER_FILTER_FIELDS:
        parser.add_argument(f"--{name}", default="")
    args = parser.parse_args()

    settings = importlib.import_module(get_settings_module())
    token = {}
    container = build_container(api_base_url=settings.API_BASE_URL, token_provider=lambda: token.get("value"))

    try:
        result = container.auth_service.login(os.environ["ADMIN_EMAIL"], os.environ["ADMIN_PASSWORD"])
        token["value"] = result.token
        members = container.member_service.list_members({k: getattr(args, k) for k in MEMBER_FILTER_FIELDS if getattr(args, k)})
    except ConsoleError as e:
        raise SystemExit(f"Export failed: {e}")

    out_dir = Path(__file__).resolve().parents[1] / "exports"
    out_dir.mkdir(parents=True, exist_ok=True)
    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    export = container.export_service.members_excel(members.items, filename=f"members_{ts}.xlsx")
    out_file = out_dir / export.filename
    out_file.write_bytes(export.content)
    print(f"OK: {len(members.items)} members exported to {out_file}")


if __name__ == "__main__":
    main()
