from __future__ import annotations

import io
from dataclasses import dataclass
from typing import Iterable, List

import pandas as pd

from ..common.datetime_utils import format_date
from ..members.helpers import ministry_label
from ..members.model import Member

MEMBER_COLUMNS = [
    "First Name",
    "Last Name",
    "Email",
    "Phone",
    "Gender",
    "Ministry",
    "Year Group",
    "Faculty",
    "Course",
    "Status",
    "Leader",
    "Date Joined",
    "Attendances",
]

XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


@dataclass(frozen=True)
class ExportFile:
    content: bytes
    mimetype: str
    filename: str


class ExportService:
    """Turns the member directory into downloadable spreadsheets."""

    def members_frame(self, members: Iterable[Member]) -> pd.DataFrame:
        rows: List[list] = []
        for m in members:
            rows.append(
                [
                    m.first_name,
                    m.last_name,
                    m.email,
                    m.phone or "",
                    (m.gender or "").title(),
                    ministry_label(m.ministry) if m.ministry else "",
                    m.year_group or "",
                    m.faculty or "",
                    m.course or "",
                    m.membership_status,
                    "Yes" if m.is_leader else "No",
                    format_date(m.date_joined),
                    m.attendance_count,
                ]
            )
        return pd.DataFrame(rows, columns=MEMBER_COLUMNS)

    def members_excel(self, members: Iterable[Member], *, filename: str = "members.xlsx") -> ExportFile:
        df = self.members_frame(members)
        out = io.BytesIO()
        with pd.ExcelWriter(out, engine="openpyxl") as writer:
            df.to_excel(writer, index=False, sheet_name="Members")
        return ExportFile(content=out.getvalue(), mimetype=XLSX_MIMETYPE, filename=filename)

    def members_csv(self, members: Iterable[Member], *, filename: str = "members.csv") -> ExportFile:
        df = self.members_frame(members)
        # utf-8-sig so Excel opens accented names correctly
        content = df.to_csv(index=False).encode("utf-8-sig")
        return ExportFile(content=content, mimetype="text/csv", filename=filename)
