from church_console.attendance.model import AttendanceRecord
from church_console.attendance.view import build_attendance_view
from church_console.core.enums import NoticeLevel
from church_console.listing.view import ListResult


class StubAttendanceService:
    def __init__(self):
        self.calls = []

    def list_records(self, params):
        self.calls.append(dict(params))
        return ListResult(items=[])


def _record():
    return AttendanceRecord(
        id="a1",
        attended_at="2024-03-09T09:30:00.000Z",
        service_type="SABBATH_MORNING",
        location_name="Main Hall",
        member_id="m1",
        member_name="Ann Otieno",
        member_email="ann@example.org",
    )


def test_delete_on_attendance_is_refused_with_read_only_notice(scheduler):
    view = build_attendance_view(StubAttendanceService(), scheduler=scheduler)
    view.request_delete(_record())

    assert view.confirm_delete() is False

    assert view.notice.level == NoticeLevel.DANGER
    assert view.notice.text == "Attendance records are read-only"
    assert view.login_required is False


def test_edit_on_attendance_is_refused_with_read_only_notice(scheduler):
    view = build_attendance_view(StubAttendanceService(), scheduler=scheduler)
    record = _record()
    view.begin_edit(record)

    assert view.edit(record, {"locationName": "Chapel"}) is False
    assert view.notice.text == "Attendance records are read-only"


def test_attendance_details_report_no_detail_view(scheduler):
    view = build_attendance_view(StubAttendanceService(), scheduler=scheduler)

    detail = view.view_details("a1")

    assert detail.record is None
    assert detail.error == "Attendance records have no detail view"
