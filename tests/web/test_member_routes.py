import pytest

from church_console.auth.session import ADMIN_KEY, TOKEN_KEY, current_token
from church_console.container import build_container
from church_console.main import create_app

ELDER = {"id": "a1", "firstName": "Grace", "lastName": "Wanjiru", "email": "grace@example.org", "role": "ELDER"}
CLERK = {**ELDER, "id": "a2", "role": "CLERK"}


@pytest.fixture
def app(http):
    container = build_container(
        api_base_url="http://church-api.test",
        token_provider=current_token,
        debounce_ms=0,
        church_url="https://church.test/",
        http_session=http,
    )
    return create_app(container=container)


@pytest.fixture
def client(app):
    return app.test_client()


def _log_in(client, admin=ELDER, token="jwt"):
    with client.session_transaction() as sess:
        sess[TOKEN_KEY] = token
        sess[ADMIN_KEY] = admin


def _ok(data=None, message=""):
    return {"success": True, "message": message, "data": data or {}}


def test_members_page_requires_login(client, http):
    resp = client.get("/admin/members")

    assert resp.status_code == 302
    assert "/admin/login" in resp.headers["Location"]
    assert http.calls == []


def test_login_stores_token_and_redirects(client, http, respond):
    http.queue(respond(200, _ok({"token": "jwt", "admin": ELDER})))

    resp = client.post("/admin/login", data={"email": "grace@example.org", "password": "secret"})

    assert resp.status_code == 302
    assert resp.headers["Location"].endswith("/admin/members")
    with client.session_transaction() as sess:
        assert sess[TOKEN_KEY] == "jwt"
        assert sess[ADMIN_KEY]["role"] == "ELDER"


def test_failed_login_shows_message(client, http, respond):
    http.queue(respond(401, {"success": False, "message": "Invalid credentials"}))

    resp = client.post("/admin/login", data={"email": "grace@example.org", "password": "nope"})

    assert resp.status_code == 200
    assert b"Invalid credentials" in resp.data


def test_blank_password_shows_validation_message(client, http):
    resp = client.post("/admin/login", data={"email": "grace@example.org", "password": ""})

    assert resp.status_code == 200
    assert b"Password is required" in resp.data
    assert http.calls == []


def test_member_list_forwards_filters_and_token(client, http, respond, make_member):
    _log_in(client)
    http.queue(respond(200, _ok({"members": [make_member()], "total": 1})))

    resp = client.get("/admin/members?search=ann&ministry=&view=grid")

    assert resp.status_code == 200
    assert b"Ann Otieno" in resp.data
    assert http.calls[0]["params"] == {"search": "ann"}
    assert http.calls[0]["headers"]["Authorization"] == "Bearer jwt"


def test_expired_token_redirects_to_login_and_clears_session(client, http, respond):
    _log_in(client)
    http.queue(respond(401, {"success": False, "message": "Token expired"}))

    resp = client.get("/admin/members")

    assert resp.status_code == 302
    assert "/admin/login" in resp.headers["Location"]
    with client.session_transaction() as sess:
        assert TOKEN_KEY not in sess


def test_list_failure_renders_notice_without_empty_state(client, http, respond):
    _log_in(client)
    http.queue(respond(500, {"success": False, "message": "Failed to fetch members"}))

    resp = client.get("/admin/members")

    assert resp.status_code == 200
    assert b"Failed to fetch members" in resp.data
    assert b"No members found" not in resp.data
    assert b"No members have been registered yet" not in resp.data


def test_empty_directory_shows_empty_state(client, http, respond):
    _log_in(client)
    http.queue(respond(200, _ok({"members": [], "total": 0})))

    resp = client.get("/admin/members")

    assert b"No members have been registered yet" in resp.data


def test_attendance_failure_hides_zero_totals(client, http, respond):
    _log_in(client)
    http.queue(respond(500, {"success": False, "message": "Failed to fetch attendance"}))

    resp = client.get("/admin/attendance")

    assert resp.status_code == 200
    assert b"Failed to fetch attendance" in resp.data
    assert b"Total attendance" not in resp.data


def test_member_details_fetches_one_member(client, http, respond, make_member):
    _log_in(client)
    http.queue(respond(200, _ok(make_member("7", "Ann"))))

    resp = client.get("/admin/members/7")

    assert resp.status_code == 200
    assert http.calls[0]["url"] == "http://church-api.test/api/members/7"
    assert b"Ann Otieno" in resp.data


def test_edit_sends_only_changed_fields(client, http, respond, make_member):
    _log_in(client)
    http.queue(respond(200, _ok(make_member())))
    http.queue(respond(200, _ok(message="Member updated successfully")))
    form = {
        "firstName": "Ann",
        "lastName": "Otieno",
        "email": "ann@example.org",
        "phone": "0700000000",
        "city": "Kisumu",
        "ministry": "FOJ",
        "yearGroup": "Year 2",
        "course": "Computer Science",
        "faculty": "Engineering",
        "dateOfBirth": "2003-04-12",
        "membershipStatus": "ACTIVE",
    }

    resp = client.post("/admin/members/1/edit?ministry=FOJ", data=form)

    assert resp.status_code == 302
    assert "ministry=FOJ" in resp.headers["Location"]
    put = http.calls[1]
    assert put["method"] == "PUT"
    assert put["json"] == {"city": "Kisumu"}


def test_edit_failure_rerenders_form_with_message(client, http, respond, make_member):
    _log_in(client)
    http.queue(respond(200, _ok(make_member())))
    http.queue(respond(400, {"success": False, "message": "Email already registered"}))

    resp = client.post("/admin/members/1/edit", data={"firstName": "Ann", "email": "taken@example.org"})

    assert resp.status_code == 200
    assert b"Email already registered" in resp.data
    assert b"taken@example.org" in resp.data


def test_delete_needs_confirmation(client, http, respond, make_member):
    _log_in(client)
    http.queue(respond(200, _ok(make_member())))

    resp = client.post("/admin/members/1/delete", data={})

    assert resp.status_code == 302
    assert [c["method"] for c in http.calls] == ["GET"]


def test_confirmed_delete_calls_api(client, http, respond, make_member):
    _log_in(client)
    http.queue(respond(200, _ok(make_member())))
    http.queue(respond(200, _ok(message="Member deleted successfully")))

    resp = client.post("/admin/members/1/delete", data={"confirm": "yes"})

    assert resp.status_code == 302
    assert http.calls[1]["method"] == "DELETE"
    assert http.calls[1]["url"].endswith("/api/members/1")


def test_clerk_delete_is_refused_without_logging_out(client, http, respond, make_member):
    _log_in(client, admin=CLERK)
    http.queue(respond(200, _ok(make_member())))

    resp = client.post("/admin/members/1/delete", data={"confirm": "yes"})

    assert resp.status_code == 302
    assert "/admin/members" in resp.headers["Location"]
    assert [c["method"] for c in http.calls] == ["GET"]
    with client.session_transaction() as sess:
        assert sess[TOKEN_KEY] == "jwt"


def test_csv_export_downloads_members(client, http, respond, make_member):
    _log_in(client)
    http.queue(respond(200, _ok({"members": [make_member()], "total": 1})))

    resp = client.get("/admin/reports/members.csv?search=ann")

    assert resp.status_code == 200
    assert resp.mimetype == "text/csv"
    assert "Ann" in resp.data.decode("utf-8-sig")
    assert http.calls[0]["params"] == {"search": "ann"}


def test_attendance_page_renders_summary(client, http, respond):
    _log_in(client)
    http.queue(respond(200, _ok({"attendances": [], "total": 0, "byService": []})))

    resp = client.get("/admin/attendance?startDate=2024-03-01")

    assert resp.status_code == 200
    assert http.calls[0]["params"] == {"startDate": "2024-03-01"}


def test_qr_code_is_public(client):
    resp = client.get("/qr.png")

    assert resp.status_code == 200
    assert resp.mimetype == "image/png"
