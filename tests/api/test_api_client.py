import pytest
import requests

from church_console.api.client import ApiClient
from church_console.core.constants import GENERIC_ERROR_MESSAGE
from church_console.core.exceptions import NetworkError, ServiceError, SessionExpiredError


@pytest.fixture
def client(http):
    return ApiClient("http://church-api.test/", token_provider=lambda: "tok-123", timeout=3, session=http)


def test_get_sends_bearer_token_and_params(client, http, respond):
    http.queue(respond(200, {"success": True, "data": {"members": []}}))

    body = client.get("/api/members", params={"search": "ann"})

    assert body["data"] == {"members": []}
    call = http.calls[0]
    assert call["method"] == "GET"
    assert call["url"] == "http://church-api.test/api/members"
    assert call["params"] == {"search": "ann"}
    assert call["headers"]["Authorization"] == "Bearer tok-123"
    assert call["timeout"] == 3


def test_no_token_means_no_authorization_header(http, respond):
    http.queue(respond(200, {"success": True, "data": {}}))
    client = ApiClient("http://church-api.test", session=http)

    client.post("/api/auth/login", {"email": "a@b.co", "password": "x"})

    assert "Authorization" not in http.calls[0]["headers"]
    assert http.calls[0]["json"] == {"email": "a@b.co", "password": "x"}


@pytest.mark.parametrize("status", [401, 403])
def test_auth_statuses_raise_session_expired(client, http, respond, status):
    http.queue(respond(status, {"success": False, "message": "Invalid token"}))

    with pytest.raises(SessionExpiredError, match="Invalid token"):
        client.get("/api/members")


def test_auth_status_without_envelope_still_means_session_expired(client, http, respond):
    http.queue(respond(401, raw="<html>Unauthorized</html>"))

    with pytest.raises(SessionExpiredError, match="session has expired"):
        client.delete("/api/members/1")


def test_service_failure_carries_message_and_status(client, http, respond):
    http.queue(respond(400, {"success": False, "message": "Email already registered"}))

    with pytest.raises(ServiceError) as info:
        client.put("/api/members/1", {"email": "x@y.z"})

    assert str(info.value) == "Email already registered"
    assert info.value.status_code == 400


def test_success_false_with_200_is_a_failure(client, http, respond):
    http.queue(respond(200, {"success": False}))

    with pytest.raises(ServiceError, match="try again"):
        client.get("/api/members")


def test_non_json_body_is_a_network_error(client, http, respond):
    http.queue(respond(502, raw="Bad Gateway"))

    with pytest.raises(NetworkError):
        client.get("/api/members")


def test_transport_failure_is_a_network_error(client, http):
    http.queue(requests.ConnectionError("refused"))

    with pytest.raises(NetworkError) as info:
        client.get("/api/members")

    assert str(info.value) == GENERIC_ERROR_MESSAGE


def test_with_token_reuses_session(http, respond):
    http.queue(respond(200, {"success": True, "data": {}}))
    client = ApiClient("http://church-api.test", session=http).with_token(lambda: "later")

    client.get("/api/attendance")

    assert http.calls[0]["headers"]["Authorization"] == "Bearer later"
