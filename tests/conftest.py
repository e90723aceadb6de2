from __future__ import annotations

import os
from typing import Any, Callable, Dict, List, Optional

import pytest

os.environ.setdefault("APP_ENV", "testing")


class ManualHandle:
    def __init__(self, scheduler: "ManualScheduler", due: float, callback: Callable[[], Any]):
        self.scheduler = scheduler
        self.due = due
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler:
    """Scheduler with a hand-driven clock, so debounce tests never sleep."""

    def __init__(self):
        self.now = 0.0
        self.handles: List[ManualHandle] = []

    def call_later(self, delay_seconds: float, callback: Callable[[], Any]) -> ManualHandle:
        handle = ManualHandle(self, self.now + delay_seconds, callback)
        self.handles.append(handle)
        return handle

    def advance(self, seconds: float) -> None:
        self.now += seconds
        for handle in list(self.handles):
            if not handle.cancelled and handle.due <= self.now:
                self.handles.remove(handle)
                handle.callback()

    @property
    def active(self) -> List[ManualHandle]:
        return [h for h in self.handles if not h.cancelled]


class FakeResponse:
    def __init__(self, status_code: int = 200, body: Any = None, *, raw: Optional[str] = None):
        self.status_code = status_code
        self._body = body
        self._raw = raw

    def json(self):
        if self._raw is not None:
            raise ValueError("No JSON object could be decoded")
        return self._body


class FakeHttpSession:
    """Stands in for ``requests.Session``: records calls, replays queued responses."""

    def __init__(self, responses: Optional[List[Any]] = None):
        self.responses = list(responses or [])
        self.calls: List[Dict[str, Any]] = []

    def queue(self, response: Any) -> None:
        self.responses.append(response)

    def request(self, method: str, url: str, **kwargs: Any) -> FakeResponse:
        self.calls.append({"method": method, "url": url, **kwargs})
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


def member_json(member_id: str = "1", first_name: str = "Ann", **overrides: Any) -> Dict[str, Any]:
    data = {
        "id": member_id,
        "firstName": first_name,
        "lastName": "Otieno",
        "email": f"{first_name.lower()}@example.org",
        "phone": "0700000000",
        "membershipStatus": "ACTIVE",
        "isLeader": False,
        "ministry": "FOJ",
        "yearGroup": "Year 2",
        "course": "Computer Science",
        "faculty": "Engineering",
        "dateOfBirth": "2003-04-12T00:00:00.000Z",
        "dateJoined": "2024-03-05T10:00:00.000Z",
        "_count": {"attendances": 4},
    }
    data.update(overrides)
    return data


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture
def http() -> FakeHttpSession:
    return FakeHttpSession()


@pytest.fixture
def make_member() -> Callable[..., Dict[str, Any]]:
    return member_json


@pytest.fixture
def respond() -> Callable[..., FakeResponse]:
    return FakeResponse
