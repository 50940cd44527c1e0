"""Pytest fixtures: a scripted stand-in for requests.Session."""

import json
from dataclasses import dataclass, field

import pytest
import requests


@dataclass
class FakeResponse:
    status_code: int = 200
    payload: object = None
    content: bytes = b""
    headers: dict = field(default_factory=dict)

    @property
    def ok(self):
        return 200 <= self.status_code < 300

    @property
    def text(self):
        if self.payload is not None:
            return json.dumps(self.payload)
        return self.content.decode("utf-8", "replace")

    def json(self):
        if self.payload is None:
            raise ValueError("no JSON body")
        return self.payload


@dataclass
class FakeSession:
    routes: dict = field(default_factory=dict)
    calls: list = field(default_factory=list)
    closed: bool = False

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.closed = True
        return False

    def _respond(self, method, url, **kwargs):
        self.calls.append((method, url, kwargs))
        result = self.routes.get((method, url))
        if result is None:
            raise AssertionError(f"unexpected {method} {url}")
        if isinstance(result, Exception):
            raise result
        return result

    def get(self, url, **kwargs):
        return self._respond("GET", url, **kwargs)

    def post(self, url, **kwargs):
        return self._respond("POST", url, **kwargs)


@pytest.fixture
def fake_session(monkeypatch):
    session = FakeSession()
    monkeypatch.setattr(requests, "Session", lambda: session)
    return session
