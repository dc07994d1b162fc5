from __future__ import annotations

from typing import Dict, List, Union

import pytest
import requests


class StubResponse:
    def __init__(self, text: str, status_code: int = 200):
        self.text = text
        self.status_code = status_code


class StubSession:
    """Serves canned bodies by URL; an exception value is raised instead."""

    def __init__(self, bodies: Dict[str, Union[str, StubResponse, Exception]]):
        self.bodies = bodies
        self.calls: List[str] = []
        self.timeouts: List[float] = []
        self.closed = False

    def get(self, url, timeout=None):
        self.calls.append(url)
        self.timeouts.append(timeout)
        body = self.bodies[url]
        if isinstance(body, Exception):
            raise body
        if isinstance(body, StubResponse):
            return body
        return StubResponse(body)

    def close(self):
        self.closed = True


@pytest.fixture
def stub_session():
    return StubSession


@pytest.fixture
def stub_response():
    return StubResponse


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    for name in (
        "PREKINDLE_FEED_URLS",
        "PREKINDLE_COLUMNS",
        "PREKINDLE_CALLBACK",
        "PREKINDLE_TIMEOUT",
        "PREKINDLE_RETRIES",
        "PREKINDLE_OUTPUT",
    ):
        monkeypatch.delenv(name, raising=False)
    # Keep a developer's .env out of the tests.
    monkeypatch.chdir(tmp_path)

