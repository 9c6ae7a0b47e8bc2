"""Shared test fixtures and configuration.

Provides infrastructure to isolate tests from the real filesystem and the
real Todoist API: log files land in a tmp dir and HTTP goes through
``httpx.MockTransport``.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from unittest.mock import patch

import httpx
import pytest

from todoist_bridge.api import TodoistAPI, TokenBucket

Handler = Callable[[httpx.Request], httpx.Response]


# ---------------------------------------------------------------------------
# Logging isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def isolated_logger(tmp_path):
    """Point the application log file at *tmp_path* and reset the singleton."""
    import todoist_bridge.utils.logger as logger_mod

    logger_mod._logger = None
    package_logger = logging.getLogger("todoist_bridge")
    package_logger.handlers.clear()
    package_logger.propagate = True
    with patch("todoist_bridge.utils.logger.user_log_dir", return_value=str(tmp_path / "logs")):
        yield
    logger_mod._logger = None
    package_logger.handlers.clear()
    package_logger.propagate = True


# ---------------------------------------------------------------------------
# HTTP mocking helpers
# ---------------------------------------------------------------------------


def respond(status_code: int = 200, *, json_body=None, text: str | None = None) -> Handler:
    """Handler returning a fresh response with the given status and body."""

    def handler(request: httpx.Request) -> httpx.Response:
        if json_body is not None:
            return httpx.Response(status_code, json=json_body)
        if text is not None:
            return httpx.Response(status_code, text=text)
        return httpx.Response(status_code)

    return handler


def body_of(request: httpx.Request):
    """Decode a recorded request's JSON body (None when there is none)."""
    return json.loads(request.content) if request.content else None


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 0.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def sent():
    """Requests received by the mock transport, in order."""
    return []


@pytest.fixture
def make_api(sent):
    """Factory building a TodoistAPI backed by a recording MockTransport."""

    def _make(handler: Handler, *, rate_limiter: TokenBucket | None = None, **kwargs) -> TodoistAPI:
        def recording(request: httpx.Request) -> httpx.Response:
            sent.append(request)
            return handler(request)

        return TodoistAPI(
            "test-token",
            transport=httpx.MockTransport(recording),
            rate_limiter=rate_limiter,
            **kwargs,
        )

    return _make


@pytest.fixture
def empty_bucket():
    """A token bucket with no balance and no refill."""
    bucket = TokenBucket(capacity=1, refill_rate=0)
    assert bucket.try_consume(1)
    return bucket
