from __future__ import annotations

import logging

import requests

from prekindle_export.utils.http import FEED_HEADERS, build_session
from prekindle_export.utils.logging_utils import get_logger, set_level


def test_feed_headers_accept_jsonp() -> None:
    assert "application/javascript" in FEED_HEADERS["Accept"]
    assert FEED_HEADERS["User-Agent"].startswith("Mozilla/5.0")


def test_build_session_reads_once_by_default() -> None:
    session = build_session()
    try:
        assert isinstance(session, requests.Session)
        adapter = session.get_adapter("https://www.prekindle.com/api/events")
        assert adapter.max_retries.total == 0
        assert "application/javascript" in session.headers["Accept"]
    finally:
        session.close()


def test_build_session_retries_knob() -> None:
    session = build_session(retries=2)
    try:
        assert session.get_adapter("http://example.test").max_retries.total == 2
    finally:
        session.close()


def test_get_logger_attaches_one_handler() -> None:
    logger = get_logger("prekindle_export.tests.once", level="debug")
    again = get_logger("prekindle_export.tests.once")
    assert logger is again
    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG
    assert logger.propagate is False


def test_set_level() -> None:
    logger = get_logger("prekindle_export.tests.level")
    set_level("warning", "prekindle_export.tests.level")
    assert logger.level == logging.WARNING
