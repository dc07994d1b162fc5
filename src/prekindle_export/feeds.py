"""Fetch Prekindle JSONP feeds and collect their event records."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, List, Optional

import requests

from .config import ExportConfig
from .errors import FeedError, FeedTransportError
from .jsonp import parse_jsonp
from .utils.http import build_session
from .utils.logging_utils import get_logger

LOG = get_logger("prekindle_export.feeds")


@dataclass
class SourceResult:
    """Outcome of reading one feed: records on success, a reason on failure."""

    url: str
    records: List[Any] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, url: str, records: List[Any]) -> "SourceResult":
        return cls(url=url, records=list(records))

    @classmethod
    def failure(cls, url: str, reason: str) -> "SourceResult":
        return cls(url=url, error=reason)


def extract_events(payload: Any) -> Optional[List[Any]]:
    """Return the record list of a decoded payload, or ``None`` if its shape is unknown.

    A top-level list is the record list itself; otherwise an object's
    ``events`` member is used when it is a list.
    """
    if isinstance(payload, list):
        return payload
    if isinstance(payload, dict):
        events = payload.get("events")
        if isinstance(events, list):
            return events
    return None


class FeedCollector:
    """Reads every configured feed once, in order.

    ``session`` is anything with a requests-style ``get(url, timeout=...)``;
    by default a session from ``build_session`` is created and closed after
    the run.
    """

    def __init__(self, config: ExportConfig, session: Optional[Any] = None):
        self.config = config
        self._owns_session = session is None
        self.session = session if session is not None else build_session(retries=config.retries)

    def _fetch_text(self, url: str) -> str:
        try:
            resp = self.session.get(url, timeout=self.config.timeout)
        except requests.RequestException as e:
            raise FeedTransportError(url, f"request failed: {e}") from e
        if resp.status_code != 200:
            if resp.text:
                LOG.error("Response body from %s: %s", url, resp.text[:500])
            raise FeedTransportError(url, f"HTTP {resp.status_code}")
        return resp.text

    def read_source(self, url: str) -> SourceResult:
        LOG.info("Fetching JSONP from: %s", url)
        try:
            text = self._fetch_text(url)
            payload = parse_jsonp(text, url=url, callback=self.config.callback)
        except FeedError as e:
            LOG.error("Skipping %s: %s", url, e.reason)
            return SourceResult.failure(url, e.reason)

        events = extract_events(payload)
        if events is None:
            LOG.warning(
                "Unexpected payload type from %s: %s (no 'events' list); using 0 events",
                url,
                type(payload).__name__,
            )
            events = []
        LOG.info("Received %d events from %s", len(events), url)
        return SourceResult.success(url, events)

    def collect(self) -> List[SourceResult]:
        try:
            return [self.read_source(url) for url in self.config.feed_urls]
        finally:
            if self._owns_session:
                self.session.close()


def combine_records(results: Iterable[SourceResult]) -> List[Any]:
    """Concatenate records of successful sources, preserving source order."""
    combined: List[Any] = []
    for result in results:
        if result.ok:
            combined.extend(result.records)
    return combined


def failed_sources(results: Iterable[SourceResult]) -> List[SourceResult]:
    return [r for r in results if not r.ok]
