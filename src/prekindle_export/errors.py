"""Exceptions raised by the exporter."""
from __future__ import annotations


class ExportError(Exception):
    """Base class for exporter failures."""


class ConfigError(ExportError):
    """Configuration values are missing or malformed."""


class FeedError(ExportError):
    """A single feed could not be turned into records."""

    def __init__(self, url: str, reason: str):
        super().__init__(f"{url}: {reason}")
        self.url = url
        self.reason = reason


class FeedTransportError(FeedError):
    """The HTTP request failed or returned a non-200 status."""


class FeedParseError(FeedError):
    """The unwrapped body is not valid JSON."""
