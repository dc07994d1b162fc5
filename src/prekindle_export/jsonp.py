"""JSONP unwrapping for Prekindle widget feeds.

Prekindle serves organizer listings as ``widgetCallback(<json>);``. The
callback name is fixed by the ``&callback=`` query parameter, so only that
literal name is stripped; no attempt is made to discover another one.
"""
from __future__ import annotations

import json
from typing import Any

from .errors import FeedParseError

DEFAULT_CALLBACK = "widgetCallback"
_SUFFIX = ");"


def strip_jsonp_wrapper(text: str, callback: str = DEFAULT_CALLBACK) -> str:
    """Remove ``<callback>(`` and a trailing ``);`` from ``text``.

    Each side is handled independently: a side that does not match is left
    as-is, so unwrapped input comes back unchanged. Whitespace after ``);``
    is dropped along with it.
    """
    prefix = f"{callback}("
    if text.startswith(prefix):
        text = text[len(prefix):]

    trimmed = text.rstrip()
    if trimmed.endswith(_SUFFIX):
        text = trimmed[: -len(_SUFFIX)]
    return text


def parse_jsonp(text: str, url: str = "", callback: str = DEFAULT_CALLBACK) -> Any:
    """Unwrap and decode a JSONP body, raising ``FeedParseError`` on bad JSON."""
    payload = strip_jsonp_wrapper(text, callback)
    try:
        return json.loads(payload)
    except (ValueError, RecursionError) as e:
        # RecursionError: nesting deeper than the decoder can follow.
        snippet = payload[:80].replace("\n", " ")
        raise FeedParseError(url, f"invalid JSON after unwrapping ({e}); body starts {snippet!r}") from e
