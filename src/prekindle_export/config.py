"""Runtime configuration: feed URLs, CSV columns and transport knobs."""
from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Any, Optional, Tuple

from dotenv import find_dotenv, load_dotenv

from .errors import ConfigError
from .jsonp import DEFAULT_CALLBACK

# Prekindle organizer feeds
DEFAULT_FEED_URLS: Tuple[str, ...] = (
    "https://www.prekindle.com/api/events/organizer/22815447474366230&callback=widgetCallback",
    "https://www.prekindle.com/api/events/organizer/22815447474833148&callback=widgetCallback",
    "https://www.prekindle.com/api/events/organizer/531433528752920374&callback=widgetCallback",
    "https://www.prekindle.com/api/events/organizer/532452771022890770&callback=widgetCallback",
)

DEFAULT_COLUMNS: Tuple[str, ...] = (
    "id",
    "promoId",
    "date",
    "time",
    "title",
    "ages",
    "lineup/0",
    "description",
    "dayOfWeek",
    "month",
    "monthAbbrev",
    "dayOfMonth",
    "venue",
    "city",
    "state",
    "dtfNames/0",
    "dtfLinks/0",
    "imageUrl",
)

DEFAULT_TIMEOUT = 30.0


def _split_list(raw: Optional[str]) -> Tuple[str, ...]:
    if not raw:
        return ()
    return tuple(part.strip() for part in raw.split(",") if part.strip())


@dataclass(frozen=True)
class ExportConfig:
    feed_urls: Tuple[str, ...] = DEFAULT_FEED_URLS
    columns: Tuple[str, ...] = DEFAULT_COLUMNS
    callback: str = DEFAULT_CALLBACK
    timeout: float = DEFAULT_TIMEOUT
    retries: int = 0
    output_path: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.feed_urls:
            raise ConfigError("at least one feed URL is required")
        if not self.columns:
            raise ConfigError("at least one column is required")
        if not self.callback:
            raise ConfigError("callback name must not be empty")
        if self.timeout <= 0:
            raise ConfigError(f"timeout must be positive, got {self.timeout}")
        if self.retries < 0:
            raise ConfigError(f"retries must be >= 0, got {self.retries}")

    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = None) -> "ExportConfig":
        """Build a config from ``PREKINDLE_*`` variables (``.env`` is loaded first)."""
        load_dotenv(dotenv_path or find_dotenv(usecwd=True))

        kwargs: dict[str, Any] = {}
        urls = _split_list(os.getenv("PREKINDLE_FEED_URLS"))
        if urls:
            kwargs["feed_urls"] = urls
        columns = _split_list(os.getenv("PREKINDLE_COLUMNS"))
        if columns:
            kwargs["columns"] = columns
        callback = os.getenv("PREKINDLE_CALLBACK", "").strip()
        if callback:
            kwargs["callback"] = callback

        timeout = os.getenv("PREKINDLE_TIMEOUT")
        if timeout:
            try:
                kwargs["timeout"] = float(timeout)
            except ValueError:
                raise ConfigError(f"PREKINDLE_TIMEOUT is not a number: {timeout!r}") from None
        retries = os.getenv("PREKINDLE_RETRIES")
        if retries:
            try:
                kwargs["retries"] = int(retries)
            except ValueError:
                raise ConfigError(f"PREKINDLE_RETRIES is not an integer: {retries!r}") from None

        output = os.getenv("PREKINDLE_OUTPUT", "").strip()
        if output:
            kwargs["output_path"] = output
        return cls(**kwargs)

    def with_overrides(self, **overrides: Any) -> "ExportConfig":
        """Return a copy with every non-``None`` override applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        for key in ("feed_urls", "columns"):
            if key in changes:
                changes[key] = tuple(changes[key])
        return replace(self, **changes)
