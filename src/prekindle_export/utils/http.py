"""requests session used to read the Prekindle widget feeds."""
from __future__ import annotations

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

DEFAULT_UA = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/124.0 Safari/537.36"
)

# Widget feeds are served as script (JSONP), not application/json.
FEED_HEADERS = {
    "User-Agent": DEFAULT_UA,
    "Accept-Language": "en-US,en;q=0.9",
    "Accept": "application/javascript, text/javascript, */*;q=0.1",
}

RETRY_STATUSES = (429, 500, 502, 503, 504)


def build_session(*, retries: int = 0) -> requests.Session:
    """Create a feed session; ``retries=0`` means every URL is read once."""
    session = requests.Session()
    session.headers.update(FEED_HEADERS)

    retry = Retry(
        total=retries,
        backoff_factor=0.8,
        status_forcelist=RETRY_STATUSES,
        allowed_methods=frozenset(["GET"]),
        raise_on_status=False,
    )
    adapter = HTTPAdapter(max_retries=retry)
    session.mount("https://", adapter)
    session.mount("http://", adapter)
    return session
