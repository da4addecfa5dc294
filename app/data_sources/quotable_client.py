"""Helpers for fetching a random quote from quotable.io."""
from __future__ import annotations

from app.data_sources import http
from app.models import Quote

QUOTE_URL = "https://api.quotable.io/random"


def fetch_random_quote(*,
                       base_url: str = QUOTE_URL,
                       timeout: float = http.DEFAULT_TIMEOUT_SECONDS,
                       ) -> Quote:
    """Fetch one random quote, mapping `content` to `text`."""
    data = http.get_json(base_url, timeout=timeout)
    text, author = data["content"], data["author"]
    if not text or not author:
        raise ValueError("Quote payload has an empty content or author")
    return Quote(text=text, author=author)
