"""Shared HTTP session used by every upstream adapter."""
from __future__ import annotations

from typing import Any, Mapping, Optional

import requests

from utils.logging_utils import get_tagged_logger, mask_url
logger = get_tagged_logger(__name__, tag="data_sources/http")

session = requests.Session()

DEFAULT_TIMEOUT_SECONDS = 10.0


def get_json(url: str, *, params: Optional[Mapping[str, Any]] = None,
             timeout: float = DEFAULT_TIMEOUT_SECONDS) -> Any:
    """GET `url` once and return the decoded JSON body, raising on non-2xx."""
    resp = session.get(url, params=params, timeout=timeout)
    logger.debug("Upstream GET %s -> %s", mask_url(getattr(resp, "url", None) or url),
                 getattr(resp, "status_code", "?"))
    resp.raise_for_status()
    return resp.json()
