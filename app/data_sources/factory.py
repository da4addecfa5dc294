"""Factory helpers for wiring configured upstream adapters at startup."""

from __future__ import annotations

from functools import partial

from app import config
from app.data_sources.base import CallableGatewayDataSource, GatewayDataSource
from app.data_sources.exchange_rate_client import fetch_inr_rates
from app.data_sources.openweather_client import fetch_current_weather
from app.data_sources.quotable_client import fetch_random_quote
from utils.logging_utils import get_tagged_logger

logger = get_tagged_logger(__name__, tag="data_sources/factory")


def build_data_source(settings: config.Settings | None = None) -> GatewayDataSource:
    """Bind upstream URLs and the request timeout from settings into the adapters."""
    settings = settings or config.settings
    timeout = settings.upstream_timeout_seconds

    logger.info(
        "Using upstreams weather=%s rates=%s quotes=%s (timeout %.1fs)",
        settings.openweather_url,
        settings.exchange_rate_url,
        settings.quote_url,
        timeout,
    )
    return CallableGatewayDataSource(
        weather=partial(fetch_current_weather, base_url=settings.openweather_url, timeout=timeout),
        rates=partial(fetch_inr_rates, base_url=settings.exchange_rate_url, timeout=timeout),
        quote=partial(fetch_random_quote, base_url=settings.quote_url, timeout=timeout),
    )
