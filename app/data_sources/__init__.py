"""Upstream adapters for the weather, exchange-rate and quote APIs."""

from .base import CallableGatewayDataSource, GatewayDataSource, call_upstream, classify_failure
from .factory import build_data_source
from .exchange_rate_client import InrRates, fetch_inr_rates, parse_rates
from .openweather_client import fetch_current_weather, parse_weather
from .quotable_client import fetch_random_quote

__all__ = [
    "build_data_source",
    "call_upstream",
    "classify_failure",
    "GatewayDataSource",
    "CallableGatewayDataSource",
    "InrRates",
    "fetch_current_weather",
    "fetch_inr_rates",
    "fetch_random_quote",
    "parse_rates",
    "parse_weather",
]
