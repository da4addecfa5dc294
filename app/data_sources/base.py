"""Interfaces and helpers for upstream data sources."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Protocol, TypeVar

import requests

from app.app_types import FailureReason, UpstreamResult
from app.data_sources.exchange_rate_client import InrRates
from app.models import Quote, WeatherReading
from utils.logging_utils import get_tagged_logger

logger = get_tagged_logger(__name__, tag="data_sources/base")

T = TypeVar("T")


class GatewayDataSource(Protocol):
    """Interface for anything that can provide weather, rates and quotes."""

    def fetch_weather(self, city: str, *, api_key: str) -> WeatherReading:
        """Return current conditions for a city."""
        ...

    def fetch_rates(self) -> InrRates:
        """Return the latest INR exchange rates."""
        ...

    def fetch_quote(self) -> Quote:
        """Return a random quote."""
        ...


@dataclass
class CallableGatewayDataSource(GatewayDataSource):
    """Wrap three callables so they can be swapped for different backends."""

    weather: Callable[..., WeatherReading]
    rates: Callable[..., InrRates]
    quote: Callable[..., Quote]

    def fetch_weather(self, city: str, *, api_key: str) -> WeatherReading:
        """Delegate to the configured weather callable."""
        return self.weather(city, api_key=api_key)

    def fetch_rates(self) -> InrRates:
        """Delegate to the configured exchange-rate callable."""
        return self.rates()

    def fetch_quote(self) -> Quote:
        """Delegate to the configured quote callable."""
        return self.quote()


_MALFORMED_TYPES = (ValueError, KeyError, IndexError, TypeError, ArithmeticError, RecursionError)


def classify_failure(exc: BaseException) -> FailureReason:
    """Map an exception raised by an adapter to a FailureReason."""
    if isinstance(exc, requests.HTTPError):
        return FailureReason.UPSTREAM_STATUS
    if isinstance(exc, requests.RequestException) and not isinstance(exc, requests.JSONDecodeError):
        return FailureReason.TRANSPORT
    if isinstance(exc, _MALFORMED_TYPES):
        return FailureReason.MALFORMED_PAYLOAD
    return FailureReason.UNEXPECTED


def call_upstream(name: str, fn: Callable[..., T], *args, **kwargs) -> UpstreamResult[T]:
    """
    Invoke one adapter call and capture the outcome as an UpstreamResult.

    Any exception raised while calling the upstream or mapping its payload
    becomes a failure; the originating message is logged here and kept in
    `detail` for operators only.
    """
    try:
        return UpstreamResult.success(fn(*args, **kwargs))
    except Exception as exc:
        reason = classify_failure(exc)
        detail = f"{type(exc).__name__}: {exc}"
        logger.warning("%s upstream failed (%s): %s", name, reason.value, detail,
                       exc_info=reason is FailureReason.UNEXPECTED)
        return UpstreamResult.failed(reason, detail)
