"""HTTP API for the dashboard gateway."""

import math
import re
from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, status

from .app_types import UpstreamResult
from .config import settings
from .data_sources import InrRates, build_data_source, call_upstream
from .data_sources.openweather_client import DEFAULT_CITY
from .errors import (
    AMOUNT_NOT_POSITIVE,
    RATES_FETCH_FAILED,
    WEATHER_FETCH_FAILED,
    WEATHER_KEY_MISSING,
    ApiError,
)
from .fallback_quotes import pick_fallback_quote
from .models import CurrencyQuote, ErrorResponse, HealthStatus, Quote, WeatherReading
from utils.logging_utils import get_tagged_logger

logger = get_tagged_logger(__name__, tag="app/api")

router = APIRouter()
DATA_SOURCE = build_data_source(settings)

DEFAULT_AMOUNT = 1000.0

# Leading decimal literal, same prefix rule as a browser's parseFloat.
_AMOUNT_PREFIX = re.compile(r"\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_amount(raw: Optional[str]) -> float:
    """Parse the `amount` query value, defaulting when it is absent or not a finite number."""
    if raw is None:
        return DEFAULT_AMOUNT
    match = _AMOUNT_PREFIX.match(raw)
    if not match:
        return DEFAULT_AMOUNT
    value = float(match.group(1))
    if not math.isfinite(value):
        return DEFAULT_AMOUNT
    return value


def _utc_timestamp() -> str:
    """ISO-8601 UTC timestamp with millisecond precision and a Z suffix."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _convert(amount: float, rates: InrRates) -> CurrencyQuote:
    """Apply INR rates to an amount, formatting each result to two decimals."""
    return CurrencyQuote(
        inr=amount,
        usd=f"{amount * rates.usd:.2f}",
        eur=f"{amount * rates.eur:.2f}",
        gbp=f"{amount * rates.gbp:.2f}",
        timestamp=_utc_timestamp(),
    )


_ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


@router.get("/weather", response_model=WeatherReading, responses={500: {"model": ErrorResponse}})
def get_weather(city: Optional[str] = None):
    """Return current conditions for a city (London by default)."""
    city = city or DEFAULT_CITY
    api_key = settings.openweather_api_key
    if not api_key:
        logger.error("OPENWEATHER_API_KEY is not set; refusing weather request")
        raise ApiError(status.HTTP_500_INTERNAL_SERVER_ERROR, WEATHER_KEY_MISSING)

    result: UpstreamResult[WeatherReading] = call_upstream("weather", DATA_SOURCE.fetch_weather, city,
                                                           api_key=api_key)
    if not result.ok:
        raise ApiError(status.HTTP_500_INTERNAL_SERVER_ERROR, WEATHER_FETCH_FAILED)
    return result.value


@router.get("/currency", response_model=CurrencyQuote, responses=_ERROR_RESPONSES)
def get_currency(amount: Optional[str] = None):
    """Convert an INR amount (1000 by default) to USD, EUR and GBP."""
    value = parse_amount(amount)
    if value <= 0:
        raise ApiError(status.HTTP_400_BAD_REQUEST, AMOUNT_NOT_POSITIVE)

    result: UpstreamResult[InrRates] = call_upstream("currency", DATA_SOURCE.fetch_rates)
    if not result.ok:
        raise ApiError(status.HTTP_500_INTERNAL_SERVER_ERROR, RATES_FETCH_FAILED)
    return _convert(value, result.value)


@router.get("/quote", response_model=Quote)
def get_quote():
    """Return a random quote, falling back to the built-in list when the upstream fails."""
    result: UpstreamResult[Quote] = call_upstream("quote", DATA_SOURCE.fetch_quote)
    if result.ok:
        return result.value
    quote = pick_fallback_quote()
    logger.info("Serving fallback quote by %s", quote.author)
    return quote


@router.get("/health", response_model=HealthStatus)
def health():
    """Liveness probe; never touches an upstream."""
    return HealthStatus()
