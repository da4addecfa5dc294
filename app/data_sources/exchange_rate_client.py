"""Helpers for fetching INR exchange rates from exchangerate-api.com."""
from __future__ import annotations

from dataclasses import dataclass

from app.data_sources import http

EXCHANGE_RATE_URL = "https://api.exchangerate-api.com/v4/latest/INR"


@dataclass(frozen=True)
class InrRates:
    """Units of each target currency bought by one rupee."""
    usd: float
    eur: float
    gbp: float


def parse_rates(data: dict) -> InrRates:
    """Pull the USD/EUR/GBP rates out of a `/latest/INR` payload."""
    rates = data["rates"]
    return InrRates(
        usd=float(rates["USD"]),
        eur=float(rates["EUR"]),
        gbp=float(rates["GBP"]),
    )


def fetch_inr_rates(*,
                    base_url: str = EXCHANGE_RATE_URL,
                    timeout: float = http.DEFAULT_TIMEOUT_SECONDS,
                    ) -> InrRates:
    """Fetch the latest rates with INR as the base currency."""
    data = http.get_json(base_url, timeout=timeout)
    return parse_rates(data)
