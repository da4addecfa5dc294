"""Pydantic response schemas for the dashboard API."""

from pydantic import BaseModel, ConfigDict, Field


class WeatherReading(BaseModel):
    """Current conditions for a single city."""
    city: str
    temp: int
    condition: str = Field(min_length=1)
    description: str = Field(min_length=1)
    humidity: int
    windSpeed: float
    icon: str = Field(min_length=1)


class CurrencyQuote(BaseModel):
    """An INR amount converted into USD, EUR and GBP."""
    inr: float
    usd: str
    eur: str
    gbp: str
    timestamp: str


class Quote(BaseModel):
    """A quotation and its author."""
    model_config = ConfigDict(frozen=True)

    text: str
    author: str


class HealthStatus(BaseModel):
    status: str = "OK"
    message: str = "Server is running"


class ErrorResponse(BaseModel):
    error: str
