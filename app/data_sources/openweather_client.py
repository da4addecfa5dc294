"""Helpers for fetching current weather from the OpenWeatherMap API."""
from __future__ import annotations

import math

from app.data_sources import http
from app.models import WeatherReading
from utils.logging_utils import get_tagged_logger
logger = get_tagged_logger(__name__, tag="openweather_client")

OPENWEATHER_URL = "https://api.openweathermap.org/data/2.5/weather"
DEFAULT_CITY = "London"


def _round_half_up(value: float) -> int:
    """Round to the nearest integer, with .5 going up (matches the dashboard client)."""
    return int(math.floor(float(value) + 0.5))


def parse_weather(data: dict) -> WeatherReading:
    """Map an OpenWeatherMap `/weather` payload to a WeatherReading.

    Raises KeyError/IndexError/TypeError when the payload is missing fields.
    """
    main = data["main"]
    weather = data["weather"][0]
    return WeatherReading(
        city=data["name"],
        temp=_round_half_up(main["temp"]),
        condition=weather["main"],
        description=weather["description"],
        humidity=main["humidity"],
        windSpeed=data["wind"]["speed"],
        icon=weather["icon"],
    )


def fetch_current_weather(city: str,
                          *,
                          api_key: str,
                          base_url: str = OPENWEATHER_URL,
                          timeout: float = http.DEFAULT_TIMEOUT_SECONDS,
                          ) -> WeatherReading:
    """Fetch current metric conditions for `city`."""
    params = {
        "q": city,
        "appid": api_key,
        "units": "metric",
    }
    logger.debug("Fetching weather for %s", params["q"])
    data = http.get_json(base_url, params=params, timeout=timeout)
    return parse_weather(data)
