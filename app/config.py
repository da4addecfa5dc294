"""Application configuration pulled from environment variables via pydantic."""
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from utils.logging_utils import get_tagged_logger
logger = get_tagged_logger(__name__, tag="config")


class Settings(BaseSettings):
    """Environment-driven configuration for the dashboard gateway."""
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    host: str = "0.0.0.0"
    port: int = 3001
    log_level: str = "INFO"
    openweather_api_key: str | None = None
    openweather_url: str = "https://api.openweathermap.org/data/2.5/weather"
    exchange_rate_url: str = "https://api.exchangerate-api.com/v4/latest/INR"
    quote_url: str = "https://api.quotable.io/random"
    upstream_timeout_seconds: float = 10.0
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])

    @field_validator("openweather_url", "exchange_rate_url", "quote_url", mode="after")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Normalize upstream URLs to avoid double slashes."""
        return str(v).rstrip("/")

    @field_validator("openweather_api_key", mode="after")
    @classmethod
    def blank_key_is_missing(cls, v: str | None) -> str | None:
        """Treat an empty credential the same as an unset one."""
        if v is None or not v.strip():
            return None
        return v.strip()


settings = Settings()


if __name__ == "__main__":
    logger.setLevel("DEBUG")
    logger.debug(f"Loaded settings: {settings.model_dump_json(indent=4, exclude={'openweather_api_key'})}")
