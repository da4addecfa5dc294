"""Error documents and FastAPI exception handlers for the gateway."""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from app.models import ErrorResponse
from utils.logging_utils import get_tagged_logger

logger = get_tagged_logger(__name__, tag="app/errors")

WEATHER_KEY_MISSING = "Weather API key not configured"
WEATHER_FETCH_FAILED = "Could not fetch weather data. Please check the city name."
AMOUNT_NOT_POSITIVE = "Amount must be greater than 0"
RATES_FETCH_FAILED = "Could not fetch exchange rates. Please try again later."
INTERNAL_ERROR = "Internal server error"


class ApiError(Exception):
    """A client-facing failure rendered as `{"error": message}`."""

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message


def error_response(status_code: int, message: str) -> JSONResponse:
    """Build the JSON error document returned to clients."""
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


async def handle_api_error(request: Request, exc: ApiError) -> JSONResponse:
    """Render an ApiError raised by a route."""
    logger.info("%s %s -> %d: %s", request.method, request.url.path, exc.status_code, exc.message)
    return error_response(exc.status_code, exc.message)


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    """Log an unhandled exception and hide its details from the client."""
    logger.exception("Unhandled error on %s %s: %s", request.method, request.url.path, exc)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR)


def register_error_handlers(app: FastAPI) -> None:
    """Attach the gateway's exception handlers to an app."""
    app.add_exception_handler(ApiError, handle_api_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
