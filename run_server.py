import uvicorn

from app.config import settings
from utils.logging_utils import get_tagged_logger, setup_logging

logger = get_tagged_logger(__name__, tag="server")


def log_endpoints(port: int) -> None:
    """Print the routes an operator is likely to try first."""
    base = f"http://localhost:{port}"
    logger.info("Server is running on %s", base)
    logger.info("Available endpoints:")
    logger.info("   Weather:  %s/api/weather?city=London", base)
    logger.info("   Currency: %s/api/currency?amount=1000", base)
    logger.info("   Quote:    %s/api/quote", base)
    logger.info("   Health:   %s/api/health", base)
    if not settings.openweather_api_key:
        logger.warning("OPENWEATHER_API_KEY is not set; /api/weather will return 500")


if __name__ == "__main__":
    setup_logging(level=settings.log_level, job_name="dashboard_gateway")
    log_endpoints(settings.port)

    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=False,
        log_config=None,
    )
