"""Main entry point for the API server."""

import logging

import uvicorn

from wedding.config import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def main() -> None:
    """Run the API with uvicorn."""
    logger.info(f"Starting Wedding RSVP API on {settings.api_host}:{settings.api_port}")
    uvicorn.run(
        "wedding.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
