"""Logging setup with optional Logfire cloud observability."""

import logging

import logfire

from evently import __version__
from evently.config import Settings

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(settings: Settings) -> None:
    """
    Configure stdlib logging and, when a token is set, Logfire.

    Must be called once at application startup, before the first connection
    is acquired, so PyMongo instrumentation sees the client.

    Args:
        settings: Application settings containing log level and Logfire token
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
    )

    if not settings.logfire_token:
        logger.debug("Logfire token not set - observability disabled")
        return

    try:
        logfire.configure(
            token=settings.logfire_token,
            service_name="evently",
            service_version=__version__,
            environment=settings.environment,
        )

        # MongoDB commands issued through Motor
        logfire.instrument_pymongo()

        # Bridge Python logging to Logfire
        logging.getLogger().addHandler(logfire.LogfireLoggingHandler())

        logger.info("✓ Logfire cloud tracking initialized")

    except Exception as e:
        logger.warning(f"Failed to initialize Logfire: {e}")
        # Continue running - observability is optional
