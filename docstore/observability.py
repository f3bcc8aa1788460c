"""Logging setup and Logfire instrumentation."""

import logging
from logging.config import dictConfig

import logfire

from docstore import __version__
from docstore.config import Settings

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    """Configure the docstore logger hierarchy at the configured level."""
    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                },
            },
            "loggers": {
                "docstore": {
                    "handlers": ["console"],
                    "level": settings.log_level,
                    "propagate": False,
                },
            },
        }
    )


def initialize_logfire(settings: Settings) -> bool:
    """
    Initialize Logfire cloud tracking for the document store.

    Call once at application startup. Configures Logfire, instruments the
    pymongo driver used by the MongoDB backend and bridges Python logging.

    Args:
        settings: Settings carrying the Logfire token

    Returns:
        True if Logfire was configured, False if it was skipped or failed.
    """
    if not settings.logfire_token:
        logger.warning("Logfire token not set - observability disabled")
        return False

    try:
        logfire.configure(
            token=settings.logfire_token,
            service_name="docstore",
            service_version=__version__,
            environment=settings.environment,
        )

        logfire.instrument_pymongo()

        root_logger = logging.getLogger()
        root_logger.addHandler(logfire.LogfireLoggingHandler())

        logger.info("Logfire cloud tracking initialized")
        return True

    except Exception as e:
        # observability is optional; the store keeps working without it
        logger.warning(f"Failed to initialize Logfire: {e}")
        return False
