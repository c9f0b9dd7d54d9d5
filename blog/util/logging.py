"""Logging configuration for the application."""

import logging

import logfire

from blog.config import Settings


def setup_logging(settings: Settings) -> None:
    """Configure application logging.

    Standard library records (uvicorn, SQLAlchemy, ...) are forwarded to
    Logfire so they end up next to the application's own spans.

    Args:
        settings: Application settings
    """
    if settings.debug:
        level = logging.DEBUG
    elif settings.environment == "production":
        level = logging.WARNING
    else:
        level = logging.INFO

    logging.basicConfig(
        level=level,
        handlers=[logfire.LogfireLoggingHandler()],
        force=True,  # Override any existing configuration
    )

    # Keep driver chatter out of application logs
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("asyncpg").setLevel(logging.WARNING)

    logging.getLogger("blog").setLevel(level)

    logger = logging.getLogger(__name__)
    logger.info(
        f"Logging configured: environment={settings.environment}, level={logging.getLevelName(level)}"
    )
