"""Logging setup for the schema reset command."""

import logging
import sys

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(log_level: str = "INFO") -> None:
    """Configure root logging with a single stdout handler.

    Calling it again only changes the level.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    if getattr(configure_logging, "has_run", False):
        logging.getLogger().setLevel(numeric_level)
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    # Configure encoding for cross-platform compatibility
    if hasattr(handler.stream, "reconfigure"):
        try:
            handler.stream.reconfigure(encoding="utf-8", errors="replace")
        except (AttributeError, ValueError, OSError):
            pass

    logging.basicConfig(level=numeric_level, force=True, handlers=[handler])

    configure_logging.has_run = True
    logger.debug(f"Logging configured at level: {log_level}")
