"""Logging configuration for the WhatsApp dispatch service."""

from __future__ import annotations

import logging
import os

logger = logging.getLogger("dispatch.server")


def configure_logging() -> None:
    """Configure logging with a uniform format and configurable log level."""
    if logger.handlers:
        return

    log_level = os.getenv("LOG_LEVEL", "INFO").upper()
    numeric_level = getattr(logging, log_level, logging.INFO)

    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # Request logging is done by the adapter; keep transport libraries quiet
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
