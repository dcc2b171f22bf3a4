"""
Centralized logging for the visualizer.

Level-based logging on top of Python's built-in logging module.

Usage:
    from shared.logger import get_logger

    logger = get_logger(__name__)
    logger.info("Recorded %d frames for %s", count, slug)
    logger.warning("Rejected input for %s: %s", slug, err)
"""

import logging
import sys

_configured = False


def setup_logging(level: str = "INFO") -> None:
    """Configure root logging for the app.

    Call once at startup (main.py). Subsequent calls are no-ops.
    """
    global _configured
    if _configured:
        return

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stdout,
        force=True,
    )
    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return a logger for a module (pass ``__name__``)."""
    return logging.getLogger(name)
