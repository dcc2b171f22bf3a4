"""
shared/
-------
Cross-cutting helpers used by every layer.

    from shared import get_logger, setup_logging, load_config
"""

from shared.logger import get_logger, setup_logging
from shared.config import AppConfig, load_config

__all__ = [
    "get_logger",
    "setup_logging",
    "AppConfig",
    "load_config",
]
