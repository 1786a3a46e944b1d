"""
Messaging context logger.

Provides logging interface for messaging context with automatic [tags] prefix.
All messaging modules should import from this module, not from utils.logger directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[tags]"


def _log_info(message: str) -> None:
    """Log info message with [tags] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [tags] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [tags] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")
