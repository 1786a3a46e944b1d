"""
Reporting context logger.

Provides logging interface for reporting context with automatic [report] prefix.
All reporting modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from golden.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[report]"


def setup_reporting_logger(log_dir: Path, report_name: str = None) -> Path:
    """
    Setup logger for reporting context.

    Args:
        log_dir: Directory for this session
        report_name: Report being produced, recorded in provenance

    Returns:
        Path to log file
    """
    extra = {"Report": report_name} if report_name else None
    return _setup_logger(
        context_name="report",
        log_dir=log_dir,
        extra_provenance=extra,
    )


# Wrapper functions with automatic [report] prefix


def _log_info(message: str) -> None:
    """Log info message with [report] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [report] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [report] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")
