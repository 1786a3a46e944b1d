"""
Session logging for Golden Content.

Every script run gets its own log directory with one file per context
(``content.log``, ``target.log``, ``report.log``). The file sink keeps DEBUG
detail such as per-tag resolution misses; the console sink writes to stderr
so resolved messages and rendered reports on stdout stay pipeable.

Context modules wrap this in contexts/{context}/logger.py and add their prefix.
"""

import os
import sys
from pathlib import Path
from typing import Dict, Optional

from dotenv import load_dotenv
from loguru import logger

import golden

load_dotenv()

CONSOLE_LEVEL = os.getenv("LOG_LEVEL", "INFO")

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = "<dim>{time:HH:mm:ss}</dim> | <level>{level: <7}</level> | <level>{message}</level>"

# Skipped rows and unresolved tags surface as warnings; keep them readable
LEVEL_COLORS = {
    "DEBUG": "<dim>",
    "WARNING": "<magenta>",
    "ERROR": "<red>",
    "CRITICAL": "<bold><red>",
}

# Data sources recorded in every session header, when configured
SOURCE_ENV_VARS = {
    "Content library": "CONTENT_LIBRARY_PATH",
    "Program catalog": "PROGRAM_CATALOG_PATH",
    "Scoring weights": "SCORING_WEIGHTS_PATH",
}


def setup_logger(
    context_name: str,
    log_dir: Path,
    extra_provenance: Optional[Dict[str, object]] = None,
    level_colors: Optional[Dict[str, str]] = None,
    console_level: Optional[str] = None,
) -> Path:
    """
    Start a logging session for one context and write its header.

    Args:
        context_name: Log file stem ("content", "target" or "report")
        log_dir: Session directory, created if missing
        extra_provenance: Context-specific header lines; None values are dropped
        level_colors: Console color overrides, e.g. {"INFO": "<cyan>"}
        console_level: Minimum console level; defaults to $LOG_LEVEL or INFO

    Returns:
        Path to the session's log file
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()

    for level_name, color in {**LEVEL_COLORS, **(level_colors or {})}.items():
        logger.level(level_name, color=color)

    logger.add(log_file, format=FILE_FORMAT, level="DEBUG", encoding="utf-8")
    logger.add(
        sys.stderr,
        format=CONSOLE_FORMAT,
        level=console_level or CONSOLE_LEVEL,
        colorize=True,
    )

    log_provenance(context_name, extra_provenance)

    return log_file


def log_provenance(context_name: str, extra_context: Optional[Dict[str, object]] = None) -> None:
    """Write the session header: version, invocation, data sources, then extras."""
    header = {
        "Golden Content": f"{golden.__version__} ({context_name})",
        "Command": " ".join(sys.argv),
        "Working directory": Path.cwd(),
        "Python": sys.version.split()[0],
    }
    for label, env_var in SOURCE_ENV_VARS.items():
        header[label] = os.getenv(env_var)
    header.update(extra_context or {})

    logger.info("=" * 80)
    for key, value in header.items():
        if value is not None:
            logger.info(f"{key}: {value}")
    logger.info("=" * 80)
