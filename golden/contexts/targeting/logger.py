"""
Targeting context logger.

Provides logging interface for targeting context with automatic [target] prefix.
All targeting modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from golden.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[target]"


def setup_targeting_logger(log_dir: Path, phase: str = "select") -> Path:
    """
    Setup logger for targeting context.

    Args:
        log_dir: Directory for this session
        phase: Phase name for provenance ("select", "coverage" or "validate")

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="target",
        log_dir=log_dir,
        extra_provenance={"Phase": phase},
    )


# Wrapper functions with automatic [target] prefix


def _log_info(message: str) -> None:
    """Log info message with [target] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [target] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [target] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [target] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [target] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level targeting-specific logging helpers


def log_selection_result(candidate_count: int, best) -> None:
    """
    Log the outcome of a selection.

    Args:
        candidate_count: Number of records considered
        best: Winning ScoredRecord, or None
    """
    if best is None:
        _log_debug(f"No match among {candidate_count} candidate(s)")
        return
    matched = ", ".join(best.matched_fields) or "general"
    _log_debug(
        f"Selected {best.record.id} (score {best.score}, matched: {matched}) "
        f"among {candidate_count} candidate(s)"
    )


def log_coverage_stats(title: str, stats) -> None:
    """Log coverage summary for a matrix."""
    _log_info(
        f"{title}: {stats.covered_cells}/{stats.total_cells} cells covered "
        f"({stats.percentage}%), {stats.total_messages} messages"
    )
    if stats.covered_cells < stats.total_cells:
        _log_warning(f"{title}: {stats.total_cells - stats.covered_cells} cell(s) have no content")


def log_validation_report(report, verbose: bool = False) -> None:
    """
    Log a bulk validation report.

    Args:
        report: ValidationReport from validate_records()
        verbose: Log every issue instead of the first few
    """
    kind = report.kind.value
    if report.ok:
        _log_success(f"{kind}: {report.total} row(s) valid, {len(report.warnings)} warning(s)")
    else:
        _log_error(f"{kind}: {len(report.errors)} of {report.total} row(s) rejected")

    limit = None if verbose else 5
    shown_errors = report.errors[:limit]
    shown_warnings = report.warnings[:limit]
    for issue in shown_errors:
        _log_error(f"  {issue}")
    for issue in shown_warnings:
        _log_warning(f"  {issue}")

    hidden = len(report.errors) + len(report.warnings) - len(shown_errors) - len(shown_warnings)
    if hidden > 0:
        _log_debug(f"  ... and {hidden} more issue(s)")
