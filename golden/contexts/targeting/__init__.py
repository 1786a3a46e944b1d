"""
Targeting Context

Responsibilities:
- Hard-filters content records against a user's MatchContext
- Scores surviving records by specificity (with level-up and day-period bonuses)
- Selects the best record deterministically
- Counts coverage per cell of persona/location/inactivity grids
- Validates bulk uploads for data-quality problems

Owns: Filter rules, scoring weights, selection, coverage analysis
Never: Formats display text beyond handing the winner to the tag resolver
"""

from golden.contexts.targeting.coverage import (
    CoverageCell,
    CoverageMatrix,
    CoverageStats,
    build_coverage_matrix,
    persona_days_matrix,
    persona_location_matrix,
)
from golden.contexts.targeting.data_quality import (
    ValidationIssue,
    ValidationReport,
    validate_records,
)
from golden.contexts.targeting.matcher import (
    MatchResult,
    ScoredRecord,
    count_matching,
    hard_filter,
    match,
    rank,
    score,
    select_and_resolve,
    select_best,
)
from golden.contexts.targeting.weights import (
    DEFAULT_WEIGHTS,
    ScoringWeights,
    load_scoring_weights,
)

__all__ = [
    # Matching
    "match",
    "hard_filter",
    "score",
    "rank",
    "select_best",
    "select_and_resolve",
    "count_matching",
    "MatchResult",
    "ScoredRecord",
    # Weights
    "ScoringWeights",
    "DEFAULT_WEIGHTS",
    "load_scoring_weights",
    # Coverage
    "build_coverage_matrix",
    "persona_location_matrix",
    "persona_days_matrix",
    "CoverageMatrix",
    "CoverageCell",
    "CoverageStats",
    # Validation
    "validate_records",
    "ValidationReport",
    "ValidationIssue",
]
