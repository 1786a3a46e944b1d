"""
Content Matcher

Hard-filters and scores content records against a MatchContext, then picks
the most specific record.

HARD FILTERS (any mismatch rejects the record outright):
    - program:  record program must be "all", the user's program, or a master
                program the user's program belongs to
    - level:    user level must lie within [min_level, max_level]
    - gender:   record gender other than "both" must equal the user's
    - persona, location, sport_type, motivation_style, experience_level,
      trigger_type, time_of_day, day_period: exact, case-sensitive equality
    - days_inactive: record bucket must equal the user's nearest bucket

SCORING (additive, over matched non-wildcard fields only):
    - field_match per matched field (progress range and level range included)
    - level_up_bonus when a 90-100 progress range matches
    - day_period_bonus when a specific day period matches

A record field that is absent (or "all"/"both"/"any") is a wildcard and earns
nothing. A context attribute that is absent is a wildcard as well, which lets
coverage tooling match against partial contexts.

Progress range never rejects: a record written for another progress bucket
just earns nothing for it.
"""

from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from golden.contexts.content.content_data_structure import (
    ALL_PROGRAMS,
    ContentRecord,
    DayPeriod,
    Gender,
    MatchContext,
    ProgressRange,
    TimeOfDay,
)
from golden.contexts.content.program_catalog import ProgramCatalog
from golden.contexts.messaging.tag_resolver import resolve
from golden.contexts.targeting.logger import log_selection_result
from golden.contexts.targeting.weights import DEFAULT_WEIGHTS, ScoringWeights

# Record fields compared by plain equality
EXACT_FIELDS = (
    "persona",
    "location",
    "sport_type",
    "motivation_style",
    "experience_level",
    "trigger_type",
)

EMPTY_CATALOG = ProgramCatalog()


@dataclass
class MatchResult:
    """
    Outcome of matching one record against one context.

    Attributes:
        passed: False if a hard filter rejected the record
        matched_fields: Targeting fields that matched exactly
        level_up: A 90-100 progress range matched
        day_period: A specific day period matched
    """

    passed: bool
    matched_fields: List[str] = field(default_factory=list)
    level_up: bool = False
    day_period: bool = False

    def total(self, weights: ScoringWeights) -> Optional[int]:
        if not self.passed:
            return None
        score = weights.field_match * len(self.matched_fields)
        if self.level_up:
            score += weights.level_up_bonus
        if self.day_period:
            score += weights.day_period_bonus
        return score


@dataclass
class ScoredRecord:
    """A record that passed the hard filters, with its score."""

    record: ContentRecord
    score: int
    matched_fields: List[str] = field(default_factory=list)


def match(
    record: ContentRecord,
    context: MatchContext,
    catalog: Optional[ProgramCatalog] = None,
) -> MatchResult:
    """
    Compare a record's targeting fields with a context.

    Args:
        record: Candidate content
        context: Full or partial user context
        catalog: Program hierarchy (None = no master/sub-program links)

    Returns:
        MatchResult; passed is False on the first hard-filter mismatch
    """
    catalog = catalog if catalog is not None else EMPTY_CATALOG
    result = MatchResult(passed=True)

    # Program
    if record.program_id and record.program_id != ALL_PROGRAMS and context.program_id:
        if not catalog.is_visible(record.program_id, context.program_id):
            return MatchResult(passed=False)
        result.matched_fields.append("program_id")

    # Level range (inclusive); a record with min_level > max_level never passes
    if (record.min_level is not None or record.max_level is not None) and context.level is not None:
        if record.min_level is not None and context.level < record.min_level:
            return MatchResult(passed=False)
        if record.max_level is not None and context.level > record.max_level:
            return MatchResult(passed=False)
        result.matched_fields.append("level_range")

    # Gender
    if record.gender not in (None, Gender.BOTH) and context.gender not in (None, Gender.BOTH):
        if record.gender != context.gender:
            return MatchResult(passed=False)
        result.matched_fields.append("gender")

    for name in EXACT_FIELDS:
        wanted = getattr(record, name)
        actual = getattr(context, name)
        if wanted is None or actual is None:
            continue
        if wanted != actual:
            return MatchResult(passed=False)
        result.matched_fields.append(name)

    # Time of day
    actual_time = context.effective_time_of_day()
    if record.time_of_day not in (None, TimeOfDay.ANY) and actual_time not in (None, TimeOfDay.ANY):
        if record.time_of_day != actual_time:
            return MatchResult(passed=False)
        result.matched_fields.append("time_of_day")

    # Day period
    actual_period = context.effective_day_period()
    if record.day_period not in (None, DayPeriod.ALL) and actual_period not in (None, DayPeriod.ALL):
        if record.day_period != actual_period:
            return MatchResult(passed=False)
        result.matched_fields.append("day_period")
        result.day_period = True

    # Inactivity bucket
    if record.days_inactive is not None and context.days_inactive is not None:
        if record.days_inactive != context.days_inactive_bucket():
            return MatchResult(passed=False)
        result.matched_fields.append("days_inactive")

    # Progress range (soft)
    if record.progress_range is not None and context.progress_percent is not None:
        if record.progress_range.contains(context.progress_percent):
            result.matched_fields.append("progress_range")
            result.level_up = record.progress_range is ProgressRange.LEVEL_UP

    return result


def hard_filter(
    record: ContentRecord,
    context: MatchContext,
    catalog: Optional[ProgramCatalog] = None,
) -> bool:
    """True if the record survives every hard filter for the context."""
    return match(record, context, catalog).passed


def score(
    record: ContentRecord,
    context: MatchContext,
    catalog: Optional[ProgramCatalog] = None,
    weights: Optional[ScoringWeights] = None,
) -> Optional[int]:
    """
    Score a record's relevance to a context.

    Args:
        record: Candidate content
        context: User context
        catalog: Program hierarchy for master-program visibility
        weights: Scoring weights (defaults to DEFAULT_WEIGHTS)

    Returns:
        None if the record is rejected, otherwise a non-negative score.
        General content (no targeting fields) scores 0.
    """
    return match(record, context, catalog).total(weights or DEFAULT_WEIGHTS)


def rank(
    records: Iterable[ContentRecord],
    context: MatchContext,
    catalog: Optional[ProgramCatalog] = None,
    weights: Optional[ScoringWeights] = None,
) -> List[ScoredRecord]:
    """
    Score every candidate and order the survivors, best first.

    Equal scores keep their input order.

    Returns:
        List of ScoredRecord (rejected records omitted)
    """
    weights = weights or DEFAULT_WEIGHTS
    scored = []
    for record in records:
        result = match(record, context, catalog)
        if result.passed:
            scored.append(ScoredRecord(record, result.total(weights), result.matched_fields))

    # sorted() is stable: ties stay in input order
    return sorted(scored, key=lambda item: item.score, reverse=True)


def select_best(
    records: Iterable[ContentRecord],
    context: MatchContext,
    catalog: Optional[ProgramCatalog] = None,
    weights: Optional[ScoringWeights] = None,
) -> Optional[ContentRecord]:
    """
    Pick the highest-scoring record.

    Ties go to the record seen first, so identical inputs always return the
    same record.

    Returns:
        Best ContentRecord, or None when every candidate is rejected
    """
    records = list(records)
    ranked = rank(records, context, catalog, weights)
    best = ranked[0] if ranked else None
    log_selection_result(len(records), best)
    return best.record if best else None


def count_matching(
    records: Iterable[ContentRecord],
    context: MatchContext,
    catalog: Optional[ProgramCatalog] = None,
) -> int:
    """Number of records surviving the hard filters for a (partial) context."""
    return sum(1 for record in records if hard_filter(record, context, catalog))


def select_and_resolve(
    records: Iterable[ContentRecord],
    context: MatchContext,
    catalog: Optional[ProgramCatalog] = None,
    weights: Optional[ScoringWeights] = None,
    fallback: Optional[str] = None,
) -> Optional[str]:
    """
    Pick the best record and resolve its tags for the context.

    Args:
        records: Candidates
        context: User context
        catalog: Program hierarchy
        weights: Scoring weights
        fallback: Template used when nothing matches (also tag-resolved)

    Returns:
        Display text, or None if nothing matches and no fallback was given
    """
    best = select_best(records, context, catalog, weights)
    if best is not None:
        return resolve(best.text, context)
    if fallback is not None:
        return resolve(fallback, context)
    return None
