"""Unit tests for content hard filters, scoring and selection."""

from datetime import datetime

import pytest

from golden.contexts.content.content_data_structure import ContentRecord, MatchContext
from golden.contexts.content.program_catalog import ProgramCatalog, ProgramEntry
from golden.contexts.targeting import (
    ScoringWeights,
    count_matching,
    hard_filter,
    match,
    rank,
    score,
    select_and_resolve,
    select_best,
)

SATURDAY = datetime(2026, 10, 24, 10, 0)
WEDNESDAY = datetime(2026, 10, 21, 10, 0)


def make_record(record_id: str, **fields) -> ContentRecord:
    return ContentRecord(id=record_id, text=fields.pop("text", f"text {record_id}"), **fields)


@pytest.fixture
def push_catalog():
    return ProgramCatalog(
        [
            ProgramEntry("push", is_master=True),
            ProgramEntry("push_beginner", parent_program_id="push"),
            ProgramEntry("pull", is_master=True),
        ]
    )


# =========================================================================
# HARD FILTERS
# =========================================================================


@pytest.mark.unit
def test_gender_mismatch_rejects_regardless_of_other_matches():
    record = make_record(
        "r1",
        gender="male",
        persona="parent",
        location="park",
        sport_type="running",
        motivation_style="competitive",
    )
    context = MatchContext(
        gender="female",
        persona="parent",
        location="park",
        sport_type="running",
        motivation_style="competitive",
    )

    assert score(record, context) is None
    assert not hard_filter(record, context)


@pytest.mark.unit
def test_gender_both_is_wildcard():
    record = make_record("r1", gender="both")

    assert score(record, MatchContext(gender="female")) == 0
    assert score(record, MatchContext(gender="male")) == 0


@pytest.mark.unit
def test_context_gender_both_matches_gendered_content():
    record = make_record("r1", gender="female")
    assert score(record, MatchContext(gender="both")) == 0


@pytest.mark.unit
@pytest.mark.parametrize("field_name,record_value,context_value", [
    ("persona", "parent", "student"),
    ("location", "park", "home"),
    ("sport_type", "running", "cycling"),
    ("motivation_style", "competitive", "calm"),
    ("experience_level", "beginner", "advanced"),
    ("trigger_type", "Inactivity", "Scheduled"),
    ("time_of_day", "morning", "evening"),
])
def test_exact_field_mismatch_rejects(field_name, record_value, context_value):
    fields = {field_name: record_value}
    if field_name == "trigger_type":
        fields["kind"] = "notifications"
    record = make_record("r1", **fields)

    assert score(record, MatchContext(**{field_name: context_value})) is None
    assert score(record, MatchContext(**{field_name: record_value})) == 1


@pytest.mark.unit
def test_free_form_fields_are_case_sensitive():
    record = make_record("r1", sport_type="Running")
    assert score(record, MatchContext(sport_type="running")) is None


@pytest.mark.unit
@pytest.mark.parametrize("level,passes", [(2, False), (3, True), (4, True), (5, True), (6, False)])
def test_level_range_is_inclusive(level, passes):
    record = make_record("r1", min_level=3, max_level=5)

    assert hard_filter(record, MatchContext(level=level)) is passes


@pytest.mark.unit
def test_level_range_with_single_bound():
    record = make_record("r1", min_level=3)

    assert hard_filter(record, MatchContext(level=10))
    assert not hard_filter(record, MatchContext(level=1))


@pytest.mark.unit
def test_inverted_level_range_never_matches_but_does_not_raise():
    record = make_record("r1", min_level=5, max_level=3)

    for level in range(0, 10):
        assert score(record, MatchContext(level=level)) is None


@pytest.mark.unit
def test_absent_context_attributes_are_wildcards():
    record = make_record("r1", persona="parent", min_level=3, max_level=5, gender="male")

    assert hard_filter(record, MatchContext())
    assert score(record, MatchContext()) == 0


@pytest.mark.unit
def test_day_period_filter_and_bonus():
    record = make_record("r1", day_period="weekend")

    # +1 matched field, +2 day-period bonus
    assert score(record, MatchContext(current_time=SATURDAY)) == 3
    assert score(record, MatchContext(current_time=WEDNESDAY)) is None
    assert score(record, MatchContext(day_period="weekend")) == 3


@pytest.mark.unit
def test_day_period_all_is_wildcard():
    record = make_record("r1", day_period="all")
    assert score(record, MatchContext(current_time=WEDNESDAY)) == 0


@pytest.mark.unit
def test_days_inactive_uses_nearest_bucket():
    record = make_record("r1", kind="notifications", trigger_type="Inactivity", days_inactive=7)

    assert hard_filter(record, MatchContext(days_inactive=7))
    assert hard_filter(record, MatchContext(days_inactive=5))
    assert not hard_filter(record, MatchContext(days_inactive=3))
    assert not hard_filter(record, MatchContext(days_inactive=30))


@pytest.mark.unit
def test_progress_range_is_soft():
    """Test a non-matching progress range earns nothing but never rejects."""
    record = make_record("r1", progress_range="0-20")

    assert score(record, MatchContext(progress_percent=95)) == 0
    assert score(record, MatchContext(progress_percent=10)) == 1


# =========================================================================
# PROGRAMS
# =========================================================================


@pytest.mark.unit
def test_master_program_content_visible_to_sub_program(push_catalog):
    master = make_record("master", program_id="push")
    context = MatchContext(program_id="push_beginner")

    assert score(master, context, push_catalog) == 1
    assert select_best([master], context, push_catalog) is master


@pytest.mark.unit
def test_master_program_content_rejected_without_relationship(push_catalog):
    master = make_record("master", program_id="push")

    assert score(master, MatchContext(program_id="push_beginner")) is None
    assert score(master, MatchContext(program_id="pull_beginner"), push_catalog) is None


@pytest.mark.unit
def test_sub_program_content_not_visible_to_master(push_catalog):
    record = make_record("sub", program_id="push_beginner")
    assert score(record, MatchContext(program_id="push"), push_catalog) is None


@pytest.mark.unit
def test_program_all_is_wildcard(push_catalog):
    record = make_record("r1", program_id="all")
    assert score(record, MatchContext(program_id="pull"), push_catalog) == 0


@pytest.mark.unit
def test_explicit_non_master_parent_does_not_cascade():
    catalog = ProgramCatalog(
        [
            ProgramEntry("legs", is_master=False),
            ProgramEntry("legs_2", parent_program_id="legs"),
        ]
    )
    record = make_record("r1", program_id="legs")

    assert score(record, MatchContext(program_id="legs_2"), catalog) is None


# =========================================================================
# SCORING
# =========================================================================


@pytest.mark.unit
def test_more_specific_record_scores_higher():
    context = MatchContext(
        persona="parent",
        location="park",
        gender="female",
        sport_type="running",
        motivation_style="calm",
    )
    record5 = make_record(
        "r5",
        persona="parent",
        location="park",
        gender="female",
        sport_type="running",
        motivation_style="calm",
    )
    record2 = make_record("r2", persona="parent", location="park")

    assert score(record5, context) == 5
    assert score(record2, context) == 2
    assert score(record5, context) > score(record2, context)


@pytest.mark.unit
def test_level_up_outranks_three_plain_matches():
    context = MatchContext(persona="parent", location="park", sport_type="running", progress_percent=95)
    level_up = make_record("level_up", progress_range="90-100")
    three_fields = make_record("three", persona="parent", location="park", sport_type="running")

    assert score(level_up, context) == 6
    assert score(three_fields, context) == 3
    assert select_best([three_fields, level_up], context) is level_up


@pytest.mark.unit
def test_general_record_scores_zero_and_is_last_resort():
    context = MatchContext(persona="student")
    general = make_record("general")
    specific = make_record("specific", persona="student")

    assert general.is_general()
    assert score(general, context) == 0
    assert select_best([general, specific], context) is specific
    assert select_best([general, make_record("other", persona="parent")], context) is general


@pytest.mark.unit
def test_match_reports_matched_fields():
    record = make_record("r1", persona="parent", progress_range="90-100", day_period="weekend")
    result = match(record, MatchContext(persona="parent", progress_percent=100, current_time=SATURDAY))

    assert result.passed
    assert result.level_up
    assert result.day_period
    assert set(result.matched_fields) == {"persona", "day_period", "progress_range"}


@pytest.mark.unit
def test_custom_weights():
    weights = ScoringWeights(field_match=2, level_up_bonus=10, day_period_bonus=0)
    record = make_record("r1", persona="parent", progress_range="90-100")

    assert score(record, MatchContext(persona="parent", progress_percent=90), weights=weights) == 14


# =========================================================================
# SELECTION
# =========================================================================


@pytest.mark.unit
def test_ties_go_to_first_seen():
    context = MatchContext(persona="parent")
    first = make_record("first", persona="parent")
    second = make_record("second", persona="parent")

    assert select_best([first, second], context) is first
    assert select_best([second, first], context) is second


@pytest.mark.unit
def test_select_best_is_deterministic():
    context = MatchContext(persona="parent", location="park")
    records = [
        make_record("a", persona="parent"),
        make_record("b", location="park"),
        make_record("c"),
        make_record("d", persona="parent", location="home"),
    ]

    assert select_best(records, context) is select_best(records, context)
    assert select_best(records, context).id == "a"


@pytest.mark.unit
def test_select_best_returns_none_when_everything_rejected():
    records = [make_record("a", gender="male"), make_record("b", persona="senior")]
    assert select_best(records, MatchContext(gender="female", persona="student")) is None
    assert select_best([], MatchContext()) is None


@pytest.mark.unit
def test_rank_orders_by_score_and_drops_rejected():
    context = MatchContext(persona="parent", location="park")
    records = [
        make_record("general"),
        make_record("rejected", persona="senior"),
        make_record("both", persona="parent", location="park"),
        make_record("one", location="park"),
    ]

    ranked = rank(records, context)

    assert [item.record.id for item in ranked] == ["both", "one", "general"]
    assert [item.score for item in ranked] == [2, 1, 0]


@pytest.mark.unit
def test_count_matching_with_partial_context():
    records = [
        make_record("a", persona="parent", location="park"),
        make_record("b", persona="parent", location="park", gender="female"),
        make_record("c", persona="parent", location="home"),
    ]

    assert count_matching(records, MatchContext(persona="parent", location="park")) == 2
    assert count_matching(records, MatchContext(persona="student", location="home")) == 0


@pytest.mark.unit
def test_select_and_resolve():
    records = [
        make_record("a", text="@בוא/י ל@location, @name!", location="park"),
        make_record("b", text="אימון טוב"),
    ]
    context = MatchContext(location="park", user_name="דנה", gender="female")

    assert select_and_resolve(records, context) == "בואי לפארק, דנה!"


@pytest.mark.unit
def test_select_and_resolve_fallback():
    records = [make_record("a", gender="male")]
    context = MatchContext(gender="female", user_name="דנה")

    assert select_and_resolve(records, context) is None
    assert select_and_resolve(records, context, fallback="היי @name") == "היי דנה"


@pytest.mark.unit
def test_string_progress_scores_like_a_number():
    record = make_record("level_up", progress_range="90-100")

    assert score(record, MatchContext(progress_percent="95")) == 6


@pytest.mark.unit
def test_rejected_results_are_independent():
    record = make_record("r1", gender="male")
    context = MatchContext(gender="female")

    first = match(record, context)
    first.matched_fields.append("gender")
    second = match(record, context)

    assert not second.passed
    assert second.matched_fields == []
    assert first is not second
