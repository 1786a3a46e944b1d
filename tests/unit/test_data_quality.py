"""Unit tests for bulk upload validation."""

import pytest

from golden.contexts.content import ContentKind, ContentRecord, ProgramCatalog, ProgramEntry
from golden.contexts.targeting import validate_records
from golden.contexts.targeting.data_quality import SEVERITY_ERROR, check_record


@pytest.mark.unit
def test_clean_upload():
    rows = [
        {"id": "a", "text": "@name, @בוא/י!", "persona": "parent"},
        {"id": "b", "text": "אימון טוב"},
    ]

    report = validate_records(rows, ContentKind.PHRASES)

    assert report.ok
    assert report.total == 2
    assert [r.id for r in report.records] == ["a", "b"]
    assert report.warnings == []


@pytest.mark.unit
def test_invalid_rows_become_errors():
    rows = [
        {"id": "a", "text": "ok"},
        {"id": "b", "text": "bad persona", "persona": "astronaut"},
        {"text": ""},
    ]

    report = validate_records(rows, "phrases")

    assert not report.ok
    assert len(report.records) == 1
    assert [(e.record_id, e.field_name) for e in report.errors] == [("b", "persona"), ("phrases-2", "text")]
    assert all(e.severity == SEVERITY_ERROR for e in report.errors)


@pytest.mark.unit
def test_inverted_level_range_warns():
    report = validate_records([{"id": "a", "text": "x", "minLevel": 5, "maxLevel": 2}], "phrases")

    assert report.ok
    assert [w.field_name for w in report.warnings] == ["min_level"]


@pytest.mark.unit
def test_unknown_tags_warn():
    report = validate_records([{"id": "a", "text": "@name @nickname"}], "titles")

    assert len(report.warnings) == 1
    assert "@nickname" in report.warnings[0].message


@pytest.mark.unit
def test_duplicate_ids_warn():
    report = validate_records([{"id": "a", "text": "x"}, {"id": "a", "text": "y"}], "phrases")

    assert [w.field_name for w in report.warnings] == ["id"]


@pytest.mark.unit
def test_unknown_program_only_checked_with_catalog():
    rows = [{"id": "a", "text": "x", "programId": "legs"}]
    catalog = ProgramCatalog([ProgramEntry("push", is_master=True)])

    assert validate_records(rows, "phrases").warnings == []
    assert [w.field_name for w in validate_records(rows, "phrases", catalog).warnings] == ["program_id"]


@pytest.mark.unit
def test_days_inactive_checks():
    off_bucket = ContentRecord(id="n1", text="x", kind="notifications", trigger_type="Inactivity", days_inactive=3)
    wrong_trigger = ContentRecord(id="n2", text="x", kind="notifications", trigger_type="Scheduled", days_inactive=7)

    assert [i.field_name for i in check_record(off_bucket, 0)] == ["days_inactive"]
    assert [i.field_name for i in check_record(wrong_trigger, 1)] == ["days_inactive"]


@pytest.mark.unit
def test_issue_string_shows_location():
    report = validate_records([{"id": "a", "text": "x", "persona": "astronaut"}], "phrases")

    assert str(report.errors[0]).startswith("row 0 (a) [persona]: ")
