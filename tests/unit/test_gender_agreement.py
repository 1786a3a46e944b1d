"""Unit tests for gender-pair branch selection."""

import pytest

from golden.contexts.content import Gender
from golden.contexts.messaging.gender_agreement import (
    feminine_form,
    is_gender_pair,
    masculine_form,
    resolve_gender_pair,
)


@pytest.mark.unit
@pytest.mark.parametrize("body,expected", [
    ("בוא/י", True),
    ("את/ה", True),
    ("name", False),
    ("/ה", False),
    ("בוא/", False),
])
def test_is_gender_pair(body, expected):
    assert is_gender_pair(body) is expected


@pytest.mark.unit
def test_table_pairs_use_listed_forms():
    """Test irregular pairs where the feminine form is shorter than the masculine."""
    assert masculine_form("את/ה") == "אתה"
    assert feminine_form("את/ה") == "את"
    assert feminine_form("תרצה/י") == "תרצי"


@pytest.mark.unit
def test_suffix_regularizes_final_letter():
    assert feminine_form("מוכן/ה") == "מוכנה"
    assert feminine_form("מחכ/ה") == "מחכה"
    assert feminine_form("שלך/ם") == "שלכם"


@pytest.mark.unit
def test_long_second_branch_is_full_word():
    assert feminine_form("גיבור/גיבורה") == "גיבורה"
    assert masculine_form("גיבור/גיבורה") == "גיבור"


@pytest.mark.unit
def test_resolve_gender_pair():
    assert resolve_gender_pair("בוא/י", Gender.MALE) == "בוא"
    assert resolve_gender_pair("בוא/י", Gender.FEMALE) == "בואי"
    assert resolve_gender_pair("בוא/י", Gender.BOTH) == "בוא/י"
    assert resolve_gender_pair("בוא/י", None) == "בוא/י"
