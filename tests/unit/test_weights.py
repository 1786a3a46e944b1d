"""Unit tests for scoring weight configuration."""

import pytest

from golden.contexts.targeting.weights import (
    DEFAULT_WEIGHTS,
    DEFAULT_WEIGHTS_PATH,
    ScoringWeights,
    load_scoring_weights,
)


@pytest.mark.unit
def test_packaged_weights_match_defaults():
    assert DEFAULT_WEIGHTS_PATH.exists()
    assert load_scoring_weights(DEFAULT_WEIGHTS_PATH) == DEFAULT_WEIGHTS


@pytest.mark.unit
def test_default_level_up_dominates_three_fields():
    w = DEFAULT_WEIGHTS
    assert w.level_up_bonus + w.field_match > 3 * w.field_match
    assert w.validate() is w


@pytest.mark.unit
def test_partial_file_keeps_defaults(tmp_path):
    config = tmp_path / "weights.yaml"
    config.write_text("day_period_bonus: 4\n")

    weights = load_scoring_weights(config)

    assert weights.day_period_bonus == 4
    assert weights.field_match == 1
    assert weights.level_up_bonus == 5


@pytest.mark.unit
def test_unknown_keys_rejected(tmp_path):
    config = tmp_path / "weights.yaml"
    config.write_text("field_match: 1\nbirthday_bonus: 3\n")

    with pytest.raises(ValueError, match="birthday_bonus"):
        load_scoring_weights(config)


@pytest.mark.unit
def test_weak_level_up_bonus_rejected():
    with pytest.raises(ValueError, match="level_up_bonus"):
        ScoringWeights(field_match=2, level_up_bonus=3).validate()


@pytest.mark.unit
@pytest.mark.parametrize("bad", [-1, 1.5, True])
def test_non_integer_or_negative_weights_rejected(bad):
    with pytest.raises(ValueError):
        ScoringWeights(day_period_bonus=bad).validate()
