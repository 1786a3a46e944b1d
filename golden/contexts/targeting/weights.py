"""
Scoring weights for content matching.

Weights live in YAML so product can tune them without a release. The packaged
defaults (config/scoring_weights.yaml) are overridden by SCORING_WEIGHTS_PATH.
"""

import os
from dataclasses import dataclass, fields
from pathlib import Path

from dotenv import load_dotenv
from omegaconf import OmegaConf

load_dotenv()
DEFAULT_WEIGHTS_PATH = Path(__file__).parent / "config" / "scoring_weights.yaml"
SCORING_WEIGHTS_PATH = os.getenv("SCORING_WEIGHTS_PATH")


@dataclass(frozen=True)
class ScoringWeights:
    """
    Additive weights used by score().

    Attributes:
        field_match: Earned per exactly-matched, non-wildcard targeting field
        level_up_bonus: Extra weight when a 90-100 progress range matches
        day_period_bonus: Extra weight when a specific day period matches
    """

    field_match: int = 1
    level_up_bonus: int = 5
    day_period_bonus: int = 2

    def validate(self) -> "ScoringWeights":
        """
        Check the weights keep level-up content on top.

        Raises:
            ValueError: If a weight is negative or not an integer, or if
                level-up content would not outrank three plain field matches
        """
        for f in fields(self):
            value = getattr(self, f.name)
            if not isinstance(value, int) or isinstance(value, bool) or value < 0:
                raise ValueError(f"Weight '{f.name}' must be a non-negative integer, got {value!r}")

        if self.level_up_bonus + self.field_match <= 3 * self.field_match:
            raise ValueError(
                "level_up_bonus + field_match must exceed 3 * field_match "
                f"(got {self.level_up_bonus} + {self.field_match})"
            )
        return self


DEFAULT_WEIGHTS = ScoringWeights()


def load_scoring_weights(config_path: Path = None) -> ScoringWeights:
    """
    Load scoring weights from YAML.

    Keys missing from the file keep their defaults; unknown keys are rejected.

    Args:
        config_path: Optional path (defaults to SCORING_WEIGHTS_PATH, then the packaged file)

    Returns:
        Validated ScoringWeights

    Raises:
        ValueError: If the file has unknown keys or invalid weights
    """
    if config_path is None:
        config_path = Path(SCORING_WEIGHTS_PATH) if SCORING_WEIGHTS_PATH else DEFAULT_WEIGHTS_PATH

    data = OmegaConf.to_container(OmegaConf.load(config_path), resolve=True) or {}

    known = {f.name for f in fields(ScoringWeights)}
    unknown = set(data) - known
    if unknown:
        raise ValueError(f"Unknown scoring weights {sorted(unknown)} in {config_path}. Known: {sorted(known)}")

    return ScoringWeights(**data).validate()
