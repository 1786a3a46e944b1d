"""
Content data structures for the Content context.

Defines the closed vocabularies content is targeted by, the ContentRecord shape
shared by workout titles, motivational phrases, notifications and smart
descriptions, and the MatchContext a request is matched against.
"""

import math
from dataclasses import dataclass, field, fields, replace
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional, Type

from golden.contexts.content.exceptions import (
    InvalidContentRecordError,
    InvalidMatchContextError,
)
from golden.utils.timestamp import detect_day_period, detect_time_of_day

# =========================================================================
# VOCABULARIES
# =========================================================================


class Persona(str, Enum):
    """Lifestyle archetype content is written for."""

    PARENT = "parent"
    STUDENT = "student"
    OFFICE_WORKER = "office_worker"
    HOME_WORKER = "home_worker"
    REMOTE_WORKER = "remote_worker"
    SENIOR = "senior"
    ATHLETE = "athlete"
    RESERVIST = "reservist"


class Location(str, Enum):
    """Where the workout takes place."""

    HOME = "home"
    PARK = "park"
    STREET = "street"
    OFFICE = "office"
    SCHOOL = "school"
    GYM = "gym"
    AIRPORT = "airport"
    LIBRARY = "library"


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"
    BOTH = "both"


class DayPeriod(str, Enum):
    """Position in the week. ALL marks content valid on any day."""

    START_OF_WEEK = "start_of_week"
    MID_WEEK = "mid_week"
    WEEKEND = "weekend"
    ALL = "all"


class ProgressRange(str, Enum):
    """Bucketed percent-to-next-level."""

    EARLY = "0-20"
    MIDDLE = "20-90"
    LEVEL_UP = "90-100"

    @property
    def bounds(self) -> tuple:
        low, high = self.value.split("-")
        return int(low), int(high)

    def contains(self, percent: float) -> bool:
        """
        Check whether a progress percentage falls in this bucket.

        Buckets are half-open ([0, 20), [20, 90)) except the last, which is
        closed ([90, 100]) so that a full bar still counts as level-up.
        Out-of-range percentages are clamped into [0, 100].
        """
        return ProgressRange.for_percent(percent) is self

    @classmethod
    def for_percent(cls, percent: float) -> "ProgressRange":
        percent = min(max(percent, 0), 100)
        if percent < 20:
            return cls.EARLY
        elif percent < 90:
            return cls.MIDDLE
        return cls.LEVEL_UP


class TriggerType(str, Enum):
    """What fires a notification."""

    INACTIVITY = "Inactivity"
    SCHEDULED = "Scheduled"
    LOCATION_BASED = "Location_Based"
    HABIT_MAINTENANCE = "Habit_Maintenance"
    PROXIMITY = "Proximity"


class TimeOfDay(str, Enum):
    MORNING = "morning"
    AFTERNOON = "afternoon"
    EVENING = "evening"
    NIGHT = "night"
    ANY = "any"


class ContentKind(str, Enum):
    """Content collections managed in the admin console."""

    TITLES = "titles"
    PHRASES = "phrases"
    NOTIFICATIONS = "notifications"
    DESCRIPTIONS = "descriptions"


# Sentinel program id meaning "applies regardless of active program"
ALL_PROGRAMS = "all"

# Inactivity notifications are authored for these day counts only
DAYS_INACTIVE_BUCKETS = (1, 2, 7, 30)

# Record values meaning "no restriction" for persona / location
WILDCARD_STRINGS = {"", "all", "any"}


def nearest_days_inactive_bucket(days: int) -> int:
    """
    Round an inactivity streak to the closest authored bucket.

    Ties go to the smaller bucket (e.g., 4.5 days would pick 2 over 7).
    """
    return min(DAYS_INACTIVE_BUCKETS, key=lambda bucket: (abs(bucket - days), bucket))


def _coerce_enum(
    enum_cls: Type[Enum],
    value: Any,
    field_name: str,
    error_cls: Type[Exception],
    record_id: Optional[str] = None,
    wildcard_to_none: bool = False,
) -> Optional[Enum]:
    """
    Convert a raw value into a member of a closed vocabulary.

    Args:
        enum_cls: Target enum
        value: Raw value (member, string, or None)
        field_name: Field being coerced (for error reporting)
        error_cls: Exception type to raise on rejection
        record_id: Record identifier (for error reporting)
        wildcard_to_none: Treat "all"/"any" as absent

    Returns:
        Enum member, or None if value is absent

    Raises:
        error_cls: If value is outside the vocabulary
    """
    if value is None or isinstance(value, enum_cls):
        return value

    if isinstance(value, str):
        stripped = value.strip()
        if stripped == "" or (wildcard_to_none and stripped in WILDCARD_STRINGS):
            return None
        try:
            return enum_cls(stripped)
        except ValueError:
            pass

    allowed = ", ".join(member.value for member in enum_cls)
    raise error_cls(
        f"Unknown {field_name} value (allowed: {allowed})",
        field_name=field_name,
        value=value,
        record_id=record_id,
    )


def _coerce_int(
    value: Any,
    field_name: str,
    error_cls: Type[Exception],
    record_id: Optional[str] = None,
) -> Optional[int]:
    """Convert a raw numeric value to int, treating None/"" as absent."""
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        raise error_cls("Expected an integer", field_name=field_name, value=value, record_id=record_id)
    try:
        return int(value)
    except (TypeError, ValueError):
        raise error_cls(
            "Expected an integer", field_name=field_name, value=value, record_id=record_id
        ) from None


def _coerce_float(
    value: Any,
    field_name: str,
    error_cls: Type[Exception],
    record_id: Optional[str] = None,
) -> Optional[float]:
    """Convert a raw measurement to a finite float, treating None/"" as absent."""
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        raise error_cls("Expected a number", field_name=field_name, value=value, record_id=record_id)
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise error_cls(
            "Expected a number", field_name=field_name, value=value, record_id=record_id
        ) from None
    if not math.isfinite(number):
        raise error_cls("Expected a finite number", field_name=field_name, value=value, record_id=record_id)
    return number


def _clean_str(value: Any) -> Optional[str]:
    """Normalize free-form category strings; blank means absent."""
    if value is None:
        return None
    value = str(value).strip()
    return value or None


# =========================================================================
# CONTENT RECORD
# =========================================================================

# Stored (camelCase) field names -> dataclass attribute names
STORED_FIELD_NAMES = {
    "sportType": "sport_type",
    "motivationStyle": "motivation_style",
    "experienceLevel": "experience_level",
    "progressRange": "progress_range",
    "dayPeriod": "day_period",
    "programId": "program_id",
    "minLevel": "min_level",
    "maxLevel": "max_level",
    "timeOfDay": "time_of_day",
    "triggerType": "trigger_type",
    "daysInactive": "days_inactive",
    "distanceMeters": "distance_meters",
}

# Keys holding the template text, by precedence
TEXT_KEYS = ("text", "phrase", "description")

# Fields whose presence makes a record targeted (not general fallback)
FILTER_FIELDS = (
    "persona",
    "location",
    "gender",
    "sport_type",
    "motivation_style",
    "experience_level",
    "progress_range",
    "day_period",
    "program_id",
    "min_level",
    "max_level",
    "time_of_day",
    "trigger_type",
    "days_inactive",
)


@dataclass
class ContentRecord:
    """
    One piece of golden content with its targeting attributes.

    Every filter field is optional; an absent field matches any context value.
    A record with no filter field set is a universal fallback.

    Attributes:
        id: Identifier assigned by the content store
        text: Template string with zero or more @tag placeholders
        kind: Collection the record belongs to
        persona, location, gender, sport_type, motivation_style,
        experience_level, progress_range, day_period, program_id,
        min_level, max_level: Targeting filters
        category: Workout category (titles)
        time_of_day: Time bucket (phrases, titles)
        trigger_type, days_inactive, distance_meters: Notification trigger data
    """

    id: str
    text: str
    kind: ContentKind = ContentKind.PHRASES

    persona: Optional[Persona] = None
    location: Optional[Location] = None
    gender: Optional[Gender] = None
    sport_type: Optional[str] = None
    motivation_style: Optional[str] = None
    experience_level: Optional[str] = None
    progress_range: Optional[ProgressRange] = None
    day_period: Optional[DayPeriod] = None
    program_id: Optional[str] = None
    min_level: Optional[int] = None
    max_level: Optional[int] = None

    category: Optional[str] = None
    time_of_day: Optional[TimeOfDay] = None
    trigger_type: Optional[TriggerType] = None
    days_inactive: Optional[int] = None
    distance_meters: Optional[int] = None

    def __post_init__(self):
        err = InvalidContentRecordError
        rid = self.id

        if self.text is None or not str(self.text).strip():
            raise err("Content text must not be empty", field_name="text", value=self.text, record_id=rid)
        self.text = str(self.text)

        self.kind = _coerce_enum(ContentKind, self.kind, "kind", err, rid)
        self.persona = _coerce_enum(Persona, self.persona, "persona", err, rid, wildcard_to_none=True)
        self.location = _coerce_enum(Location, self.location, "location", err, rid, wildcard_to_none=True)
        self.gender = _coerce_enum(Gender, self.gender, "gender", err, rid)
        self.progress_range = _coerce_enum(ProgressRange, self.progress_range, "progress_range", err, rid)
        self.day_period = _coerce_enum(DayPeriod, self.day_period, "day_period", err, rid)
        self.time_of_day = _coerce_enum(TimeOfDay, self.time_of_day, "time_of_day", err, rid)
        self.trigger_type = _coerce_enum(TriggerType, self.trigger_type, "trigger_type", err, rid)

        self.sport_type = _clean_str(self.sport_type)
        self.motivation_style = _clean_str(self.motivation_style)
        self.experience_level = _clean_str(self.experience_level)
        self.program_id = _clean_str(self.program_id)
        self.category = _clean_str(self.category)

        self.min_level = _coerce_int(self.min_level, "min_level", err, rid)
        self.max_level = _coerce_int(self.max_level, "max_level", err, rid)
        self.days_inactive = _coerce_int(self.days_inactive, "days_inactive", err, rid)
        self.distance_meters = _coerce_int(self.distance_meters, "distance_meters", err, rid)

        if self.kind is ContentKind.NOTIFICATIONS and self.trigger_type is None:
            raise err(
                "Notifications require a trigger type",
                field_name="trigger_type",
                value=None,
                record_id=rid,
            )

    # =========================================================================
    # FACTORY METHODS
    # =========================================================================

    @classmethod
    def from_dict(
        cls, data: Dict[str, Any], kind: Any = None, record_id: Optional[str] = None
    ) -> "ContentRecord":
        """
        Build a record from a stored row.

        Accepts both the stored camelCase keys (sportType, minLevel, ...) and
        snake_case keys. The template text is read from "text", "phrase" or
        "description", whichever is present first. Unrecognized keys
        (clickCount, createdAt, ...) are ignored.

        Args:
            data: Stored row
            kind: Collection the row came from (overrides data["kind"])
            record_id: Identifier (overrides data["id"])

        Returns:
            ContentRecord

        Raises:
            InvalidContentRecordError: If the row fails validation
        """
        attribute_names = {f.name for f in fields(cls)}
        values: Dict[str, Any] = {}

        for key, value in data.items():
            name = STORED_FIELD_NAMES.get(key, key)
            if name in attribute_names and name not in ("id", "text", "kind"):
                values[name] = value

        text = next((data[key] for key in TEXT_KEYS if data.get(key)), None)
        rid = record_id if record_id is not None else data.get("id")

        return cls(
            id=str(rid) if rid is not None else "",
            text=text,
            kind=kind if kind is not None else data.get("kind", ContentKind.PHRASES),
            **values,
        )

    # =========================================================================
    # PUBLIC API METHODS
    # =========================================================================

    def is_general(self) -> bool:
        """True when no targeting filter is set (universal fallback)."""
        return all(getattr(self, name) is None for name in FILTER_FIELDS)

    def targeted_fields(self) -> List[str]:
        """Names of the filter fields this record sets."""
        return [name for name in FILTER_FIELDS if getattr(self, name) is not None]

    def merge(self, updates: Dict[str, Any]) -> "ContentRecord":
        """
        Apply a merge-update and return the updated record.

        Keys follow from_dict conventions; the identifier is immutable.
        """
        updates = dict(updates)
        # Stored-shape text keys replace the current text
        aliases = [updates.pop(key) for key in TEXT_KEYS[1:] if key in updates]
        if "text" not in updates and aliases:
            updates["text"] = aliases[0]

        current = self.to_dict()
        current.update(updates)
        return ContentRecord.from_dict(current, kind=self.kind, record_id=self.id)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the stored camelCase shape, omitting absent fields."""
        stored_names = {v: k for k, v in STORED_FIELD_NAMES.items()}
        result: Dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None:
                continue
            if isinstance(value, Enum):
                value = value.value
            result[stored_names.get(f.name, f.name)] = value
        return result


# =========================================================================
# MATCH CONTEXT
# =========================================================================


@dataclass
class MatchContext:
    """
    Concrete description of one user at one moment, built per request.

    Every attribute is optional. Absent targeting attributes act as wildcards,
    which is how coverage tooling builds partial contexts from a single
    matrix cell.

    Targeting attributes mirror ContentRecord's filters with concrete values
    (an actual level rather than a range, an actual progress percentage rather
    than a bucket). Substitution attributes only feed @tag resolution.
    """

    # Targeting
    persona: Optional[Persona] = None
    location: Optional[Location] = None
    gender: Optional[Gender] = None
    sport_type: Optional[str] = None
    motivation_style: Optional[str] = None
    experience_level: Optional[str] = None
    program_id: Optional[str] = None
    level: Optional[int] = None
    day_period: Optional[DayPeriod] = None
    progress_percent: Optional[float] = None
    time_of_day: Optional[TimeOfDay] = None
    trigger_type: Optional[TriggerType] = None
    days_inactive: Optional[int] = None
    distance_meters: Optional[float] = None

    # Substitution values
    user_name: Optional[str] = None
    goal: Optional[str] = None
    exercise_name: Optional[str] = None
    category: Optional[str] = None
    muscles: List[str] = field(default_factory=list)
    equipment: List[str] = field(default_factory=list)
    location_name: Optional[str] = None
    program_name: Optional[str] = None
    next_level: Optional[int] = None
    current_time: Optional[datetime] = None

    def __post_init__(self):
        err = InvalidMatchContextError

        self.persona = _coerce_enum(Persona, self.persona, "persona", err)
        self.location = _coerce_enum(Location, self.location, "location", err)
        self.gender = _coerce_enum(Gender, self.gender, "gender", err)
        self.day_period = _coerce_enum(DayPeriod, self.day_period, "day_period", err)
        self.time_of_day = _coerce_enum(TimeOfDay, self.time_of_day, "time_of_day", err)
        self.trigger_type = _coerce_enum(TriggerType, self.trigger_type, "trigger_type", err)

        self.sport_type = _clean_str(self.sport_type)
        self.motivation_style = _clean_str(self.motivation_style)
        self.experience_level = _clean_str(self.experience_level)
        self.program_id = _clean_str(self.program_id)

        self.level = _coerce_int(self.level, "level", err)
        self.next_level = _coerce_int(self.next_level, "next_level", err)
        self.days_inactive = _coerce_int(self.days_inactive, "days_inactive", err)
        self.progress_percent = _coerce_float(self.progress_percent, "progress_percent", err)
        self.distance_meters = _coerce_float(self.distance_meters, "distance_meters", err)

    def effective_time_of_day(self) -> Optional[TimeOfDay]:
        """Explicit time of day, else the bucket of current_time, else None."""
        if self.time_of_day is not None:
            return self.time_of_day
        if self.current_time is not None:
            return TimeOfDay(detect_time_of_day(self.current_time))
        return None

    def effective_day_period(self) -> Optional[DayPeriod]:
        """Explicit day period, else the weekday bucket of current_time, else None."""
        if self.day_period is not None:
            return self.day_period
        if self.current_time is not None:
            return DayPeriod(detect_day_period(self.current_time))
        return None

    def progress_range(self) -> Optional[ProgressRange]:
        """Bucket of progress_percent, or None when progress is unknown."""
        if self.progress_percent is None:
            return None
        return ProgressRange.for_percent(self.progress_percent)

    def days_inactive_bucket(self) -> Optional[int]:
        if self.days_inactive is None:
            return None
        return nearest_days_inactive_bucket(self.days_inactive)

    def with_overrides(self, **overrides) -> "MatchContext":
        """Return a copy with some attributes replaced."""
        return replace(self, **overrides)
