"""
Static @tag vocabulary.

Each tag has an English canonical name and the Hebrew aliases stored content
already uses. A tag's value function returns None when the context lacks the
data it needs; the resolver then leaves the tag in place.
"""

from dataclasses import dataclass
from typing import Callable, Dict, FrozenSet, List, Optional, Tuple

from golden.contexts.content.content_data_structure import MatchContext, TriggerType
from golden.contexts.messaging import labels
from golden.utils.timestamp import format_clock

# Tag groups (which trigger types a tag is offered for in the legend)
COMMON = frozenset()
INACTIVITY = frozenset({TriggerType.INACTIVITY})
VENUE = frozenset({TriggerType.LOCATION_BASED, TriggerType.PROXIMITY})
PROXIMITY = frozenset({TriggerType.PROXIMITY})
WORKOUT = frozenset({TriggerType.SCHEDULED, TriggerType.HABIT_MAINTENANCE})


@dataclass
class TagDescriptor:
    """Legend entry shown next to content editors."""

    tag: str
    description: str
    example: str


@dataclass
class TagDefinition:
    """
    One substitution tag.

    Attributes:
        name: Canonical tag body (without "@")
        aliases: Alternate bodies resolving to the same value
        description: Legend description
        example: Legend example text
        value: Function of the context producing the substitution (None = unavailable)
        triggers: Trigger types the tag is offered for (empty = all)
    """

    name: str
    aliases: Tuple[str, ...]
    description: str
    example: str
    value: Callable[[MatchContext], Optional[str]]
    triggers: FrozenSet[TriggerType] = COMMON

    def descriptor(self) -> TagDescriptor:
        return TagDescriptor(tag=f"@{self.name}", description=self.description, example=self.example)


# =========================================================================
# VALUE FUNCTIONS
# =========================================================================


def _label(mapping: Dict[str, str], value) -> Optional[str]:
    if value is None:
        return None
    key = getattr(value, "value", value)
    return mapping.get(key)


def _first_name(ctx: MatchContext) -> str:
    if ctx.user_name and ctx.user_name.strip():
        return ctx.user_name.split()[0]
    return labels.DEFAULT_USER_LABEL


def _location(ctx: MatchContext) -> str:
    return (
        _label(labels.LOCATION_LABELS, ctx.location)
        or ctx.location_name
        or labels.DEFAULT_LOCATION_LABEL
    )


def _location_name(ctx: MatchContext) -> str:
    if ctx.location_name:
        return ctx.location_name
    return _label(labels.VENUE_FALLBACKS, ctx.location) or labels.DEFAULT_LOCATION_LABEL


def _persona(ctx: MatchContext) -> str:
    return _label(labels.PERSONA_LABELS, ctx.persona) or labels.DEFAULT_USER_LABEL


def _sport(ctx: MatchContext) -> Optional[str]:
    if ctx.sport_type is None:
        return None
    return labels.SPORT_LABELS.get(ctx.sport_type, ctx.sport_type)


def _level(ctx: MatchContext) -> Optional[str]:
    return None if ctx.level is None else str(ctx.level)


def _next_level(ctx: MatchContext) -> Optional[str]:
    if ctx.next_level is not None:
        return str(ctx.next_level)
    if ctx.level is not None:
        return str(ctx.level + 1)
    return None


def _percent_progress(ctx: MatchContext) -> Optional[str]:
    if ctx.progress_percent is None:
        return None
    return f"{round(ctx.progress_percent)}%"


def _time_of_day(ctx: MatchContext) -> Optional[str]:
    return _label(labels.TIME_OF_DAY_LABELS, ctx.effective_time_of_day())


def _hour(ctx: MatchContext) -> Optional[str]:
    if ctx.current_time is None:
        return None
    return format_clock(ctx.current_time)


def _days_inactive(ctx: MatchContext) -> Optional[str]:
    return None if ctx.days_inactive is None else str(ctx.days_inactive)


def _distance(ctx: MatchContext) -> Optional[str]:
    meters = ctx.distance_meters
    if meters is None:
        return None
    if meters < 1000:
        return f"{round(meters)} {labels.METERS_UNIT}"
    return f"{meters / 1000:.1f} {labels.KILOMETERS_UNIT}"


def _goal(ctx: MatchContext) -> str:
    if not ctx.goal:
        return labels.DEFAULT_GOAL_LABEL
    return labels.GOAL_LABELS.get(ctx.goal, ctx.goal)


def _exercise(ctx: MatchContext) -> str:
    return ctx.exercise_name or labels.DEFAULT_EXERCISE_LABEL


def _category(ctx: MatchContext) -> str:
    return ctx.category or labels.DEFAULT_CATEGORY_LABEL


def _muscles(ctx: MatchContext) -> str:
    names = [labels.MUSCLE_LABELS.get(m, m) for m in ctx.muscles[:2] if m]
    return labels.LIST_JOINER.join(names) or labels.DEFAULT_MUSCLES_LABEL


def _muscle(ctx: MatchContext) -> str:
    if ctx.muscles and ctx.muscles[0]:
        return labels.MUSCLE_LABELS.get(ctx.muscles[0], ctx.muscles[0])
    return labels.DEFAULT_MUSCLE_LABEL


def _equipment(ctx: MatchContext) -> str:
    items = [item for item in ctx.equipment[:2] if item]
    return labels.LIST_JOINER.join(items) or labels.DEFAULT_EQUIPMENT_LABEL


def _program(ctx: MatchContext) -> Optional[str]:
    return ctx.program_name or ctx.program_id


# =========================================================================
# TABLE
# =========================================================================

TAG_DEFINITIONS: List[TagDefinition] = [
    TagDefinition("name", ("שם",), "שם המשתמש (שם פרטי)", "@name, בוא נתחיל!", _first_name),
    TagDefinition("persona", ("פרסונה",), "שם הפרסונה (הורה, סטודנט, וכו')", "@persona יקר, בוא נחזור לשגרה!", _persona),
    TagDefinition("location", ("מיקום",), "מיקום האימון (בית, פארק, וכו')", "אימון מושלם ב-@location", _location),
    TagDefinition("time_of_day", ("זמן_יום",), "זמן היום (בוקר, צהריים, ערב, לילה)", "@time_of_day טוב!", _time_of_day),
    TagDefinition("hour", ("שעה",), "השעה הנוכחית (HH:MM)", "השעה @hour, זמן טוב לאימון", _hour),
    TagDefinition("sport", ("ספורט",), "סוג הספורט של המשתמש", "אימון משלים ל-@sport", _sport),
    TagDefinition("level", ("רמה",), "הרמה הנוכחית בתוכנית", "את/ה ברמה @level", _level),
    TagDefinition("next_level", ("רמה_הבאה",), "הרמה הבאה בתוכנית", "עוד קצת ל-@next_level!", _next_level),
    TagDefinition("percent_progress", ("אחוז_התקדמות",), "אחוז ההתקדמות לרמה הבאה", "כבר @percent_progress מהדרך", _percent_progress),
    TagDefinition("program", ("שם_תוכנית",), "שם התוכנית הפעילה", "ממשיכים ב-@program", _program),
    TagDefinition("days_inactive", ("ימי_אי_פעילות",), "מספר הימים ללא אימון", "כבר @days_inactive ימים שלא ראינו אותך", _days_inactive, INACTIVITY),
    TagDefinition("location_name", ("שם_הפארק", "שם_המתקן"), "שם הפארק או המתקן", "אימון חדש ב-@location_name מחכה לך!", _location_name, VENUE),
    TagDefinition("distance", ("מרחק",), "המרחק מהמיקום", "רק @distance ממך", _distance, PROXIMITY),
    TagDefinition("goal", ("מטרה",), "מטרת האימון של המשתמש", "זמן ל-@goal!", _goal, WORKOUT),
    TagDefinition("exercise", ("שם_תרגיל",), "שם התרגיל המומלץ", "נסה את @exercise היום!", _exercise, WORKOUT),
    TagDefinition("category", ("קטגוריה",), "קטגוריית האימון", "אימון @category מושלם לך", _category, WORKOUT),
    TagDefinition("muscles", ("שרירים",), "קבוצות השרירים העיקריות", "מתמקד ב-@muscles", _muscles, WORKOUT),
    TagDefinition("muscle", ("שריר",), "השריר העיקרי של התרגיל", "מתמקד ב-@muscle", _muscle, WORKOUT),
    TagDefinition("equipment", ("ציוד",), "הציוד הנדרש לתרגיל", "דורש רק @equipment", _equipment, WORKOUT),
]

# Every accepted body (canonical or alias) -> definition
TAG_LOOKUP: Dict[str, TagDefinition] = {}
for _definition in TAG_DEFINITIONS:
    TAG_LOOKUP[_definition.name] = _definition
    for _alias in _definition.aliases:
        TAG_LOOKUP[_alias] = _definition

# Tags offered in the smart-description editor
DESCRIPTION_TAG_NAMES = (
    "name",
    "goal",
    "muscle",
    "location",
    "equipment",
    "exercise",
    "category",
)

GENDER_PAIR_DESCRIPTORS = [
    TagDescriptor("@את/ה", "את (נקבה) / אתה (זכר)", "@את/ה @מוכן/ה להתחיל?"),
    TagDescriptor("@מוכן/ה", "מוכנה (נקבה) / מוכן (זכר)", "@את/ה @מוכן/ה להתחיל?"),
    TagDescriptor("@בוא/י", "בואי (נקבה) / בוא (זכר)", "@בוא/י נתחיל!"),
    TagDescriptor("@תוכל/י", "תוכלי (נקבה) / תוכל (זכר)", "@תוכל/י להתחיל עכשיו"),
    TagDescriptor("@תרצה/י", "תרצי (נקבה) / תרצה (זכר)", "@תרצה/י להתחיל?"),
]
