"""
@tag resolution for golden content.

Expands the @tag placeholders of a content template into values drawn from a
MatchContext. Resolution is a single left-to-right pass: substituted values
are never re-scanned, so a user name containing "@" can't trigger further
substitution.

Unknown tags, and tags whose value the context can't supply, are left in the
text exactly as written.

Examples:
    >>> ctx = MatchContext(user_name="דוד", days_inactive=3, gender="male")
    >>> resolve("היי @name! כבר @days_inactive ימים. @בוא/י נתחיל", ctx)
    'היי דוד! כבר 3 ימים. בוא נתחיל'
"""

import re
from typing import List, Optional, Union

from golden.contexts.content.content_data_structure import MatchContext, TriggerType
from golden.contexts.messaging.gender_agreement import is_gender_pair, resolve_gender_pair
from golden.contexts.messaging.logger import _log_debug
from golden.contexts.messaging.tag_table import (
    DESCRIPTION_TAG_NAMES,
    GENDER_PAIR_DESCRIPTORS,
    TAG_DEFINITIONS,
    TAG_LOOKUP,
    TagDescriptor,
)

# "@" + word, optionally "/" + word for gender pairs. \w covers letters of any
# script, digits and underscore.
TAG_PATTERN = re.compile(r"@(\w+(?:/\w+)?)")


def find_tags(template: str) -> List[str]:
    """
    List the tag bodies appearing in a template, in order.

    Args:
        template: Content text

    Returns:
        Tag bodies without the "@" (e.g., ["name", "בוא/י"])
    """
    if not template:
        return []
    return TAG_PATTERN.findall(template)


def is_known_tag(body: str) -> bool:
    """True if the body is a table tag or a gender pair."""
    return body in TAG_LOOKUP or is_gender_pair(body)


def find_unknown_tags(template: str) -> List[str]:
    """Tag bodies in a template that resolution would leave untouched."""
    return [body for body in find_tags(template) if not is_known_tag(body)]


def _substitute(body: str, context: MatchContext) -> Optional[str]:
    """Value for one tag body, or None to keep the tag literal."""
    definition = TAG_LOOKUP.get(body)
    if definition is not None:
        return definition.value(context)
    if is_gender_pair(body):
        return resolve_gender_pair(body, context.gender)
    return None


def resolve(template: Optional[str], context: Optional[MatchContext] = None) -> str:
    """
    Expand every @tag in a template.

    Args:
        template: Content text (None or empty yields "")
        context: Values to substitute (defaults to an empty context)

    Returns:
        Resolved text. Never raises for malformed or unknown tags.
    """
    if not template:
        return ""

    if context is None:
        context = MatchContext()

    unresolved: List[str] = []

    def replace(match: re.Match) -> str:
        value = _substitute(match.group(1), context)
        if value is None:
            unresolved.append(match.group(0))
            return match.group(0)
        return value

    resolved = TAG_PATTERN.sub(replace, template)

    if unresolved:
        _log_debug(f"Left {len(unresolved)} tag(s) unresolved: {', '.join(unresolved)}")

    return resolved


def get_available_tags(
    trigger_type: Union[TriggerType, str, None] = None,
) -> List[TagDescriptor]:
    """
    Tag legend for a notification trigger type.

    Common tags are always offered; trigger-specific tags (e.g., @days_inactive
    for Inactivity) only for their trigger types. Without a trigger type the
    full vocabulary is returned.

    Args:
        trigger_type: Trigger to filter by (None = no filtering)

    Returns:
        List of TagDescriptor (tag, description, example)
    """
    if trigger_type is None:
        return [definition.descriptor() for definition in TAG_DEFINITIONS] + list(
            GENDER_PAIR_DESCRIPTORS
        )

    trigger_type = TriggerType(trigger_type)
    return [
        definition.descriptor()
        for definition in TAG_DEFINITIONS
        if not definition.triggers or trigger_type in definition.triggers
    ]


def get_description_tags() -> List[TagDescriptor]:
    """Tag legend for the smart-description editor, gender pairs included."""
    descriptors = [TAG_LOOKUP[name].descriptor() for name in DESCRIPTION_TAG_NAMES]
    return descriptors + list(GENDER_PAIR_DESCRIPTORS)
