"""
Messaging Context

Responsibilities:
- Owns the @tag vocabulary (canonical English names and Hebrew aliases)
- Resolves content templates into final display text for a MatchContext
- Applies grammatical gender agreement for dual-form tags
- Publishes tag legends for content editors

Owns: Tag table, display labels, gender agreement rules
Never: Decides which content record is shown
"""

from golden.contexts.messaging.tag_resolver import (
    find_tags,
    find_unknown_tags,
    get_available_tags,
    get_description_tags,
    resolve,
)
from golden.contexts.messaging.tag_table import TagDescriptor

__all__ = [
    "resolve",
    "get_available_tags",
    "get_description_tags",
    "find_tags",
    "find_unknown_tags",
    "TagDescriptor",
]
