"""
Content Context

Responsibilities:
- Defines the ContentRecord shape shared by titles, phrases, notifications and descriptions
- Defines the MatchContext describing one user at one moment
- Rejects out-of-vocabulary values when records and contexts are built
- Loads content collections and the program catalog from YAML stores

Owns: Content data model, closed vocabularies, storage adapters
Never: Scores content or resolves tags
"""

from golden.contexts.content.content_data_structure import (
    ALL_PROGRAMS,
    DAYS_INACTIVE_BUCKETS,
    ContentKind,
    ContentRecord,
    DayPeriod,
    Gender,
    Location,
    MatchContext,
    Persona,
    ProgressRange,
    TimeOfDay,
    TriggerType,
    nearest_days_inactive_bucket,
)
from golden.contexts.content.content_library import ContentLibrary
from golden.contexts.content.exceptions import (
    ContentLibraryError,
    ContentValidationError,
    InvalidContentRecordError,
    InvalidMatchContextError,
)
from golden.contexts.content.program_catalog import (
    ProgramCatalog,
    ProgramEntry,
    load_program_catalog,
)

__all__ = [
    # Data structures
    "ContentRecord",
    "MatchContext",
    "ContentKind",
    "Persona",
    "Location",
    "Gender",
    "DayPeriod",
    "ProgressRange",
    "TimeOfDay",
    "TriggerType",
    "ALL_PROGRAMS",
    "DAYS_INACTIVE_BUCKETS",
    "nearest_days_inactive_bucket",
    # Stores
    "ContentLibrary",
    "ProgramCatalog",
    "ProgramEntry",
    "load_program_catalog",
    # Errors
    "ContentValidationError",
    "InvalidContentRecordError",
    "InvalidMatchContextError",
    "ContentLibraryError",
]
