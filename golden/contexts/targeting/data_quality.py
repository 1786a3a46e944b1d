"""
Bulk content validation.

Checks uploaded content rows before they go live. Rows that can't become a
ContentRecord are errors; rows that load but can never match, or contain tags
the resolver doesn't know, are warnings. Matching itself tolerates all of
these, so nothing here raises for bad data.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

from golden.contexts.content.content_data_structure import (
    DAYS_INACTIVE_BUCKETS,
    ContentKind,
    ContentRecord,
    TriggerType,
)
from golden.contexts.content.exceptions import InvalidContentRecordError
from golden.contexts.content.program_catalog import ProgramCatalog
from golden.contexts.messaging.tag_resolver import find_unknown_tags

SEVERITY_ERROR = "error"
SEVERITY_WARNING = "warning"


@dataclass
class ValidationIssue:
    """One problem found in one row."""

    row_index: int
    record_id: Optional[str]
    field_name: Optional[str]
    message: str
    severity: str = SEVERITY_WARNING

    def __str__(self) -> str:
        location = f"row {self.row_index}"
        if self.record_id:
            location += f" ({self.record_id})"
        if self.field_name:
            location += f" [{self.field_name}]"
        return f"{location}: {self.message}"


@dataclass
class ValidationReport:
    """
    Result of validating one collection.

    Attributes:
        kind: Content kind validated
        total: Number of rows checked
        records: Rows that loaded successfully
        errors: Rows rejected at construction
        warnings: Data-quality problems in rows that did load
    """

    kind: ContentKind
    total: int = 0
    records: List[ContentRecord] = field(default_factory=list)
    errors: List[ValidationIssue] = field(default_factory=list)
    warnings: List[ValidationIssue] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


def check_record(
    record: ContentRecord, row_index: int, catalog: Optional[ProgramCatalog] = None
) -> List[ValidationIssue]:
    """
    Data-quality warnings for a record that loaded successfully.

    Args:
        record: Loaded record
        row_index: Position in the upload (for reporting)
        catalog: Live program list; dangling program ids are only detected when given

    Returns:
        List of warning issues
    """
    issues = []

    def warn(field_name: Optional[str], message: str) -> None:
        issues.append(ValidationIssue(row_index, record.id, field_name, message))

    if (
        record.min_level is not None
        and record.max_level is not None
        and record.min_level > record.max_level
    ):
        warn("min_level", f"min_level {record.min_level} > max_level {record.max_level}; never matches")

    if catalog is not None and record.program_id and not catalog.is_known(record.program_id):
        warn("program_id", f"Unknown program '{record.program_id}'")

    if record.days_inactive is not None:
        if record.days_inactive not in DAYS_INACTIVE_BUCKETS:
            buckets = ", ".join(str(b) for b in DAYS_INACTIVE_BUCKETS)
            warn("days_inactive", f"{record.days_inactive} is not an authored bucket ({buckets})")
        if record.trigger_type not in (None, TriggerType.INACTIVITY):
            warn("days_inactive", f"days_inactive set on a {record.trigger_type.value} notification")

    unknown = find_unknown_tags(record.text)
    if unknown:
        warn("text", f"Unknown tag(s): {', '.join('@' + tag for tag in unknown)}")

    return issues


def validate_records(
    rows: Iterable[Dict[str, Any]],
    kind: ContentKind,
    catalog: Optional[ProgramCatalog] = None,
) -> ValidationReport:
    """
    Validate a bulk upload.

    Args:
        rows: Stored-shape rows (as read from CSV/YAML)
        kind: Content kind the rows belong to
        catalog: Live program list for dangling-program detection

    Returns:
        ValidationReport
    """
    kind = ContentKind(kind)
    report = ValidationReport(kind=kind)
    seen_ids = set()

    for index, row in enumerate(rows):
        report.total += 1
        record_id = row.get("id") or f"{kind.value}-{index}"

        try:
            record = ContentRecord.from_dict(row, kind=kind, record_id=record_id)
        except InvalidContentRecordError as e:
            report.errors.append(
                ValidationIssue(index, record_id, e.field_name, e.message, SEVERITY_ERROR)
            )
            continue

        if record.id in seen_ids:
            report.warnings.append(ValidationIssue(index, record.id, "id", "Duplicate id"))
        seen_ids.add(record.id)

        report.records.append(record)
        report.warnings.extend(check_record(record, index, catalog))

    return report

