"""
Content Coverage Matrix

Counts, for each cell of a two-dimensional grid (persona x location,
persona x days inactive, ...), how many records would survive the hard
filters for a partial context built from just that cell's values. Cells with
no content show where the admin team still needs to write messages.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Sequence

from golden.contexts.content.content_data_structure import (
    DAYS_INACTIVE_BUCKETS,
    ContentRecord,
    Gender,
    Location,
    MatchContext,
    Persona,
    TriggerType,
)
from golden.contexts.content.program_catalog import ProgramCatalog
from golden.contexts.targeting.matcher import hard_filter

# Cell status thresholds
STATUS_MISSING = "missing"
STATUS_THIN = "thin"
STATUS_COVERED = "covered"


def coverage_status(count: int) -> str:
    """Classify a cell count: 0 missing, 1 thin, 2+ covered."""
    if count == 0:
        return STATUS_MISSING
    if count == 1:
        return STATUS_THIN
    return STATUS_COVERED


@dataclass
class CoverageCell:
    """
    One cell of a coverage matrix.

    Attributes:
        row: Row dimension value
        column: Column dimension value
        count: Records passing the hard filters for this cell
        male_count: ...of which target male users
        female_count: ...of which target female users
        unisex_count: ...of which target any gender
    """

    row: Any
    column: Any
    count: int = 0
    male_count: int = 0
    female_count: int = 0
    unisex_count: int = 0

    @property
    def status(self) -> str:
        return coverage_status(self.count)


@dataclass
class CoverageStats:
    total_cells: int
    covered_cells: int
    total_messages: int
    percentage: int


@dataclass
class CoverageMatrix:
    """
    Grid of coverage cells.

    Attributes:
        row_field: MatchContext attribute varied along rows
        column_field: MatchContext attribute varied along columns
        rows: Row values, in display order
        columns: Column values, in display order
        cells: Cells in row-major order
    """

    row_field: str
    column_field: str
    rows: List[Any]
    columns: List[Any]
    cells: List[CoverageCell] = field(default_factory=list)

    def cell(self, row: Any, column: Any) -> Optional[CoverageCell]:
        """Look up a cell by its (row, column) values."""
        return next((c for c in self.cells if c.row == row and c.column == column), None)

    def row_cells(self, row: Any) -> List[CoverageCell]:
        return [c for c in self.cells if c.row == row]

    def missing(self) -> List[CoverageCell]:
        """Cells with no content at all."""
        return [c for c in self.cells if c.count == 0]

    def stats(self) -> CoverageStats:
        total = len(self.cells)
        covered = sum(1 for c in self.cells if c.count > 0)
        return CoverageStats(
            total_cells=total,
            covered_cells=covered,
            total_messages=sum(c.count for c in self.cells),
            percentage=round(covered / total * 100) if total else 0,
        )

    def as_table(self) -> Dict[Any, Dict[Any, int]]:
        """Nested {row: {column: count}} mapping."""
        return {row: {c.column: c.count for c in self.row_cells(row)} for row in self.rows}


def build_coverage_matrix(
    records: Iterable[ContentRecord],
    row_field: str,
    row_values: Sequence[Any],
    column_field: str,
    column_values: Sequence[Any],
    base_context: Optional[MatchContext] = None,
    catalog: Optional[ProgramCatalog] = None,
) -> CoverageMatrix:
    """
    Count hard-filter survivors for every (row, column) cell.

    Each cell's context is base_context with the two dimension attributes
    overridden; every other attribute stays as in base_context (absent means
    wildcard).

    Args:
        records: Content to count
        row_field: MatchContext attribute for rows (e.g., "persona")
        row_values: Values to enumerate for rows
        column_field: MatchContext attribute for columns (e.g., "location")
        column_values: Values to enumerate for columns
        base_context: Global filters shared by all cells (e.g., gender, sport)
        catalog: Program hierarchy

    Returns:
        CoverageMatrix in row-major order
    """
    records = list(records)
    base_context = base_context or MatchContext()
    matrix = CoverageMatrix(
        row_field=row_field,
        column_field=column_field,
        rows=list(row_values),
        columns=list(column_values),
    )

    for row in matrix.rows:
        for column in matrix.columns:
            cell_context = base_context.with_overrides(**{row_field: row, column_field: column})
            matching = [r for r in records if hard_filter(r, cell_context, catalog)]
            matrix.cells.append(
                CoverageCell(
                    row=row,
                    column=column,
                    count=len(matching),
                    male_count=sum(1 for r in matching if r.gender == Gender.MALE),
                    female_count=sum(1 for r in matching if r.gender == Gender.FEMALE),
                    unisex_count=sum(1 for r in matching if r.gender in (None, Gender.BOTH)),
                )
            )

    return matrix


def persona_location_matrix(
    records: Iterable[ContentRecord],
    personas: Optional[Sequence[Persona]] = None,
    locations: Optional[Sequence[Location]] = None,
    base_context: Optional[MatchContext] = None,
    catalog: Optional[ProgramCatalog] = None,
) -> CoverageMatrix:
    """Persona x location coverage (phrases, titles, descriptions)."""
    return build_coverage_matrix(
        records,
        "persona",
        personas or list(Persona),
        "location",
        locations or list(Location),
        base_context=base_context,
        catalog=catalog,
    )


def persona_days_matrix(
    records: Iterable[ContentRecord],
    personas: Optional[Sequence[Persona]] = None,
    days: Sequence[int] = DAYS_INACTIVE_BUCKETS,
    base_context: Optional[MatchContext] = None,
    catalog: Optional[ProgramCatalog] = None,
) -> CoverageMatrix:
    """
    Persona x days-inactive coverage for inactivity notifications.

    Any day count may be used as a column (e.g., a 0-30 journey); each is
    matched against the nearest authored bucket.
    """
    if base_context is None:
        base_context = MatchContext(trigger_type=TriggerType.INACTIVITY)
    return build_coverage_matrix(
        records,
        "persona",
        personas or list(Persona),
        "days_inactive",
        days,
        base_context=base_context,
        catalog=catalog,
    )
