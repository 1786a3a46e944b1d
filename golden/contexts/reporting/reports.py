"""
Plain-text admin reports.

Builds the template context for each report and renders it through the
TemplateRegistry. Enum values are flattened to their stored strings here so
templates never see enum members.
"""

from enum import Enum
from typing import Any, List, Optional, Union

from golden.contexts.content.content_data_structure import TriggerType
from golden.contexts.messaging.tag_resolver import get_available_tags
from golden.contexts.reporting.logger import _log_debug
from golden.contexts.reporting.registries import TemplateRegistry
from golden.contexts.targeting.coverage import STATUS_MISSING, STATUS_THIN, CoverageMatrix

# Cell markers in the coverage table
STATUS_MARKERS = {STATUS_MISSING: "!", STATUS_THIN: "*"}

_default_registry: Optional[TemplateRegistry] = None


def _get_registry(registry: Optional[TemplateRegistry]) -> TemplateRegistry:
    global _default_registry
    if registry is not None:
        return registry
    if _default_registry is None:
        _default_registry = TemplateRegistry()
    return _default_registry


def _label(value: Any) -> str:
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def render_tag_legend(
    trigger_type: Union[TriggerType, str, None] = None,
    registry: Optional[TemplateRegistry] = None,
) -> str:
    """
    Render the @tag legend for content editors.

    Args:
        trigger_type: Restrict to tags offered for this trigger (None = all tags)
        registry: Template registry (defaults to the packaged templates)

    Returns:
        Legend text
    """
    if trigger_type is not None:
        trigger_type = TriggerType(trigger_type)

    descriptors = get_available_tags(trigger_type)
    width = max((len(d.tag) for d in descriptors), default=0)
    entries = [
        {"tag": d.tag.ljust(width), "description": d.description, "example": d.example}
        for d in descriptors
    ]

    template = _get_registry(registry).get_template("tag_legend")
    _log_debug(f"Rendering tag legend with {len(entries)} tag(s)")
    return template.render(
        trigger=_label(trigger_type) if trigger_type is not None else None,
        entries=entries,
    )


def _format_row(label: str, values: List[str], label_width: int, cell_width: int) -> str:
    return label.ljust(label_width) + "".join(v.rjust(cell_width) for v in values)


def render_coverage_report(
    matrix: CoverageMatrix,
    title: str = "Content coverage",
    registry: Optional[TemplateRegistry] = None,
) -> str:
    """
    Render a coverage matrix as a text table with summary stats.

    Cell counts are suffixed with "!" when missing and "*" when only one
    message covers the cell.

    Args:
        matrix: Matrix from build_coverage_matrix() or a preset builder
        title: Report heading
        registry: Template registry (defaults to the packaged templates)

    Returns:
        Report text
    """
    row_labels = [_label(row) for row in matrix.rows]
    column_labels = [_label(column) for column in matrix.columns]

    label_width = max([len(label) for label in row_labels] + [len(matrix.row_field)]) + 2
    cell_width = max([len(label) for label in column_labels] + [4]) + 2

    header = _format_row(matrix.row_field, column_labels, label_width, cell_width)
    lines = []
    for row, row_label in zip(matrix.rows, row_labels):
        values = [f"{c.count}{STATUS_MARKERS.get(c.status, '')}" for c in matrix.row_cells(row)]
        lines.append(_format_row(row_label, values, label_width, cell_width))

    missing = [f"{_label(c.row)} / {_label(c.column)}" for c in matrix.missing()]

    template = _get_registry(registry).get_template("coverage_report")
    _log_debug(f"Rendering coverage report '{title}' ({len(matrix.cells)} cells)")
    return template.render(
        title=title,
        row_field=matrix.row_field,
        column_field=matrix.column_field,
        header=header,
        lines=lines,
        stats=matrix.stats(),
        missing=missing,
    )
