"""
Reporting Context

Responsibilities:
- Renders the @tag legend shown to content editors
- Renders coverage matrices as text tables for the admin team
- Loads and caches Jinja2 report templates

Owns: Report templates and their rendering context
Never: Computes coverage counts or resolves tags itself
"""

from golden.contexts.reporting.registries import TemplateRegistry
from golden.contexts.reporting.reports import render_coverage_report, render_tag_legend

__all__ = [
    "TemplateRegistry",
    "render_tag_legend",
    "render_coverage_report",
]
