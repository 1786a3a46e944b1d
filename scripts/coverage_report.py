#!/usr/bin/env python3
"""
Content coverage reports for the admin team.

Shows, per grid cell, how many messages would pass the hard filters so gaps
in the golden content are easy to spot.

Commands:
    matrix - Persona x location (or persona x days inactive) coverage table
"""

import os
from enum import Enum
from pathlib import Path
from typing import List, Optional

import typer
from dotenv import load_dotenv

from golden.contexts.content import (
    DAYS_INACTIVE_BUCKETS,
    ContentKind,
    ContentLibrary,
    ContentLibraryError,
    InvalidMatchContextError,
    MatchContext,
    ProgramCatalog,
    TriggerType,
    load_program_catalog,
)
from golden.contexts.reporting import render_coverage_report
from golden.contexts.targeting import persona_days_matrix, persona_location_matrix
from golden.contexts.targeting.logger import log_coverage_stats, setup_targeting_logger
from golden.utils.timestamp import session_stamp

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))

app = typer.Typer(
    add_completion=False,
    help="Report golden content coverage",
    invoke_without_command=True,
)


class Grid(str, Enum):
    LOCATION = "location"
    DAYS = "days"


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("matrix")
def matrix_command(
    kind: ContentKind = typer.Argument(ContentKind.PHRASES, help="Content collection to analyze"),
    grid: Grid = typer.Option(Grid.LOCATION, "--grid", help="Column dimension: location or days"),
    library: Optional[Path] = typer.Option(None, "--library", help="Content library directory (defaults to CONTENT_LIBRARY_PATH)"),
    catalog_path: Optional[Path] = typer.Option(None, "--catalog", help="Program catalog YAML"),
    gender: Optional[str] = typer.Option(None, "--gender", "-g", help="Only count content visible to this gender"),
    sport: Optional[str] = typer.Option(None, "--sport", help="Only count content for this sport type"),
    program: Optional[str] = typer.Option(None, "--program", help="Only count content visible to this program"),
    days: Optional[List[int]] = typer.Option(None, "--day", help="Day column for --grid days (repeatable)"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Also write the report to this file"),
):
    """
    Print a coverage matrix for a content collection.

    Cells marked "!" have no content and cells marked "*" have a single message.

    Examples:\n

        $ coverage_report.py matrix phrases                          # Persona x location

        $ coverage_report.py matrix phrases -g female --sport running

        $ coverage_report.py matrix notifications --grid days        # Inactivity buckets

        $ coverage_report.py matrix notifications --grid days --day 0 --day 3 --day 14
    """
    log_dir = LOGS_PATH / f"coverage_{session_stamp()}"
    setup_targeting_logger(log_dir, phase="coverage")

    try:
        records = ContentLibrary(library).fetch_all(kind)
        if catalog_path is not None or os.getenv("PROGRAM_CATALOG_PATH"):
            catalog = load_program_catalog(catalog_path)
        else:
            catalog = ProgramCatalog()
    except ContentLibraryError as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    try:
        base = MatchContext(gender=gender, sport_type=sport, program_id=program)
    except InvalidMatchContextError as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    if grid is Grid.DAYS:
        base = base.with_overrides(trigger_type=TriggerType.INACTIVITY)
        matrix = persona_days_matrix(
            records, days=days or DAYS_INACTIVE_BUCKETS, base_context=base, catalog=catalog
        )
        title = f"{kind.value}: persona x days inactive"
    else:
        matrix = persona_location_matrix(records, base_context=base, catalog=catalog)
        title = f"{kind.value}: persona x location"

    log_coverage_stats(title, matrix.stats())
    report = render_coverage_report(matrix, title=title)
    typer.echo(report)

    if output is not None:
        output.parent.mkdir(exist_ok=True, parents=True)
        output.write_text(report, encoding="utf-8")
        typer.secho(f"✓ Report written to {output}", fg=typer.colors.GREEN)


if __name__ == "__main__":
    app()
