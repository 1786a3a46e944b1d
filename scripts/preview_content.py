#!/usr/bin/env python3
"""
Preview golden content the way a user would see it.

Commands:
    resolve - Resolve the @tags of a template for a sample user
    select  - Rank a content collection for a sample user and show the winner
    tags    - Show the @tag legend (optionally for one trigger type)
"""

import os
from datetime import datetime
from pathlib import Path
from typing import List, Optional

import typer
from dotenv import load_dotenv

from golden.contexts.content import (
    ContentKind,
    ContentLibrary,
    ContentLibraryError,
    InvalidMatchContextError,
    MatchContext,
    ProgramCatalog,
    load_program_catalog,
)
from golden.contexts.messaging import resolve
from golden.contexts.reporting import render_tag_legend
from golden.contexts.targeting import load_scoring_weights, rank
from golden.contexts.targeting.logger import setup_targeting_logger
from golden.utils.timestamp import session_stamp

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))

app = typer.Typer(
    add_completion=False,
    help="Preview resolved golden content for a sample user",
    invoke_without_command=True,
)

TIME_FORMATS = ["%Y-%m-%dT%H:%M", "%Y-%m-%d %H:%M"]


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def _build_context(**values) -> MatchContext:
    """Build a MatchContext from CLI options, exiting on bad vocabulary."""
    values["muscles"] = list(values.get("muscles") or [])
    values["equipment"] = list(values.get("equipment") or [])
    try:
        return MatchContext(**values)
    except InvalidMatchContextError as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)


def _load_catalog(catalog_path: Optional[Path]) -> ProgramCatalog:
    """Load the program catalog, or fall back to an empty one when none is configured."""
    if catalog_path is None and not os.getenv("PROGRAM_CATALOG_PATH"):
        return ProgramCatalog()
    try:
        return load_program_catalog(catalog_path)
    except ContentLibraryError as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)


@app.command("resolve")
def resolve_command(
    template: str = typer.Argument(..., help="Template text with @tags"),
    name: Optional[str] = typer.Option(None, "--name", help="User name"),
    gender: Optional[str] = typer.Option(None, "--gender", "-g", help="male | female | both"),
    persona: Optional[str] = typer.Option(None, "--persona", "-p", help="User persona"),
    location: Optional[str] = typer.Option(None, "--location", "-l", help="Location type"),
    location_name: Optional[str] = typer.Option(None, "--location-name", help="Park or venue name"),
    sport: Optional[str] = typer.Option(None, "--sport", help="Sport type"),
    goal: Optional[str] = typer.Option(None, "--goal", help="Training goal"),
    level: Optional[int] = typer.Option(None, "--level", help="Current level"),
    next_level: Optional[int] = typer.Option(None, "--next-level", help="Next level"),
    progress: Optional[float] = typer.Option(None, "--progress", help="Progress in level (0-100)"),
    days_inactive: Optional[int] = typer.Option(None, "--days-inactive", "-d", help="Days since last workout"),
    distance: Optional[float] = typer.Option(None, "--distance", help="Distance to venue in meters"),
    program_name: Optional[str] = typer.Option(None, "--program-name", help="Program display name"),
    exercise: Optional[str] = typer.Option(None, "--exercise", help="Exercise name"),
    muscles: Optional[List[str]] = typer.Option(None, "--muscle", help="Target muscle (repeatable)"),
    equipment: Optional[List[str]] = typer.Option(None, "--equipment", help="Equipment item (repeatable)"),
    at: Optional[datetime] = typer.Option(None, "--at", formats=TIME_FORMATS, help="Clock time for @hour and time of day"),
):
    """
    Resolve a template's @tags for a sample user.

    Examples:\n

        $ preview_content.py resolve "היי @name! @בוא/י נתחיל" --name דוד -g male

        $ preview_content.py resolve "כבר @days_inactive ימים" -d 3
    """
    context = _build_context(
        user_name=name,
        gender=gender,
        persona=persona,
        location=location,
        location_name=location_name,
        sport_type=sport,
        goal=goal,
        level=level,
        next_level=next_level,
        progress_percent=progress,
        days_inactive=days_inactive,
        distance_meters=distance,
        program_name=program_name,
        exercise_name=exercise,
        muscles=muscles,
        equipment=equipment,
        current_time=at,
    )
    typer.echo(resolve(template, context))


@app.command("select")
def select_command(
    kind: ContentKind = typer.Argument(..., help="Content collection to select from"),
    library: Optional[Path] = typer.Option(None, "--library", help="Content library directory (defaults to CONTENT_LIBRARY_PATH)"),
    catalog_path: Optional[Path] = typer.Option(None, "--catalog", help="Program catalog YAML (defaults to PROGRAM_CATALOG_PATH)"),
    weights_path: Optional[Path] = typer.Option(None, "--weights", help="Scoring weights YAML"),
    name: Optional[str] = typer.Option(None, "--name", help="User name"),
    gender: Optional[str] = typer.Option(None, "--gender", "-g", help="male | female | both"),
    persona: Optional[str] = typer.Option(None, "--persona", "-p", help="User persona"),
    location: Optional[str] = typer.Option(None, "--location", "-l", help="Location type"),
    sport: Optional[str] = typer.Option(None, "--sport", help="Sport type"),
    motivation: Optional[str] = typer.Option(None, "--motivation", help="Motivation style"),
    experience: Optional[str] = typer.Option(None, "--experience", help="Experience level"),
    program: Optional[str] = typer.Option(None, "--program", help="Active program id"),
    level: Optional[int] = typer.Option(None, "--level", help="Current level"),
    progress: Optional[float] = typer.Option(None, "--progress", help="Progress in level (0-100)"),
    trigger: Optional[str] = typer.Option(None, "--trigger", "-t", help="Notification trigger type"),
    days_inactive: Optional[int] = typer.Option(None, "--days-inactive", "-d", help="Days since last workout"),
    at: Optional[datetime] = typer.Option(None, "--at", formats=TIME_FORMATS, help="Clock time for time of day and day period"),
    top: int = typer.Option(5, "--top", "-n", help="Number of ranked candidates to show"),
):
    """
    Rank a collection for a sample user and show the resolved winner.

    Examples:\n

        $ preview_content.py select phrases -p parent -l park -g female

        $ preview_content.py select notifications -t Inactivity -d 7 --name דנה -g female
    """
    log_dir = LOGS_PATH / f"preview_{session_stamp()}"
    setup_targeting_logger(log_dir, phase="select")

    context = _build_context(
        user_name=name,
        gender=gender,
        persona=persona,
        location=location,
        sport_type=sport,
        motivation_style=motivation,
        experience_level=experience,
        program_id=program,
        level=level,
        progress_percent=progress,
        trigger_type=trigger,
        days_inactive=days_inactive,
        current_time=at,
    )

    try:
        records = ContentLibrary(library).fetch_all(kind)
        weights = load_scoring_weights(weights_path)
    except (ContentLibraryError, ValueError) as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    catalog = _load_catalog(catalog_path)

    ranked = rank(records, context, catalog, weights)

    typer.secho(
        f"\n{len(ranked)} of {len(records)} {kind.value} pass the filters",
        fg=typer.colors.BLUE,
        bold=True,
    )
    if not ranked:
        typer.secho("No matching content", fg=typer.colors.YELLOW)
        raise typer.Exit(code=1)

    for position, item in enumerate(ranked[:top], start=1):
        matched = ", ".join(item.matched_fields) or "general"
        typer.echo(f"  {position}. [{item.score:>2}] {item.record.id}  ({matched})")

    typer.echo("\n" + "=" * 80)
    typer.secho(resolve(ranked[0].record.text, context), fg=typer.colors.GREEN)


@app.command("tags")
def tags_command(
    trigger: Optional[str] = typer.Option(None, "--trigger", "-t", help="Only tags offered for this trigger type"),
):
    """
    Show the @tag legend.

    Examples:\n

        $ preview_content.py tags

        $ preview_content.py tags -t Inactivity
    """
    try:
        typer.echo(render_tag_legend(trigger))
    except ValueError:
        typer.secho(f"Error: Unknown trigger type '{trigger}'", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
