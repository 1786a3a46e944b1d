#!/usr/bin/env python3
"""
Validate golden content collections before they go live.

Usage:
    python scripts/validate_content.py
    python scripts/validate_content.py notifications --catalog data/programs.yaml
    python scripts/validate_content.py --file upload.yaml --kind phrases
"""

import os
from pathlib import Path
from typing import List, Optional

import typer
from dotenv import load_dotenv

from golden.contexts.content import (
    ContentKind,
    ContentLibrary,
    ContentLibraryError,
    load_program_catalog,
)
from golden.contexts.content.content_library import read_rows
from golden.contexts.targeting import validate_records
from golden.contexts.targeting.logger import log_validation_report, setup_targeting_logger
from golden.utils.timestamp import session_stamp

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))

app = typer.Typer(help="Validate golden content collections.")


@app.command()
def main(
    kinds: Optional[List[ContentKind]] = typer.Argument(None, help="Collections to check (default: all)"),
    library: Optional[Path] = typer.Option(None, "--library", help="Content library directory (defaults to CONTENT_LIBRARY_PATH)"),
    upload: Optional[Path] = typer.Option(None, "--file", "-f", help="Validate a single upload file instead of the library"),
    kind: ContentKind = typer.Option(ContentKind.PHRASES, "--kind", "-k", help="Kind of rows in --file"),
    catalog_path: Optional[Path] = typer.Option(None, "--catalog", help="Program catalog YAML for dangling-program checks"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="List every issue"),
    strict: bool = typer.Option(False, "--strict", help="Treat warnings as failures"),
):
    """Check content rows for rejected values and data-quality problems."""
    log_dir = LOGS_PATH / f"validate_{session_stamp()}"
    setup_targeting_logger(log_dir, phase="validate")

    try:
        catalog = None
        if catalog_path is not None or os.getenv("PROGRAM_CATALOG_PATH"):
            catalog = load_program_catalog(catalog_path)

        if upload is not None:
            batches = [(kind, read_rows(upload, kind))]
        else:
            content = ContentLibrary(library)
            batches = [(k, content.fetch_rows(k)) for k in (kinds or list(ContentKind))]
    except ContentLibraryError as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    failed = False
    for batch_kind, rows in batches:
        report = validate_records(rows, batch_kind, catalog)
        log_validation_report(report, verbose=verbose)
        if not report.ok or (strict and report.warnings):
            failed = True

    if catalog is None:
        typer.echo("(No program catalog given: unknown program ids were not checked)")

    if failed:
        typer.secho("✗ Validation failed", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    typer.secho("✓ All collections valid", fg=typer.colors.GREEN)


if __name__ == "__main__":
    app()
