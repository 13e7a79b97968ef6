from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from roster_parser.cli.utils import resolve_cache, resolve_store
from roster_parser.config import get_config
from roster_parser.core.context import ImportContext
from roster_parser.core.exceptions import ImportExecutionError
from roster_parser.core.pipeline import Pipeline
from roster_parser.logging import get_logger

console = Console()
log = get_logger("cli.import")


def import_command(
    roster: Path = typer.Argument(..., exists=True, readable=True),
    store: Optional[Path] = typer.Option(
        None,
        "--store",
        help="JSON document store (defaults to paths.store)",
    ),
    cache: Optional[Path] = typer.Option(
        None,
        "--cache",
        help="Snapshot cache file (defaults to paths.cache)",
    ),
    out: Optional[Path] = typer.Option(
        None,
        "--out",
        "-o",
        help="Also write the parsed roster as JSON",
    ),
):
    """
    Import a roster into the store, merging duplicate employees.
    """
    cfg = get_config()
    ctx = ImportContext(
        config=cfg,
        logger=log,
        input_path=str(roster),
        store_path=str(resolve_store(store).path),
        cache_path=str(resolve_cache(cache).path),
        output_path=str(out) if out else None,
        debug=cfg.debug,
    )

    try:
        report = Pipeline(ctx).run()
    except ImportExecutionError as exc:
        console.print(f"[red]Import failed:[/red] {exc}")
        raise typer.Exit(code=1)

    console.print(
        f"Import complete: {report.created} new, {report.added} added, "
        f"{report.updated} updated"
    )
    for failure in report.failures:
        console.print(f"[red]Failed:[/red] {failure.name}: {failure.error}")

    if not report.ok:
        raise typer.Exit(code=1)
