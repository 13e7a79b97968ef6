from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from roster_parser.admin.deduplicate import deduplicate_database
from roster_parser.cli.utils import resolve_cache, resolve_store
from roster_parser.core.exceptions import StoreError

console = Console()


def dedupe_command(
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
):
    """
    Collapse duplicate employees in every stored company.
    """
    try:
        report = deduplicate_database(resolve_store(store), cache=resolve_cache(cache))
    except StoreError as exc:
        console.print(f"[red]Deduplication failed:[/red] {exc}")
        raise typer.Exit(code=1)

    console.print(f"Deduplication complete! Total duplicates removed: {report.removed}")
    for failure in report.failures:
        console.print(f"[red]Failed:[/red] {failure.name}: {failure.error}")

    if not report.ok:
        raise typer.Exit(code=1)
