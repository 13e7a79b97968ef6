from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from roster_parser.cli.utils import load_roster, write_json

console = Console()


def parse_command(
    roster: Path = typer.Argument(..., exists=True, readable=True),
    out: Optional[Path] = typer.Option(
        None,
        "--out",
        "-o",
        help="Write output to file instead of stdout",
    ),
    pretty: bool = typer.Option(
        False,
        "--pretty",
        help="Pretty-print JSON",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Parse a CSV/JSON roster and print the grouped companies as JSON.
    """
    companies = load_roster(roster, verbose=verbose)

    if verbose:
        console.log(f"Exporting {len(companies)} companies")

    write_json(companies, out=out, pretty=pretty)
