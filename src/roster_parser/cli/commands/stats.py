from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from roster_parser.cli.utils import load_roster
from roster_parser.resolution.dedup import dedupe_employees

console = Console()


def stats_command(
    roster: Path = typer.Argument(..., exists=True, readable=True),
    dedupe: bool = typer.Option(
        False,
        "--dedupe",
        help="Also count duplicates each company would collapse",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Show per-company employee counts for a roster file.
    """
    companies = load_roster(roster, verbose=verbose)

    table = Table(title="Roster Statistics")
    table.add_column("Company", style="bold")
    table.add_column("Domain")
    table.add_column("Employees", justify="right")
    if dedupe:
        table.add_column("Duplicates", justify="right")

    total_employees = 0
    total_duplicates = 0
    for company in companies:
        row = [company.name, company.domain, str(len(company.employees))]
        total_employees += len(company.employees)
        if dedupe:
            merged = dedupe_employees(company.employees).merged
            total_duplicates += merged
            row.append(str(merged))
        table.add_row(*row)

    footer = [f"{len(companies)} companies", "", str(total_employees)]
    if dedupe:
        footer.append(str(total_duplicates))
    table.add_row(*footer, style="dim")

    console.print(table)
