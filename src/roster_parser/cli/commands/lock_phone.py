from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from roster_parser.admin.phone_lock import set_phone_lock
from roster_parser.cli.utils import resolve_store
from roster_parser.core.exceptions import RosterError

console = Console()


def lock_phone_command(
    company_id: str = typer.Argument(...),
    employee_id: str = typer.Argument(...),
    unlock: bool = typer.Option(
        False,
        "--unlock",
        help="Unlock instead of lock",
    ),
    store: Optional[Path] = typer.Option(
        None,
        "--store",
        help="JSON document store (defaults to paths.store)",
    ),
):
    """
    Lock (or unlock) an employee's phone number.
    """
    try:
        locked = set_phone_lock(
            resolve_store(store),
            company_id,
            employee_id,
            locked=not unlock,
        )
    except RosterError as exc:
        console.print(f"[red]Update failed:[/red] {exc}")
        raise typer.Exit(code=1)

    console.print("Phone Locked" if locked else "Phone Unlocked")
