"""
CLI command modules for roster_parser.

Each command module defines a single Typer-compatible command function.
"""

from roster_parser.cli.commands.dedupe import dedupe_command
from roster_parser.cli.commands.import_roster import import_command
from roster_parser.cli.commands.lock_phone import lock_phone_command
from roster_parser.cli.commands.parse import parse_command
from roster_parser.cli.commands.stats import stats_command

__all__ = [
    "dedupe_command",
    "import_command",
    "lock_phone_command",
    "parse_command",
    "stats_command",
]
