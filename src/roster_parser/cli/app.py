from __future__ import annotations

import typer

from roster_parser.cli.commands.dedupe import dedupe_command
from roster_parser.cli.commands.import_roster import import_command
from roster_parser.cli.commands.lock_phone import lock_phone_command
from roster_parser.cli.commands.parse import parse_command
from roster_parser.cli.commands.stats import stats_command

app = typer.Typer(
    name="roster",
    help="Employee roster parser, importer and deduplicator",
    add_completion=False,
)

app.command("parse")(parse_command)
app.command("stats")(stats_command)
app.command("import")(import_command)
app.command("dedupe")(dedupe_command)
app.command("lock-phone")(lock_phone_command)


def main():
    app()


if __name__ == "__main__":
    main()
