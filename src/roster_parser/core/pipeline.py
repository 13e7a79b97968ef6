from __future__ import annotations

from roster_parser.admin.importer import import_companies
from roster_parser.admin.reports import ImportReport
from roster_parser.core.context import ImportContext
from roster_parser.core.exceptions import ImportExecutionError
from roster_parser.entities.models import count_employees
from roster_parser.exporter import export_companies_json
from roster_parser.parsers import parse_file
from roster_parser.store.cache import SnapshotCache
from roster_parser.store.json_store import JsonFileStore


class Pipeline:
    """
    Orchestrates a roster import: parse -> import-merge -> optional export.
    No business logic lives here.
    """

    def __init__(self, context: ImportContext):
        self.ctx = context
        self.log = context.logger

    def run(self) -> ImportReport:
        self.log.info("Pipeline starting: %s", self.ctx.input_path)

        try:
            companies = parse_file(self.ctx.input_path)
            self.ctx.stats["parsed_companies"] = len(companies)
            self.ctx.stats["parsed_employees"] = count_employees(companies)

            store = JsonFileStore(self.ctx.store_path)
            cache = SnapshotCache(self.ctx.cache_path) if self.ctx.cache_path else None
            report = import_companies(companies, store, cache=cache)

            self.ctx.stats.update(
                created=report.created,
                added=report.added,
                updated=report.updated,
            )
            self.ctx.errors.extend(
                f"{o.name}: {o.error}" for o in report.failures
            )

            if self.ctx.output_path:
                export_companies_json(companies, self.ctx.output_path)

            self.log.info("Pipeline completed: %s", self.ctx.stats)
            return report

        except Exception as exc:
            self.log.exception("Pipeline execution failed")
            raise ImportExecutionError(str(exc)) from exc
