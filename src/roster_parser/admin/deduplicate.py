"""
Database-wide duplicate cleanup.

Every persisted company with more than one employee has its list collapsed
by ``dedupe_employees``; the company is written back only when something
was merged.
"""

from __future__ import annotations

from typing import Optional

from roster_parser.admin.reports import CompanyOutcome, DedupReport
from roster_parser.logging import get_logger
from roster_parser.resolution.dedup import dedupe_employees
from roster_parser.store.base import CompanyStore
from roster_parser.store.cache import SnapshotCache

log = get_logger("deduplicate")


def deduplicate_database(
    store: CompanyStore,
    cache: Optional[SnapshotCache] = None,
) -> DedupReport:
    report = DedupReport()
    companies = store.get_all()
    log.info("Checking %d companies for duplicate employees", len(companies))

    for company in companies:
        if len(company.employees) <= 1:
            continue

        original_count = len(company.employees)
        result = dedupe_employees(company.employees)
        if len(result.employees) >= original_count:
            continue

        removed = original_count - len(result.employees)
        try:
            store.update_company(company.id, {"employees": result.employees})
        except Exception as exc:
            log.exception("Failed to update company %s (%s)", company.name, company.id)
            report.outcomes.append(
                CompanyOutcome(company.id, company.name, "dedupe", ok=False, error=str(exc))
            )
            continue

        report.removed += removed
        report.outcomes.append(CompanyOutcome(company.id, company.name, "dedupe"))
        log.info(
            "Updated %s with %d unique employees (removed %d)",
            company.name,
            len(result.employees),
            removed,
        )

    if cache is not None:
        cache.save(store.get_all())

    log.info("Deduplication complete. Total duplicates removed: %d", report.removed)
    return report


__all__ = ["deduplicate_database"]
