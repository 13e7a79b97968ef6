"""
Bulk import of a parsed roster into the document store.

Companies are matched against persisted ones by case-insensitive exact
name (not by the domain-aware grouping key the parsers use). A matched
company gets its employee list reconciled with ``merge_employees_into`` and
is written back in one update; an unmatched company is added as is.

A failed write is recorded for that company and the import moves on.
"""

from __future__ import annotations

from typing import Dict, Iterable, Optional

from roster_parser.admin.reports import CompanyOutcome, ImportReport
from roster_parser.entities.models import Company
from roster_parser.logging import get_logger
from roster_parser.resolution.dedup import merge_employees_into
from roster_parser.store.base import CompanyStore
from roster_parser.store.cache import SnapshotCache

log = get_logger("importer")


def _company_key(company: Company) -> str:
    return (company.name or "").lower()


def import_companies(
    parsed: Iterable[Company],
    store: CompanyStore,
    cache: Optional[SnapshotCache] = None,
) -> ImportReport:
    report = ImportReport()
    existing: Dict[str, Company] = {_company_key(c): c for c in store.get_all()}

    for company in parsed:
        key = _company_key(company)
        current = existing.get(key)

        if current is not None:
            merge = merge_employees_into(current.employees, company.employees)
            try:
                store.update_company(current.id, {"employees": merge.employees})
            except Exception as exc:
                log.exception("Failed to update company %s (%s)", current.name, current.id)
                report.outcomes.append(
                    CompanyOutcome(current.id, current.name, "update", ok=False, error=str(exc))
                )
                continue

            current.employees = merge.employees
            report.added += merge.added
            report.updated += merge.updated
            report.outcomes.append(CompanyOutcome(current.id, current.name, "update"))
            log.info(
                "Wrote %d employees for %s (added=%d updated=%d)",
                len(merge.employees),
                current.name,
                merge.added,
                merge.updated,
            )
        else:
            try:
                stored = store.add_company(company)
            except Exception as exc:
                log.exception("Failed to create company %s", company.name)
                report.outcomes.append(
                    CompanyOutcome(None, company.name, "create", ok=False, error=str(exc))
                )
                continue

            existing[key] = stored
            report.created += 1
            report.outcomes.append(CompanyOutcome(stored.id, stored.name, "create"))
            log.info("Created: %s", stored.name)

    if cache is not None:
        cache.save(store.get_all())

    log.info(
        "Import complete: %d new, %d added, %d updated, %d failed",
        report.created,
        report.added,
        report.updated,
        len(report.failures),
    )
    return report


__all__ = ["import_companies"]
