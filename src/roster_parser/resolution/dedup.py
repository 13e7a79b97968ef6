"""
Deduplication drivers.

Two modes share the matcher and the merge policy:

- ``dedupe_employees``: clean one list. The accumulator starts empty; a
  duplicate is folded into the first-seen record.
- ``merge_employees_into``: reconcile a freshly parsed batch with a persisted
  list. The accumulator starts as the persisted list and a merged record
  always keeps the persisted id, so storage sees an update, not an insert.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterable, List

from roster_parser.entities.models import Employee
from roster_parser.identity.uuid_factory import new_id
from roster_parser.logging import get_logger
from roster_parser.resolution.matcher import find_match
from roster_parser.resolution.merge import merge_employee

log = get_logger("dedup")


@dataclass
class DedupResult:
    employees: List[Employee] = field(default_factory=list)
    merged: int = 0


@dataclass
class MergeResult:
    employees: List[Employee] = field(default_factory=list)
    added: int = 0
    updated: int = 0


def _index_of(items: List[Employee], target: Employee) -> int:
    # identity, not equality: two distinct records may compare equal
    for idx, item in enumerate(items):
        if item is target:
            return idx
    raise ValueError("record not in accumulator")


def dedupe_employees(employees: Iterable[Employee]) -> DedupResult:
    result = DedupResult()
    unique = result.employees

    for emp in employees:
        match = find_match(unique, emp)
        if match is None:
            unique.append(emp)
            continue

        unique[_index_of(unique, match)] = merge_employee(match, emp)
        result.merged += 1
        log.debug("Merging record for: %s", emp.full_name)

    return result


def merge_employees_into(
    existing: Iterable[Employee],
    incoming: Iterable[Employee],
) -> MergeResult:
    result = MergeResult(employees=list(existing))
    accumulator = result.employees

    for new_emp in incoming:
        match = find_match(accumulator, new_emp)
        if match is None:
            accumulator.append(replace(new_emp, id=new_emp.id or new_id()))
            result.added += 1
            log.debug("Added: %s", new_emp.full_name)
            continue

        merged = merge_employee(match, new_emp)
        merged.id = match.id or merged.id or new_id()
        accumulator[_index_of(accumulator, match)] = merged
        result.updated += 1
        log.debug("Merged employee: %s | phone: %s", merged.full_name, merged.phone)

    return result


__all__ = [
    "DedupResult",
    "MergeResult",
    "dedupe_employees",
    "merge_employees_into",
]
