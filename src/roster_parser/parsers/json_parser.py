"""
json_parser.py
JSON roster -> list[Company].

Accepted shapes:
  - pre-grouped: a list of company objects, each with an ``employees`` list
  - flat: a list of rows using the same header vocabulary as the CSV import
    (or the canonical keys)

Malformed input never raises: it yields an empty list and a log entry.
"""

from __future__ import annotations

import json
from typing import Any, Dict, List, Mapping, Union

from roster_parser.entities.models import Company
from roster_parser.logging import get_logger
from roster_parser.mapping.field_mapper import LEGACY_KEYS, FieldCategory, lookup, normalize_record
from roster_parser.parsers.grouping import CompanyGrouper

log = get_logger("json_parser")


def _is_pre_grouped(data: List[Any]) -> bool:
    first = data[0]
    return isinstance(first, Mapping) and isinstance(first.get("employees"), list)


def _parse_grouped(data: List[Any]) -> List[Company]:
    return [Company.from_dict(item) for item in data if isinstance(item, Mapping)]


def _normalize_with_fallback(item: Mapping[str, Any], category: FieldCategory) -> Dict[str, Any]:
    """Header-mapped values, with blank ones filled from the canonical keys."""
    record = normalize_record(item, category)
    for canonical, keys in LEGACY_KEYS[category].items():
        if not record.get(canonical):
            value = lookup(item, keys)
            if value:
                record[canonical] = value
    return record


def _parse_flat(data: List[Any]) -> List[Company]:
    grouper = CompanyGrouper()

    for item in data:
        if not isinstance(item, Mapping):
            log.debug("Skipping non-object row: %r", item)
            continue

        company_data = _normalize_with_fallback(item, FieldCategory.COMPANY)
        employee_data = _normalize_with_fallback(item, FieldCategory.EMPLOYEE)

        name = company_data.get("name") or lookup(item, ("name", "Company name"), "N/A")
        domain = company_data.get("domain") or lookup(item, ("domain", "Company domain"))

        if not employee_data.get("jobTitle"):
            employee_data["jobTitle"] = lookup(item, ("jobTitle", "title"))

        grouper.add_row(str(name), str(domain), company_data, employee_data)

    return grouper.companies()


def parse_json(data: Union[str, bytes, List[Any], Any]) -> List[Company]:
    if isinstance(data, (str, bytes)):
        try:
            data = json.loads(data)
        except ValueError as exc:
            log.error("JSON parse error: %s", exc)
            return []

    if not isinstance(data, list):
        log.warning("JSON roster must be a list, got %s", type(data).__name__)
        return []

    if not data:
        return []

    if _is_pre_grouped(data):
        companies = _parse_grouped(data)
        shape = "grouped"
    else:
        companies = _parse_flat(data)
        shape = "flat"

    log.info(
        "Parsed JSON (%s): items=%d companies=%d employees=%d",
        shape,
        len(data),
        len(companies),
        sum(len(c.employees) for c in companies),
    )
    return companies


__all__ = ["parse_json"]
