"""
field_mapper.py
Header / key canonicalization for roster imports.

Two lookup tables translate the human-readable column headers found in
exported rosters ("Company name", "First name", ...) into canonical field
names. ``map_header`` is total: unknown headers fall back to a
lowercase/underscore key tagged ``FieldCategory.UNKNOWN``.

``LEGACY_KEYS`` is the ordered candidate-key table used when reading
already-structured documents (pre-grouped JSON, cached snapshots, persisted
companies) whose keys may be either canonical or human-readable.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping, Tuple


class FieldCategory(str, Enum):
    COMPANY = "company"
    EMPLOYEE = "employee"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class HeaderMapping:
    key: str
    category: FieldCategory


COMPANY_FIELD_MAP: Dict[str, str] = {
    "Company name": "name",
    "Company domain": "domain",
    "Company industry": "industry",
    "Company size": "size",
    "Company type": "type",
    "Company headquarters": "headquarters",
    "Company LinkedIn": "linkedin",
}

EMPLOYEE_FIELD_MAP: Dict[str, str] = {
    "First name": "firstName",
    "Last name": "lastName",
    "Email": "email",
    "Phone": "phone",
    "Job title": "jobTitle",
    "LinkedIn": "linkedin",
    "Location": "location",
}

FIELD_MAPPINGS: Dict[FieldCategory, Dict[str, str]] = {
    FieldCategory.COMPANY: COMPANY_FIELD_MAP,
    FieldCategory.EMPLOYEE: EMPLOYEE_FIELD_MAP,
}

# canonical field -> keys tried in order (canonical first)
LEGACY_KEYS: Dict[FieldCategory, Dict[str, Tuple[str, ...]]] = {
    FieldCategory.COMPANY: {
        "name": ("name", "Company name"),
        "domain": ("domain", "Company domain"),
        "industry": ("industry", "Company industry"),
        "size": ("size", "Company size"),
        "type": ("type", "Company type"),
        "headquarters": ("headquarters", "Company headquarters"),
        "linkedin": ("linkedin", "Company LinkedIn"),
    },
    FieldCategory.EMPLOYEE: {
        "firstName": ("firstName", "First name"),
        "lastName": ("lastName", "Last name"),
        "email": ("email", "Email"),
        "phone": ("phone", "Phone"),
        "jobTitle": ("jobTitle", "Job title"),
        "linkedin": ("linkedin", "LinkedIn"),
        "location": ("location", "Location"),
    },
}

_WS_RE = re.compile(r"\s+")


def fallback_key(header: str) -> str:
    return _WS_RE.sub("_", header.strip().lower())


def map_header(
    header: str,
    mappings: Mapping[FieldCategory, Mapping[str, str]] = FIELD_MAPPINGS,
) -> HeaderMapping:
    """
    Map a raw header to its canonical field.

    Company headers win over employee headers; anything else becomes an
    ``UNKNOWN`` fallback key.
    """
    trimmed = header.strip()

    company = mappings.get(FieldCategory.COMPANY, {})
    if trimmed in company:
        return HeaderMapping(company[trimmed], FieldCategory.COMPANY)

    employee = mappings.get(FieldCategory.EMPLOYEE, {})
    if trimmed in employee:
        return HeaderMapping(employee[trimmed], FieldCategory.EMPLOYEE)

    return HeaderMapping(fallback_key(trimmed), FieldCategory.UNKNOWN)


def normalize_record(
    item: Mapping[str, Any],
    category: FieldCategory,
    mappings: Mapping[FieldCategory, Mapping[str, str]] = FIELD_MAPPINGS,
) -> Dict[str, Any]:
    """
    Project a flat JSON row onto the canonical fields of one category.

    For each table entry the human-readable key wins, then the canonical key.
    Keys absent from the row are absent from the result.
    """
    normalized: Dict[str, Any] = {}
    for original, mapped in mappings.get(category, {}).items():
        if item.get(original) is not None:
            normalized[mapped] = item[original]
        elif item.get(mapped) is not None:
            normalized[mapped] = item[mapped]
    return normalized


def lookup(item: Mapping[str, Any], keys: Tuple[str, ...], default: Any = "") -> Any:
    """First truthy value among ``keys``; ``default`` when none is set."""
    for key in keys:
        value = item.get(key)
        if value:
            return value
    return default


__all__ = [
    "COMPANY_FIELD_MAP",
    "EMPLOYEE_FIELD_MAP",
    "FIELD_MAPPINGS",
    "FieldCategory",
    "HeaderMapping",
    "LEGACY_KEYS",
    "fallback_key",
    "lookup",
    "map_header",
    "normalize_record",
]
