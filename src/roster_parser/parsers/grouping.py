"""
grouping.py
Collapse flat company/employee rows into Company aggregates.

Rows that repeat the same company (one row per employee is the usual export
shape) are folded together by a normalized grouping key built from the
company domain, or the company name when no domain is given.
"""

from __future__ import annotations

import re
from typing import Dict, List, Mapping, Optional

from roster_parser.entities.models import Company, Employee
from roster_parser.identity.uuid_factory import new_id

_SCHEME_RE = re.compile(r"^https?://")
_WWW_RE = re.compile(r"^www\.")
_TRAILING_SLASH_RE = re.compile(r"/$")

COMPANY_FIELDS = ("industry", "size", "type", "headquarters", "linkedin")
EMPLOYEE_FIELDS = {
    "first_name": "firstName",
    "last_name": "lastName",
    "email": "email",
    "phone": "phone",
    "job_title": "jobTitle",
    "linkedin": "linkedin",
    "location": "location",
}


def grouping_key(domain: Optional[str], name: Optional[str]) -> str:
    """
    ``"https://www.Acme.com/"``, ``"www.acme.com"`` and ``"acme.com"`` all
    give ``"acme.com"``.
    """
    key = (domain or name or "").lower()
    key = _SCHEME_RE.sub("", key)
    key = _WWW_RE.sub("", key)
    key = _TRAILING_SLASH_RE.sub("", key)
    return key.strip()


class CompanyGrouper:
    """
    Accumulates rows into companies keyed by ``grouping_key``.

    The first row seen for a key creates the Company; later rows only
    contribute employees.
    """

    def __init__(self) -> None:
        self._companies: Dict[str, Company] = {}

    def __len__(self) -> int:
        return len(self._companies)

    def company_for(self, name: str, domain: str, data: Mapping[str, str]) -> Company:
        key = grouping_key(domain, name)
        company = self._companies.get(key)
        if company is None:
            company = Company(
                id=new_id(),
                name=name,
                domain=domain,
                **{f: str(data.get(f) or "") for f in COMPANY_FIELDS},
            )
            self._companies[key] = company
        return company

    def add_row(
        self,
        name: str,
        domain: str,
        company_data: Mapping[str, str],
        employee_data: Mapping[str, str],
    ) -> Company:
        company = self.company_for(name, domain, company_data)

        employee = Employee(
            id=new_id(),
            **{attr: str(employee_data.get(key) or "") for attr, key in EMPLOYEE_FIELDS.items()},
        )
        # Nameless rows describe the company only.
        if employee.has_name():
            company.employees.append(employee)
        return company

    def companies(self) -> List[Company]:
        return list(self._companies.values())


__all__ = ["CompanyGrouper", "grouping_key"]
