"""
json_store.py
File-backed CompanyStore.

The whole collection lives in one JSON document (a list of company
objects in the camelCase document format). Every operation reads the file,
applies the change and rewrites it atomically through a temporary file.
"""

from __future__ import annotations

import json
import os
from dataclasses import replace
from pathlib import Path
from typing import Any, List, Mapping, Optional, Union

from roster_parser.core.exceptions import StoreError
from roster_parser.entities.models import Company, Employee
from roster_parser.identity.uuid_factory import new_id
from roster_parser.logging import get_logger
from roster_parser.store.base import apply_updates

log = get_logger("json_store")


class JsonFileStore:
    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    # ------------------------------------------------------------------
    # File I/O
    # ------------------------------------------------------------------

    def _read(self) -> List[Company]:
        if not self.path.exists():
            return []
        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as exc:
            raise StoreError(f"Cannot read store {self.path}: {exc}") from exc

        if not isinstance(data, list):
            raise StoreError(f"Store {self.path} does not hold a list of companies")
        return [Company.from_dict(item) for item in data if isinstance(item, Mapping)]

    def _write(self, companies: List[Company]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        payload = json.dumps([c.to_dict() for c in companies], indent=2, ensure_ascii=False)
        try:
            tmp_path.write_text(payload, encoding="utf-8")
            os.replace(tmp_path, self.path)
        except OSError as exc:
            raise StoreError(f"Cannot write store {self.path}: {exc}") from exc

    @staticmethod
    def _require(companies: List[Company], company_id: str) -> Company:
        for company in companies:
            if company.id == company_id:
                return company
        raise StoreError(f"Company not found: {company_id}")

    # ------------------------------------------------------------------
    # Companies
    # ------------------------------------------------------------------

    def get_all(self) -> List[Company]:
        return self._read()

    def get_by_id(self, company_id: str) -> Optional[Company]:
        for company in self._read():
            if company.id == company_id:
                return company
        return None

    def add_company(self, company: Company) -> Company:
        companies = self._read()
        stored = replace(company, id=company.id or new_id(), employees=list(company.employees))
        if any(c.id == stored.id for c in companies):
            stored.id = new_id()
        companies.append(stored)
        self._write(companies)
        log.info("Added company %s (%s)", stored.name, stored.id)
        return stored

    def update_company(self, company_id: str, updates: Mapping[str, Any]) -> None:
        companies = self._read()
        apply_updates(self._require(companies, company_id), updates)
        self._write(companies)
        log.debug("Updated company %s fields=%s", company_id, sorted(updates))

    def delete_company(self, company_id: str) -> None:
        companies = self._read()
        company = self._require(companies, company_id)
        companies.remove(company)
        self._write(companies)
        log.info("Deleted company %s", company_id)

    def bulk_import(self, companies: List[Company]) -> List[Company]:
        return [self.add_company(c) for c in companies]

    def clear_all(self) -> None:
        self._write([])
        log.info("Cleared store %s", self.path)

    # ------------------------------------------------------------------
    # Employees
    # ------------------------------------------------------------------

    def add_employee(self, company_id: str, employee: Employee) -> Employee:
        companies = self._read()
        company = self._require(companies, company_id)
        stored = replace(employee, id=employee.id or new_id())
        company.employees.append(stored)
        self._write(companies)
        return stored

    def update_employee(
        self,
        company_id: str,
        employee_id: str,
        updates: Mapping[str, Any],
    ) -> None:
        companies = self._read()
        company = self._require(companies, company_id)
        employee = company.find_employee(employee_id)
        if employee is None:
            raise StoreError(f"Employee not found: {employee_id} in company {company_id}")
        apply_updates(employee, updates)
        self._write(companies)

    def delete_employee(self, company_id: str, employee_id: str) -> None:
        companies = self._read()
        company = self._require(companies, company_id)
        remaining = [e for e in company.employees if e.id != employee_id]
        if len(remaining) == len(company.employees):
            raise StoreError(f"Employee not found: {employee_id} in company {company_id}")
        company.employees = remaining
        self._write(companies)


__all__ = ["JsonFileStore"]
