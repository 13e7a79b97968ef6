from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Protocol

from roster_parser.entities.models import Company, Employee


class CompanyStore(Protocol):
    """
    Document store holding Company aggregates.

    ``updates`` mappings use Company/Employee attribute names, e.g.
    ``{"employees": [...]}`` or ``{"phone_locked": True}``.
    """

    def get_all(self) -> List[Company]: ...

    def get_by_id(self, company_id: str) -> Optional[Company]: ...

    def add_company(self, company: Company) -> Company: ...

    def update_company(self, company_id: str, updates: Mapping[str, Any]) -> None: ...

    def delete_company(self, company_id: str) -> None: ...

    def add_employee(self, company_id: str, employee: Employee) -> Employee: ...

    def update_employee(
        self,
        company_id: str,
        employee_id: str,
        updates: Mapping[str, Any],
    ) -> None: ...

    def delete_employee(self, company_id: str, employee_id: str) -> None: ...

    def clear_all(self) -> None: ...


def apply_updates(obj: Any, updates: Mapping[str, Any]) -> None:
    """Assign known attributes; unknown keys land in ``obj.extra``."""
    extra: Dict[str, Any] = obj.extra
    for key, value in updates.items():
        if key in ("id", "extra"):
            continue
        if hasattr(obj, key):
            setattr(obj, key, value)
        else:
            extra[key] = value
