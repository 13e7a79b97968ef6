from __future__ import annotations

from typing import Optional

from roster_parser.core.exceptions import StoreError, ValidationError
from roster_parser.logging import get_logger
from roster_parser.store.base import CompanyStore

log = get_logger("phone_lock")


def set_phone_lock(
    store: CompanyStore,
    company_id: str,
    employee_id: str,
    locked: Optional[bool] = None,
) -> bool:
    """
    Set (or toggle, when ``locked`` is None) an employee's phone lock flag.

    Returns the new flag value.

    Raises:
        StoreError: unknown company or employee.
        ValidationError: the employee has no phone number to lock.
    """
    company = store.get_by_id(company_id)
    if company is None:
        raise StoreError(f"Company not found: {company_id}")

    employee = company.find_employee(employee_id)
    if employee is None:
        raise StoreError(f"Employee not found: {employee_id} in company {company_id}")

    if not employee.phone:
        raise ValidationError(
            f"{employee.full_name or employee_id} has no phone number on file to lock"
        )

    new_value = (not employee.phone_locked) if locked is None else bool(locked)
    store.update_employee(company_id, employee_id, {"phone_locked": new_value})
    log.info(
        "%s phone for %s",
        "Locked" if new_value else "Unlocked",
        employee.full_name,
    )
    return new_value


__all__ = ["set_phone_lock"]
