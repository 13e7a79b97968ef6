"""
Identity matching for employees.

Signals are checked strongest first for every existing record:

  1. email (trimmed, case-insensitive)
  2. phone (digits only)
  3. LinkedIn profile identifier
  4. normalized full name, with a compatible or missing job title

The first existing record, in list order, that satisfies any signal is the
match. There is no scoring across records.
"""

from __future__ import annotations

from typing import Iterable, Optional

from roster_parser.entities.models import Employee
from roster_parser.normalization.text import (
    digits_only,
    is_empty,
    normalize_linkedin,
    normalize_string,
)


def _normalized_full_name(emp: Employee) -> str:
    return f"{normalize_string(emp.first_name)} {normalize_string(emp.last_name)}".strip()


def _email_match(a: Employee, b: Employee) -> bool:
    if is_empty(a.email) or is_empty(b.email):
        return False
    return a.email.strip().lower() == b.email.strip().lower()


def _phone_match(a: Employee, b: Employee) -> bool:
    if is_empty(a.phone) or is_empty(b.phone):
        return False
    p1 = digits_only(a.phone)
    return bool(p1) and p1 == digits_only(b.phone)


def _linkedin_match(a: Employee, b: Employee) -> bool:
    if is_empty(a.linkedin) or is_empty(b.linkedin):
        return False
    l1 = normalize_linkedin(a.linkedin)
    return bool(l1) and l1 == normalize_linkedin(b.linkedin)


def _titles_compatible(a: Employee, b: Employee) -> bool:
    t1 = normalize_string(a.job_title)
    t2 = normalize_string(b.job_title)
    if t1 == t2:
        return True
    if t1 and t2 and (t1 in t2 or t2 in t1):
        return True
    # a missing title is no evidence against the match
    return is_empty(a.job_title) or is_empty(b.job_title) or not t1 or not t2


def _name_match(a: Employee, b: Employee) -> bool:
    full = _normalized_full_name(a)
    if not full or full != _normalized_full_name(b):
        return False
    return _titles_compatible(a, b)


def is_same_person(candidate: Employee, existing: Employee) -> bool:
    return (
        _email_match(candidate, existing)
        or _phone_match(candidate, existing)
        or _linkedin_match(candidate, existing)
        or _name_match(candidate, existing)
    )


def find_match(existing: Iterable[Employee], candidate: Employee) -> Optional[Employee]:
    for emp in existing:
        if is_same_person(candidate, emp):
            return emp
    return None


__all__ = ["find_match", "is_same_person"]
