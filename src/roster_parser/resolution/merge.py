"""
Field-level merge policy for two records of the same person.

``target`` is the base record (its id and any other attribute survive);
``source`` is the newly observed data.
"""

from __future__ import annotations

from dataclasses import replace

from roster_parser.entities.models import Employee
from roster_parser.normalization.text import digits_only, is_empty

MERGE_FIELDS = (
    "first_name",
    "last_name",
    "email",
    "phone",
    "job_title",
    "linkedin",
    "location",
)

NAME_FIELDS = frozenset({"first_name", "last_name"})


def resolve_field(field_name: str, current: str, incoming: str) -> str:
    """Value that survives for one field."""
    if is_empty(current):
        return current if is_empty(incoming) else incoming
    if is_empty(incoming):
        return current

    if field_name == "phone":
        # re-imported numbers supersede, formatting alone does not
        return incoming if digits_only(incoming) != digits_only(current) else current
    if field_name in NAME_FIELDS:
        return current
    return incoming if len(str(incoming)) > len(str(current)) else current


def merge_employee(target: Employee, source: Employee) -> Employee:
    updates = {
        name: resolve_field(name, getattr(target, name), getattr(source, name))
        for name in MERGE_FIELDS
    }
    return replace(target, extra=dict(target.extra), **updates)


__all__ = ["MERGE_FIELDS", "merge_employee", "resolve_field"]
