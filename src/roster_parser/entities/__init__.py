"""
Entity models for roster_parser.

Company owns an ordered list of Employee; both round-trip to the camelCase
document format used by imports, the document store and the snapshot cache.
"""

from .models import Company, Employee, count_employees

__all__ = ["Company", "Employee", "count_employees"]
