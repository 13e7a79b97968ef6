"""
Employee identity resolution: matching, field merge policy and the
deduplication drivers built on them.
"""

from .dedup import DedupResult, MergeResult, dedupe_employees, merge_employees_into
from .matcher import find_match, is_same_person
from .merge import merge_employee

__all__ = [
    "DedupResult",
    "MergeResult",
    "dedupe_employees",
    "find_match",
    "is_same_person",
    "merge_employee",
    "merge_employees_into",
]
