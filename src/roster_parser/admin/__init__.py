"""
Admin operations run against a CompanyStore: bulk import, database-wide
deduplication, phone lock toggling and directory loading.
"""

from .deduplicate import deduplicate_database
from .directory import load_directory
from .importer import import_companies
from .phone_lock import set_phone_lock
from .reports import CompanyOutcome, DedupReport, ImportReport

__all__ = [
    "CompanyOutcome",
    "DedupReport",
    "ImportReport",
    "deduplicate_database",
    "import_companies",
    "load_directory",
    "set_phone_lock",
]
