"""
Persistence collaborators: the CompanyStore protocol, a JSON-file document
store and the offline snapshot cache.
"""

from .base import CompanyStore
from .cache import SnapshotCache
from .json_store import JsonFileStore

__all__ = ["CompanyStore", "JsonFileStore", "SnapshotCache"]
