from __future__ import annotations

from typing import List

from roster_parser.entities.models import Company
from roster_parser.logging import get_logger
from roster_parser.store.base import CompanyStore
from roster_parser.store.cache import SnapshotCache

log = get_logger("directory")


def load_directory(store: CompanyStore, cache: SnapshotCache) -> List[Company]:
    """
    All companies, preferring the store.

    A non-empty store result refreshes the snapshot; a failing or empty store
    falls back to the snapshot.
    """
    try:
        companies = store.get_all()
    except Exception as exc:
        log.warning("Store fetch failed, using local snapshot: %s", exc)
    else:
        if companies:
            cache.save(companies)
            log.info("Loaded %d companies from store", len(companies))
            return companies

    return cache.load()


__all__ = ["load_directory"]
