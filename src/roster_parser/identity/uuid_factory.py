# src/roster_parser/identity/uuid_factory.py
from __future__ import annotations

import uuid


def new_id() -> str:
    """
    Fresh opaque identifier for a Company or Employee.

    Every parse assigns new ids; stability across imports comes from the
    deduplication driver, never from here.
    """
    return str(uuid.uuid4())


__all__ = ["new_id"]
