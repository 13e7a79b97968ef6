"""
Offline snapshot of the whole directory.

``save`` normalizes every company/employee to the document schema (filling
ids and empty-string defaults); ``load`` never raises and returns ``[]``
when the snapshot is missing or unreadable.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable, List, Mapping, Union

from roster_parser.entities.models import Company
from roster_parser.logging import get_logger

log = get_logger("cache")


class SnapshotCache:
    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def save(self, companies: Iterable[Union[Company, Mapping[str, Any]]]) -> None:
        normalized = []
        for company in companies:
            if isinstance(company, Company):
                company = company.to_dict()
            normalized.append(Company.from_dict(company, default_name="Unknown").to_dict())

        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(normalized, ensure_ascii=False), encoding="utf-8")
        log.debug("Cached %d companies to %s", len(normalized), self.path)

    def load(self) -> List[Company]:
        if not self.path.exists():
            return []
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            log.error("Failed to load snapshot %s: %s", self.path, exc)
            return []

        if not isinstance(data, list):
            log.error("Snapshot %s does not hold a list", self.path)
            return []
        return [Company.from_dict(item) for item in data if isinstance(item, Mapping)]

    def clear(self) -> None:
        self.path.unlink(missing_ok=True)
