from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class CompanyOutcome:
    """Result of the single store write issued for one company."""
    company_id: Optional[str]
    name: str
    action: str
    ok: bool = True
    error: Optional[str] = None


@dataclass
class ImportReport:
    created: int = 0
    added: int = 0
    updated: int = 0
    outcomes: List[CompanyOutcome] = field(default_factory=list)

    @property
    def failures(self) -> List[CompanyOutcome]:
        return [o for o in self.outcomes if not o.ok]

    @property
    def ok(self) -> bool:
        return not self.failures


@dataclass
class DedupReport:
    removed: int = 0
    outcomes: List[CompanyOutcome] = field(default_factory=list)

    @property
    def failures(self) -> List[CompanyOutcome]:
        return [o for o in self.outcomes if not o.ok]

    @property
    def ok(self) -> bool:
        return not self.failures
