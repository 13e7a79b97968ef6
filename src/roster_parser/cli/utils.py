from __future__ import annotations

import time
from pathlib import Path
from typing import List, Optional

from rich.console import Console

from roster_parser.config import get_config
from roster_parser.entities.models import Company
from roster_parser.exporter import serialize_companies
from roster_parser.parsers import parse_file
from roster_parser.store.cache import SnapshotCache
from roster_parser.store.json_store import JsonFileStore

console = Console()


def load_roster(path: Path, *, verbose: bool = False) -> List[Company]:
    """
    Parse a CSV/JSON roster file.
    """
    if not path.exists():
        raise FileNotFoundError(path)

    t0 = time.perf_counter()
    companies = parse_file(path)
    elapsed = time.perf_counter() - t0

    if verbose:
        console.log(f"Parsed {path.name} in {elapsed:.2f}s")

    return companies


def resolve_store(store: Optional[Path]) -> JsonFileStore:
    """--store wins over ``paths.store`` in the config file."""
    if store is None:
        store = get_config().resolve_path("store", "data/companies.json")
    return JsonFileStore(store)


def resolve_cache(cache: Optional[Path]) -> SnapshotCache:
    if cache is None:
        cache = get_config().resolve_path("cache", "data/companies.cache.json")
    return SnapshotCache(cache)


def write_json(
    companies: List[Company],
    *,
    out: Path | None,
    pretty: bool,
):
    """
    Write JSON to stdout or file.
    """
    payload = serialize_companies(companies, indent=2 if pretty else None)

    if out:
        out.write_text(payload, encoding="utf-8")
    else:
        print(payload)
