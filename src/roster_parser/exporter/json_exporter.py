"""
json_exporter.py
JSON export of parsed or persisted companies.

Output is the camelCase document format, so an export can be fed straight
back into ``parse_json`` as a pre-grouped roster.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from roster_parser.entities.models import Company
from roster_parser.logging import get_logger

log = get_logger("json_exporter")


def build_directory_dict(companies: Iterable[Company]) -> List[Dict[str, Any]]:
    return [c.to_dict() for c in companies]


def serialize_companies(companies: Iterable[Company], indent: Optional[int] = 2) -> str:
    if indent is None:
        return json.dumps(
            build_directory_dict(companies),
            separators=(",", ":"),
            ensure_ascii=False,
        )
    return json.dumps(build_directory_dict(companies), indent=indent, ensure_ascii=False)


def export_companies_json(
    companies: List[Company],
    output_path: str | Path,
    indent: Optional[int] = 2,
) -> None:
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    log.info(
        "Exporting directory JSON to: %s (companies=%d, employees=%d)",
        output_path,
        len(companies),
        sum(len(c.employees) for c in companies),
    )

    with output_path.open("w", encoding="utf-8") as f:
        f.write(serialize_companies(companies, indent=indent))

    log.info("JSON export complete. size=%d bytes", output_path.stat().st_size)
