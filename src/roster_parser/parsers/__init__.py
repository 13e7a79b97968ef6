"""
Roster parsers.

``parse_csv`` and ``parse_json`` both return an ordered list of Company,
each owning its employees. ``parse_file`` picks one by file suffix.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Union

from roster_parser.entities.models import Company
from roster_parser.parsers.csv_parser import parse_csv
from roster_parser.parsers.grouping import CompanyGrouper, grouping_key
from roster_parser.parsers.json_parser import parse_json


def parse_file(path: Union[str, Path]) -> List[Company]:
    """
    Parse a roster file: ``.json`` as JSON, anything else as CSV.

    Raises:
        FileNotFoundError: if ``path`` does not exist.
    """
    file_path = Path(path)
    if not file_path.is_file():
        raise FileNotFoundError(f"Roster file not found: {file_path}")

    text = file_path.read_text(encoding="utf-8-sig", errors="replace")
    if file_path.suffix.lower() == ".json":
        return parse_json(text)
    return parse_csv(text)


__all__ = [
    "CompanyGrouper",
    "grouping_key",
    "parse_csv",
    "parse_file",
    "parse_json",
]
