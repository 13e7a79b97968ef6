"""
csv_parser.py
CSV roster -> list[Company].

The first non-blank line holds the headers. Each data row is mapped through
the field mapper into a flat record plus company and employee subsets, then
folded into companies by ``CompanyGrouper``.
"""

from __future__ import annotations

from typing import Dict, List

from roster_parser.entities.models import Company
from roster_parser.logging import get_logger
from roster_parser.mapping.field_mapper import FieldCategory, map_header
from roster_parser.parsers.grouping import CompanyGrouper
from roster_parser.parsers.tokenizer import split_lines, tokenize_line

log = get_logger("csv_parser")


def parse_csv(text: str) -> List[Company]:
    lines = split_lines(text or "")
    if len(lines) < 2:
        log.debug("CSV input has no data rows (lines=%d)", len(lines))
        return []

    headers = [map_header(h) for h in tokenize_line(lines[0])]
    grouper = CompanyGrouper()

    for line in lines[1:]:
        values = tokenize_line(line)
        record: Dict[str, str] = {}
        company_data: Dict[str, str] = {}
        employee_data: Dict[str, str] = {}

        for idx, header in enumerate(headers):
            value = values[idx] if idx < len(values) else ""
            record[header.key] = value

            if header.category is FieldCategory.COMPANY:
                company_data[header.key] = value
            elif header.category is FieldCategory.EMPLOYEE:
                employee_data[header.key] = value

        name = company_data.get("name") or record.get("name") or "N/A"
        domain = company_data.get("domain") or ""

        grouper.add_row(name, domain, company_data, employee_data)

    companies = grouper.companies()
    log.info(
        "Parsed CSV: rows=%d companies=%d employees=%d",
        len(lines) - 1,
        len(companies),
        sum(len(c.employees) for c in companies),
    )
    return companies


__all__ = ["parse_csv"]
