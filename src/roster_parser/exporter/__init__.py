"""
Exporter package.

Re-exports the JSON export entry points used by the CLI and the pipeline.
"""

from __future__ import annotations

from .json_exporter import (
    build_directory_dict,
    export_companies_json,
    serialize_companies,
)

__all__ = [
    "build_directory_dict",
    "export_companies_json",
    "serialize_companies",
]
