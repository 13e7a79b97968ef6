"""
roster_parser.mapping package

Header canonicalization tables and lookups shared by the parsers and the
entity (de)serializers.
"""

from .field_mapper import (
    FIELD_MAPPINGS,
    LEGACY_KEYS,
    FieldCategory,
    HeaderMapping,
    lookup,
    map_header,
    normalize_record,
)

__all__ = [
    "FIELD_MAPPINGS",
    "LEGACY_KEYS",
    "FieldCategory",
    "HeaderMapping",
    "lookup",
    "map_header",
    "normalize_record",
]
