"""
roster_parser.normalization package

String normalizers shared by the identity matcher and the merge resolver.
"""

from .text import (
    digits_only,
    is_empty,
    normalize_linkedin,
    normalize_string,
)

__all__ = [
    "digits_only",
    "is_empty",
    "normalize_linkedin",
    "normalize_string",
]
