"""
text.py
Comparison normalizers for contact fields.

Placeholder values commonly emitted by enrichment exports ("N/A",
"No email found", "Phone not revealed", ...) count as empty so they never
take part in a positive match and never win a merge.
"""

from __future__ import annotations

import re
from typing import Any, Optional

PLACEHOLDER_VALUES = frozenset({
    "",
    "n/a",
    "-",
    "no email",
    "no phone",
    "unknown",
    "no email found",
})

PLACEHOLDER_FRAGMENTS = ("not revealed", "no phone")

_PUNCT_RE = re.compile(r"[.,/#!$%^&*;:{}=\-_`~()]")
_WS_RE = re.compile(r"\s+")
_NON_DIGIT_RE = re.compile(r"\D")
_LINKEDIN_URL_RE = re.compile(r"https?://(www\.)?linkedin\.com/in/")
_LINKEDIN_PATH_RE = re.compile(r"(www\.)?linkedin\.com/in/")


def is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        v = value.strip().lower()
        if v in PLACEHOLDER_VALUES:
            return True
        return any(fragment in v for fragment in PLACEHOLDER_FRAGMENTS)
    if isinstance(value, (list, tuple, dict, set)):
        return len(value) == 0
    return False


def normalize_string(value: Optional[str]) -> str:
    """Lowercase, trim, drop punctuation, collapse whitespace."""
    if not value:
        return ""
    out = _PUNCT_RE.sub("", value.lower().strip())
    return _WS_RE.sub(" ", out).strip()


def digits_only(value: Any) -> str:
    if value is None:
        return ""
    return _NON_DIGIT_RE.sub("", str(value))


def normalize_linkedin(value: Optional[str]) -> str:
    """
    Reduce a LinkedIn URL or bare slug to the profile identifier.

    "https://www.linkedin.com/in/jane-doe/" and "jane-doe" both become
    "jane-doe".
    """
    if is_empty(value):
        return ""
    out = str(value).lower().strip()
    if out.endswith("/"):
        out = out[:-1]
    out = _LINKEDIN_URL_RE.sub("", out, count=1)
    out = _LINKEDIN_PATH_RE.sub("", out, count=1)
    return out
