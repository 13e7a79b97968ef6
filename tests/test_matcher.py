# tests/test_matcher.py

from __future__ import annotations

import pytest

from roster_parser.entities import Employee
from roster_parser.normalization import is_empty, normalize_linkedin, normalize_string
from roster_parser.resolution import find_match


def emp(**kwargs) -> Employee:
    return Employee(**kwargs)


@pytest.mark.parametrize(
    "value",
    [None, "", "  ", "N/A", "-", "No Email", "no phone", "Unknown", "No email found",
     "Phone not revealed", "Mobile: no phone listed"],
)
def test_placeholders_are_empty(value) -> None:
    assert is_empty(value)


def test_real_values_are_not_empty() -> None:
    assert not is_empty("jane@acme.com")
    assert not is_empty("0")


def test_normalize_string_strips_punctuation_and_whitespace() -> None:
    assert normalize_string("  Mary-Jane   O.Neil ") == "maryjane oneil"


def test_email_match_is_case_and_space_insensitive() -> None:
    existing = [emp(id="1", email=" Jane@Acme.com ")]
    assert find_match(existing, emp(email="jane@acme.com")) is existing[0]


def test_placeholder_emails_never_match() -> None:
    existing = [emp(id="1", email="N/A", first_name="Ann")]
    assert find_match(existing, emp(email="n/a", first_name="Bob")) is None


def test_phone_digit_normalization() -> None:
    existing = [emp(id="1", phone="+1 (555) 123-4567")]
    assert find_match(existing, emp(phone="15551234567")) is existing[0]


def test_phone_without_digits_never_matches() -> None:
    existing = [emp(id="1", phone="ext", first_name="Ann")]
    assert find_match(existing, emp(phone="ext", first_name="Bob")) is None


@pytest.mark.parametrize(
    "value",
    ["https://www.linkedin.com/in/jane-doe/", "http://linkedin.com/in/jane-doe", "jane-doe", "www.linkedin.com/in/Jane-Doe"],
)
def test_linkedin_variants_normalize_to_slug(value) -> None:
    assert normalize_linkedin(value) == "jane-doe"


def test_linkedin_match() -> None:
    existing = [emp(id="1", linkedin="https://www.linkedin.com/in/jane-doe/")]
    assert find_match(existing, emp(linkedin="jane-doe")) is existing[0]


def test_name_match_with_compatible_titles() -> None:
    existing = [emp(id="1", first_name="Jane", last_name="Doe", job_title="Senior Engineer")]
    assert find_match(existing, emp(first_name="jane", last_name="DOE", job_title="Engineer")) is existing[0]


def test_name_match_when_one_title_missing() -> None:
    existing = [emp(id="1", first_name="Jane", last_name="Doe", job_title="CTO")]
    assert find_match(existing, emp(first_name="Jane", last_name="Doe")) is existing[0]
    assert find_match(existing, emp(first_name="Jane", last_name="Doe", job_title="N/A")) is existing[0]


def test_same_name_conflicting_titles_do_not_match() -> None:
    existing = [emp(id="1", first_name="John", last_name="Smith", job_title="Accountant")]
    assert find_match(existing, emp(first_name="John", last_name="Smith", job_title="Pilot")) is None


def test_empty_names_never_match() -> None:
    existing = [emp(id="1")]
    assert find_match(existing, emp()) is None


def test_first_qualifying_record_wins_name_record_first() -> None:
    name_only = emp(id="name", first_name="Jane", last_name="Doe", email="other@acme.com")
    by_email = emp(id="email", first_name="J", last_name="D", email="jane@acme.com")
    candidate = emp(first_name="Jane", last_name="Doe", email="jane@acme.com")

    # list order decides; signals are not ranked across records
    assert find_match([name_only, by_email], candidate) is name_only
    assert find_match([by_email, name_only], candidate) is by_email


def test_no_match_returns_none() -> None:
    assert find_match([], emp(first_name="Jane")) is None
