# tests/test_field_mapper.py

from __future__ import annotations

from roster_parser.mapping import FieldCategory, map_header, normalize_record


def test_company_header_maps_to_company_field() -> None:
    mapping = map_header("Company domain")
    assert mapping.key == "domain"
    assert mapping.category is FieldCategory.COMPANY


def test_employee_header_maps_to_employee_field() -> None:
    mapping = map_header("  Job title ")
    assert mapping.key == "jobTitle"
    assert mapping.category is FieldCategory.EMPLOYEE


def test_linkedin_headers_are_distinguished_by_category() -> None:
    assert map_header("Company LinkedIn").category is FieldCategory.COMPANY
    assert map_header("LinkedIn").category is FieldCategory.EMPLOYEE
    assert map_header("LinkedIn").key == map_header("Company LinkedIn").key == "linkedin"


def test_unknown_header_falls_back_to_snake_key() -> None:
    mapping = map_header("Lead   Source Name")
    assert mapping.key == "lead_source_name"
    assert mapping.category is FieldCategory.UNKNOWN


def test_empty_header_is_still_mapped() -> None:
    mapping = map_header("")
    assert mapping.key == ""
    assert mapping.category is FieldCategory.UNKNOWN


def test_normalize_record_prefers_human_header_then_canonical_key() -> None:
    item = {"First name": "Jane", "lastName": "Doe", "Email": "jane@acme.com", "extra": 1}
    out = normalize_record(item, FieldCategory.EMPLOYEE)
    assert out == {"firstName": "Jane", "lastName": "Doe", "email": "jane@acme.com"}
