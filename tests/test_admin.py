# tests/test_admin.py

from __future__ import annotations

import pytest

from roster_parser.admin import (
    deduplicate_database,
    import_companies,
    load_directory,
    set_phone_lock,
)
from roster_parser.core.exceptions import StoreError, ValidationError
from roster_parser.entities import Company, Employee
from roster_parser.parsers import parse_csv
from roster_parser.store import JsonFileStore, SnapshotCache


class FlakyStore(JsonFileStore):
    """JsonFileStore whose writes fail for selected company names."""

    def __init__(self, path, failing_names):
        super().__init__(path)
        self.failing_names = {n.lower() for n in failing_names}
        self.update_calls = []

    def update_company(self, company_id, updates):
        self.update_calls.append(company_id)
        company = self.get_by_id(company_id)
        if company is not None and company.name.lower() in self.failing_names:
            raise StoreError(f"write rejected for {company.name}")
        super().update_company(company_id, updates)

    def add_company(self, company):
        if company.name.lower() in self.failing_names:
            raise StoreError(f"write rejected for {company.name}")
        return super().add_company(company)


@pytest.fixture
def store(tmp_path):
    return JsonFileStore(tmp_path / "companies.json")


def _seed(store):
    return store.add_company(Company(
        id="c-acme",
        name="Acme",
        domain="acme.com",
        employees=[
            Employee(id="p-jane", first_name="Jane", last_name="Doe", email="jane@acme.com", phone="555-1111"),
            Employee(id="p-john", first_name="John", last_name="Smith"),
        ],
    ))


def test_import_creates_new_companies(store) -> None:
    parsed = parse_csv("Company name,First name\nAcme,Jane\nGlobex,Hank")
    report = import_companies(parsed, store)

    assert report.created == 2
    assert report.ok
    assert sorted(c.name for c in store.get_all()) == ["Acme", "Globex"]


def test_import_merges_into_existing_company_by_name(store) -> None:
    _seed(store)
    parsed = parse_csv("\n".join([
        "Company name,Company domain,First name,Last name,Email,Phone",
        "ACME,other-domain.com,Jane,Doe,jane@acme.com,555-2222",
        "ACME,other-domain.com,Hank,Scorpio,,",
    ]))
    report = import_companies(parsed, store)

    assert (report.created, report.added, report.updated) == (0, 1, 1)
    companies = store.get_all()
    assert len(companies) == 1
    acme = companies[0]
    assert acme.id == "c-acme"
    assert [e.id for e in acme.employees[:2]] == ["p-jane", "p-john"]
    assert acme.employees[0].phone == "555-2222"
    assert acme.employees[2].first_name == "Hank"


def test_import_matches_company_by_name_not_domain(store) -> None:
    _seed(store)
    parsed = parse_csv("Company name,Company domain,First name\nAcme Inc,acme.com,Zed")
    report = import_companies(parsed, store)

    assert report.created == 1
    assert len(store.get_all()) == 2


def test_repeated_import_is_stable(store) -> None:
    text = "Company name,First name,Last name,Email\nAcme,Jane,Doe,jane@acme.com"
    import_companies(parse_csv(text), store)
    first_ids = [e.id for e in store.get_all()[0].employees]

    report = import_companies(parse_csv(text), store)
    assert report.updated == 1
    assert report.added == 0
    assert [e.id for e in store.get_all()[0].employees] == first_ids


def test_failed_company_write_does_not_abort_the_rest(tmp_path) -> None:
    store = FlakyStore(tmp_path / "companies.json", failing_names=["Acme"])
    JsonFileStore.add_company(store, Company(id="c-acme", name="Acme"))
    JsonFileStore.add_company(store, Company(id="c-globex", name="Globex"))

    parsed = parse_csv("Company name,First name\nAcme,Jane\nGlobex,Hank\nInitech,Peter")
    report = import_companies(parsed, store)

    assert not report.ok
    assert [f.name for f in report.failures] == ["Acme"]
    assert "rejected" in report.failures[0].error
    assert report.created == 1
    assert report.added == 1
    assert store.update_calls == ["c-acme", "c-globex"]
    names = {c.name: c for c in store.get_all()}
    assert names["Acme"].employees == []
    assert names["Globex"].employees[0].first_name == "Hank"
    assert "Initech" in names


def test_import_refreshes_cache(store, tmp_path) -> None:
    cache = SnapshotCache(tmp_path / "cache.json")
    import_companies(parse_csv("Company name,First name\nAcme,Jane"), store, cache=cache)
    assert [c.name for c in cache.load()] == ["Acme"]


def test_deduplicate_database(store) -> None:
    store.add_company(Company(id="c1", name="Acme", employees=[
        Employee(id="a", first_name="Jane", last_name="Doe", email="jane@acme.com"),
        Employee(id="b", first_name="Jane", last_name="Doe", phone="555-1212", email="jane@acme.com"),
        Employee(id="c", first_name="John", last_name="Smith"),
    ]))
    store.add_company(Company(id="c2", name="Solo", employees=[Employee(id="s", first_name="Sam")]))

    report = deduplicate_database(store)

    assert report.removed == 1
    assert [o.company_id for o in report.outcomes] == ["c1"]
    acme = store.get_by_id("c1")
    assert [e.id for e in acme.employees] == ["a", "c"]
    assert acme.employees[0].phone == "555-1212"


def test_deduplicate_database_reports_failures(tmp_path) -> None:
    store = FlakyStore(tmp_path / "companies.json", failing_names=["Acme"])
    dupes = [Employee(id="a", first_name="Jane", last_name="Doe"), Employee(id="b", first_name="Jane", last_name="Doe")]
    JsonFileStore.add_company(store, Company(id="c1", name="Acme", employees=list(dupes)))
    JsonFileStore.add_company(store, Company(id="c2", name="Globex", employees=list(dupes)))

    report = deduplicate_database(store)

    assert [f.company_id for f in report.failures] == ["c1"]
    assert report.removed == 1
    assert len(store.get_by_id("c2").employees) == 1


def test_set_phone_lock_toggles(store) -> None:
    _seed(store)
    assert set_phone_lock(store, "c-acme", "p-jane") is True
    assert store.get_by_id("c-acme").find_employee("p-jane").phone_locked is True
    assert set_phone_lock(store, "c-acme", "p-jane") is False
    assert set_phone_lock(store, "c-acme", "p-jane", locked=True) is True


def test_set_phone_lock_requires_phone(store) -> None:
    _seed(store)
    with pytest.raises(ValidationError):
        set_phone_lock(store, "c-acme", "p-john")
    with pytest.raises(StoreError):
        set_phone_lock(store, "c-acme", "nobody")
    with pytest.raises(StoreError):
        set_phone_lock(store, "missing", "p-jane")


def test_load_directory_prefers_store_and_refreshes_cache(store, tmp_path) -> None:
    _seed(store)
    cache = SnapshotCache(tmp_path / "cache.json")
    companies = load_directory(store, cache)
    assert [c.name for c in companies] == ["Acme"]
    assert [c.name for c in cache.load()] == ["Acme"]


def test_load_directory_falls_back_to_cache(tmp_path) -> None:
    broken = tmp_path / "companies.json"
    broken.write_text("{broken", encoding="utf-8")
    cache = SnapshotCache(tmp_path / "cache.json")
    cache.save([Company(id="c1", name="Cached")])

    companies = load_directory(JsonFileStore(broken), cache)
    assert [c.name for c in companies] == ["Cached"]
