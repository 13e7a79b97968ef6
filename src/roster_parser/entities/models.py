from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from roster_parser.identity.uuid_factory import new_id
from roster_parser.mapping.field_mapper import LEGACY_KEYS, FieldCategory, lookup


# attribute name -> document (wire) key
EMPLOYEE_WIRE_KEYS: Dict[str, str] = {
    "first_name": "firstName",
    "last_name": "lastName",
    "email": "email",
    "phone": "phone",
    "job_title": "jobTitle",
    "linkedin": "linkedin",
    "location": "location",
}

COMPANY_WIRE_KEYS: Dict[str, str] = {
    "name": "name",
    "domain": "domain",
    "industry": "industry",
    "size": "size",
    "type": "type",
    "headquarters": "headquarters",
    "linkedin": "linkedin",
}


def _known_keys(category: FieldCategory) -> set:
    keys = {"id"}
    for candidates in LEGACY_KEYS[category].values():
        keys.update(candidates)
    return keys


_EMPLOYEE_KNOWN = _known_keys(FieldCategory.EMPLOYEE) | {"phoneLocked"}
_COMPANY_KNOWN = _known_keys(FieldCategory.COMPANY) | {"employees"}


def _as_bool(value: Any) -> bool:
    # Stored documents may carry "true"/"false" strings.
    if isinstance(value, str):
        return value.strip().lower() == "true"
    if isinstance(value, (bool, int)):
        return bool(value)
    return False


def _as_list(value: Any) -> List[Any]:
    return value if isinstance(value, list) else []


@dataclass(slots=True)
class Employee:
    """
    A person owned by exactly one Company.

    ``extra`` keeps any document keys this model does not know about so a
    merge can carry them forward untouched.
    """
    id: str = ""
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone: str = ""
    job_title: str = ""
    linkedin: str = ""
    location: str = ""
    phone_locked: bool = False
    extra: Dict[str, Any] = field(default_factory=dict)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    def has_name(self) -> bool:
        return bool(self.first_name or self.last_name)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"id": self.id}
        for attr, key in EMPLOYEE_WIRE_KEYS.items():
            data[key] = getattr(self, attr)
        data["phoneLocked"] = self.phone_locked
        data.update({k: v for k, v in self.extra.items() if k not in data})
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Employee":
        """Build from a document whose keys are canonical or human-readable."""
        keys = LEGACY_KEYS[FieldCategory.EMPLOYEE]
        values = {
            attr: str(lookup(data, keys[wire]))
            for attr, wire in EMPLOYEE_WIRE_KEYS.items()
        }
        return cls(
            id=str(data.get("id") or new_id()),
            phone_locked=_as_bool(data.get("phoneLocked", False)),
            extra={k: v for k, v in data.items() if k not in _EMPLOYEE_KNOWN},
            **values,
        )


@dataclass(slots=True)
class Company:
    """An organization and its employees, in import order."""
    id: str = ""
    name: str = "N/A"
    domain: str = ""
    industry: str = ""
    size: str = ""
    type: str = ""
    headquarters: str = ""
    linkedin: str = ""
    employees: List[Employee] = field(default_factory=list)
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"id": self.id}
        for attr, key in COMPANY_WIRE_KEYS.items():
            data[key] = getattr(self, attr)
        data["employees"] = [emp.to_dict() for emp in self.employees]
        data.update({k: v for k, v in self.extra.items() if k not in data})
        return data

    @classmethod
    def from_dict(
        cls,
        data: Mapping[str, Any],
        *,
        default_name: str = "N/A",
    ) -> "Company":
        keys = LEGACY_KEYS[FieldCategory.COMPANY]
        values = {
            attr: str(lookup(data, keys[wire]))
            for attr, wire in COMPANY_WIRE_KEYS.items()
            if attr != "name"
        }
        employees = [
            Employee.from_dict(emp)
            for emp in _as_list(data.get("employees"))
            if isinstance(emp, Mapping)
        ]
        return cls(
            id=str(data.get("id") or new_id()),
            name=str(lookup(data, keys["name"], default_name)),
            employees=employees,
            extra={k: v for k, v in data.items() if k not in _COMPANY_KNOWN},
            **values,
        )

    def find_employee(self, employee_id: str) -> Optional[Employee]:
        for emp in self.employees:
            if emp.id == employee_id:
                return emp
        return None


def count_employees(companies: List[Company]) -> int:
    return sum(len(c.employees) for c in companies)
