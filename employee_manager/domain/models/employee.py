"""
Employee Model
==============

Domain model representing an employee record.
This is a pure domain object with no infrastructure dependencies.
"""
from dataclasses import dataclass
from typing import Optional

from employee_manager.domain.constants.employee_fields import EmployeeFields


@dataclass
class Employee:
    """
    Employee domain model.

    All text fields are required. `id` is assigned by the store on create.
    """
    name: str
    position: str
    email: str
    phone: str
    id: Optional[str] = None

    def normalize(self) -> None:
        """Strip surrounding whitespace from all text fields."""
        for field_name in EmployeeFields.REQUIRED:
            value = getattr(self, field_name)
            if isinstance(value, str):
                setattr(self, field_name, value.strip())

    def validate(self) -> None:
        """
        Check that every required field is present and non-blank.

        Raises:
            ValueError: Listing each missing field
        """
        missing = [
            field_name
            for field_name in EmployeeFields.REQUIRED
            if not getattr(self, field_name) or not str(getattr(self, field_name)).strip()
        ]
        if missing:
            raise ValueError(
                "Employee validation failed: "
                + ", ".join(f"{field_name} is required" for field_name in missing)
            )

    def matches(self, query: str) -> bool:
        """Case-insensitive substring match across all text fields."""
        needle = (query or "").lower()
        return any(
            needle in (getattr(self, field_name) or "").lower()
            for field_name in EmployeeFields.REQUIRED
        )

    def to_dict(self) -> dict:
        """Plain dict of the record, including the id."""
        return {
            EmployeeFields.ID: self.id,
            EmployeeFields.NAME: self.name,
            EmployeeFields.POSITION: self.position,
            EmployeeFields.EMAIL: self.email,
            EmployeeFields.PHONE: self.phone,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Employee":
        """Build an employee from an API payload (missing fields become empty strings)."""
        return cls(
            id=data.get(EmployeeFields.ID),
            name=data.get(EmployeeFields.NAME) or "",
            position=data.get(EmployeeFields.POSITION) or "",
            email=data.get(EmployeeFields.EMAIL) or "",
            phone=data.get(EmployeeFields.PHONE) or "",
        )
