"""
Employee DTO
============

Pydantic models for employee API requests and responses.

Request fields are optional at the schema level so that a missing field
reaches domain validation and is reported with a 400 message.
"""
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from employee_manager.domain.models.employee import Employee


class EmployeeCreateRequest(BaseModel):
    """DTO for creating an employee."""
    name: Optional[str] = Field(None, description="Full name")
    position: Optional[str] = Field(None, description="Job position")
    email: Optional[str] = Field(None, description="Email address, unique across employees")
    phone: Optional[str] = Field(None, description="Phone number")

    model_config = ConfigDict(
        coerce_numbers_to_str=True,
        json_schema_extra={
            "example": {
                "name": "Jane Doe",
                "position": "Engineer",
                "email": "jane.doe@example.com",
                "phone": "555-0100",
            }
        }
    )


class EmployeeUpdateRequest(EmployeeCreateRequest):
    """DTO for replacing an employee. `id` selects the record."""
    id: Optional[str] = Field(None, description="Identifier of the employee to update")

    model_config = ConfigDict(
        coerce_numbers_to_str=True,
        json_schema_extra={
            "example": {
                "id": "65f1c2a9e4b0a1b2c3d4e5f6",
                "name": "Jane Doe",
                "position": "Senior Engineer",
                "email": "jane.doe@example.com",
                "phone": "555-0100",
            }
        }
    )


class EmployeeDeleteRequest(BaseModel):
    """DTO for deleting an employee."""
    id: Optional[str] = Field(None, description="Identifier of the employee to delete")


class EmployeeResponse(BaseModel):
    """DTO for employee data."""
    id: str
    name: str
    position: str
    email: str
    phone: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "65f1c2a9e4b0a1b2c3d4e5f6",
                "name": "Jane Doe",
                "position": "Engineer",
                "email": "jane.doe@example.com",
                "phone": "555-0100",
            }
        }
    )

    @classmethod
    def from_entity(cls, employee: Employee) -> "EmployeeResponse":
        return cls(
            id=employee.id,
            name=employee.name,
            position=employee.position,
            email=employee.email,
            phone=employee.phone,
        )


class MessageResponse(BaseModel):
    """DTO for plain message responses (confirmations and errors)."""
    message: str
