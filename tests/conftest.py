from __future__ import annotations

from typing import Dict, List, Optional

import pytest
from fastapi.testclient import TestClient

from employee_manager.api.v1.dependencies import get_employee_service
from employee_manager.application.services.employee_service import EmployeeService
from employee_manager.domain.models.employee import Employee
from employee_manager.domain.repositories.employee_repository import EmployeeRepository
from employee_manager.main import app


class FakeEmployeeRepository(EmployeeRepository):
    """In-memory repository with the same unique-email behaviour as the Mongo one."""

    def __init__(self):
        self._next_id = 1
        self._rows: Dict[str, Employee] = {}

    def _check_email(self, email: str, own_id: Optional[str] = None) -> None:
        for emp in self._rows.values():
            if emp.email == email and emp.id != own_id:
                raise ValueError(
                    f'E11000 duplicate key error collection: employee_db.employees '
                    f'index: email_1 dup key: {{ email: "{email}" }}'
                )

    def create(self, employee: Employee) -> Employee:
        self._check_email(employee.email)
        employee.id = f"{self._next_id:024x}"
        self._next_id += 1
        self._rows[employee.id] = Employee(**employee.__dict__)
        return employee

    def find_all(self) -> List[Employee]:
        return [Employee(**emp.__dict__) for emp in self._rows.values()]

    def find_by_id(self, employee_id: str) -> Optional[Employee]:
        emp = self._rows.get(employee_id)
        return Employee(**emp.__dict__) if emp else None

    def update(self, employee: Employee) -> Optional[Employee]:
        if employee.id not in self._rows:
            return None
        self._check_email(employee.email, own_id=employee.id)
        self._rows[employee.id] = Employee(**employee.__dict__)
        return Employee(**employee.__dict__)

    def delete(self, employee_id: str) -> bool:
        return self._rows.pop(employee_id, None) is not None


@pytest.fixture
def repo() -> FakeEmployeeRepository:
    return FakeEmployeeRepository()


@pytest.fixture
def service(repo) -> EmployeeService:
    return EmployeeService(employee_repository=repo)


@pytest.fixture
def client(service):
    app.dependency_overrides[get_employee_service] = lambda: service
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def sample_payload() -> Dict[str, str]:
    return {"name": "A", "position": "B", "email": "a@b.com", "phone": "1"}
