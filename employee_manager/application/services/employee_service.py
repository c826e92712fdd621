"""
Employee Service
================

Application service that coordinates employee-related operations.
This service orchestrates multiple use cases.
"""
from typing import List, Optional

from employee_manager.domain.models.employee import Employee
from employee_manager.domain.repositories.employee_repository import EmployeeRepository
from employee_manager.application.use_cases.employee.create_employee import CreateEmployeeUseCase
from employee_manager.application.use_cases.employee.update_employee import UpdateEmployeeUseCase
from employee_manager.application.use_cases.employee.delete_employee import DeleteEmployeeUseCase


class EmployeeService:
    """
    Application service for employee operations.

    This service coordinates multiple use cases and provides
    a high-level interface for employee management.
    """

    def __init__(self, employee_repository: EmployeeRepository):
        """
        Initialize service with repository.

        Args:
            employee_repository: Repository for employee persistence
        """
        self._repository = employee_repository
        self._create_use_case = CreateEmployeeUseCase(employee_repository)
        self._update_use_case = UpdateEmployeeUseCase(employee_repository)
        self._delete_use_case = DeleteEmployeeUseCase(employee_repository)

    def create_employee(self, name: str, position: str, email: str, phone: str) -> Employee:
        """
        Create an employee.

        Returns:
            Created employee entity with its assigned id
        """
        return self._create_use_case.execute(
            name=name,
            position=position,
            email=email,
            phone=phone,
        )

    def list_employees(self) -> List[Employee]:
        """List every employee."""
        return self._repository.find_all()

    def get_employee(self, employee_id: str) -> Optional[Employee]:
        """
        Get an employee by ID.

        Args:
            employee_id: Unique employee identifier

        Returns:
            Employee entity if found, None otherwise
        """
        return self._repository.find_by_id(employee_id)

    def update_employee(
        self,
        id: Optional[str],
        name: str,
        position: str,
        email: str,
        phone: str,
    ) -> Optional[Employee]:
        """
        Replace the fields of an employee.

        Returns:
            Updated employee entity, or None if not found
        """
        return self._update_use_case.execute(
            id=id,
            name=name,
            position=position,
            email=email,
            phone=phone,
        )

    def delete_employee(self, employee_id: Optional[str]) -> bool:
        """
        Delete an employee.

        Returns:
            True if employee was found and deleted, False otherwise
        """
        return self._delete_use_case.execute(employee_id)
