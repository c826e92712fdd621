"""
Update Employee Use Case
========================

Business use case for replacing the fields of an existing employee.
"""
import logging
from typing import Optional

from employee_manager.domain.models.employee import Employee
from employee_manager.domain.repositories.employee_repository import EmployeeRepository

logger = logging.getLogger(__name__)


class UpdateEmployeeUseCase:
    """Use case for updating an employee."""

    def __init__(self, employee_repository: EmployeeRepository):
        self._repository = employee_repository

    def execute(
        self,
        id: Optional[str],
        name: str,
        position: str,
        email: str,
        phone: str,
    ) -> Optional[Employee]:
        """
        Execute the update employee use case.

        Returns:
            Updated employee entity, or None if no employee has that id

        Raises:
            ValueError: If the id or a required field is missing,
                or the store rejects the record
        """
        if not id or not id.strip():
            raise ValueError("ID is required")

        employee = Employee(id=id.strip(), name=name, position=position, email=email, phone=phone)

        # An unknown id is reported as not found before any field errors
        if self._repository.find_by_id(employee.id) is None:
            logger.info(f"Employee {employee.id} not found for update")
            return None

        employee.validate()
        employee.normalize()

        updated = self._repository.update(employee)
        if updated is None:
            logger.info(f"Employee {employee.id} not found for update")
            return None

        logger.info(f"Employee {updated.id} updated")
        return updated
