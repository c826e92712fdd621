"""
Create Employee Use Case
========================

Business use case for adding a new employee record.
"""
import logging

from employee_manager.domain.models.employee import Employee
from employee_manager.domain.repositories.employee_repository import EmployeeRepository

logger = logging.getLogger(__name__)


class CreateEmployeeUseCase:
    """
    Use case for creating an employee.

    This encapsulates the business logic for employee creation.
    """

    def __init__(self, employee_repository: EmployeeRepository):
        """
        Initialize use case with repository.

        Args:
            employee_repository: Repository for employee persistence
        """
        self._repository = employee_repository

    def execute(self, name: str, position: str, email: str, phone: str) -> Employee:
        """
        Execute the create employee use case.

        Args:
            name: Full name
            position: Job position
            email: Email address (unique across employees)
            phone: Phone number

        Returns:
            Created employee entity with its assigned id

        Raises:
            ValueError: If a required field is missing or the store rejects the record
        """
        employee = Employee(name=name, position=position, email=email, phone=phone)
        employee.validate()
        employee.normalize()

        created = self._repository.create(employee)
        logger.info(f"Employee {created.id} created")
        return created
