"""
Delete Employee Use Case
========================

Business use case for removing an employee record.
"""
import logging
from typing import Optional

from employee_manager.domain.repositories.employee_repository import EmployeeRepository

logger = logging.getLogger(__name__)


class DeleteEmployeeUseCase:
    """Use case for deleting an employee."""

    def __init__(self, employee_repository: EmployeeRepository):
        self._repository = employee_repository

    def execute(self, employee_id: Optional[str]) -> bool:
        """
        Execute the delete employee use case.

        Returns:
            True if the employee was found and deleted, False otherwise

        Raises:
            ValueError: If the id is missing
        """
        if not employee_id or not employee_id.strip():
            raise ValueError("ID is required")

        deleted = self._repository.delete(employee_id.strip())
        if deleted:
            logger.info(f"Employee {employee_id} deleted")
        return deleted
