"""
Employee Repository Interface
=============================

Abstract interface for employee data access.
Implementations should be in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from employee_manager.domain.models.employee import Employee


class EmployeeRepository(ABC):
    """
    Abstract repository for employee persistence operations.

    This interface defines the contract for employee data access.
    Concrete implementations should be in the infrastructure layer.
    """

    @abstractmethod
    def create(self, employee: Employee) -> Employee:
        """
        Create a new employee.

        Args:
            employee: Employee entity to create (id is ignored)

        Returns:
            Created employee entity with its assigned id

        Raises:
            ValueError: If the store rejects the record (e.g. duplicate email)
        """
        pass

    @abstractmethod
    def find_all(self) -> List[Employee]:
        """
        Find all employees.

        Returns:
            List of employee entities in insertion order
        """
        pass

    @abstractmethod
    def find_by_id(self, employee_id: str) -> Optional[Employee]:
        """
        Find an employee by its ID.

        Args:
            employee_id: Unique employee identifier

        Returns:
            Employee entity if found, None otherwise
        """
        pass

    @abstractmethod
    def update(self, employee: Employee) -> Optional[Employee]:
        """
        Replace the fields of an existing employee.

        Args:
            employee: Employee entity carrying the id and new field values

        Returns:
            Updated employee entity, or None if no record has that id

        Raises:
            ValueError: If the store rejects the record (e.g. duplicate email)
        """
        pass

    @abstractmethod
    def delete(self, employee_id: str) -> bool:
        """
        Delete an employee.

        Args:
            employee_id: Unique employee identifier

        Returns:
            True if employee was found and deleted, False otherwise
        """
        pass
