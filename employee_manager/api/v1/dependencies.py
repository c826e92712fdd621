"""
Dependency Container
====================

Dependency injection container for FastAPI.
Provides singleton instances of repositories and services.
"""
from employee_manager.domain.repositories.employee_repository import EmployeeRepository
from employee_manager.application.services.employee_service import EmployeeService
from employee_manager.di.container import get_container


def get_employee_repository() -> EmployeeRepository:
    """
    Get employee repository instance (singleton).

    Returns:
        EmployeeRepository instance
    """
    container = get_container()
    return container.get(EmployeeRepository)


def get_employee_service() -> EmployeeService:
    """
    Get employee service instance (singleton).

    Returns:
        EmployeeService instance
    """
    container = get_container()
    return container.get(EmployeeService)
