from typing import TYPE_CHECKING
from ...core.config import get_settings
from ...domain.repositories.employee_repository import EmployeeRepository
from ...infrastructure.db.mongo_employee_repository import MongoEmployeeRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all repository implementations.
        Gets database client from database provider and creates repository instances.
        """
        mongo_client = container.get("mongo_client")

        # Domain interfaces -> Infrastructure implementations
        container.register_singleton(
            EmployeeRepository,
            MongoEmployeeRepository(
                collection=mongo_client.get_collection(get_settings().employees_collection)
            )
        )
