"""
MongoDB Employee Repository
===========================

Concrete implementation of EmployeeRepository using MongoDB.
"""
import logging
from typing import List, Optional
from bson import ObjectId
from pymongo import ASCENDING, ReturnDocument
from pymongo.collection import Collection
from pymongo.errors import DuplicateKeyError

from employee_manager.core.config import get_settings
from employee_manager.domain.models.employee import Employee
from employee_manager.domain.repositories.employee_repository import EmployeeRepository
from employee_manager.domain.constants.employee_fields import EmployeeFields
from employee_manager.infrastructure.db.mongo_connection import get_mongo_client

logger = logging.getLogger(__name__)


class MongoEmployeeRepository(EmployeeRepository):
    """
    MongoDB implementation of EmployeeRepository.

    Handles all employee persistence operations using MongoDB.
    """

    def __init__(self, collection: Optional[Collection] = None):
        """Initialize repository with a collection from the cached MongoDB client."""
        if collection is None:
            collection = get_mongo_client().get_collection(get_settings().employees_collection)
        self._collection = collection

    def ensure_indexes(self) -> None:
        """Create the unique index that enforces one record per email."""
        self._collection.create_index([(EmployeeFields.EMAIL, ASCENDING)], unique=True)

    @staticmethod
    def _object_id(employee_id: str) -> ObjectId:
        if not ObjectId.is_valid(employee_id):
            raise ValueError(f"Invalid employee ID '{employee_id}'")
        return ObjectId(employee_id)

    @staticmethod
    def _duplicate_message(error: DuplicateKeyError) -> str:
        details = error.details or {}
        return details.get("errmsg") or str(error)

    def _to_entity(self, doc: dict) -> Employee:
        """Convert MongoDB document to Employee entity."""
        return Employee(
            id=str(doc[EmployeeFields.MONGO_ID]),
            name=doc.get(EmployeeFields.NAME, ""),
            position=doc.get(EmployeeFields.POSITION, ""),
            email=doc.get(EmployeeFields.EMAIL, ""),
            phone=doc.get(EmployeeFields.PHONE, ""),
        )

    def _to_document(self, employee: Employee) -> dict:
        """Convert Employee entity to MongoDB document (without _id)."""
        return {
            EmployeeFields.NAME: employee.name,
            EmployeeFields.POSITION: employee.position,
            EmployeeFields.EMAIL: employee.email,
            EmployeeFields.PHONE: employee.phone,
        }

    def create(self, employee: Employee) -> Employee:
        """Create a new employee."""
        doc = self._to_document(employee)
        try:
            result = self._collection.insert_one(doc)
        except DuplicateKeyError as e:
            raise ValueError(self._duplicate_message(e)) from e

        employee.id = str(result.inserted_id)
        return employee

    def find_all(self) -> List[Employee]:
        """Find all employees."""
        docs = self._collection.find({}).sort(EmployeeFields.MONGO_ID, ASCENDING)
        return [self._to_entity(doc) for doc in docs]

    def find_by_id(self, employee_id: str) -> Optional[Employee]:
        """Find an employee by its ID."""
        doc = self._collection.find_one({EmployeeFields.MONGO_ID: self._object_id(employee_id)})
        if not doc:
            return None
        return self._to_entity(doc)

    def update(self, employee: Employee) -> Optional[Employee]:
        """Replace name, position, email and phone of an existing employee."""
        try:
            result = self._collection.find_one_and_update(
                {EmployeeFields.MONGO_ID: self._object_id(employee.id)},
                {"$set": self._to_document(employee)},
                return_document=ReturnDocument.AFTER,
            )
        except DuplicateKeyError as e:
            raise ValueError(self._duplicate_message(e)) from e

        if not result:
            return None
        return self._to_entity(result)

    def delete(self, employee_id: str) -> bool:
        """Delete an employee."""
        result = self._collection.delete_one({EmployeeFields.MONGO_ID: self._object_id(employee_id)})
        return result.deleted_count > 0
