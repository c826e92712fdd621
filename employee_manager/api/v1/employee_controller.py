"""
Employee Controller
===================

FastAPI controller for the employee resource.

One path, dispatched by HTTP method:
GET lists, POST creates, PUT replaces, DELETE removes.
Any other method on the path is answered with 405 by the router.
"""
import logging
from typing import List

from fastapi import APIRouter, HTTPException, status, Depends

from employee_manager.application.dto.employee_dto import (
    EmployeeCreateRequest,
    EmployeeUpdateRequest,
    EmployeeDeleteRequest,
    EmployeeResponse,
    MessageResponse,
)
from employee_manager.api.v1.dependencies import get_employee_service
from employee_manager.application.services.employee_service import EmployeeService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["employees"])

NOT_FOUND_MESSAGE = "Employee not found"
INTERNAL_ERROR_MESSAGE = "Internal Server Error"

ERROR_RESPONSES = {
    status.HTTP_400_BAD_REQUEST: {"model": MessageResponse},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": MessageResponse},
}


def _internal_error(action: str) -> HTTPException:
    logger.exception(f"Failed to {action}")
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=INTERNAL_ERROR_MESSAGE,
    )


@router.get(
    "",
    response_model=List[EmployeeResponse],
    responses={status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": MessageResponse}},
    summary="List employees",
    description="Get every employee record. Filtering and pagination happen in the UI.",
)
def list_employees(
    service: EmployeeService = Depends(get_employee_service),
) -> List[EmployeeResponse]:
    """List all employees."""
    try:
        employees = service.list_employees()
    except Exception:
        raise _internal_error("list employees")

    return [EmployeeResponse.from_entity(emp) for emp in employees]


@router.post(
    "",
    response_model=EmployeeResponse,
    status_code=status.HTTP_201_CREATED,
    responses=ERROR_RESPONSES,
    summary="Create an employee",
    description="""
    Add a new employee record.

    All fields are required and the email must not belong to another employee.
    Validation failures are returned as 400 with the reason in `message`.
    """,
)
def create_employee(
    request: EmployeeCreateRequest,
    service: EmployeeService = Depends(get_employee_service),
) -> EmployeeResponse:
    """Create an employee."""
    try:
        employee = service.create_employee(
            name=request.name,
            position=request.position,
            email=request.email,
            phone=request.phone,
        )
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )
    except Exception:
        raise _internal_error("create employee")

    return EmployeeResponse.from_entity(employee)


@router.put(
    "",
    response_model=EmployeeResponse,
    responses={**ERROR_RESPONSES, status.HTTP_404_NOT_FOUND: {"model": MessageResponse}},
    summary="Update an employee",
    description="Replace name, position, email and phone of the employee named by `id`.",
)
def update_employee(
    request: EmployeeUpdateRequest,
    service: EmployeeService = Depends(get_employee_service),
) -> EmployeeResponse:
    """Update an employee."""
    try:
        employee = service.update_employee(
            id=request.id,
            name=request.name,
            position=request.position,
            email=request.email,
            phone=request.phone,
        )
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )
    except Exception:
        raise _internal_error("update employee")

    if employee is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=NOT_FOUND_MESSAGE
        )

    return EmployeeResponse.from_entity(employee)


@router.delete(
    "",
    response_model=MessageResponse,
    responses={**ERROR_RESPONSES, status.HTTP_404_NOT_FOUND: {"model": MessageResponse}},
    summary="Delete an employee",
    description="Remove the employee named by `id` in the request body.",
)
def delete_employee(
    request: EmployeeDeleteRequest,
    service: EmployeeService = Depends(get_employee_service),
) -> MessageResponse:
    """Delete an employee."""
    try:
        deleted = service.delete_employee(request.id)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )
    except Exception:
        raise _internal_error("delete employee")

    if not deleted:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=NOT_FOUND_MESSAGE
        )

    return MessageResponse(message="Employee deleted")


@router.get(
    "/{employee_id}",
    response_model=EmployeeResponse,
    responses={**ERROR_RESPONSES, status.HTTP_404_NOT_FOUND: {"model": MessageResponse}},
    summary="Get employee by ID",
    description="Get a single employee record.",
)
def get_employee(
    employee_id: str,
    service: EmployeeService = Depends(get_employee_service),
) -> EmployeeResponse:
    """Get a specific employee by ID."""
    try:
        employee = service.get_employee(employee_id)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )
    except Exception:
        raise _internal_error("get employee")

    if not employee:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=NOT_FOUND_MESSAGE
        )

    return EmployeeResponse.from_entity(employee)
