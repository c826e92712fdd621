"""
Employee table state helpers for the UI.

Everything here is pure: search filtering, page slicing, row numbering,
form handling and the CSV export. The Streamlit page keeps the actual
state in `st.session_state` and calls these functions on every rerun.
"""
from __future__ import annotations

import math
from typing import Dict, List

import pandas as pd

from employee_manager.domain.constants.employee_fields import EmployeeFields
from employee_manager.domain.models.employee import Employee

DEFAULT_PAGE_SIZE = 5

CSV_FILENAME = "employees.csv"

# Stored field -> CSV/table column label
CSV_HEADERS: Dict[str, str] = {
    EmployeeFields.NAME: "Name",
    EmployeeFields.POSITION: "Position",
    EmployeeFields.EMAIL: "Email",
    EmployeeFields.PHONE: "Phone",
}


def filter_employees(employees: List[Employee], query: str) -> List[Employee]:
    """Keep employees whose name, position, email or phone contains `query` (any case)."""
    if not query:
        return list(employees)
    return [emp for emp in employees if emp.matches(query)]


def total_pages(count: int, page_size: int = DEFAULT_PAGE_SIZE) -> int:
    return math.ceil(count / page_size) if count > 0 else 0


def clamp_page(page: int, pages: int) -> int:
    """Keep a 1-based page index inside 1..pages (1 when there are no pages)."""
    if pages <= 0:
        return 1
    return min(max(page, 1), pages)


def paginate(employees: List[Employee], page: int, page_size: int = DEFAULT_PAGE_SIZE) -> List[Employee]:
    """Slice one 1-based page out of the list."""
    start = (page - 1) * page_size
    return employees[start:start + page_size]


def row_number(index: int, page: int, page_size: int = DEFAULT_PAGE_SIZE) -> int:
    """Row numbers continue across pages."""
    return index + 1 + (page - 1) * page_size


def empty_form() -> Dict[str, str]:
    return {
        EmployeeFields.ID: "",
        EmployeeFields.NAME: "",
        EmployeeFields.POSITION: "",
        EmployeeFields.EMAIL: "",
        EmployeeFields.PHONE: "",
    }


def form_from_employee(employee: Employee) -> Dict[str, str]:
    """Form contents for editing an existing employee."""
    form = employee.to_dict()
    form[EmployeeFields.ID] = employee.id or ""
    return form


def form_payload(form: Dict[str, str], editing: bool) -> Dict[str, str]:
    """
    Request body for the form submission.

    The id is only sent when editing (PUT); a create (POST) never carries one.
    """
    payload = {field_name: form.get(field_name, "") for field_name in EmployeeFields.REQUIRED}
    if editing:
        payload[EmployeeFields.ID] = form.get(EmployeeFields.ID, "")
    return payload


def to_dataframe(employees: List[Employee]) -> pd.DataFrame:
    """Employees as a frame with the display column labels."""
    rows = [{field_name: getattr(emp, field_name) for field_name in CSV_HEADERS} for emp in employees]
    frame = pd.DataFrame(rows, columns=list(CSV_HEADERS))
    return frame.rename(columns=CSV_HEADERS)


def to_csv(employees: List[Employee]) -> str:
    """CSV export with a Name,Position,Email,Phone header row."""
    return to_dataframe(employees).to_csv(index=False)
