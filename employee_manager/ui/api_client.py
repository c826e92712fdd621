"""
Employee API Client
===================
Thin HTTP client the UI uses to talk to the employee API.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import requests

from employee_manager.domain.models.employee import Employee

logger = logging.getLogger(__name__)

EMPLOYEES_PATH = "/api/employees"


class EmployeeApiError(Exception):
    """Non-2xx answer (or no answer) from the employee API."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class EmployeeApiClient:
    """
    Client for the `/api/employees` resource.

    Every call raises EmployeeApiError carrying the server's `message`
    when the request fails.
    """

    def __init__(self, base_url: str, timeout: float = 10, session: Optional[requests.Session] = None):
        self._url = f"{base_url.rstrip('/')}{EMPLOYEES_PATH}"
        self._timeout = timeout
        self._session = session or requests.Session()

    def _request(self, method: str, payload: Optional[Dict[str, Any]] = None) -> Any:
        try:
            resp = self._session.request(method, self._url, json=payload, timeout=self._timeout)
        except requests.RequestException as e:
            logger.warning(f"{method} {self._url} failed: {e}")
            raise EmployeeApiError(f"Could not reach the employee API: {e}") from e

        try:
            data = resp.json()
        except ValueError:
            data = None

        if resp.status_code >= 300:
            message = data.get("message") if isinstance(data, dict) else None
            raise EmployeeApiError(message or f"Request failed ({resp.status_code})", resp.status_code)
        return data

    def list_employees(self) -> List[Employee]:
        return [Employee.from_dict(item) for item in self._request("GET") or []]

    def create_employee(self, payload: Dict[str, str]) -> Employee:
        return Employee.from_dict(self._request("POST", payload))

    def update_employee(self, payload: Dict[str, str]) -> Employee:
        return Employee.from_dict(self._request("PUT", payload))

    def delete_employee(self, employee_id: str) -> str:
        data = self._request("DELETE", {"id": employee_id})
        return (data or {}).get("message", "")
