from __future__ import annotations

from unittest.mock import MagicMock

import pytest
import requests

from employee_manager.ui.api_client import EmployeeApiClient, EmployeeApiError


def _response(status_code, payload):
    resp = MagicMock()
    resp.status_code = status_code
    resp.json.return_value = payload
    return resp


@pytest.fixture
def session():
    return MagicMock()


@pytest.fixture
def api(session):
    return EmployeeApiClient("http://api.local/", session=session)


def test_list_employees_builds_models(api, session):
    session.request.return_value = _response(
        200, [{"id": "1", "name": "A", "position": "B", "email": "a@b.com", "phone": "1"}]
    )

    employees = api.list_employees()

    assert employees[0].id == "1"
    assert employees[0].email == "a@b.com"
    session.request.assert_called_once_with("GET", "http://api.local/api/employees", json=None, timeout=10)


def test_error_carries_server_message(api, session):
    session.request.return_value = _response(400, {"message": "ID is required"})

    with pytest.raises(EmployeeApiError) as exc:
        api.update_employee({"name": "A"})
    assert exc.value.message == "ID is required"
    assert exc.value.status_code == 400


def test_delete_sends_id_in_body(api, session):
    session.request.return_value = _response(200, {"message": "Employee deleted"})

    assert api.delete_employee("abc") == "Employee deleted"
    session.request.assert_called_once_with(
        "DELETE", "http://api.local/api/employees", json={"id": "abc"}, timeout=10
    )


def test_connection_failure_is_wrapped(api, session):
    session.request.side_effect = requests.ConnectionError("refused")

    with pytest.raises(EmployeeApiError, match="Could not reach"):
        api.list_employees()
