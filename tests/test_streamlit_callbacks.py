from __future__ import annotations

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from employee_manager.domain.models.employee import Employee
from employee_manager.ui import streamlit_app
from employee_manager.ui.api_client import EmployeeApiError
from employee_manager.ui.table_state import empty_form


class FakeSessionState(dict):
    """Dict with attribute access, like `st.session_state`."""

    def __getattr__(self, key):
        try:
            return self[key]
        except KeyError:
            raise AttributeError(key)

    def __setattr__(self, key, value):
        self[key] = value


@pytest.fixture
def api():
    return MagicMock()


@pytest.fixture
def state(monkeypatch, api):
    session_state = FakeSessionState(
        api_client=api,
        employees=[],
        needs_fetch=False,
        editing=False,
        search="",
        page=3,
        pending_delete=None,
        flash=None,
    )
    monkeypatch.setattr(streamlit_app, "st", SimpleNamespace(session_state=session_state))
    streamlit_app._load_form(empty_form())
    return session_state


def _fill(state, **values):
    for field_name, value in values.items():
        state[f"form_{field_name}"] = value


def test_search_change_resets_page(state):
    streamlit_app._on_search_change()
    assert state.page == 1


def test_successful_add_resets_form_and_refetches(state, api):
    _fill(state, name="A", position="B", email="a@b.com", phone="1")

    streamlit_app._on_submit()

    api.create_employee.assert_called_once_with({"name": "A", "position": "B", "email": "a@b.com", "phone": "1"})
    assert state.form_name == ""
    assert state.form_email == ""
    assert state.editing is False
    assert state.needs_fetch is True
    assert state.flash == ("success", "Employee added")


def test_successful_edit_sends_put_with_id(state, api):
    streamlit_app._on_edit(Employee(id="abc", name="A", position="B", email="a@b.com", phone="1"))
    assert state.editing is True
    assert state.form_name == "A"

    _fill(state, name="Z")
    streamlit_app._on_submit()

    api.update_employee.assert_called_once_with(
        {"name": "Z", "position": "B", "email": "a@b.com", "phone": "1", "id": "abc"}
    )
    assert state.editing is False
    assert state.form_id == ""
    assert state.needs_fetch is True


def test_failed_submit_shows_server_message_and_keeps_form(state, api):
    api.create_employee.side_effect = EmployeeApiError("duplicate key error", 400)
    _fill(state, name="A", position="B", email="a@b.com", phone="1")

    streamlit_app._on_submit()

    assert state.flash == ("error", "duplicate key error")
    assert state.form_name == "A"
    assert state.form_email == "a@b.com"
    assert state.needs_fetch is False


def test_delete_waits_for_confirmation_then_refetches(state, api):
    streamlit_app._on_request_delete("abc")
    assert state.pending_delete == "abc"
    api.delete_employee.assert_not_called()

    streamlit_app._on_confirm_delete()

    api.delete_employee.assert_called_once_with("abc")
    assert state.pending_delete is None
    assert state.needs_fetch is True


def test_cancelled_delete_sends_nothing(state, api):
    streamlit_app._on_request_delete("abc")
    streamlit_app._on_cancel_delete()

    assert state.pending_delete is None
    api.delete_employee.assert_not_called()


def test_failed_delete_shows_server_message(state, api):
    api.delete_employee.side_effect = EmployeeApiError("Employee not found", 404)
    streamlit_app._on_request_delete("abc")

    streamlit_app._on_confirm_delete()

    assert state.flash == ("error", "Employee not found")
    assert state.needs_fetch is False
