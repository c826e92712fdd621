"""
Employee Management page.

Single page: search box, add/edit form, paginated table with
Edit/Delete actions, CSV export and page buttons.

Run with:
    streamlit run employee_manager/ui/streamlit_app.py
"""
from __future__ import annotations

import streamlit as st

from employee_manager.core.config import get_settings
from employee_manager.domain.constants.employee_fields import EmployeeFields
from employee_manager.ui.api_client import EmployeeApiClient, EmployeeApiError
from employee_manager.ui.table_state import (
    CSV_FILENAME,
    CSV_HEADERS,
    clamp_page,
    empty_form,
    filter_employees,
    form_from_employee,
    form_payload,
    paginate,
    row_number,
    to_csv,
    total_pages,
)

FORM_FIELDS = [
    (EmployeeFields.NAME, "Full Name"),
    (EmployeeFields.POSITION, "Position"),
    (EmployeeFields.EMAIL, "Email"),
    (EmployeeFields.PHONE, "Phone"),
]


def _form_key(field_name: str) -> str:
    return f"form_{field_name}"


def _client() -> EmployeeApiClient:
    if "api_client" not in st.session_state:
        st.session_state.api_client = EmployeeApiClient(get_settings().api_base_url)
    return st.session_state.api_client


def _init_state() -> None:
    if "employees" not in st.session_state:
        st.session_state.employees = []
        st.session_state.needs_fetch = True
    if "editing" not in st.session_state:
        st.session_state.editing = False
    if "form_id" not in st.session_state:
        _load_form(empty_form())
    if "search" not in st.session_state:
        st.session_state.search = ""
    if "page" not in st.session_state:
        st.session_state.page = 1
    if "pending_delete" not in st.session_state:
        st.session_state.pending_delete = None
    if "flash" not in st.session_state:
        st.session_state.flash = None


def _load_form(form: dict) -> None:
    st.session_state.form_id = form[EmployeeFields.ID]
    for field_name, _ in FORM_FIELDS:
        st.session_state[_form_key(field_name)] = form[field_name]


def _current_form() -> dict:
    form = {EmployeeFields.ID: st.session_state.form_id}
    for field_name, _ in FORM_FIELDS:
        form[field_name] = st.session_state.get(_form_key(field_name), "")
    return form


def _fetch_employees() -> None:
    try:
        st.session_state.employees = _client().list_employees()
    except EmployeeApiError as e:
        st.session_state.flash = ("error", e.message)
    st.session_state.needs_fetch = False


# Callbacks run before the next rerun renders widgets, so they may reset widget state.

def _on_search_change() -> None:
    st.session_state.page = 1


def _on_submit() -> None:
    editing = st.session_state.editing
    payload = form_payload(_current_form(), editing)
    try:
        if editing:
            _client().update_employee(payload)
        else:
            _client().create_employee(payload)
    except EmployeeApiError as e:
        st.session_state.flash = ("error", e.message)
        return

    st.session_state.flash = ("success", "Employee updated" if editing else "Employee added")
    _load_form(empty_form())
    st.session_state.editing = False
    st.session_state.needs_fetch = True


def _on_cancel_edit() -> None:
    _load_form(empty_form())
    st.session_state.editing = False


def _on_edit(employee) -> None:
    _load_form(form_from_employee(employee))
    st.session_state.editing = True


def _on_request_delete(employee_id: str) -> None:
    st.session_state.pending_delete = employee_id


def _on_confirm_delete() -> None:
    employee_id = st.session_state.pending_delete
    st.session_state.pending_delete = None
    try:
        _client().delete_employee(employee_id)
    except EmployeeApiError as e:
        st.session_state.flash = ("error", e.message)
        return
    st.session_state.flash = ("success", "Employee deleted")
    st.session_state.needs_fetch = True


def _on_cancel_delete() -> None:
    st.session_state.pending_delete = None


def _on_page(page: int) -> None:
    st.session_state.page = page


def _render_flash() -> None:
    flash = st.session_state.flash
    if not flash:
        return
    kind, message = flash
    (st.error if kind == "error" else st.success)(message)
    st.session_state.flash = None


def _render_form() -> None:
    editing = st.session_state.editing
    st.subheader("Edit Employee" if editing else "Add Employee")
    with st.form("employee_form", clear_on_submit=False):
        for field_name, label in FORM_FIELDS:
            st.text_input(label, key=_form_key(field_name), placeholder=label)
        st.form_submit_button(
            "Update Employee" if editing else "Add Employee",
            type="primary",
            on_click=_on_submit,
        )
    if editing:
        st.button("Cancel edit", on_click=_on_cancel_edit)


def _render_table(page_size: int) -> None:
    filtered = filter_employees(st.session_state.employees, st.session_state.search)
    pages = total_pages(len(filtered), page_size)
    page = clamp_page(st.session_state.page, pages)
    st.session_state.page = page
    rows = paginate(filtered, page, page_size)

    widths = [0.5, 2, 2, 3, 2, 2]
    header = st.columns(widths)
    for col, label in zip(header, ["#", *CSV_HEADERS.values(), "Actions"]):
        col.markdown(f"**{label}**")

    if not rows:
        st.info("No employees found")

    for index, emp in enumerate(rows):
        cols = st.columns(widths)
        cols[0].write(row_number(index, page, page_size))
        cols[1].write(emp.name)
        cols[2].write(emp.position)
        cols[3].write(emp.email)
        cols[4].write(emp.phone)
        with cols[5]:
            edit_col, delete_col = st.columns(2)
            edit_col.button("Edit", key=f"edit_{emp.id}", on_click=_on_edit, args=(emp,))
            delete_col.button("Delete", key=f"delete_{emp.id}", on_click=_on_request_delete, args=(emp.id,))

    if st.session_state.pending_delete:
        st.warning("Are you sure you want to delete this employee?")
        yes_col, no_col, _ = st.columns([1, 1, 6])
        yes_col.button("Yes, delete", on_click=_on_confirm_delete, type="primary")
        no_col.button("Cancel", on_click=_on_cancel_delete)

    st.download_button(
        "Export CSV",
        data=to_csv(st.session_state.employees),
        file_name=CSV_FILENAME,
        mime="text/csv",
    )

    if pages > 1:
        page_cols = st.columns(min(pages, 12))
        for i in range(pages):
            page_cols[i % len(page_cols)].button(
                str(i + 1),
                key=f"page_{i + 1}",
                on_click=_on_page,
                args=(i + 1,),
                type="primary" if page == i + 1 else "secondary",
            )


def main() -> None:
    st.set_page_config(page_title="Employee Management", layout="wide")
    _init_state()
    if st.session_state.needs_fetch:
        _fetch_employees()

    st.title("Employee Management")
    _render_flash()

    # Streamlit commits text input on Enter or blur, so filtering follows each committed edit
    st.text_input(
        "Search",
        key="search",
        placeholder="Search Employee...",
        label_visibility="collapsed",
        on_change=_on_search_change,
    )

    _render_form()
    _render_table(get_settings().employees_page_size)


if __name__ == "__main__":
    main()
