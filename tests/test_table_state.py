from __future__ import annotations

from employee_manager.domain.models.employee import Employee
from employee_manager.ui.table_state import (
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


def _staff(count: int):
    return [
        Employee(id=f"{i:024x}", name=f"Person {i}", position="Clerk", email=f"p{i}@corp.com", phone=f"555-{i:04d}")
        for i in range(1, count + 1)
    ]


def test_search_matches_any_text_field_case_insensitively():
    staff = [
        Employee(id="1", name="Alice", position="Engineer", email="alice@corp.com", phone="111"),
        Employee(id="2", name="Bob", position="Designer", email="bob@corp.com", phone="222"),
        Employee(id="3", name="Carol", position="Manager", email="carol@home.net", phone="333"),
    ]

    assert [e.id for e in filter_employees(staff, "ALI")] == ["1"]
    assert [e.id for e in filter_employees(staff, "design")] == ["2"]
    assert [e.id for e in filter_employees(staff, "CORP.COM")] == ["1", "2"]
    assert [e.id for e in filter_employees(staff, "33")] == ["3"]
    assert filter_employees(staff, "zzz") == []
    assert filter_employees(staff, "") == staff


def test_pages_of_five():
    staff = _staff(12)
    assert total_pages(len(staff)) == 3
    assert [e.name for e in paginate(staff, 1)] == [f"Person {i}" for i in range(1, 6)]
    assert [e.name for e in paginate(staff, 3)] == ["Person 11", "Person 12"]
    assert total_pages(0) == 0


def test_clamp_page_stays_in_range():
    assert clamp_page(4, 3) == 3
    assert clamp_page(0, 3) == 1
    assert clamp_page(2, 0) == 1


def test_row_numbers_continue_across_pages():
    assert row_number(0, 1) == 1
    assert row_number(0, 2) == 6
    assert row_number(4, 3) == 15


def test_form_payload_only_sends_id_when_editing():
    emp = Employee(id="abc", name="A", position="B", email="a@b.com", phone="1")
    form = form_from_employee(emp)

    assert form_payload(form, editing=True) == {"id": "abc", "name": "A", "position": "B", "email": "a@b.com", "phone": "1"}
    assert "id" not in form_payload(empty_form(), editing=False)


def test_csv_export_has_headers_and_all_rows():
    csv_text = to_csv(_staff(2))
    lines = csv_text.strip().splitlines()
    assert lines[0] == "Name,Position,Email,Phone"
    assert lines[1] == "Person 1,Clerk,p1@corp.com,555-0001"
    assert len(lines) == 3


def test_csv_export_of_empty_list_is_header_only():
    assert to_csv([]).strip() == "Name,Position,Email,Phone"
