# tests/test_field_rules.py
from __future__ import annotations

import pytest

from shootboard.services import field_rules
from shootboard.services.errors import InvalidField


@pytest.mark.parametrize(
    "category,status,ok",
    [
        ("OP_EXEC", "未編集", True),
        ("OP_EXEC", "編集中", True),
        ("OP_EXEC", "FIX", True),
        ("OP_EXEC", "投稿済み", True),
        ("OP_EXEC", "DONE", False),
        ("OP_EXEC", "TODO", False),
        ("PRE_SHOOT", "TODO", True),
        ("PRE_SHOOT", "DONE", True),
        ("PRE_SHOOT", "FIX", False),
        ("OP_PREP", "DONE", True),
        ("OP_PREP", "投稿済み", False),
    ],
)
def test_status_domain_depends_on_category(category, status, ok):
    assert field_rules.is_allowed_status(category, status) is ok


def test_defaults_per_category():
    assert field_rules.default_status("OP_EXEC") == "未編集"
    assert field_rules.default_status("PRE_SHOOT") == "TODO"
    assert field_rules.default_index_label("OP_EXEC", "") == "NEW"
    assert field_rules.default_index_label("OP_EXEC", "7") == "7"
    assert field_rules.default_index_label("OP_PREP", "") == ""


def test_toggle_flips_checklist_status():
    assert field_rules.toggled_status("TODO") == "DONE"
    assert field_rules.toggled_status("DONE") == "TODO"


@pytest.mark.parametrize("value,ok", [("", True), (None, True), ("3", True), ("12", True), ("0", False), ("-1", False), ("abc", False), ("1.5", False)])
def test_shoot_count_is_empty_or_positive_integer(value, ok):
    assert field_rules.is_valid_shoot_count(value) is ok


def test_new_task_record_seeds_assignee_and_defaults():
    project = {"id": "p1", "director": "Aoi"}
    rec = field_rules.new_task_record(project, "OP_EXEC", "Vlog #1")
    assert rec == {
        "project_id": "p1",
        "category": "OP_EXEC",
        "index_label": "NEW",
        "title": "Vlog #1",
        "status": "未編集",
        "due_date": "",
        "assignee": "Aoi",
    }
    assert field_rules.new_task_record({"id": "p2"}, "PRE_SHOOT", "x")["assignee"] == ""


def test_validate_rejects_status_outside_category():
    existing = {"id": "t1", "project_id": "p1", "category": "PRE_SHOOT", "status": "TODO"}
    with pytest.raises(InvalidField) as exc:
        field_rules.validate("tasks", "update", {"status": "FIX"}, existing)
    assert exc.value.message == "タスクの更新に失敗しました"


def test_validate_rejects_category_change():
    existing = {"id": "t1", "project_id": "p1", "category": "OP_EXEC", "status": "FIX"}
    with pytest.raises(InvalidField):
        field_rules.validate("tasks", "update", {"category": "OP_PREP"}, existing)


def test_validate_requires_names():
    with pytest.raises(InvalidField):
        field_rules.validate("projects", "insert", {"client": "  "})
    with pytest.raises(InvalidField):
        field_rules.validate("creators", "update", {"name": ""})
    field_rules.validate("creators", "update", {"email": "x@example.com"})


def test_validate_month_and_date_formats():
    field_rules.validate("projects", "update", {"contract_month": "2024-04", "next_shoot_date": "2024-05-01"})
    field_rules.validate("projects", "update", {"contract_month": "", "next_shoot_date": ""})
    with pytest.raises(InvalidField):
        field_rules.validate("projects", "update", {"start_month": "2024-13"})
    with pytest.raises(InvalidField):
        field_rules.validate("projects", "update", {"next_shoot_date": "05/01/2024"})


def test_validate_rejects_unknown_field_names():
    with pytest.raises(InvalidField) as exc:
        field_rules.validate("directors", "insert", {"name": "Sho", "phone": "1"})
    assert "phone" in exc.value.detail
    existing = {"id": "t1", "project_id": "p1", "category": "OP_EXEC", "status": "FIX"}
    with pytest.raises(InvalidField):
        field_rules.validate("tasks", "update", {"bogus": "x"}, existing)
    # the id key is tolerated on any kind
    field_rules.validate("creators", "update", {"id": "c1", "note": "x"})
