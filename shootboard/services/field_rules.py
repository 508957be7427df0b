# shootboard/services/field_rules.py
"""Field-level rules enforced at the mutation boundary.

Status domains depend on the task category:
  OP_EXEC            -> 未編集 / 編集中 / FIX / 投稿済み
  PRE_SHOOT, OP_PREP -> TODO / DONE
"""
from __future__ import annotations
import re
from typing import Any, Dict, Mapping, Optional

from shootboard.models.entities import Task
from shootboard.models.types import ENTITY_COLUMNS, TASK_CATEGORIES, TaskCategory
from shootboard.services.errors import InvalidField

POST_STATUS_OPTIONS: tuple[str, ...] = ("未編集", "編集中", "FIX", "投稿済み")
CHECK_STATUS_OPTIONS: tuple[str, ...] = ("TODO", "DONE")

SCHEDULE_CATEGORY = "OP_EXEC"
DEFAULT_SCHEDULE_LABEL = "NEW"

_MONTH = re.compile(r"^\d{4}-(0[1-9]|1[0-2])$")
_DATE = re.compile(r"^\d{4}-(0[1-9]|1[0-2])-(0[1-9]|[12]\d|3[01])$")


def status_domain(category: str) -> tuple[str, ...]:
    return POST_STATUS_OPTIONS if category == SCHEDULE_CATEGORY else CHECK_STATUS_OPTIONS


def is_allowed_status(category: str, status: str) -> bool:
    return status in status_domain(category)


def default_status(category: str) -> str:
    return status_domain(category)[0]


def default_index_label(category: str, index_label: Optional[str] = None) -> str:
    if index_label:
        return index_label
    return DEFAULT_SCHEDULE_LABEL if category == SCHEDULE_CATEGORY else ""


def toggled_status(status: str) -> str:
    """Checklist toggle used by the PRE_SHOOT / OP_PREP boards."""
    return "TODO" if status == "DONE" else "DONE"


def is_valid_shoot_count(value: Any) -> bool:
    text = "" if value is None else str(value).strip()
    if text == "":
        return True
    return text.isdigit() and int(text) > 0


def _is_blank(value: Any) -> bool:
    return value is None or str(value).strip() == ""


def _check_optional(pattern: re.Pattern, value: Any) -> bool:
    return _is_blank(value) or bool(pattern.match(str(value)))


def validate(kind: str, operation: str, fields: Mapping[str, Any], existing: Optional[Mapping[str, Any]] = None) -> None:
    """Raise InvalidField when `fields` break a rule for `kind`.

    `existing` is the stored record for updates; task status is checked
    against its category.
    """
    def reject(detail: str) -> None:
        raise InvalidField(kind, operation, detail=detail)

    inserting = operation == "insert"

    unknown = sorted(set(fields) - set(ENTITY_COLUMNS.get(kind, ())) - {"id"})
    if unknown:
        reject(f"unknown {kind} field(s): {', '.join(unknown)}")

    if kind == "projects":
        if (inserting or "client" in fields) and _is_blank(fields.get("client")):
            reject("client is required")
        for key in ("contract_month", "start_month", "expiry_month"):
            if key in fields and not _check_optional(_MONTH, fields[key]):
                reject(f"{key} must be YYYY-MM")
        if "next_shoot_count" in fields and not is_valid_shoot_count(fields["next_shoot_count"]):
            reject("next_shoot_count must be a positive integer")
        if "next_shoot_date" in fields and not _check_optional(_DATE, fields["next_shoot_date"]):
            reject("next_shoot_date must be YYYY-MM-DD")

    elif kind == "tasks":
        if inserting:
            category = fields.get("category")
            if category not in TASK_CATEGORIES:
                reject(f"unknown category: {category!r}")
            if _is_blank(fields.get("project_id")):
                reject("project_id is required")
        else:
            category = (existing or {}).get("category")
            if "category" in fields and fields["category"] != category:
                reject("category cannot change")
            if "project_id" in fields and existing is not None and fields["project_id"] != existing.get("project_id"):
                reject("project_id cannot change")
        if "status" in fields and not is_allowed_status(str(category), fields["status"]):
            reject(f"status {fields['status']!r} not allowed for {category}")
        if "due_date" in fields and not _check_optional(_DATE, fields["due_date"]):
            reject("due_date must be YYYY-MM-DD")

    elif kind in ("directors", "creators"):
        if (inserting or "name" in fields) and _is_blank(fields.get("name")):
            reject("name is required")


def with_task_defaults(record: Mapping[str, Any]) -> Dict[str, Any]:
    """Fill index_label/status from the category when the caller left them empty."""
    category = str(record.get("category"))
    out = dict(record)
    out["index_label"] = default_index_label(category, record.get("index_label"))
    out["status"] = record.get("status") or default_status(category)
    return out


def new_task_record(project: Mapping[str, Any], category: TaskCategory, title: str, index_label: str = "") -> Dict[str, str]:
    """Insert payload for a task added to `project`'s board; the director becomes the assignee."""
    task = Task(
        id=None,
        project_id=project["id"],
        category=category,
        title=title,
        index_label=default_index_label(category, index_label),
        status=default_status(category),
        assignee=project.get("director") or "",
    )
    return task.to_record()
