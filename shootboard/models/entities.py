# Rev 0.1.0
"""Lightweight entities mirroring the four store collections.

The store itself keeps plain dicts (the shape the gateway returns); these
dataclasses are used to build insert payloads from form input.
"""
from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import Any, Dict, Mapping, Optional


def _text(value: Any) -> str:
    return "" if value is None else str(value)


@dataclass
class Project:
    id: Optional[str]
    client: str
    director: str = ""
    assigned_creator: str = ""
    contract_month: str = ""
    start_month: str = ""
    expiry_month: str = ""
    memo: str = ""
    next_shoot_count: str = ""
    next_shoot_date: str = ""

    @classmethod
    def from_form(cls, form: Mapping[str, Any]) -> "Project":
        return cls(
            id=None,
            client=_text(form.get("client")).strip(),
            director=_text(form.get("director")),
            assigned_creator=_text(form.get("assigned_creator")),
            contract_month=_text(form.get("contract_month")),
            start_month=_text(form.get("start_month")),
            expiry_month=_text(form.get("expiry_month")),
            memo=_text(form.get("memo")),
        )

    def form_fields(self) -> Dict[str, str]:
        """Fields the project form edits (next-shoot pair is owned by autosave)."""
        data = asdict(self)
        for key in ("id", "next_shoot_count", "next_shoot_date"):
            data.pop(key)
        return data


@dataclass
class Task:
    id: Optional[str]
    project_id: str
    category: str
    title: str
    index_label: str = ""
    status: str = ""
    due_date: str = ""
    assignee: str = ""

    def to_record(self) -> Dict[str, str]:
        data = asdict(self)
        data.pop("id")
        return data


@dataclass
class Person:
    """Director or creator; which one is decided by the collection it lives in."""
    id: Optional[str]
    name: str
    email: str = ""
    note: str = ""

    @classmethod
    def from_form(cls, form: Mapping[str, Any]) -> "Person":
        return cls(
            id=None,
            name=_text(form.get("name")).strip(),
            email=_text(form.get("email")),
            note=_text(form.get("note")),
        )

    def to_record(self) -> Dict[str, str]:
        data = asdict(self)
        data.pop("id")
        return data
