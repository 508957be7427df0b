# Rev 0.1.0

"""Referential guard (Rev 0.1.0)
Projects point at directors/creators by name; a person may only be deleted
when no project still carries that name.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional

from shootboard.models.types import PersonKind

# person kind -> project column holding the name reference
REFERENCE_COLUMNS: Dict[str, str] = {
    "directors": "director",
    "creators": "assigned_creator",
}

CLIENT_SEPARATOR = "、"


@dataclass
class GuardResult:
    blocking: List[Dict[str, Any]] = field(default_factory=list)
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return not self.blocking


def blocking_projects(person: Mapping[str, Any], kind: PersonKind, projects: Iterable[Mapping[str, Any]]) -> List[Dict[str, Any]]:
    column = REFERENCE_COLUMNS[kind]
    name = person.get("name")
    return [dict(p) for p in projects if p.get(column) == name]


def can_delete(person: Mapping[str, Any], kind: PersonKind, projects: Iterable[Mapping[str, Any]]) -> GuardResult:
    blocking = blocking_projects(person, kind, projects)
    if not blocking:
        return GuardResult()
    clients = CLIENT_SEPARATOR.join(str(p.get("client") or "") for p in blocking)
    message = f"{person.get('name')}さんは案件（{clients}）にアサインされているため削除できません。"
    return GuardResult(blocking=blocking, message=message)
