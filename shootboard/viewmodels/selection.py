# shootboard/viewmodels/selection.py
"""Derived views over the store. No state of their own; recompute on every render."""
from __future__ import annotations
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

UNASSIGNED_ID = "none"
UNASSIGNED_LABEL = "未定"


def current_project(projects: Iterable[Mapping[str, Any]], project_id: Any) -> Optional[Dict[str, Any]]:
    if project_id is None:
        return None
    for p in projects:
        if p.get("id") == project_id:
            return dict(p)
    return None


def tasks_for_board(tasks: Iterable[Mapping[str, Any]], project_id: Any, category: str) -> List[Dict[str, Any]]:
    return [dict(t) for t in tasks if t.get("project_id") == project_id and t.get("category") == category]


def projects_by_creator(
    projects: Iterable[Mapping[str, Any]],
    creators: Iterable[Mapping[str, Any]],
) -> List[Tuple[Dict[str, Any], List[Dict[str, Any]]]]:
    """
    Dashboard grouping: one (creator, projects) pair per creator with at least
    one project, in creator order, then the synthetic 未定 bucket for projects
    whose assigned_creator matches no known creator name.
    """
    projects = [dict(p) for p in projects]
    creators = [dict(c) for c in creators]
    known = {c.get("name") for c in creators}

    groups: List[Tuple[Dict[str, Any], List[Dict[str, Any]]]] = []
    for creator in creators:
        mine = [p for p in projects if p.get("assigned_creator") == creator.get("name")]
        if mine:
            groups.append((creator, mine))

    orphans = [p for p in projects if p.get("assigned_creator") not in known]
    if orphans:
        groups.append(({"id": UNASSIGNED_ID, "name": UNASSIGNED_LABEL}, orphans))
    return groups


def project_form_defaults(
    editing: Optional[Mapping[str, Any]],
    directors: List[Mapping[str, Any]],
    creators: List[Mapping[str, Any]],
) -> Dict[str, str]:
    """Initial form values: the edited project's, else the first director/creator."""
    editing = editing or {}
    first_director = directors[0].get("name", "") if directors else ""
    first_creator = creators[0].get("name", "") if creators else ""
    return {
        "client": editing.get("client") or "",
        "director": editing.get("director") or first_director,
        "assigned_creator": editing.get("assigned_creator") or first_creator,
        "contract_month": editing.get("contract_month") or "",
        "start_month": editing.get("start_month") or "",
        "expiry_month": editing.get("expiry_month") or "",
        "memo": editing.get("memo") or "",
    }
