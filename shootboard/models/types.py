# shootboard type definitions
# Rev 0.1.0

from __future__ import annotations
from typing import Dict, Literal

# Collections mirrored from the store
EntityKind = Literal["projects", "tasks", "directors", "creators"]
ENTITY_KINDS: tuple[str, ...] = ("projects", "tasks", "directors", "creators")

# People referenced by projects (by name)
PersonKind = Literal["directors", "creators"]
PERSON_KINDS: tuple[str, ...] = ("directors", "creators")

# Task board sections
TaskCategory = Literal["PRE_SHOOT", "OP_EXEC", "OP_PREP"]
TASK_CATEGORIES: tuple[str, ...] = ("PRE_SHOOT", "OP_EXEC", "OP_PREP")

# Next-shoot autosave indicator
SaveState = Literal["idle", "saving", "saved", "error"]

# Writable columns per collection; `id` is assigned by the store on insert
ENTITY_COLUMNS: Dict[str, tuple[str, ...]] = {
    "projects": (
        "client", "director", "assigned_creator", "contract_month", "start_month",
        "expiry_month", "memo", "next_shoot_count", "next_shoot_date",
    ),
    "tasks": ("project_id", "category", "index_label", "title", "status", "due_date", "assignee"),
    "directors": ("name", "email", "note"),
    "creators": ("name", "email", "note"),
}
