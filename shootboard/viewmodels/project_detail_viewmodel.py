# Rev 0.1.0 — open project + its three boards
from __future__ import annotations
import logging
from typing import Any, Dict, List, Optional

from PySide6.QtCore import QObject, Signal

from shootboard.services import field_rules
from shootboard.services.errors import BLANK_TITLE_MESSAGE
from shootboard.services.mutation_service import MutationResult, MutationService
from shootboard.viewmodels.next_shoot_autosave import NextShootAutosave
from shootboard.viewmodels.selection import current_project, tasks_for_board

log = logging.getLogger(__name__)


class ProjectDetailViewModel(QObject):
    """
    Emits:
      loaded(dict)           the open project, or {} when the id has no record
      boardsReloaded(str)    tasks collection changed for the open project id
    """
    loaded = Signal(dict)
    boardsReloaded = Signal(str)

    def __init__(self, mutations: MutationService, autosave: NextShootAutosave):
        super().__init__()
        self._mutations = mutations
        self._store = mutations.store
        self._autosave = autosave
        self._project_id: Optional[str] = None

        self._store.collectionReplaced.connect(self._on_collection_replaced)
        self._store.projectPatched.connect(self._on_project_patched)

    @property
    def project_id(self) -> Optional[str]:
        return self._project_id

    @property
    def autosave(self) -> NextShootAutosave:
        return self._autosave

    # ---- navigation
    def open(self, project_id: Optional[str]) -> Optional[Dict[str, Any]]:
        self._project_id = project_id
        self._autosave.select_project(project_id)
        proj = self.current()
        self.loaded.emit(proj or {})
        return proj

    def close(self) -> None:
        self.open(None)

    # ---- queries
    def current(self) -> Optional[Dict[str, Any]]:
        return current_project(self._store.projects, self._project_id)

    def board(self, category: str) -> List[Dict[str, Any]]:
        return tasks_for_board(self._store.tasks, self._project_id, category)

    # ---- commands
    def add_task(self, category: str, title: str, index_label: str = "") -> MutationResult:
        if not title.strip():
            # ignored without a notification; the form just stays open
            log.debug("add_task(%s): blank title ignored", category)
            return MutationResult(ok=False, code="invalid", message=BLANK_TITLE_MESSAGE)
        return self._mutations.add_task(self.current(), category, title, index_label)

    def update_task(self, task_id: str, fields: Dict[str, Any]) -> MutationResult:
        return self._mutations.update("tasks", task_id, fields)

    def toggle_task(self, task_id: str) -> MutationResult:
        task = self._store.get("tasks", task_id)
        status = field_rules.toggled_status(task.get("status", "")) if task else "DONE"
        return self._mutations.update("tasks", task_id, {"status": status})

    def delete_task(self, task_id: str) -> MutationResult:
        return self._mutations.delete("tasks", task_id)

    # ---- store events
    def _on_collection_replaced(self, kind: str) -> None:
        if self._project_id is None:
            return
        if kind == "projects":
            self.loaded.emit(self.current() or {})
        elif kind == "tasks":
            self.boardsReloaded.emit(self._project_id)

    def _on_project_patched(self, project_id: str) -> None:
        if project_id == self._project_id:
            self.loaded.emit(self.current() or {})
