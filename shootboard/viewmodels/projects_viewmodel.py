# Rev 0.1.0
# shootboard/viewmodels/projects_viewmodel.py
from __future__ import annotations
from typing import Any, Dict, List, Mapping, Optional, Tuple

from PySide6.QtCore import QObject, Signal

from shootboard.models.entities import Project
from shootboard.services.mutation_service import MutationResult, MutationService
from shootboard.viewmodels.selection import project_form_defaults, projects_by_creator


class ProjectsViewModel(QObject):
    """Dashboard (projects grouped by creator) and the project form."""
    groupsReloaded = Signal(list)

    def __init__(self, mutations: MutationService):
        super().__init__()
        self._mutations = mutations
        self._store = mutations.store
        self._store.collectionReplaced.connect(self._on_collection_replaced)

    def groups(self) -> List[Tuple[Dict[str, Any], List[Dict[str, Any]]]]:
        return projects_by_creator(self._store.projects, self._store.creators)

    def form_defaults(self, editing_id: Optional[str] = None) -> Dict[str, str]:
        editing = self._store.get("projects", editing_id) if editing_id is not None else None
        return project_form_defaults(editing, self._store.directors, self._store.creators)

    def save_project(self, form: Mapping[str, Any], editing_id: Optional[str] = None) -> MutationResult:
        fields = Project.from_form(form).form_fields()
        if editing_id is None:
            return self._mutations.insert("projects", fields)
        return self._mutations.update("projects", editing_id, fields)

    def delete_project(self, project_id: str) -> MutationResult:
        result = self._mutations.delete("projects", project_id)
        if result.ok:
            # the store cascades the project's tasks
            self._mutations.refresh("tasks")
        return result

    def _on_collection_replaced(self, kind: str) -> None:
        if kind in ("projects", "creators"):
            self.groupsReloaded.emit(self.groups())
