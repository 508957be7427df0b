# Rev 0.1.0
# shootboard/viewmodels/directory_viewmodel.py
from __future__ import annotations
from typing import Any, Dict, List, Mapping, Optional

from PySide6.QtCore import QObject, Signal

from shootboard.models.entities import Person
from shootboard.services.mutation_service import MutationResult, MutationService


def normalize_kind(person_type: Optional[str]) -> str:
    """Directory route type -> collection; anything but 'creator' shows directors."""
    return "creators" if person_type in ("creator", "creators") else "directors"


class DirectoryViewModel(QObject):
    peopleReloaded = Signal(str, list)  # kind, rows

    def __init__(self, mutations: MutationService):
        super().__init__()
        self._mutations = mutations
        self._store = mutations.store
        self._store.collectionReplaced.connect(self._on_collection_replaced)

    def people(self, person_type: str) -> List[Dict[str, Any]]:
        return self._store.all(normalize_kind(person_type))

    def save_person(self, person_type: str, form: Mapping[str, Any], editing_id: Optional[str] = None) -> MutationResult:
        kind = normalize_kind(person_type)
        record = Person.from_form(form).to_record()
        if editing_id is None:
            return self._mutations.insert(kind, record)
        # renames are not cascaded to projects
        return self._mutations.update(kind, editing_id, record)

    def delete_person(self, person_type: str, person_id: str) -> MutationResult:
        return self._mutations.delete(normalize_kind(person_type), person_id)

    def _on_collection_replaced(self, kind: str) -> None:
        if kind in ("directors", "creators"):
            self.peopleReloaded.emit(kind, self._store.all(kind))
