# Rev 0.1.0
from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional

from PySide6.QtCore import QObject, Signal

from shootboard.models.types import ENTITY_KINDS

log = logging.getLogger(__name__)

# The only fields the autosave controller may patch ahead of the gateway.
OPTIMISTIC_FIELDS = frozenset({"next_shoot_count", "next_shoot_date"})


class EntityStore(QObject):
    """
    Session copy of the four collections.

    Emits:
      collectionReplaced(kind)      after a wholesale replace
      projectPatched(project_id)    after an optimistic next-shoot patch
    """
    collectionReplaced = Signal(str)
    projectPatched = Signal(str)

    def __init__(self, parent: Optional[QObject] = None):
        super().__init__(parent)
        self._collections: Dict[str, List[Dict[str, Any]]] = {k: [] for k in ENTITY_KINDS}

    # ---- reads
    def all(self, kind: str) -> List[Dict[str, Any]]:
        return list(self._collections[kind])

    @property
    def projects(self) -> List[Dict[str, Any]]:
        return self.all("projects")

    @property
    def tasks(self) -> List[Dict[str, Any]]:
        return self.all("tasks")

    @property
    def directors(self) -> List[Dict[str, Any]]:
        return self.all("directors")

    @property
    def creators(self) -> List[Dict[str, Any]]:
        return self.all("creators")

    def get(self, kind: str, entity_id: Any) -> Optional[Dict[str, Any]]:
        for rec in self._collections[kind]:
            if rec.get("id") == entity_id:
                return rec
        return None

    # ---- writes
    def replace(self, kind: str, records: Iterable[Mapping[str, Any]]) -> None:
        if kind not in self._collections:
            raise KeyError(f"unknown entity kind: {kind}")
        self._collections[kind] = [dict(r) for r in records]
        log.debug("store[%s] replaced (%d rows)", kind, len(self._collections[kind]))
        self.collectionReplaced.emit(kind)

    def apply_optimistic(self, project_id: str, fields: Mapping[str, Any]) -> bool:
        illegal = set(fields) - OPTIMISTIC_FIELDS
        if illegal:
            raise ValueError(f"optimistic patch not allowed for: {', '.join(sorted(illegal))}")
        found = False
        rows = []
        for rec in self._collections["projects"]:
            if rec.get("id") == project_id:
                rec = {**rec, **fields}
                found = True
            rows.append(rec)
        if found:
            self._collections["projects"] = rows
            self.projectPatched.emit(project_id)
        return found
