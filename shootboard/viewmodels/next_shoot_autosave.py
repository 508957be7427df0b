# Rev 0.1.0 — next-shoot autosave (debounced, optimistic)
from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional, Tuple

from PySide6.QtCore import QObject, QTimer, Signal

from shootboard.models.types import SaveState
from shootboard.repositories.gateway import DataGateway
from shootboard.services import field_rules
from shootboard.services.errors import AutosavePersistFailure, InvalidField
from shootboard.services.mutation_service import MutationService

log = logging.getLogger(__name__)

DEBOUNCE_MS = 600
SAVED_REVERT_MS = 1200

_STATE_LABELS = {"saving": "保存中", "saved": "保存済", "error": "エラー", "idle": ""}


def _text(value: Any) -> str:
    return "" if value is None else str(value)


class NextShootAutosave(QObject):
    """
    Draft of (next_shoot_count, next_shoot_date) for the open project.

    Keystrokes only touch the draft and the store's optimistic copy; a single
    debounced update goes to the gateway per burst. Blur persists at once and
    leaves a pending debounce alone (both send the same idempotent update).

    Emits:
      draftChanged(count, date)
      saveStateChanged(state)   idle | saving | saved | error
    """
    draftChanged = Signal(str, str)
    saveStateChanged = Signal(str)

    def __init__(
        self,
        gateway: DataGateway,
        mutations: MutationService,
        notify: Optional[Callable[[str], None]] = None,
        *,
        debounce_ms: int = DEBOUNCE_MS,
        saved_revert_ms: int = SAVED_REVERT_MS,
        parent: Optional[QObject] = None,
    ):
        super().__init__(parent)
        self._gateway = gateway
        self._mutations = mutations
        self._store = mutations.store
        self._notify = notify

        self._project_id: Optional[str] = None
        self._count = ""
        self._date = ""
        self._baseline: Tuple[str, str] = ("", "")
        self._state: SaveState = "idle"

        self._debounce = QTimer(self)
        self._debounce.setSingleShot(True)
        self._debounce.setInterval(debounce_ms)
        self._debounce.timeout.connect(self._on_debounce)

        self._revert = QTimer(self)
        self._revert.setSingleShot(True)
        self._revert.setInterval(saved_revert_ms)
        self._revert.timeout.connect(self._on_revert)

        self._store.collectionReplaced.connect(self._on_collection_replaced)

    # ---- state for display
    @property
    def project_id(self) -> Optional[str]:
        return self._project_id

    @property
    def count(self) -> str:
        return self._count

    @property
    def date(self) -> str:
        return self._date

    @property
    def save_state(self) -> SaveState:
        return self._state

    @property
    def save_state_label(self) -> str:
        return _STATE_LABELS[self._state]

    @property
    def is_missing(self) -> bool:
        return not self._count or not self._date

    @property
    def has_pending(self) -> bool:
        return self._debounce.isActive()

    # ---- commands
    def select_project(self, project_id: Optional[str]) -> None:
        # a persist already sent for the previous project still completes
        self._debounce.stop()
        self._revert.stop()
        self._project_id = project_id
        rec = self._store.get("projects", project_id) if project_id is not None else None
        stored = self._stored_pair(rec)
        self._baseline = stored
        self._set_draft(*stored)
        self._set_state("idle")

    def set_count(self, text: str) -> None:
        self._set_draft(_text(text), self._date)
        self._on_edit()

    def set_date(self, text: str) -> None:
        self._set_draft(self._count, _text(text))
        self._on_edit()

    def blur(self) -> bool:
        """Focus left either field: persist the current draft now."""
        return self.persist()

    def persist(self) -> bool:
        if self._project_id is None:
            return False
        return self._persist(self._project_id, self._fields())

    # ---- internals
    def _fields(self) -> Dict[str, str]:
        return {"next_shoot_count": self._count, "next_shoot_date": self._date}

    @staticmethod
    def _stored_pair(rec: Optional[Dict[str, Any]]) -> Tuple[str, str]:
        if not rec:
            return ("", "")
        return (_text(rec.get("next_shoot_count")), _text(rec.get("next_shoot_date")))

    def _set_draft(self, count: str, date: str) -> None:
        if (count, date) == (self._count, self._date):
            return
        self._count, self._date = count, date
        self.draftChanged.emit(count, date)

    def _set_state(self, state: SaveState) -> None:
        if state == self._state:
            return
        self._state = state
        self.saveStateChanged.emit(state)

    def _on_edit(self) -> None:
        pid = self._project_id
        if pid is None or self._store.get("projects", pid) is None:
            return
        self._debounce.stop()
        self._store.apply_optimistic(pid, self._fields())
        if (self._count, self._date) == self._baseline:
            return
        self._debounce.start()

    def _on_debounce(self) -> None:
        if self._project_id is not None:
            self._persist(self._project_id, self._fields())

    def _on_revert(self) -> None:
        if self._state == "saved":
            self._set_state("idle")

    def _send(self, project_id: str, fields: Dict[str, str]) -> None:
        try:
            field_rules.validate("projects", "update", fields)
        except InvalidField as e:
            raise AutosavePersistFailure(detail=e.detail) from e
        res = self._gateway.update("projects", project_id, fields)
        if not res.ok:
            raise AutosavePersistFailure(detail=res.error)

    def _persist(self, project_id: str, fields: Dict[str, str]) -> bool:
        if project_id == self._project_id:
            self._revert.stop()
            self._set_state("saving")
        self._store.apply_optimistic(project_id, fields)
        try:
            self._send(project_id, fields)
        except AutosavePersistFailure as e:
            # optimistic copy stays; the next edit or blur re-arms persistence
            log.warning("next-shoot persist for %s failed: %s", project_id, e.detail)
            if project_id == self._project_id:
                self._set_state("error")
            if self._notify is not None:
                self._notify(e.message)
            return False

        self._mutations.refresh("projects")
        if project_id == self._project_id:
            self._set_state("saved")
            self._revert.start()
        return True

    def _on_collection_replaced(self, kind: str) -> None:
        if kind != "projects" or self._project_id is None:
            return
        rec = self._store.get("projects", self._project_id)
        if rec is None:
            return
        clean = (self._count, self._date) == self._baseline
        self._baseline = self._stored_pair(rec)
        if clean and not self._debounce.isActive():
            self._set_draft(*self._baseline)
