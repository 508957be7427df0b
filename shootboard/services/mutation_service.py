# Rev 0.1.0

"""Mutation engine (Rev 0.1.0)
Write through the gateway, then refetch the whole collection. The store is
never patched from a write result; on failure it keeps its last-known-good copy
and a single notification is raised.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Optional

from shootboard.models.entity_store import EntityStore
from shootboard.models.types import ENTITY_KINDS, PERSON_KINDS
from shootboard.repositories.gateway import DataGateway, GatewayResult
from shootboard.services import field_rules
from shootboard.services.errors import (
    NotFound,
    ReferentialConflict,
    ShootboardError,
    WriteFailure,
)
from shootboard.services.referential_guard import can_delete

log = logging.getLogger(__name__)


@dataclass
class MutationResult:
    ok: bool
    code: str = "applied"
    message: Optional[str] = None
    blocking: List[Dict[str, Any]] = field(default_factory=list)

    @classmethod
    def from_error(cls, err: ShootboardError) -> "MutationResult":
        return cls(ok=False, code=err.code, message=err.message, blocking=list(getattr(err, "blocking", [])))


class MutationService:
    def __init__(self, gateway: DataGateway, store: EntityStore, notify: Optional[Callable[[str], None]] = None):
        self._gateway = gateway
        self._store = store
        self._notify = notify

    @property
    def store(self) -> EntityStore:
        return self._store

    # ---- loading
    def load_all(self) -> bool:
        """Session start: fill every collection. Returns False if any list call failed."""
        ok = True
        for kind in ENTITY_KINDS:
            ok = self.refresh(kind) and ok
        return ok

    def refresh(self, kind: str) -> bool:
        res = self._gateway.list(kind)
        if not res.ok:
            log.warning("refresh(%s) failed; keeping last snapshot: %s", kind, res.error)
            return False
        self._store.replace(kind, res.data)
        return True

    # ---- commands
    def insert(self, kind: str, record: Mapping[str, Any]) -> MutationResult:
        return self._run(kind, "insert", lambda: self._insert(kind, record))

    def update(self, kind: str, entity_id: Any, fields: Mapping[str, Any]) -> MutationResult:
        return self._run(kind, "update", lambda: self._update(kind, entity_id, fields))

    def delete(self, kind: str, entity_id: Any) -> MutationResult:
        return self._run(kind, "delete", lambda: self._delete(kind, entity_id))

    def add_task(self, project: Optional[Mapping[str, Any]], category: str, title: str, index_label: str = "") -> MutationResult:
        """Insert a task on `project`'s board with category defaults and the director as assignee."""
        if project is None:
            return self._fail(NotFound("tasks", "insert", detail="no open project"))
        return self.insert("tasks", field_rules.new_task_record(project, category, title, index_label))

    # ---- internals
    def _insert(self, kind: str, record: Mapping[str, Any]) -> None:
        if kind == "tasks":
            record = field_rules.with_task_defaults(record)
        field_rules.validate(kind, "insert", record)
        self._check(kind, "insert", self._gateway.insert(kind, dict(record)))

    def _update(self, kind: str, entity_id: Any, fields: Mapping[str, Any]) -> None:
        existing = self._store.get(kind, entity_id)
        if existing is None:
            raise NotFound(kind, "update", detail=f"{kind}/{entity_id} not loaded")
        # only forward what actually changed
        changed = {k: v for k, v in fields.items() if existing.get(k) != v}
        field_rules.validate(kind, "update", changed, existing)
        if not changed:
            log.debug("update(%s, %s): nothing changed", kind, entity_id)
            return
        self._check(kind, "update", self._gateway.update(kind, entity_id, changed))

    def _delete(self, kind: str, entity_id: Any) -> None:
        if kind in PERSON_KINDS:
            person = self._store.get(kind, entity_id)
            if person is None:
                raise NotFound(kind, "delete", detail=f"{kind}/{entity_id} not loaded")
            guard = can_delete(person, kind, self._store.projects)
            if not guard.ok:
                raise ReferentialConflict(guard.message or "", guard.blocking)
        self._check(kind, "delete", self._gateway.delete(kind, entity_id))

    def _check(self, kind: str, operation: str, res: GatewayResult) -> None:
        if not res.ok:
            raise WriteFailure(kind, operation, detail=res.error)
        self.refresh(kind)

    def _run(self, kind: str, operation: str, fn: Callable[[], None]) -> MutationResult:
        if kind not in ENTITY_KINDS:
            raise KeyError(f"unknown entity kind: {kind}")
        try:
            fn()
        except ShootboardError as e:
            return self._fail(e)
        return MutationResult(ok=True)

    def _fail(self, err: ShootboardError) -> MutationResult:
        log.warning("%s (%s)%s", err.message, err.code, f": {err.detail}" if err.detail else "")
        if self._notify is not None:
            self._notify(err.message)
        return MutationResult.from_error(err)
