# Rev 0.1.0

"""Pytest fixtures for shootboard (Rev 0.1.0)"""
from __future__ import annotations
import os
import tempfile

# keep settings/logs/db out of the real XDG dirs; must run before shootboard imports
_XDG = tempfile.mkdtemp(prefix="shootboard-tests-")
for _var in ("XDG_CONFIG_HOME", "XDG_STATE_HOME", "XDG_DATA_HOME"):
    os.environ[_var] = os.path.join(_XDG, _var.lower())
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from pathlib import Path
from typing import Any, Dict, List, Mapping, Tuple

import pytest
from PySide6.QtCore import QCoreApplication

from shootboard.app_context import AppContext
from shootboard.repositories.db import Database
from shootboard.repositories.gateway import GatewayResult
from shootboard.repositories.sqlite_gateway import SQLiteGateway

FAST_SETTINGS: Dict[str, Any] = {
    "timing": {
        "autosave_debounce_ms": 80,
        "saved_revert_ms": 400,
        "notification_ms": 1000,
    },
    "database": {"path": None},
}


class RecordingGateway:
    """Wraps a real gateway, records every call and can be told to fail (kind, op) pairs."""

    def __init__(self, inner):
        self.inner = inner
        self.calls: List[Tuple[Any, ...]] = []
        self.fail: set[Tuple[str, str]] = set()

    def _call(self, op: str, kind: str, *args: Any) -> GatewayResult:
        self.calls.append((op, kind) + tuple(dict(a) if isinstance(a, Mapping) else a for a in args))
        if (kind, op) in self.fail:
            return GatewayResult.failed(f"{kind} {op} refused")
        return getattr(self.inner, op)(kind, *args)

    def list(self, kind):
        return self._call("list", kind)

    def insert(self, kind, record):
        return self._call("insert", kind, record)

    def update(self, kind, entity_id, fields):
        return self._call("update", kind, entity_id, fields)

    def delete(self, kind, entity_id):
        return self._call("delete", kind, entity_id)

    def writes(self, op: str | None = None) -> List[Tuple[Any, ...]]:
        return [c for c in self.calls if c[0] != "list" and (op is None or c[0] == op)]


@pytest.fixture(scope="session", autouse=True)
def qt_app():
    app = QCoreApplication.instance() or QCoreApplication([])
    yield app


@pytest.fixture()
def db(tmp_path: Path):
    database = Database(path=str(tmp_path / "test.db"))
    try:
        database.run_migrations()
        yield database
    finally:
        database.close()


@pytest.fixture()
def sqlite_gateway(db) -> SQLiteGateway:
    return SQLiteGateway(db)


@pytest.fixture()
def seeded(sqlite_gateway) -> Dict[str, Dict[str, Any]]:
    """Aoi directs, Ken creates, one project ("Cafe Aoi") and one OP_EXEC task."""
    aoi = sqlite_gateway.insert("directors", {"name": "Aoi", "email": "aoi@example.com", "note": ""}).data[0]
    mio = sqlite_gateway.insert("directors", {"name": "Mio", "email": "", "note": ""}).data[0]
    ken = sqlite_gateway.insert("creators", {"name": "Ken", "email": "", "note": ""}).data[0]
    project = sqlite_gateway.insert("projects", {
        "client": "Cafe Aoi", "director": "Aoi", "assigned_creator": "Ken",
        "next_shoot_count": "", "next_shoot_date": "",
    }).data[0]
    task = sqlite_gateway.insert("tasks", {
        "project_id": project["id"], "category": "OP_EXEC", "index_label": "1",
        "title": "店舗紹介", "status": "未編集", "due_date": "", "assignee": "Aoi",
    }).data[0]
    return {"aoi": aoi, "mio": mio, "ken": ken, "project": project, "task": task}


@pytest.fixture()
def gateway(sqlite_gateway, seeded) -> RecordingGateway:
    return RecordingGateway(sqlite_gateway)


@pytest.fixture()
def ctx(gateway) -> AppContext:
    context = AppContext.create(gateway=gateway, settings=FAST_SETTINGS)
    assert context.start()
    gateway.calls.clear()
    return context
