# Rev 0.1.0
# shootboard – SQLiteGateway (Rev 0.1.0, schema 0001_init)
from __future__ import annotations
import logging
import sqlite3
import uuid
from typing import Any, Dict, List, Mapping

from shootboard.models.types import ENTITY_COLUMNS
from shootboard.repositories.gateway import GatewayResult

log = logging.getLogger(__name__)


class SQLiteGateway:
    """
    Local stand-in for the remote relational store.
    Table names equal entity kinds; rows come back in insertion order.
    """

    def __init__(self, db_or_conn):
        self._db = db_or_conn

    # ---------- public API ----------

    def list(self, kind: str) -> GatewayResult:
        if kind not in ENTITY_COLUMNS:
            return GatewayResult.failed(f"unknown entity kind: {kind}")
        cols = ", ".join(("id",) + ENTITY_COLUMNS[kind])
        try:
            return GatewayResult(data=self._fetch_all(f"SELECT {cols} FROM {kind} ORDER BY rowid;"))
        except sqlite3.Error as e:
            log.warning("list(%s) failed: %s", kind, e)
            return GatewayResult.failed(str(e))

    def insert(self, kind: str, record: Mapping[str, Any]) -> GatewayResult:
        bad = self._unknown_fields(kind, record)
        if bad:
            return GatewayResult.failed(bad)
        row = {k: ("" if v is None else v) for k, v in record.items() if k != "id"}
        row["id"] = uuid.uuid4().hex
        names = ", ".join(row)
        marks = ", ".join("?" for _ in row)
        try:
            self._conn().execute(f"INSERT INTO {kind} ({names}) VALUES ({marks});", tuple(row.values()))
        except sqlite3.Error as e:
            log.warning("insert(%s) failed: %s", kind, e)
            return GatewayResult.failed(str(e))
        return GatewayResult(data=[row])

    def update(self, kind: str, entity_id: str, fields: Mapping[str, Any]) -> GatewayResult:
        bad = self._unknown_fields(kind, fields)
        if bad:
            return GatewayResult.failed(bad)
        changes = {k: ("" if v is None else v) for k, v in fields.items() if k != "id"}
        if not changes:
            return GatewayResult()
        assignments = ", ".join(f"{k} = ?" for k in changes)
        try:
            self._conn().execute(
                f"UPDATE {kind} SET {assignments} WHERE id = ?;",
                tuple(changes.values()) + (entity_id,),
            )
        except sqlite3.Error as e:
            log.warning("update(%s, %s) failed: %s", kind, entity_id, e)
            return GatewayResult.failed(str(e))
        return GatewayResult()

    def delete(self, kind: str, entity_id: str) -> GatewayResult:
        if kind not in ENTITY_COLUMNS:
            return GatewayResult.failed(f"unknown entity kind: {kind}")
        try:
            self._conn().execute(f"DELETE FROM {kind} WHERE id = ?;", (entity_id,))
        except sqlite3.Error as e:
            log.warning("delete(%s, %s) failed: %s", kind, entity_id, e)
            return GatewayResult.failed(str(e))
        return GatewayResult()

    # ---------- internals ----------

    @staticmethod
    def _unknown_fields(kind: str, fields: Mapping[str, Any]) -> str | None:
        if kind not in ENTITY_COLUMNS:
            return f"unknown entity kind: {kind}"
        unknown = sorted(set(fields) - set(ENTITY_COLUMNS[kind]) - {"id"})
        if unknown:
            return f"unknown {kind} field(s): {', '.join(unknown)}"
        return None

    def _conn(self) -> sqlite3.Connection:
        # You can pass a raw sqlite3.Connection directly
        if isinstance(self._db, sqlite3.Connection):
            return self._db
        # Or a wrapper with .conn (repositories/db.py)
        if hasattr(self._db, "conn") and isinstance(self._db.conn, sqlite3.Connection):
            return self._db.conn
        raise RuntimeError("SQLiteGateway: could not obtain sqlite3.Connection from db wrapper (.conn).")

    def _fetch_all(self, sql: str, params: tuple = ()) -> List[Dict[str, Any]]:
        cur = self._conn().execute(sql, params)
        cols = [d[0] for d in cur.description]
        return [{cols[i]: row[i] for i in range(len(cols))} for row in cur.fetchall()]
