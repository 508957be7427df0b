# Rev 0.1.0
"""Failure taxonomy surfaced by the mutation and autosave boundaries.

Each error carries the user-facing message shown in the notification bar.
"""
from __future__ import annotations
from typing import Any, Dict, List, Optional


# (kind, operation) -> message shown to the user
WRITE_FAILURE_MESSAGES: Dict[tuple[str, str], str] = {
    ("tasks", "insert"): "タスク追加に失敗しました",
    ("tasks", "update"): "タスクの更新に失敗しました",
    ("tasks", "delete"): "タスクの削除に失敗しました",
    ("projects", "insert"): "案件保存に失敗しました",
    ("projects", "update"): "案件保存に失敗しました",
    ("projects", "delete"): "案件の削除に失敗しました",
    ("directors", "insert"): "メンバー保存に失敗しました",
    ("directors", "update"): "メンバー保存に失敗しました",
    ("directors", "delete"): "ディレクター削除に失敗しました",
    ("creators", "insert"): "メンバー保存に失敗しました",
    ("creators", "update"): "メンバー保存に失敗しました",
    ("creators", "delete"): "クリエイター削除に失敗しました",
}

AUTOSAVE_FAILURE_MESSAGE = "次回撮影情報の保存に失敗しました（projects側のカラムを確認してください）"
BLANK_TITLE_MESSAGE = "タイトルを入力してください"


class ShootboardError(Exception):
    code = "error"

    def __init__(self, message: str, *, detail: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.detail = detail


class WriteFailure(ShootboardError):
    """A gateway insert/update/delete came back with an error."""
    code = "write_failed"

    def __init__(self, kind: str, operation: str, *, detail: Optional[str] = None, message: Optional[str] = None):
        if message is None:
            message = WRITE_FAILURE_MESSAGES.get((kind, operation), f"{kind} {operation} failed")
        super().__init__(message, detail=detail)
        self.kind = kind
        self.operation = operation


class InvalidField(WriteFailure):
    """Rejected before reaching the gateway."""
    code = "invalid"


class NotFound(WriteFailure):
    """The target record is not in the store."""
    code = "not_found"


class AutosavePersistFailure(WriteFailure):
    code = "autosave_failed"

    def __init__(self, *, detail: Optional[str] = None):
        super().__init__("projects", "update", detail=detail, message=AUTOSAVE_FAILURE_MESSAGE)


class ReferentialConflict(ShootboardError):
    """Delete refused locally: projects still reference the person by name."""
    code = "conflict"

    def __init__(self, message: str, blocking: List[Dict[str, Any]]):
        super().__init__(message)
        self.blocking = blocking
