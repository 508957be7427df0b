# Rev 0.1.0
"""Data access contract consumed by the sync engine.

Every call returns a GatewayResult instead of raising, so callers can decide
how a failure is surfaced. Implementations must accept partial field sets on
update and assign `id` on insert.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Protocol

from shootboard.models.types import EntityKind


@dataclass
class GatewayResult:
    data: List[Dict[str, Any]] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def failed(cls, error: str) -> "GatewayResult":
        return cls(data=[], error=error)


class DataGateway(Protocol):
    def list(self, kind: EntityKind) -> GatewayResult: ...

    def insert(self, kind: EntityKind, record: Mapping[str, Any]) -> GatewayResult: ...

    def update(self, kind: EntityKind, entity_id: str, fields: Mapping[str, Any]) -> GatewayResult: ...

    def delete(self, kind: EntityKind, entity_id: str) -> GatewayResult: ...
