"""Audit sink contract for authorization decisions.

The gateway hands every recorded decision to an ``AuditSink``. Storage and
retention belong to the sink; the engine only emits records.
"""

from datetime import datetime, timezone
from typing import Any, Protocol, runtime_checkable

import structlog
from pydantic import BaseModel, ConfigDict, Field


log = structlog.get_logger()


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class AuthorizationRecord(BaseModel):
    """A single gateway decision.

    Attributes:
        principal_id: The id the caller asked about
        action: The requested action name
        allowed: The decision returned to the caller
        reason: Internal reason code, never returned to the caller
        role: The principal's role, when it was resolved
        resource: The reserved resource argument, if one was passed
        occurred_at: When the decision was taken
    """

    model_config = ConfigDict(frozen=True)

    principal_id: Any
    action: Any
    allowed: bool
    reason: str
    role: str | None = None
    resource: Any = None
    occurred_at: datetime = Field(default_factory=_utcnow)


@runtime_checkable
class AuditSink(Protocol):
    async def record(self, entry: AuthorizationRecord) -> None: ...


class StructlogAuditSink:
    """Emit each record as a structured log event."""

    def __init__(self, event: str = "authorization_decision") -> None:
        self.event = event

    async def record(self, entry: AuthorizationRecord) -> None:
        log.info(
            self.event,
            principal_id=entry.principal_id,
            action=entry.action,
            allowed=entry.allowed,
            reason=entry.reason,
            role=entry.role,
            occurred_at=entry.occurred_at.isoformat(),
        )


class NullAuditSink:
    """Discard all records."""

    async def record(self, entry: AuthorizationRecord) -> None:
        return None
