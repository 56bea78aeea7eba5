"""Authorization gateway and the collaborator contracts it consumes."""

from clubauthz.gateway.audit import (
    AuditSink,
    AuthorizationRecord,
    NullAuditSink,
    StructlogAuditSink,
)
from clubauthz.gateway.decorators import require_action
from clubauthz.gateway.directory import InMemoryUserDirectory, Principal, UserDirectory
from clubauthz.gateway.service import ACTION_POLICIES, AuthorizationGateway


__all__ = [
    "ACTION_POLICIES",
    "AuditSink",
    "AuthorizationGateway",
    "AuthorizationRecord",
    "InMemoryUserDirectory",
    "NullAuditSink",
    "Principal",
    "StructlogAuditSink",
    "UserDirectory",
    "require_action",
]
