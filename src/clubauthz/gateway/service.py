"""Authorization gateway.

Resolves a principal id and an action name into a policy decision. The
only I/O is one directory read per call; there is no caching, retrying or
timeout at this layer.
"""

from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Any

import structlog

from clubauthz.config import Settings, get_settings
from clubauthz.core.constants import (
    ACTION_GENERATE_REPORTS,
    ACTION_MANAGE_CLUBS,
    ACTION_MANAGE_EVENTS,
    ACTION_MANAGE_USERS,
    ACTION_VIEW_DASHBOARD,
    ACTION_VIEW_REPORTS,
    FEATURE_CLUB_MANAGEMENT,
    FEATURE_DASHBOARD,
    FEATURE_EVENT_MANAGEMENT,
    FEATURE_REPORT_VIEW,
    FEATURE_USER_MANAGEMENT,
)
from clubauthz.gateway.audit import AuditSink, AuthorizationRecord
from clubauthz.gateway.directory import Principal, UserDirectory
from clubauthz.policy.evaluator import can_access_feature, can_generate_reports
from clubauthz.policy.roles import Role


logger = structlog.get_logger()

RoleCheck = Callable[[Role | str], bool]


def _feature(feature: str) -> RoleCheck:
    return lambda role: can_access_feature(role, feature)


ACTION_POLICIES: Mapping[str, RoleCheck] = MappingProxyType(
    {
        ACTION_VIEW_DASHBOARD: _feature(FEATURE_DASHBOARD),
        ACTION_MANAGE_USERS: _feature(FEATURE_USER_MANAGEMENT),
        ACTION_MANAGE_CLUBS: _feature(FEATURE_CLUB_MANAGEMENT),
        ACTION_MANAGE_EVENTS: _feature(FEATURE_EVENT_MANAGEMENT),
        ACTION_VIEW_REPORTS: _feature(FEATURE_REPORT_VIEW),
        ACTION_GENERATE_REPORTS: can_generate_reports,
    }
)

# Internal reason codes, recorded for audit only.
REASON_GRANTED = "granted"
REASON_POLICY_DENIED = "policy_denied"
REASON_UNKNOWN_ACTION = "unknown_action"
REASON_PRINCIPAL_UNAVAILABLE = "principal_unavailable"
REASON_PRINCIPAL_INACTIVE = "principal_inactive"


class AuthorizationGateway:
    """Async entry point that checks actions for a principal id.

    Fails closed: a missing principal, an inactive principal and a failing
    directory all produce the same ``False``.
    """

    def __init__(
        self,
        directory: UserDirectory,
        audit_sink: AuditSink | None = None,
        settings: Settings | None = None,
    ) -> None:
        self.directory = directory
        self.audit_sink = audit_sink
        self.settings = settings or get_settings()

    async def _load_active_principal(
        self, principal_id: int
    ) -> tuple[Principal | None, str]:
        try:
            principal = await self.directory.find_by_id(principal_id)
        except Exception:
            # Lookup errors must look exactly like "not found" to the caller.
            logger.warning(
                "directory_lookup_failed",
                principal_id=principal_id,
                exc_info=True,
            )
            return None, REASON_PRINCIPAL_UNAVAILABLE

        if principal is None:
            return None, REASON_PRINCIPAL_UNAVAILABLE
        if not principal.is_active:
            return None, REASON_PRINCIPAL_INACTIVE
        return principal, REASON_GRANTED

    async def is_authorized(
        self,
        principal_id: int,
        action_name: str,
        resource: Any = None,
    ) -> bool:
        """Check whether a principal may perform an action.

        Args:
            principal_id: The principal's id in the user directory
            action_name: One of the mapped action names (case-sensitive)
            resource: Reserved for resource-aware actions; no current action
                reads it, but it is passed through to the audit record

        Returns:
            True if the action is permitted, False otherwise
        """
        policy = ACTION_POLICIES.get(action_name) if isinstance(action_name, str) else None
        principal, reason = await self._load_active_principal(principal_id)

        if principal is None:
            allowed = False
        elif policy is None:
            allowed, reason = False, REASON_UNKNOWN_ACTION
        else:
            allowed = policy(principal.role)
            reason = REASON_GRANTED if allowed else REASON_POLICY_DENIED

        logger.debug(
            "authorization_checked",
            principal_id=principal_id,
            action=action_name,
            allowed=allowed,
            reason=reason,
        )
        await self._audit(
            principal_id=principal_id,
            action=action_name,
            allowed=allowed,
            reason=reason,
            role=_role_name(principal),
            resource=resource,
        )
        return allowed

    async def allowed_actions(self, principal_id: int) -> frozenset[str]:
        """Return every mapped action the principal may currently perform."""
        principal, _ = await self._load_active_principal(principal_id)
        if principal is None:
            return frozenset()
        return frozenset(
            action for action, policy in ACTION_POLICIES.items() if policy(principal.role)
        )

    async def _audit(self, **fields: Any) -> None:
        if self.audit_sink is None or not self.settings.audit_decisions:
            return
        if fields["allowed"] and not self.settings.audit_allowed:
            return
        try:
            await self.audit_sink.record(AuthorizationRecord(**fields))
        except Exception:
            logger.exception(
                "audit_record_failed",
                principal_id=repr(fields["principal_id"]),
                action=repr(fields["action"]),
            )


def _role_name(principal: Principal | None) -> str | None:
    if principal is None:
        return None
    role = principal.role
    return role.value if isinstance(role, Role) else str(role)
