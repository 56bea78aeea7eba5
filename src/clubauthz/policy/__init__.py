"""Pure role-based policy: roles, scopes and decision functions."""

from clubauthz.policy.evaluator import (
    allowed_features,
    can_access_club_settings,
    can_access_feature,
    can_access_global_settings,
    can_export_reports,
    can_generate_reports,
    can_manage_club,
    can_manage_event,
    can_manage_user,
    can_view_club,
    can_view_event,
    can_view_reports,
    can_view_statistics,
    can_view_user,
)
from clubauthz.policy.roles import (
    MANAGEABLE_ROLES,
    TOP_LEVEL_ROLES,
    Role,
    can_act_on,
    manageable_roles,
)
from clubauthz.policy.scope import NO_SCOPE, NoScope, Scope, ScopeRef, as_scope, same_scope


__all__ = [
    "MANAGEABLE_ROLES",
    "NO_SCOPE",
    "TOP_LEVEL_ROLES",
    "NoScope",
    "Role",
    "Scope",
    "ScopeRef",
    "allowed_features",
    "as_scope",
    "can_access_club_settings",
    "can_access_feature",
    "can_access_global_settings",
    "can_act_on",
    "can_export_reports",
    "can_generate_reports",
    "can_manage_club",
    "can_manage_event",
    "can_manage_user",
    "can_view_club",
    "can_view_event",
    "can_view_reports",
    "can_view_statistics",
    "can_view_user",
    "manageable_roles",
    "same_scope",
]
