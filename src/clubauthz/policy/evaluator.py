"""Policy evaluator.

Stateless decision functions over roles and scopes. Every function returns
a plain bool and treats an unrecognised role as a deny; none of them raise.

Feature access is expressed with two table shapes on purpose. The top-level
and senior club roles are granted "every known feature except ...", the
junior roles "exactly ...". A feature added to the vocabulary is therefore
picked up by the senior tiers and withheld from the junior ones.
"""

from collections.abc import Mapping
from types import MappingProxyType

from clubauthz.core.constants import (
    FEATURE_APPROVE_MEMBER,
    FEATURE_CLUB_MANAGEMENT,
    FEATURE_EVENT_MANAGEMENT,
    FEATURE_EVENT_VIEW,
    FEATURE_MEMBER_VIEW,
    FEATURE_PROFILE_EDIT,
    FEATURE_REPORT_VIEW,
    FEATURE_SYSTEM_CONFIG,
    FEATURE_USER_MANAGEMENT,
    KNOWN_FEATURES,
)
from clubauthz.policy.roles import (
    SENIOR_CLUB_ROLES,
    TOP_LEVEL_ROLES,
    Role,
    can_act_on,
)
from clubauthz.policy.scope import NoScope, ScopeRef, as_scope, same_scope


FEATURE_DENYLIST: Mapping[Role, frozenset[str]] = MappingProxyType(
    {
        Role.SYSTEM_ADMIN: frozenset(),
        Role.ADMIN: frozenset(),
        Role.CLUB_PRESIDENT: frozenset({FEATURE_SYSTEM_CONFIG, FEATURE_USER_MANAGEMENT}),
        Role.CHAIRMAN: frozenset({FEATURE_SYSTEM_CONFIG, FEATURE_USER_MANAGEMENT}),
        Role.VICE_CHAIRMAN: frozenset(
            {FEATURE_SYSTEM_CONFIG, FEATURE_USER_MANAGEMENT, FEATURE_APPROVE_MEMBER}
        ),
    }
)

FEATURE_ALLOWLIST: Mapping[Role, frozenset[str]] = MappingProxyType(
    {
        Role.CLUB_OFFICER: frozenset(
            {
                FEATURE_EVENT_MANAGEMENT,
                FEATURE_MEMBER_VIEW,
                FEATURE_REPORT_VIEW,
                FEATURE_CLUB_MANAGEMENT,
            }
        ),
        Role.TEAM_LEADER: frozenset(
            {FEATURE_EVENT_MANAGEMENT, FEATURE_MEMBER_VIEW, FEATURE_REPORT_VIEW}
        ),
        Role.MEMBER: frozenset({FEATURE_EVENT_VIEW, FEATURE_PROFILE_EDIT}),
    }
)

# Roles allowed to act on their own club, per resource kind.
CLUB_MANAGERS: frozenset[Role] = SENIOR_CLUB_ROLES | {Role.CLUB_OFFICER}
EVENT_MANAGERS: frozenset[Role] = CLUB_MANAGERS | {Role.TEAM_LEADER}
SCOPED_REPORT_VIEWERS: frozenset[Role] = frozenset({Role.CLUB_OFFICER, Role.TEAM_LEADER})
REPORT_GENERATORS: frozenset[Role] = TOP_LEVEL_ROLES | SENIOR_CLUB_ROLES
USER_VIEWERS: frozenset[Role] = TOP_LEVEL_ROLES | SENIOR_CLUB_ROLES


def allowed_features(role: Role | str | None) -> frozenset[str]:
    """Resolve the set of known features a role may access."""
    parsed = Role.parse(role)
    if parsed is None:
        return frozenset()
    if parsed in FEATURE_DENYLIST:
        return KNOWN_FEATURES - FEATURE_DENYLIST[parsed]
    return FEATURE_ALLOWLIST.get(parsed, frozenset()) & KNOWN_FEATURES


def can_access_feature(role: Role | str | None, feature: str) -> bool:
    """Check whether a role may use a feature. Unknown keys are denied."""
    return isinstance(feature, str) and feature in allowed_features(role)


def _scoped(
    role: Role | str | None,
    scoped_roles: frozenset[Role],
    caller_scope: ScopeRef | int | None,
    target_scope: ScopeRef | int | None,
) -> bool:
    # Top-level roles bypass scope; listed roles need the same club.
    parsed = Role.parse(role)
    if parsed is None:
        return False
    if parsed in TOP_LEVEL_ROLES:
        return True
    return parsed in scoped_roles and same_scope(caller_scope, target_scope)


def can_manage_club(
    role: Role | str | None,
    caller_scope: ScopeRef | int | None,
    target_club_id: ScopeRef | int | None,
) -> bool:
    """Check whether a role may manage a club.

    SystemAdmin and Admin always may; President, Chairman, ViceChairman and
    ClubOfficer only their own club. TeamLeader and Member never. An absent
    caller scope never matches, even against an absent club id.
    """
    return _scoped(role, CLUB_MANAGERS, caller_scope, target_club_id)


def can_manage_user(
    role: Role | str | None,
    target_role: Role | str | None,
    caller_scope: ScopeRef | int | None,
    target_scope: ScopeRef | int | None,
) -> bool:
    """Check whether a principal may manage another principal.

    The caller must dominate the target in the role table and, below the
    top-level roles, both must belong to the same club.
    """
    parsed = Role.parse(role)
    if parsed is None or not can_act_on(parsed, target_role):
        return False
    if parsed in TOP_LEVEL_ROLES:
        return True
    return same_scope(caller_scope, target_scope)


def can_manage_event(
    role: Role | str | None,
    caller_scope: ScopeRef | int | None,
    event_scope: ScopeRef | int | None,
) -> bool:
    """Two absent scopes do not match; only top-level roles act on unscoped events."""
    return _scoped(role, EVENT_MANAGERS, caller_scope, event_scope)


def can_view_reports(
    role: Role | str | None,
    caller_scope: ScopeRef | int | None,
    report_scope: ScopeRef | int | None,
) -> bool:
    """Check whether a role may view a report.

    A report without a scope is a global report. Only the top-level and
    senior club roles may see global reports; ClubOfficer and TeamLeader
    need an exact club match.
    """
    parsed = Role.parse(role)
    if parsed is None:
        return False
    if parsed in TOP_LEVEL_ROLES:
        return True
    if parsed in SENIOR_CLUB_ROLES:
        if isinstance(as_scope(report_scope), NoScope):
            return True
        return same_scope(caller_scope, report_scope)
    if parsed in SCOPED_REPORT_VIEWERS:
        return same_scope(caller_scope, report_scope)
    return False


def can_generate_reports(role: Role | str | None) -> bool:
    return Role.parse(role) in REPORT_GENERATORS


def can_view_event(role: Role | str | None) -> bool:
    """Any recognised role may view events."""
    return Role.parse(role) is not None


def can_view_club(
    role: Role | str | None,
    caller_scope: ScopeRef | int | None,
    club_scope: ScopeRef | int | None,
) -> bool:
    return _scoped(role, frozenset(Role), caller_scope, club_scope)


def can_view_user(role: Role | str | None) -> bool:
    return Role.parse(role) in USER_VIEWERS


def can_export_reports(role: Role | str | None) -> bool:
    return can_generate_reports(role)


def can_view_statistics(role: Role | str | None) -> bool:
    return can_generate_reports(role)


def can_access_club_settings(
    role: Role | str | None,
    caller_scope: ScopeRef | int | None,
    club_scope: ScopeRef | int | None,
) -> bool:
    """Senior club roles reach their own club's settings; top-level roles any."""
    return _scoped(role, SENIOR_CLUB_ROLES, caller_scope, club_scope)


def can_access_global_settings(role: Role | str | None) -> bool:
    return can_access_feature(role, FEATURE_SYSTEM_CONFIG)
