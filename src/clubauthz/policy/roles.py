"""Role hierarchy model.

Roles have a fixed, total order of seniority, but management rights are not
derived from that order numerically. Each role carries an explicit set of
roles it may administer, so that e.g. a ClubOfficer can manage TeamLeaders
and Members but not ViceChairmen.
"""

from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType
from typing import Any


class Role(str, Enum):
    """Principal roles, declared from most to least senior."""

    SYSTEM_ADMIN = "SystemAdmin"
    ADMIN = "Admin"
    CLUB_PRESIDENT = "ClubPresident"
    CHAIRMAN = "Chairman"
    VICE_CHAIRMAN = "ViceChairman"
    CLUB_OFFICER = "ClubOfficer"
    TEAM_LEADER = "TeamLeader"
    MEMBER = "Member"

    @classmethod
    def parse(cls, value: Any) -> "Role | None":
        """Resolve a role or its string value; anything else yields None.

        Matching is case-sensitive. Never raises.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value)
            except ValueError:
                return None
        return None

    @property
    def rank(self) -> int:
        """Seniority rank; higher is more senior."""
        return len(_SENIORITY) - _SENIORITY.index(self)

    def outranks(self, other: "Role") -> bool:
        return self.rank > other.rank


_SENIORITY: tuple[Role, ...] = tuple(Role)

# Roles that bypass same-scope checks.
TOP_LEVEL_ROLES: frozenset[Role] = frozenset({Role.SYSTEM_ADMIN, Role.ADMIN})

# Club leadership tier: may see global (unscoped) reports and generate reports.
SENIOR_CLUB_ROLES: frozenset[Role] = frozenset(
    {Role.CLUB_PRESIDENT, Role.CHAIRMAN, Role.VICE_CHAIRMAN}
)


def _all_except(*excluded: Role) -> frozenset[Role]:
    return frozenset(role for role in Role if role not in excluded)


MANAGEABLE_ROLES: Mapping[Role, frozenset[Role]] = MappingProxyType(
    {
        Role.SYSTEM_ADMIN: _all_except(),
        Role.ADMIN: _all_except(Role.SYSTEM_ADMIN),
        Role.CLUB_PRESIDENT: _all_except(Role.SYSTEM_ADMIN, Role.ADMIN),
        Role.CHAIRMAN: _all_except(Role.SYSTEM_ADMIN, Role.ADMIN, Role.CLUB_PRESIDENT),
        Role.VICE_CHAIRMAN: _all_except(
            Role.SYSTEM_ADMIN, Role.ADMIN, Role.CLUB_PRESIDENT, Role.CHAIRMAN
        ),
        Role.CLUB_OFFICER: frozenset({Role.TEAM_LEADER, Role.MEMBER}),
        Role.TEAM_LEADER: frozenset({Role.MEMBER}),
        Role.MEMBER: frozenset(),
    }
)


def manageable_roles(role: Role | str | None) -> frozenset[Role]:
    """Return the roles the given role may administer (empty if unknown)."""
    parsed = Role.parse(role)
    if parsed is None:
        return frozenset()
    return MANAGEABLE_ROLES[parsed]


def can_act_on(actor: Role | str | None, target: Role | str | None) -> bool:
    """Check whether ``actor`` may administratively act on ``target``.

    This is a dominance-table lookup only; scope is not considered.
    """
    target_role = Role.parse(target)
    if target_role is None:
        return False
    return target_role in manageable_roles(actor)
