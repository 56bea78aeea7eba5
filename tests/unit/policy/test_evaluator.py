"""Unit tests for the policy evaluator.

These tests verify the decision tables including:
- Feature access (denylist and allowlist tiers)
- Club, user and event management with scope gating
- Report visibility and generation
- Default-deny for unknown roles
"""

import pytest

from clubauthz.core.constants import KNOWN_FEATURES
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
from clubauthz.policy.roles import TOP_LEVEL_ROLES, Role
from clubauthz.policy.scope import NO_SCOPE, Scope


pytestmark = pytest.mark.unit

NON_TOP_LEVEL = [role for role in Role if role not in TOP_LEVEL_ROLES]
SCOPED_JUNIORS = [Role.CLUB_OFFICER, Role.TEAM_LEADER]
UNKNOWN_ROLES = [None, "Overlord", "admin", 7]


class TestFeatureAccess:
    """Tests for can_access_feature."""

    @pytest.mark.parametrize("role", list(TOP_LEVEL_ROLES))
    def test_top_level_roles_get_every_feature(self, role):
        assert allowed_features(role) == KNOWN_FEATURES

    @pytest.mark.parametrize("role", NON_TOP_LEVEL)
    def test_system_config_is_top_level_only(self, role):
        assert not can_access_feature(role, "SystemConfig")

    @pytest.mark.parametrize("role", NON_TOP_LEVEL)
    def test_user_management_is_top_level_only(self, role):
        assert not can_access_feature(role, "UserManagement")

    @pytest.mark.parametrize("role", [Role.CLUB_PRESIDENT, Role.CHAIRMAN])
    def test_president_and_chairman_denylist(self, role):
        assert allowed_features(role) == KNOWN_FEATURES - {"SystemConfig", "UserManagement"}
        assert can_access_feature(role, "ApproveMember")
        assert can_access_feature(role, "Dashboard")

    def test_vice_chairman_cannot_approve_members(self):
        assert not can_access_feature(Role.VICE_CHAIRMAN, "ApproveMember")
        assert can_access_feature(Role.VICE_CHAIRMAN, "ClubManagement")

    def test_club_officer_allowlist(self):
        assert allowed_features(Role.CLUB_OFFICER) == {
            "EventManagement",
            "MemberView",
            "ReportView",
            "ClubManagement",
        }

    def test_team_leader_allowlist(self):
        assert allowed_features(Role.TEAM_LEADER) == {
            "EventManagement",
            "MemberView",
            "ReportView",
        }

    def test_member_allowlist(self):
        assert allowed_features(Role.MEMBER) == {"EventView", "ProfileEdit"}
        assert not can_access_feature(Role.MEMBER, "Dashboard")

    @pytest.mark.parametrize("role", list(Role))
    def test_unknown_feature_is_denied(self, role):
        assert not can_access_feature(role, "DeleteUniverse")

    def test_feature_keys_are_case_sensitive(self):
        assert not can_access_feature(Role.SYSTEM_ADMIN, "systemconfig")

    @pytest.mark.parametrize("feature", [None, 7, ["Dashboard"], {"Dashboard": 1}])
    def test_non_string_feature_is_denied(self, feature):
        """Unhashable or non-string keys are denied rather than raising."""
        assert can_access_feature(Role.SYSTEM_ADMIN, feature) is False

    @pytest.mark.parametrize("role", UNKNOWN_ROLES)
    def test_unknown_role_is_denied(self, role):
        assert not can_access_feature(role, "EventView")
        assert allowed_features(role) == frozenset()


class TestManageClub:
    """Tests for can_manage_club."""

    @pytest.mark.parametrize("role", list(TOP_LEVEL_ROLES))
    def test_top_level_roles_manage_any_club(self, role):
        assert can_manage_club(role, None, 3)
        assert can_manage_club(role, 1, 3)

    @pytest.mark.parametrize(
        "role",
        [Role.CLUB_PRESIDENT, Role.CHAIRMAN, Role.VICE_CHAIRMAN, Role.CLUB_OFFICER],
    )
    def test_club_roles_manage_own_club_only(self, role):
        assert can_manage_club(role, 3, 3)
        assert not can_manage_club(role, 4, 3)
        assert not can_manage_club(role, None, 3)

    @pytest.mark.parametrize("role", [Role.TEAM_LEADER, Role.MEMBER])
    def test_team_leader_and_member_never_manage_clubs(self, role):
        assert not can_manage_club(role, 3, 3)

    def test_accepts_scope_values(self):
        assert can_manage_club(Role.CHAIRMAN, Scope(3), Scope(3))
        assert not can_manage_club(Role.CHAIRMAN, NO_SCOPE, NO_SCOPE)

    @pytest.mark.parametrize("role", [Role.CLUB_PRESIDENT, Role.CLUB_OFFICER])
    def test_two_absent_scopes_do_not_match(self, role):
        assert not can_manage_club(role, None, None)
        assert not can_manage_event(role, None, None)


class TestManageUser:
    """Tests for can_manage_user."""

    @pytest.mark.parametrize("target", list(Role))
    def test_system_admin_manages_everyone_anywhere(self, target):
        assert can_manage_user(Role.SYSTEM_ADMIN, target, None, 9)

    def test_admin_manages_all_but_system_admin(self):
        assert can_manage_user(Role.ADMIN, Role.ADMIN, None, 9)
        assert can_manage_user(Role.ADMIN, Role.MEMBER, 1, 9)
        assert not can_manage_user(Role.ADMIN, Role.SYSTEM_ADMIN, None, None)

    @pytest.mark.parametrize(
        ("role", "excluded"),
        [
            (Role.CLUB_PRESIDENT, {Role.SYSTEM_ADMIN, Role.ADMIN}),
            (Role.CHAIRMAN, {Role.SYSTEM_ADMIN, Role.ADMIN, Role.CLUB_PRESIDENT}),
            (
                Role.VICE_CHAIRMAN,
                {Role.SYSTEM_ADMIN, Role.ADMIN, Role.CLUB_PRESIDENT, Role.CHAIRMAN},
            ),
        ],
    )
    def test_senior_club_exclusion_lists(self, role, excluded):
        for target in Role:
            assert can_manage_user(role, target, 5, 5) is (target not in excluded)

    def test_club_officer_manages_team_leaders_and_members(self):
        allowed = {target for target in Role if can_manage_user(Role.CLUB_OFFICER, target, 5, 5)}
        assert allowed == {Role.TEAM_LEADER, Role.MEMBER}

    def test_team_leader_manages_members(self):
        allowed = {target for target in Role if can_manage_user(Role.TEAM_LEADER, target, 5, 5)}
        assert allowed == {Role.MEMBER}

    def test_member_manages_nobody(self):
        assert not any(can_manage_user(Role.MEMBER, target, 5, 5) for target in Role)

    @pytest.mark.parametrize("role", NON_TOP_LEVEL)
    def test_scope_mismatch_denies_below_top_level(self, role):
        assert not can_manage_user(role, Role.MEMBER, 5, 6)
        assert not can_manage_user(role, Role.MEMBER, None, None)

    def test_monotonic_down_the_hierarchy(self):
        """If a role cannot manage a target, no junior role can either."""
        ordered = list(Role)
        for target in Role:
            for i, senior in enumerate(ordered):
                if can_manage_user(senior, target, 5, 5):
                    continue
                for junior in ordered[i + 1 :]:
                    assert not can_manage_user(junior, target, 5, 5)

    def test_unknown_target_role_is_denied(self):
        assert not can_manage_user(Role.SYSTEM_ADMIN, "Overlord", None, None)

    @pytest.mark.parametrize("role", UNKNOWN_ROLES)
    def test_unknown_role_is_denied(self, role):
        assert not can_manage_user(role, Role.MEMBER, 5, 5)


class TestManageEvent:
    """Tests for can_manage_event."""

    @pytest.mark.parametrize("role", list(TOP_LEVEL_ROLES))
    def test_top_level_roles_manage_any_event(self, role):
        assert can_manage_event(role, None, 8)

    @pytest.mark.parametrize(
        "role",
        [
            Role.CLUB_PRESIDENT,
            Role.CHAIRMAN,
            Role.VICE_CHAIRMAN,
            Role.CLUB_OFFICER,
            Role.TEAM_LEADER,
        ],
    )
    def test_club_roles_need_same_scope(self, role):
        assert can_manage_event(role, 8, 8)
        assert not can_manage_event(role, 7, 8)

    def test_member_never_manages_events(self):
        assert not can_manage_event(Role.MEMBER, 8, 8)


class TestViewReports:
    """Tests for can_view_reports."""

    @pytest.mark.parametrize("role", list(TOP_LEVEL_ROLES))
    def test_top_level_roles_view_everything(self, role):
        assert can_view_reports(role, None, None)
        assert can_view_reports(role, 1, 2)

    @pytest.mark.parametrize("role", [Role.CLUB_PRESIDENT, Role.CHAIRMAN, Role.VICE_CHAIRMAN])
    def test_senior_roles_see_global_and_own_reports(self, role):
        assert can_view_reports(role, 5, None)
        assert can_view_reports(role, 5, 5)
        assert not can_view_reports(role, 5, 6)

    def test_chairman_sees_global_report(self):
        assert can_view_reports(Role.CHAIRMAN, 5, None) is True

    def test_club_officer_cannot_see_global_report(self):
        assert can_view_reports(Role.CLUB_OFFICER, 5, None) is False

    @pytest.mark.parametrize("role", SCOPED_JUNIORS)
    def test_juniors_need_exact_scope(self, role):
        assert can_view_reports(role, 5, 5)
        assert not can_view_reports(role, 5, 6)
        assert not can_view_reports(role, None, None)

    def test_member_never_views_reports(self):
        assert not can_view_reports(Role.MEMBER, 5, 5)
        assert not can_view_reports(Role.MEMBER, 5, None)


class TestScopeIsolation:
    """Scope equality is a hard gate for the scoped junior roles."""

    @pytest.mark.parametrize("role", SCOPED_JUNIORS)
    @pytest.mark.parametrize(("caller", "target"), [(1, 2), (None, 2), (1, None)])
    def test_mismatched_scope_denies(self, role, caller, target):
        assert not can_manage_event(role, caller, target)
        assert not can_manage_club(role, caller, target)
        assert not can_view_reports(role, caller, target)


class TestGenerateReports:
    """Tests for can_generate_reports."""

    @pytest.mark.parametrize(
        "role",
        [Role.SYSTEM_ADMIN, Role.ADMIN, Role.CLUB_PRESIDENT, Role.CHAIRMAN, Role.VICE_CHAIRMAN],
    )
    def test_generators(self, role):
        assert can_generate_reports(role) is True

    @pytest.mark.parametrize("role", [Role.CLUB_OFFICER, Role.TEAM_LEADER, Role.MEMBER])
    def test_non_generators(self, role):
        assert can_generate_reports(role) is False

    @pytest.mark.parametrize("role", UNKNOWN_ROLES)
    def test_unknown_role_is_denied(self, role):
        assert can_generate_reports(role) is False

    @pytest.mark.parametrize("role", list(Role))
    def test_export_and_statistics_follow_generation(self, role):
        assert can_export_reports(role) is can_generate_reports(role)
        assert can_view_statistics(role) is can_generate_reports(role)

    def test_export_and_statistics_deny_unknown_roles(self):
        assert can_export_reports("Overlord") is False
        assert can_view_statistics(None) is False


class TestViewing:
    """Tests for event, club and user visibility."""

    @pytest.mark.parametrize("role", list(Role))
    def test_every_role_views_events(self, role):
        assert can_view_event(role)

    def test_unknown_role_cannot_view_events(self):
        assert not can_view_event("Overlord")

    def test_members_view_their_own_club(self):
        assert can_view_club(Role.MEMBER, 4, 4)
        assert not can_view_club(Role.MEMBER, 4, 5)

    def test_admin_views_any_club(self):
        assert can_view_club(Role.ADMIN, None, 5)

    @pytest.mark.parametrize(
        "role",
        [Role.SYSTEM_ADMIN, Role.ADMIN, Role.CLUB_PRESIDENT, Role.CHAIRMAN, Role.VICE_CHAIRMAN],
    )
    def test_senior_roles_view_users(self, role):
        assert can_view_user(role) is True

    @pytest.mark.parametrize("role", [Role.CLUB_OFFICER, Role.TEAM_LEADER, Role.MEMBER, "Overlord"])
    def test_junior_roles_cannot_view_users(self, role):
        assert can_view_user(role) is False


class TestSettingsAccess:
    """Tests for club and global settings access."""

    @pytest.mark.parametrize("role", list(TOP_LEVEL_ROLES))
    def test_top_level_roles_reach_any_club_settings(self, role):
        assert can_access_club_settings(role, None, 4)

    @pytest.mark.parametrize("role", [Role.CLUB_PRESIDENT, Role.CHAIRMAN, Role.VICE_CHAIRMAN])
    def test_senior_roles_reach_own_club_settings_only(self, role):
        assert can_access_club_settings(role, 4, 4)
        assert not can_access_club_settings(role, 4, 5)

    @pytest.mark.parametrize("role", [Role.CLUB_OFFICER, Role.TEAM_LEADER, Role.MEMBER])
    def test_junior_roles_never_reach_club_settings(self, role):
        assert not can_access_club_settings(role, 4, 4)

    @pytest.mark.parametrize("role", list(Role))
    def test_global_settings_are_top_level_only(self, role):
        assert can_access_global_settings(role) is (role in TOP_LEVEL_ROLES)

    def test_global_settings_deny_unknown_role(self):
        assert can_access_global_settings("Overlord") is False


class TestDeterminism:
    def test_repeated_calls_agree(self):
        first = [
            can_manage_user(role, target, 5, 5) for role in Role for target in Role
        ]
        for _ in range(3):
            again = [
                can_manage_user(role, target, 5, 5) for role in Role for target in Role
            ]
            assert again == first
