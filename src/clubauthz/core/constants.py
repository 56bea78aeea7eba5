"""Policy-wide constants.

Feature keys and gateway action names are plain, case-sensitive strings.
They are collected here so the decision tables and the gateway agree on a
single vocabulary.
"""

# Feature keys
FEATURE_DASHBOARD = "Dashboard"
FEATURE_SYSTEM_CONFIG = "SystemConfig"
FEATURE_USER_MANAGEMENT = "UserManagement"
FEATURE_APPROVE_MEMBER = "ApproveMember"
FEATURE_CLUB_MANAGEMENT = "ClubManagement"
FEATURE_EVENT_MANAGEMENT = "EventManagement"
FEATURE_EVENT_VIEW = "EventView"
FEATURE_MEMBER_VIEW = "MemberView"
FEATURE_REPORT_VIEW = "ReportView"
FEATURE_PROFILE_EDIT = "ProfileEdit"

KNOWN_FEATURES: frozenset[str] = frozenset(
    {
        FEATURE_DASHBOARD,
        FEATURE_SYSTEM_CONFIG,
        FEATURE_USER_MANAGEMENT,
        FEATURE_APPROVE_MEMBER,
        FEATURE_CLUB_MANAGEMENT,
        FEATURE_EVENT_MANAGEMENT,
        FEATURE_EVENT_VIEW,
        FEATURE_MEMBER_VIEW,
        FEATURE_REPORT_VIEW,
        FEATURE_PROFILE_EDIT,
    }
)

# Gateway action names
ACTION_VIEW_DASHBOARD = "ViewDashboard"
ACTION_MANAGE_USERS = "ManageUsers"
ACTION_MANAGE_CLUBS = "ManageClubs"
ACTION_MANAGE_EVENTS = "ManageEvents"
ACTION_VIEW_REPORTS = "ViewReports"
ACTION_GENERATE_REPORTS = "GenerateReports"

# Settings
ENV_PREFIX = "CLUBAUTHZ_"
VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
VALID_ENVIRONMENTS = ("development", "staging", "production")
