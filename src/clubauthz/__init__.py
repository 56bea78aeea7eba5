"""clubauthz - role-based authorization policy engine for club management."""

__version__ = "0.1.0"
