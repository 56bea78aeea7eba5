"""Error hierarchy for the policy engine and its collaborators."""

from clubauthz.core.errors.exceptions import (
    AppException,
    ConfigurationError,
    DirectoryLookupError,
    ForbiddenError,
)


__all__ = [
    "AppException",
    "ConfigurationError",
    "DirectoryLookupError",
    "ForbiddenError",
]
