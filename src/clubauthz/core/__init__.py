"""Cross-cutting concerns: constants, errors, logging."""

from clubauthz.core.errors import (
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
