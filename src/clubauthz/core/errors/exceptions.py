"""Exceptions raised around the policy engine.

The decision functions themselves never raise: every malformed input
collapses to a deny. These exceptions exist for the collaborators around
the engine (directories, configuration) and for the route guard.
"""

from typing import Any


class AppException(Exception):
    """Base exception for all clubauthz errors.

    Attributes:
        message: Human-readable error message
        error_code: Machine-readable error code for clients
        details: Additional error details
    """

    message: str = "An unexpected error occurred"
    error_code: str = "internal_error"

    def __init__(
        self,
        message: str | None = None,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message or self.message
        self.error_code = error_code or self.error_code
        self.details = details or {}
        super().__init__(self.message)


class ForbiddenError(AppException):
    """Raised by the route guard when the gateway denies an action.

    Example:
        raise ForbiddenError(
            "Action not permitted",
            details={"action": "ManageUsers"}
        )
    """

    message = "Access forbidden"
    error_code = "forbidden"


class DirectoryLookupError(AppException):
    """Raised by user directory implementations when the backend fails.

    The gateway treats this exactly like an unknown principal.

    Example:
        raise DirectoryLookupError(details={"principal_id": 42})
    """

    message = "User directory lookup failed"
    error_code = "directory_lookup_failed"

    def __init__(
        self,
        message: str | None = None,
        principal_id: int | None = None,
        **kwargs: Any,
    ) -> None:
        details = kwargs.pop("details", {})
        if principal_id is not None:
            details["principal_id"] = principal_id
        super().__init__(message=message, details=details, **kwargs)


class ConfigurationError(AppException):
    """Raised when settings are invalid."""

    message = "Invalid configuration"
    error_code = "configuration_error"
