"""Guard decorator for coroutines that act on behalf of a principal.

Usage:
    @require_action("ManageEvents")
    async def reschedule_event(event_id: int, *, principal_id: int, gateway):
        ...
"""

from collections.abc import Awaitable, Callable
from functools import wraps
from typing import Any, ParamSpec, TypeVar, cast

import structlog

from clubauthz.core.errors import ForbiddenError
from clubauthz.gateway.service import AuthorizationGateway


logger = structlog.get_logger()

P = ParamSpec("P")
R = TypeVar("R")


def _get_principal_and_gateway(
    kwargs: dict[str, Any],
) -> tuple[int | None, AuthorizationGateway | None]:
    principal_id = cast("int | None", kwargs.get("principal_id"))
    gateway = cast("AuthorizationGateway | None", kwargs.get("gateway"))
    return principal_id, gateway


def require_action(
    action_name: str,
) -> Callable[[Callable[P, Awaitable[R]]], Callable[P, Awaitable[R]]]:
    """Decorator that requires the gateway to allow an action.

    The wrapped coroutine must receive ``principal_id`` and ``gateway`` as
    keyword arguments.

    Args:
        action_name: The gateway action to check (e.g., "ManageUsers")

    Returns:
        Decorator function

    Raises:
        ForbiddenError: If the principal or gateway is missing, or the
            gateway denies the action
    """

    def decorator(func: Callable[P, Awaitable[R]]) -> Callable[P, Awaitable[R]]:
        @wraps(func)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            principal_id, gateway = _get_principal_and_gateway(kwargs)

            if principal_id is None:
                raise ForbiddenError(
                    "Authentication required",
                    error_code="auth_required",
                )

            if gateway is None:
                raise ForbiddenError(
                    "Permission check failed",
                    error_code="permission_check_failed",
                )

            if not await gateway.is_authorized(principal_id, action_name):
                logger.info(
                    "action_forbidden",
                    principal_id=principal_id,
                    action=action_name,
                    target=func.__qualname__,
                )
                raise ForbiddenError(
                    f"Missing required action: {action_name}",
                    error_code="permission_denied",
                    details={"required_action": action_name},
                )

            return await func(*args, **kwargs)

        return wrapper

    return decorator
