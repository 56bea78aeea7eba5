"""User directory contract consumed by the gateway.

The engine does not own user storage. It only reads a ``Principal`` record
from whatever directory the embedding application injects.
"""

from collections.abc import Iterable
from typing import Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict

from clubauthz.policy.roles import Role
from clubauthz.policy.scope import ScopeRef, as_scope


class Principal(BaseModel):
    """A user as seen by the policy engine.

    ``role`` keeps unrecognised role strings instead of rejecting them, so
    that a stale or corrupt directory entry is denied by the evaluator
    rather than failing the lookup.
    """

    model_config = ConfigDict(frozen=True)

    id: int
    role: Role | str
    is_active: bool = True
    home_scope_id: int | None = None

    @property
    def home_scope(self) -> ScopeRef:
        return as_scope(self.home_scope_id)


@runtime_checkable
class UserDirectory(Protocol):
    """Read-only lookup of principals by id."""

    async def find_by_id(self, principal_id: int) -> Principal | None:
        """Return the principal, or None if no such user exists.

        Implementations raise ``DirectoryLookupError`` on backend failure.
        """
        ...


class InMemoryUserDirectory:
    """Dictionary-backed directory for tests and embedded use."""

    def __init__(self, principals: Iterable[Principal] = ()) -> None:
        self._principals: dict[int, Principal] = {p.id: p for p in principals}

    def add(self, principal: Principal) -> None:
        self._principals[principal.id] = principal

    async def find_by_id(self, principal_id: int) -> Principal | None:
        return self._principals.get(principal_id)
