"""Scope values: either no scope (system level) or a concrete club id."""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class NoScope:
    """Absent scope: a system-level principal or a global resource."""

    def __repr__(self) -> str:
        return "NoScope()"


@dataclass(frozen=True)
class Scope:
    """A concrete club scope."""

    id: int


ScopeRef = Union[NoScope, Scope]

NO_SCOPE = NoScope()


def as_scope(value: "ScopeRef | int | None") -> ScopeRef:
    """Normalise a nullable club id (or an existing scope) into a scope value.

    ``bool`` is rejected as an id and treated as no scope.
    """
    if isinstance(value, (NoScope, Scope)):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return Scope(value)
    return NO_SCOPE


def same_scope(a: "ScopeRef | int | None", b: "ScopeRef | int | None") -> bool:
    """Check that both sides name the same concrete club.

    Two absent scopes never match: a club-level role without a club has
    nothing to share.
    """
    left, right = as_scope(a), as_scope(b)
    return isinstance(left, Scope) and left == right
