"""Configuration name -> IDEA library scope."""

from __future__ import annotations

from sbtidea.models.domain import Scope

_SCOPES: dict[str, Scope] = {
    "compile": Scope.COMPILE,
    "runtime": Scope.RUNTIME,
    "test": Scope.TEST,
    "provided": Scope.PROVIDED,
}


def to_scope(configuration: str) -> Scope:
    """Map a build configuration name to a scope; unknown names fall back to COMPILE."""
    return _SCOPES.get(configuration, Scope.COMPILE)
