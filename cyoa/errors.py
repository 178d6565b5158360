"""
Errors raised by the engine.

Hierarchy:
    CyoaError
    ├── ResolutionError          key could not be turned into a value
    │   ├── UnknownKeyError
    │   ├── UnknownScopeError
    │   └── UnsupportedLookupError
    ├── EvaluationError          predicate is structurally unevaluable
    ├── LegalityError            requested action cannot be performed
    │   ├── ActionNotOfferedError
    │   ├── ConditionFailedError
    │   ├── ConditionUnevaluableError
    │   └── LocationMismatchError
    ├── ContentError             story content is malformed
    └── SessionError             playthrough driven incorrectly
"""

from __future__ import annotations
from typing import Any


class CyoaError(Exception):
    """
    Base exception for all engine errors.

    `context` carries identifiers (action, location, story ids, keys)
    and is rendered after the message.
    """

    def __init__(self, message: str, context: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if not self.context:
            return self.message
        details = ", ".join(f"{k}={v}" for k, v in self.context.items())
        return f"{self.message} [{details}]"


class ResolutionError(CyoaError):
    """A key expression could not be resolved to a value."""


class UnknownKeyError(ResolutionError):
    """The lookup has no value under the requested key."""

    def __init__(self, key: str, kind: str = "value"):
        super().__init__(f"unknown {kind} key {key!r}", {"key": key})
        self.key = key


class UnknownScopeError(ResolutionError):
    """A dotted key named a scope the lookup does not expose."""

    def __init__(self, scope: str, key: str, kind: str):
        super().__init__(
            f"invalid scope lookup {scope!r} from {kind} key {key!r}",
            {"scope": scope, "key": key},
        )
        self.scope = scope
        self.key = key


class UnsupportedLookupError(ResolutionError):
    """The lookup does not implement the requested kind of value."""

    def __init__(self, lookup: object, kind: str, key: str):
        super().__init__(
            f"{type(lookup).__name__} does not support {kind} values",
            {"key": key},
        )
        self.kind = kind
        self.key = key


class EvaluationError(CyoaError):
    """A predicate uses an operation outside the supported set."""


class LegalityError(CyoaError):
    """The requested action cannot be performed from this state."""


class ActionNotOfferedError(LegalityError):
    """The action is not among the location's possible actions."""


class ConditionFailedError(LegalityError):
    """The action's offering condition evaluated to false."""


class ConditionUnevaluableError(LegalityError):
    """The action's offering condition raised during evaluation."""


class LocationMismatchError(LegalityError):
    """The run state is not at the location the event was built for."""


class ContentError(CyoaError):
    """Story content failed parsing or validation."""

    def __init__(self, errors: list[str]):
        self.errors = errors
        super().__init__(f"story content invalid with {len(errors)} error(s)")

    def __str__(self) -> str:
        return "; ".join([self.message] + self.errors)


class SessionError(CyoaError):
    """A playthrough session was asked to do something it cannot."""
