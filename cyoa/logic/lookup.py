"""
Lookups - where predicate keys get their values.

A Lookup answers integer, string and string-array queries by key and
may expose named nested Lookups ("scopes"), reached with dotted keys
such as `story.chapter`. Implementations only need to support the
value kinds relevant to them; the rest raise UnsupportedLookupError.
"""

from __future__ import annotations
from abc import ABC

from ..errors import UnknownKeyError, UnsupportedLookupError


class Lookup(ABC):
    """Capability interface for resolving predicate keys."""

    def get_int(self, key: str) -> int:
        raise UnsupportedLookupError(self, "integer", key)

    def get_str(self, key: str) -> str:
        raise UnsupportedLookupError(self, "string", key)

    def get_str_array(self, key: str) -> list[str]:
        raise UnsupportedLookupError(self, "string array", key)

    def get_scope(self, name: str) -> Lookup | None:
        return None

    def set_scope(self, name: str, scope: Lookup) -> None:
        raise UnsupportedLookupError(self, "scope", name)

    def list_scopes(self) -> list[str]:
        return []


class Scoper(Lookup):
    """
    Default in-memory scope registry.

    Lookups that don't need custom scope handling inherit from this
    and get get_scope / set_scope / list_scopes for free.
    """

    def __init__(self):
        self._scopes: dict[str, Lookup] = {}

    def get_scope(self, name: str) -> Lookup | None:
        return self._scopes.get(name)

    def set_scope(self, name: str, scope: Lookup) -> None:
        self._scopes[name] = scope

    def list_scopes(self) -> list[str]:
        return sorted(self._scopes)


class MemoryLookup(Scoper):
    """
    Dict-backed Lookup.

    Builder methods return self so lookups can be assembled inline:

        MemoryLookup().with_int("gold", 3).with_str("name", "Ann")
    """

    def __init__(
        self,
        ints: dict[str, int] | None = None,
        strs: dict[str, str] | None = None,
        str_arrays: dict[str, list[str]] | None = None,
    ):
        super().__init__()
        self.ints: dict[str, int] = dict(ints or {})
        self.strs: dict[str, str] = dict(strs or {})
        self.str_arrays: dict[str, list[str]] = dict(str_arrays or {})

    def get_int(self, key: str) -> int:
        if key not in self.ints:
            raise UnknownKeyError(key, "integer")
        return self.ints[key]

    def get_str(self, key: str) -> str:
        if key not in self.strs:
            raise UnknownKeyError(key, "string")
        return self.strs[key]

    def get_str_array(self, key: str) -> list[str]:
        if key not in self.str_arrays:
            raise UnknownKeyError(key, "string array")
        return list(self.str_arrays[key])

    def with_int(self, key: str, value: int) -> MemoryLookup:
        self.ints[key] = value
        return self

    def with_str(self, key: str, value: str) -> MemoryLookup:
        self.strs[key] = value
        return self

    def with_str_array(self, key: str, value: list[str]) -> MemoryLookup:
        self.str_arrays[key] = list(value)
        return self

    def with_scope(self, name: str, scope: Lookup) -> MemoryLookup:
        self.set_scope(name, scope)
        return self
