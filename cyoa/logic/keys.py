"""
Key resolution for predicate operands.

A key expression is resolved in this order:
1. 'text       string literal (string contexts only)
2. 123, -4     integer literal (integer context only)
3. [a, 'b]     inline string array (array context only, checked first)
4. scope.rest  split on the first '.', resolve rest in the named scope
5. anything else is handed to the lookup

Unknown keys and scopes raise; nothing defaults to 0 or "".
"""

from __future__ import annotations
import re

from ..errors import ResolutionError, UnknownScopeError
from .lookup import Lookup

SCOPE_SEPARATOR = "."
STRING_LITERAL_PREFIX = "'"

_INT_LITERAL = re.compile(r"[+-]?[0-9]+")
INT_MIN, INT_MAX = -2**63, 2**63 - 1


def _scoped(key: str, lookup: Lookup, kind: str) -> tuple[str, Lookup] | None:
    """Split off a leading scope name and return (remainder, scope lookup)."""
    scope_name, sep, remainder = key.partition(SCOPE_SEPARATOR)
    if not sep:
        return None
    scope = lookup.get_scope(scope_name)
    if scope is None:
        raise UnknownScopeError(scope_name, key, kind)
    return remainder, scope


def resolve_int(key: str, lookup: Lookup) -> int:
    """Resolve a key as an integer literal or looked-up integer."""
    if _INT_LITERAL.fullmatch(key):
        value = int(key)
        if not INT_MIN <= value <= INT_MAX:
            raise ResolutionError(f"integer literal {key!r} out of 64-bit range", {"key": key})
        return value
    if key.startswith(STRING_LITERAL_PREFIX):
        raise ResolutionError(f"string literal {key!r} used as an integer", {"key": key})
    scoped = _scoped(key, lookup, "integer")
    if scoped:
        return resolve_int(*scoped)
    return lookup.get_int(key)


def resolve_str(key: str, lookup: Lookup) -> str:
    """Resolve a key as a string literal or looked-up string."""
    if key.startswith(STRING_LITERAL_PREFIX):
        return key[1:]
    scoped = _scoped(key, lookup, "string")
    if scoped:
        return resolve_str(*scoped)
    return lookup.get_str(key)


def resolve_str_array(key: str, lookup: Lookup) -> list[str]:
    """Resolve a key as an inline array literal or looked-up string array."""
    if key.startswith("[") and key.endswith("]"):
        return _parse_array_literal(key, lookup)
    scoped = _scoped(key, lookup, "string array")
    if scoped:
        return resolve_str_array(*scoped)
    return lookup.get_str_array(key)


def _parse_array_literal(key: str, lookup: Lookup) -> list[str]:
    body = key[1:-1]
    if not body.strip():
        return []
    values = []
    for entry in body.split(","):
        entry = entry.strip()
        if not entry:
            raise ResolutionError(f"empty entry in array literal {key!r}", {"key": key})
        try:
            values.append(resolve_str(entry, lookup))
        except ResolutionError as e:
            raise ResolutionError(
                f"error constructing array entry {entry!r}: {e}", {"key": key}
            ) from e
    return values
