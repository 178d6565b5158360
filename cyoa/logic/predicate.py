"""
Predicate trees - the boolean conditions attached to triggers and actions.

A Predicate holds at most one of:
- Compare: two key expressions and an operation
- Combine: a logical operation over ordered sub-predicates

A Predicate holding neither is unconditionally true, as is a missing
predicate (None).
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum


class CompareOp(Enum):
    """Comparison operations. The first six compare integers."""
    GT = "gt"
    LT = "lt"
    EQ = "eq"
    GTE = "gte"
    LTE = "lte"
    NEQ = "neq"

    # String operations
    STREQ = "streq"
    STRIN = "strin"

    @property
    def is_string(self) -> bool:
        return self in (CompareOp.STREQ, CompareOp.STRIN)


class CombineOp(Enum):
    """Logical combinators over sub-predicates."""
    ALL = "all"
    ANY = "any"
    NONE = "none"


@dataclass
class Compare:
    """
    Compare two key expressions.

    Keys are resolved by the evaluator: 'text is a string literal,
    digits are an integer literal, scope.key reads a nested scope,
    anything else is looked up.
    """
    key_one: str
    key_two: str
    operation: CompareOp


@dataclass
class Combine:
    """Combine sub-predicates with ALL / ANY / NONE."""
    operation: CombineOp
    operands: list[Predicate] = field(default_factory=list)


@dataclass
class Predicate:
    """Tagged union of Compare and Combine; empty means always true."""
    comp: Compare | None = None
    comb: Combine | None = None

    @property
    def is_empty(self) -> bool:
        return self.comp is None and self.comb is None

    @classmethod
    def compare(cls, key_one: str, operation: CompareOp, key_two: str) -> Predicate:
        """Factory for a comparison, written in infix order."""
        return cls(comp=Compare(key_one=key_one, key_two=key_two, operation=operation))

    @classmethod
    def all_of(cls, *operands: Predicate) -> Predicate:
        return cls(comb=Combine(operation=CombineOp.ALL, operands=list(operands)))

    @classmethod
    def any_of(cls, *operands: Predicate) -> Predicate:
        return cls(comb=Combine(operation=CombineOp.ANY, operands=list(operands)))

    @classmethod
    def none_of(cls, *operands: Predicate) -> Predicate:
        return cls(comb=Combine(operation=CombineOp.NONE, operands=list(operands)))
