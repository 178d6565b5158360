"""
Logic - boolean predicates over scoped variables.

Predicates are trees of comparisons and combinators. They are
evaluated against a Lookup, which supplies values by key and may
expose nested scopes reachable with dotted keys.
"""

from .predicate import Predicate, Compare, CompareOp, Combine, CombineOp
from .lookup import Lookup, Scoper, MemoryLookup
from .keys import resolve_int, resolve_str, resolve_str_array
from .evaluator import PredicateEvaluator, evaluate

__all__ = [
    "Predicate",
    "Compare",
    "CompareOp",
    "Combine",
    "CombineOp",
    "Lookup",
    "Scoper",
    "MemoryLookup",
    "resolve_int",
    "resolve_str",
    "resolve_str_array",
    "PredicateEvaluator",
    "evaluate",
]
