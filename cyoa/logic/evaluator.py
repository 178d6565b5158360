"""
Predicate Evaluator.

Evaluates Predicate trees against a Lookup.

Supports:
- Integer comparisons: GT, LT, EQ, GTE, LTE, NEQ
- String equality: STREQ
- String membership in an array: STRIN
- Combinators: ALL, ANY, NONE (short-circuiting, strictly in order)

Failures raise instead of evaluating to False, so callers can tell
"condition is false" from "condition is broken".
"""

from __future__ import annotations
import operator
from typing import Callable

from ..errors import EvaluationError
from .keys import resolve_int, resolve_str, resolve_str_array
from .lookup import Lookup
from .predicate import Combine, CombineOp, Compare, CompareOp, Predicate

_INT_OPERATIONS: dict[CompareOp, Callable[[int, int], bool]] = {
    CompareOp.GT: operator.gt,
    CompareOp.LT: operator.lt,
    CompareOp.EQ: operator.eq,
    CompareOp.GTE: operator.ge,
    CompareOp.LTE: operator.le,
    CompareOp.NEQ: operator.ne,
}


class PredicateEvaluator:
    """
    Evaluates predicates.

    Stateless; one instance can be shared freely.
    """

    def evaluate(self, predicate: Predicate | None, lookup: Lookup) -> bool:
        """
        Return the truth value of the predicate.

        Args:
            predicate: Predicate to evaluate, or None
            lookup: Source of key values

        Raises:
            ResolutionError: an operand key could not be resolved
            EvaluationError: an operation is not recognized
        """
        if predicate is None:
            return True
        if predicate.comb is not None:
            return self._evaluate_combination(predicate.comb, lookup)
        if predicate.comp is not None:
            return self._evaluate_comparison(predicate.comp, lookup)
        return True

    def _evaluate_combination(self, comb: Combine, lookup: Lookup) -> bool:
        op = comb.operation
        if op == CombineOp.ALL:
            for operand in comb.operands:
                if not self.evaluate(operand, lookup):
                    return False
            return True
        elif op == CombineOp.ANY:
            for operand in comb.operands:
                if self.evaluate(operand, lookup):
                    return True
            return False
        elif op == CombineOp.NONE:
            for operand in comb.operands:
                if self.evaluate(operand, lookup):
                    return False
            return True

        raise EvaluationError(
            f"cannot evaluate unknown combination operator {op!r}",
            {"operands": len(comb.operands)},
        )

    def _evaluate_comparison(self, comp: Compare, lookup: Lookup) -> bool:
        op = comp.operation
        if op == CompareOp.STREQ:
            return resolve_str(comp.key_one, lookup) == resolve_str(comp.key_two, lookup)
        if op == CompareOp.STRIN:
            needle = resolve_str(comp.key_one, lookup)
            return needle in resolve_str_array(comp.key_two, lookup)

        int_op = _INT_OPERATIONS.get(op) if isinstance(op, CompareOp) else None
        if int_op is None:
            raise EvaluationError(
                f"cannot evaluate unknown operator {comp.key_one!r} {op!r} {comp.key_two!r}",
                {"key_one": comp.key_one, "key_two": comp.key_two},
            )
        return int_op(resolve_int(comp.key_one, lookup), resolve_int(comp.key_two, lookup))


_EVALUATOR = PredicateEvaluator()


def evaluate(predicate: Predicate | None, lookup: Lookup) -> bool:
    """Convenience function to evaluate a predicate."""
    return _EVALUATOR.evaluate(predicate, lookup)
