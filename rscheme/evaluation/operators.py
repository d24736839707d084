"""Operators for the RScheme evaluator.

Arithmetic, chained comparison and boolean connectives. Each handler takes
the unevaluated operand expressions so that `and`/`or` can short-circuit;
the others evaluate every operand left to right before doing any work.
"""

from __future__ import annotations

import operator
from functools import reduce, wraps
from typing import Callable

from rscheme import EvaluatorFn, LispValue, SExpression
from rscheme.errors import RSchemeArityError, RSchemeRuntimeError, RSchemeTypeError
from rscheme.printer import to_string
from rscheme.types.environment import Environment
from rscheme.types.tokens import Operator

Number = int | float
OperatorFn = Callable[[list[SExpression], Environment, EvaluatorFn], LispValue]


def is_number(value: LispValue) -> bool:
    """Integer or Real; booleans are not numbers."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _numbers(op: str, tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> list[Number]:
    values = [evaluate_fn(expr, env) for expr in tail]
    for value in values:
        if not is_number(value):
            raise RSchemeTypeError(f"{op} operator applied to non-number {to_string(value)}")
    return values


# -------------------------------
# Arithmetic
# -------------------------------
def _guard_overflow(fn: OperatorFn) -> OperatorFn:
    # big integers meeting a Real, or an inexact big quotient, overflow float
    @wraps(fn)
    def guarded(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> Number:
        try:
            return fn(tail, env, evaluate_fn)
        except OverflowError as err:
            raise RSchemeRuntimeError(f"numeric overflow in {fn.__name__}: {err}") from None

    return guarded


@_guard_overflow
def add(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> Number:
    """Sum of all operands; (+) is 0."""
    return reduce(operator.add, _numbers("+", tail, env, evaluate_fn), 0)


@_guard_overflow
def mult(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> Number:
    """Product of all operands; (*) is 1."""
    return reduce(operator.mul, _numbers("*", tail, env, evaluate_fn), 1)


@_guard_overflow
def sub(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> Number:
    """Subtract all subsequent numbers from the first; unary negation for one arg."""
    values = _numbers("-", tail, env, evaluate_fn)
    if not values:
        raise RSchemeArityError("- requires at least 1 argument")
    if len(values) == 1:
        return -values[0]
    return reduce(operator.sub, values)


@_guard_overflow
def div(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> Number:
    """Divide the first number by all subsequent ones; reciprocal for one arg.

    Integer operands stay Integer while every step divides exactly; the first
    inexact step switches to floating point for the rest of the chain.
    """
    values = _numbers("/", tail, env, evaluate_fn)
    if not values:
        raise RSchemeArityError("/ requires at least 1 argument")
    if len(values) == 1:
        values = [1, values[0]]

    result = values[0]
    for divisor in values[1:]:
        if divisor == 0:
            raise RSchemeRuntimeError("division by zero")
        if isinstance(result, int) and isinstance(divisor, int) and result % divisor == 0:
            result = result // divisor
        else:
            result = result / divisor
    return result


# -------------------------------
# Comparison
# -------------------------------
def _chained(op: str, relation: Callable[[Number, Number], bool]) -> OperatorFn:
    def compare(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> bool:
        values = _numbers(op, tail, env, evaluate_fn)
        # all() stops at the first adjacent pair that fails
        return all(relation(a, b) for a, b in zip(values, values[1:]))

    compare.__name__ = f"compare_{relation.__name__}"
    compare.__doc__ = f"Return #t if every adjacent pair satisfies {op}."
    return compare


equal = _chained("=", operator.eq)
less = _chained("<", operator.lt)
less_equal = _chained("<=", operator.le)
greater = _chained(">", operator.gt)
greater_equal = _chained(">=", operator.ge)


# -------------------------------
# Boolean
# -------------------------------
def _boolean(op: str, value: LispValue) -> bool:
    if not isinstance(value, bool):
        raise RSchemeTypeError(f"{op} operator applied to non-boolean {to_string(value)}")
    return value


def and_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> bool:
    """Short-circuiting logical AND. (and) is #t."""
    for expr in tail:
        if not _boolean("and", evaluate_fn(expr, env)):
            return False
    return True


def or_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> bool:
    """Short-circuiting logical OR. (or) is #f."""
    for expr in tail:
        if _boolean("or", evaluate_fn(expr, env)):
            return True
    return False


def not_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> bool:
    if len(tail) != 1:
        raise RSchemeArityError("not expects exactly 1 argument")
    return not _boolean("not", evaluate_fn(tail[0], env))


OPERATORS: dict[Operator, OperatorFn] = {
    Operator.PLUS: add,
    Operator.MINUS: sub,
    Operator.MULT: mult,
    Operator.DIV: div,
    Operator.EQUAL: equal,
    Operator.LT: less,
    Operator.LE: less_equal,
    Operator.GT: greater,
    Operator.GE: greater_equal,
    Operator.AND: and_form,
    Operator.OR: or_form,
    Operator.NOT: not_form,
}
