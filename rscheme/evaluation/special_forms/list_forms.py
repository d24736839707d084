from rscheme import EvaluatorFn
from rscheme import SExpression, LispValue
from rscheme.errors import RSchemeArityError, RSchemeTypeError
from rscheme.printer import to_string
from rscheme.types.environment import Environment


def _operands(form: str, count: int, tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> list[LispValue]:
    if len(tail) != count:
        raise RSchemeArityError(f"{form} expects exactly {count} argument{'s' if count > 1 else ''}")
    return [evaluate_fn(expr, env) for expr in tail]


def _non_empty_list(form: str, value: LispValue) -> list:
    if not isinstance(value, list):
        raise RSchemeTypeError(f"{form} applied to non-list {to_string(value)}")
    if not value:
        raise RSchemeTypeError(f"{form} applied to empty list")
    return value


def car_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    (xs,) = _operands("car", 1, tail, env, evaluate_fn)
    return _non_empty_list("car", xs)[0]


def cdr_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    (xs,) = _operands("cdr", 1, tail, env, evaluate_fn)
    return _non_empty_list("cdr", xs)[1:]


def cons_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    head, xs = _operands("cons", 2, tail, env, evaluate_fn)
    if not isinstance(xs, list):
        raise RSchemeTypeError(f"cons applied to non-list {to_string(xs)}")
    return [head, *xs]
