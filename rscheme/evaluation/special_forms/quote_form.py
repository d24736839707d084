from rscheme import SExpression, LispValue, EvaluatorFn
from rscheme.errors import RSchemeArityError
from rscheme.types.environment import Environment


def quote_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    if len(tail) != 1:
        raise RSchemeArityError("quote expects exactly 1 argument")
    return tail[0]
