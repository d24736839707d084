from rscheme import EvaluatorFn
from rscheme import SExpression, LispValue
from rscheme.errors import RSchemeArityError
from rscheme.types.environment import Environment
from rscheme.types.nil import Nil


def is_truthy(value: LispValue) -> bool:
    # Only the boolean #f is false.
    return value is not False


def if_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    if len(tail) not in (2, 3):
        raise RSchemeArityError("if requires a condition, a then-expression and an optional else-expression")

    if is_truthy(evaluate_fn(tail[0], env)):
        return evaluate_fn(tail[1], env)
    elif len(tail) > 2:
        return evaluate_fn(tail[2], env)
    else:
        return Nil
