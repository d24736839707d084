from rscheme import EvaluatorFn
from rscheme import SExpression, LispValue
from rscheme.errors import RSchemeArityError, RSchemeTypeError
from rscheme.types.environment import Environment
from rscheme.types.nil import Nil
from rscheme.types.symbol import Symbol


def _bind_form(
    form: str,
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) != 2:
        raise RSchemeArityError(f"{form} requires exactly 2 arguments: ({form} name value)")

    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise RSchemeTypeError(f"{form} first argument must be an identifier, got {name}")

    # Introduce the name first so a lambda value can refer to itself.
    env.extend(name)
    value = evaluate_fn(val_expr, env)
    env.bind(name, value)
    return Nil


def define_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    """
    (define name value)
    Binds in the nearest frame; a second define of the same name overwrites.
    """
    return _bind_form("define", tail, env, evaluate_fn)


def set_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    """
    (set! name value)
    Same binding rule as define: the nearest frame only, never an outer one.
    """
    return _bind_form("set!", tail, env, evaluate_fn)
