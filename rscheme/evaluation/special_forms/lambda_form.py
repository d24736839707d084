import logging

from rscheme import EvaluatorFn
from rscheme import SExpression, LispValue
from rscheme.errors import RSchemeArityError, RSchemeTypeError
from rscheme.types.closure import Closure
from rscheme.types.environment import Environment
from rscheme.types.symbol import Symbol

logger = logging.getLogger(__name__)


def lambda_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    # (lambda (params) body): exactly one body expression.
    if len(tail) != 2:
        raise RSchemeArityError("lambda requires a parameter list and a body")

    params, body = tail
    if not isinstance(params, list):
        raise RSchemeTypeError(f"lambda parameter list must be a list, got {params}")
    for param in params:
        if not isinstance(param, Symbol):
            raise RSchemeTypeError(f"lambda parameter must be an identifier, got {param}")
    if len(set(params)) != len(params):
        raise RSchemeTypeError("lambda parameters must be distinct")

    closure = Closure(list(params), body, env)
    logger.debug("Closure created: %s", closure)
    return closure
