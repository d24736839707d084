"""Application engine for RScheme.

Each call binds the already evaluated arguments in a fresh frame layered
over the closure's captured environment (see Closure.extend_env) and
evaluates the body there.
"""

import logging

from rscheme import LispValue, EvaluatorFn
from rscheme.types.closure import Closure

logger = logging.getLogger(__name__)


def apply(closure: Closure, args: list[LispValue], evaluate_fn: EvaluatorFn) -> LispValue:
    """Apply a Closure to evaluated arguments.

    Raises RSchemeArityError when the argument count differs from the
    closure's formals. The evaluator rejects non-closure heads before the
    arguments are evaluated.
    """
    call_env = closure.extend_env(args)
    logger.debug("Applying %s to %s", closure, args)
    return evaluate_fn(closure.body, call_env)
