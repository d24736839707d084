"""Core evaluator for the RScheme interpreter.

A plain recursive tree-walker: special forms and operators are dispatched
through their registries, everything else is closure application. Recursion
depth follows expression and call nesting; there is no tail-call
elimination, so very deep recursion ends in RecursionError (turned into an
RSchemeRuntimeError by the Interpreter).
"""

from __future__ import annotations

from rscheme import SExpression, LispValue
from rscheme.errors import RSchemeRuntimeError
from rscheme.evaluation.apply import apply
from rscheme.evaluation.operators import OPERATORS
from rscheme.evaluation.special_forms import SPECIAL_FORMS
from rscheme.printer import to_string
from rscheme.types.closure import Closure
from rscheme.types.environment import Environment
from rscheme.types.symbol import Symbol
from rscheme.types.tokens import Keyword, Operator


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """Evaluate `expr` in `env` and return its value."""
    match expr:
        # --- Literals (and closures spliced into a tree) are self-evaluating ---
        case bool() | int() | float() | str() | Closure():
            return expr

        case Symbol():
            return env.lookup(expr)

        case []:
            return []

        # --- Special forms ---
        case [Keyword() as keyword, *tail]:
            return SPECIAL_FORMS[keyword](tail, env, evaluate)

        # --- Operators ---
        case [Operator() as op, *tail]:
            return OPERATORS[op](tail, env, evaluate)

        # --- Closure application: head may be an identifier, a list or a closure ---
        case [head, *tail]:
            fn = evaluate(head, env)
            if not isinstance(fn, Closure):
                raise RSchemeRuntimeError(f"cannot apply {to_string(fn)}")
            args = [evaluate(arg, env) for arg in tail]
            return apply(fn, args, evaluate)

    raise RSchemeRuntimeError(f"unrecognized token type {type(expr).__name__}: {expr!r}")
