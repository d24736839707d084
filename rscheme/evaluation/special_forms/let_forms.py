"""let, let* and letrec.

Each form creates exactly one child frame over the current environment and
evaluates its body there. They differ only in where the binding values are
evaluated:

- let:    in the outer environment, so bindings cannot see each other;
- let*:   in the child frame as it grows, so later bindings see earlier ones;
- letrec: in the child frame after every name has been introduced, so the
          bound lambdas can refer to each other and to themselves.
"""

from rscheme import EvaluatorFn
from rscheme import SExpression, LispValue
from rscheme.errors import RSchemeArityError, RSchemeTypeError
from rscheme.types.environment import Environment
from rscheme.types.symbol import Symbol


def _split_let(
    form: str, tail: list[SExpression]
) -> tuple[list[tuple[Symbol, SExpression]], SExpression]:
    """Validate `(form ((name expr) ...) body)` and return (bindings, body)."""
    if len(tail) != 2:
        raise RSchemeArityError(f"{form} requires a binding list and a body")

    binding_list, body = tail
    if not isinstance(binding_list, list):
        raise RSchemeTypeError(f"{form} bindings must be a list, got {binding_list}")

    bindings = []
    for binding in binding_list:
        if not (isinstance(binding, list) and len(binding) == 2 and isinstance(binding[0], Symbol)):
            raise RSchemeTypeError(f"{form} binding must be of the form (name value), got {binding}")
        bindings.append((binding[0], binding[1]))
    return bindings, body


def let_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    bindings, body = _split_let("let", tail)
    let_env = env.child()
    for name, val_expr in bindings:
        let_env.bind(name, evaluate_fn(val_expr, env))
    return evaluate_fn(body, let_env)


def let_seq_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    bindings, body = _split_let("let*", tail)
    let_env = env.child()
    for name, val_expr in bindings:
        let_env.bind(name, evaluate_fn(val_expr, let_env))
    return evaluate_fn(body, let_env)


def letrec_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    bindings, body = _split_let("letrec", tail)
    let_env = env.child()
    for name, _ in bindings:  # first round extends the environment
        let_env.extend(name)
    for name, val_expr in bindings:  # second round binds the values
        let_env.bind(name, evaluate_fn(val_expr, let_env))
    return evaluate_fn(body, let_env)
