"""Closure representation and argument binding for RScheme."""

from __future__ import annotations

from io import StringIO

from rscheme import SExpression, LispValue
from rscheme.errors import RSchemeArityError
from rscheme.types.environment import Environment
from rscheme.types.symbol import Symbol


class Closure:
    """A first-class procedure: formal parameters, body, and captured env."""

    __slots__ = ("formals", "body", "env")

    def __init__(self, formals: list[Symbol], body: SExpression, env: Environment):
        self.formals: list[Symbol] = formals
        self.body: SExpression = body
        self.env: Environment = env

    @property
    def arity(self) -> int:
        return len(self.formals)

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("#<closure (")
            buffer.write(" ".join(str(f) for f in self.formals))
            buffer.write(")>")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return str(self)

    def extend_env(self, args: list[LispValue]) -> Environment:
        """
        Bind the given argument values to this closure's formal parameters
        and return a new Environment for evaluating the body.

        The frame is a fresh child of the captured environment; the captured
        environment itself is never written to, so calls stay isolated.
        """
        if len(args) != self.arity:
            raise RSchemeArityError(
                f"{self} called with wrong number of arguments: "
                f"expected {self.arity}, received {len(args)}"
            )
        call_env = self.env.child()
        for formal, actual in zip(self.formals, args):
            call_env.bind(formal, actual)
        return call_env
