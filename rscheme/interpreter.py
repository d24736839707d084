from __future__ import annotations

import logging

from rscheme import SExpression, LispValue
from rscheme.config import apply_recursion_limit
from rscheme.errors import RSchemeRuntimeError
from rscheme.evaluation.evaluator import evaluate
from rscheme.reader.parser import FeedResult, Incomplete, Parser, parse
from rscheme.types.environment import Environment, make_global_env
from rscheme.types.nil import Nil

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Reads and evaluates RScheme code against one global Environment.
    Definitions persist across calls; independent instances never share state.
    """

    def __init__(self, env: Environment | None = None):
        apply_recursion_limit()
        self.env: Environment = env if env is not None else make_global_env()
        self.parser: Parser = Parser()

    @property
    def depth(self) -> int:
        """Number of parentheses still open in the pending input."""
        return self.parser.depth

    def evaluate(self, expr: SExpression) -> LispValue:
        try:
            return evaluate(expr, self.env)
        except RecursionError:
            logger.debug("Recursion limit hit while evaluating %s", expr)
            raise RSchemeRuntimeError("maximum recursion depth exceeded") from None

    def feed(self, line: str) -> FeedResult:
        """Feed one line of input.

        Returns Incomplete while parentheses remain open, otherwise the values
        of every expression the line completed. An error aborts the remaining
        expressions; bindings made before it are kept.
        """
        exprs = self.parser.feed(line)
        if exprs is Incomplete:
            return Incomplete
        return [self.evaluate(expr) for expr in exprs]

    def eval(self, code: str) -> LispValue:
        """Evaluate complete source text and return the value of the last expression."""
        result: LispValue = Nil
        for expr in parse(code):
            result = self.evaluate(expr)
        return result
