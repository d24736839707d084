"""
  RScheme parser

Builds nested Python lists out of the token stream:

    - ( ... )      -> list
    - identifiers  -> Symbol
    - keywords     -> Keyword member
    - operators    -> Operator member
    - literals     -> int / float / bool / str

`Parser` accumulates input line by line. While more `(` than `)` have been
seen it reports `Incomplete` and keeps the buffered text; once balanced it
clears the buffer and returns every completed top-level expression.
"""

from __future__ import annotations

import logging
from typing import Iterable, Union

from rscheme import SExpression
from rscheme.errors import RSchemeError, RSchemeExprNotTerminatedError, RSchemeParsingError
from rscheme.reader.lexer import tokenize
from rscheme.types.symbol import Symbol
from rscheme.types.tokens import Paren, Token, TokenKind

logger = logging.getLogger(__name__)


class IncompleteType:
    """Marker returned by Parser.feed while an expression is still open."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self): return "Incomplete"
    def __bool__(self): return False


Incomplete = IncompleteType()

FeedResult = Union[list[SExpression], IncompleteType]


def leaf(token: Token) -> SExpression:
    """Tree value for a non-parenthesis token."""
    if token.kind is TokenKind.IDENTIFIER:
        return Symbol(token.value)
    return token.value


def build(tokens: Iterable[Token]) -> tuple[list[SExpression], int]:
    """Fold tokens into top-level expressions.

    Returns the completed expressions and the number of lists still open.
    Raises RSchemeParsingError on a `)` with nothing to close.
    """
    list_stack: list[list[SExpression]] = []
    current: list[SExpression] = []

    for token in tokens:
        if token.kind is TokenKind.PAREN:
            if token.value is Paren.LEFT:
                list_stack.append(current)
                current = []
            else:
                if not list_stack:
                    raise RSchemeParsingError("Syntax error: unmatched )")
                closed = current
                current = list_stack.pop()
                current.append(closed)
        else:
            current.append(leaf(token))

    if list_stack:
        return list_stack[0], len(list_stack)
    return current, 0


class Parser:
    """Incremental reader that accepts input one line at a time."""

    def __init__(self):
        self.buffer: str = ""
        self.depth: int = 0

    @property
    def pending(self) -> bool:
        """True while the buffer holds an unfinished expression."""
        return self.depth > 0

    def reset(self) -> None:
        self.buffer = ""
        self.depth = 0

    def feed(self, line: str) -> FeedResult:
        """Append `line` and try to parse everything buffered so far."""
        if self.buffer and not self.buffer.endswith("\n"):
            self.buffer += "\n"
        self.buffer += line

        try:
            tokens = tokenize(self.buffer)
            logger.debug("Tokens: %s", tokens)
            exprs, depth = build(tokens)
        except RSchemeError:
            self.reset()
            raise

        if depth:
            self.depth = depth
            return Incomplete

        self.reset()
        logger.debug("AST: %s", exprs)
        return exprs


def parse(source: str) -> list[SExpression]:
    """Parse complete source text in one go."""
    exprs, depth = build(tokenize(source))
    if depth:
        raise RSchemeExprNotTerminatedError(f"Syntax error: {depth} unclosed (")
    return exprs
