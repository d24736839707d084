"""Token vocabulary shared by the lexer, the parser and the evaluator.

Keyword and Operator members double as leaves of the parsed tree, so the
evaluator can dispatch on them directly.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, NamedTuple


class TokenKind(Enum):
    PAREN = "paren"
    KEYWORD = "keyword"
    OPERATOR = "operator"
    INTEGER = "integer"
    REAL = "real"
    BOOLEAN = "boolean"
    STRING = "string"
    IDENTIFIER = "identifier"


class Paren(Enum):
    LEFT = "("
    RIGHT = ")"


class Keyword(Enum):
    QUOTE = "quote"
    DEFINE = "define"
    ASSIGN = "set!"
    LAMBDA = "lambda"
    IF = "if"
    LET = "let"
    LETSEQ = "let*"
    LETREC = "letrec"
    CAR = "car"
    CDR = "cdr"
    CONS = "cons"

    def __str__(self) -> str:
        return self.value


class Operator(Enum):
    PLUS = "+"
    MINUS = "-"
    MULT = "*"
    DIV = "/"
    EQUAL = "="
    LT = "<"
    LE = "<="
    GT = ">"
    GE = ">="
    AND = "and"
    OR = "or"
    NOT = "not"

    def __str__(self) -> str:
        return self.value


KEYWORDS: dict[str, Keyword] = {k.value: k for k in Keyword}
OPERATORS: dict[str, Operator] = {op.value: op for op in Operator}


class Token(NamedTuple):
    kind: TokenKind
    value: Any

    def __str__(self) -> str:
        if self.kind is TokenKind.PAREN:
            return self.value.value
        if self.kind is TokenKind.BOOLEAN:
            return "#t" if self.value else "#f"
        if self.kind is TokenKind.STRING:
            return f'"{self.value}"'
        return str(self.value)
