"""
  RScheme tokenizer

- Parentheses are always their own tokens, whatever surrounds them.
- Double-quoted text is a single string token and is never split, even when
  it holds whitespace, reserved words or parentheses.
- Every other whitespace-delimited word is classified against the keyword
  and operator tables, then by shape: integer, real, boolean, identifier.
  Identifiers are case-folded to lowercase.
- A word matching none of those raises RSchemeLexingError; no partial token
  list is ever returned by `tokenize`.
"""

from __future__ import annotations

import re
from typing import Iterator

from rscheme.errors import RSchemeLexingError
from rscheme.types.tokens import KEYWORDS, OPERATORS, Paren, Token, TokenKind


TOKEN_RE = re.compile(
    r"(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r'|(?P<string>"[^"]*")'  # double-quoted strings, no escapes
    r'|(?P<unterminated>"[^"]*\Z)'  # opening quote with no partner
    r'|(?P<word>[^\s()"]+)',  # everything else up to a delimiter
)
WHITESPACE_RE = re.compile(r"\s*")

INTEGER_RE = re.compile(r"[0-9]+")
REAL_RE = re.compile(r"[0-9]*\.[0-9]+")
IDENTIFIER_RE = re.compile(r"[A-Za-z_][A-Za-z0-9.+?!-]*")

BOOLEANS: dict[str, bool] = {"#t": True, "#f": False}

LEFT = Token(TokenKind.PAREN, Paren.LEFT)
RIGHT = Token(TokenKind.PAREN, Paren.RIGHT)


def classify(word: str) -> Token:
    """Turn one whitespace-delimited word into a token."""
    if word in KEYWORDS:
        return Token(TokenKind.KEYWORD, KEYWORDS[word])
    if word in OPERATORS:
        return Token(TokenKind.OPERATOR, OPERATORS[word])
    if INTEGER_RE.fullmatch(word):
        return Token(TokenKind.INTEGER, int(word))
    if REAL_RE.fullmatch(word):
        return Token(TokenKind.REAL, float(word))
    if word in BOOLEANS:
        return Token(TokenKind.BOOLEAN, BOOLEANS[word])
    if IDENTIFIER_RE.fullmatch(word):
        return Token(TokenKind.IDENTIFIER, word.lower())
    raise RSchemeLexingError(f"Lexing error: unrecognized token {word}")


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields Token(kind, value) tuples."""
    pos = 0
    n = len(source)

    while True:
        pos = WHITESPACE_RE.match(source, pos).end()
        if pos >= n:
            return

        m = TOKEN_RE.match(source, pos)
        if m is None:  # pragma: no cover - the word group accepts any non-delimiter
            raise RSchemeLexingError(f"Lexing error: unexpected character {source[pos]!r}")
        pos = m.end()

        if m.group("lparen"):
            yield LEFT
        elif m.group("rparen"):
            yield RIGHT
        elif m.group("string") is not None:
            yield Token(TokenKind.STRING, m.group("string")[1:-1])
        elif m.group("unterminated") is not None:
            raise RSchemeLexingError(
                f"Lexing error: unterminated string {m.group('unterminated').rstrip()}"
            )
        else:
            yield classify(m.group("word"))


def tokenize(source: str) -> list[Token]:
    """Tokenize all of `source` eagerly."""
    return list(lex(source))
