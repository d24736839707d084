from __future__ import annotations

"""
Lightweight indexer for RScheme files without evaluating code.

We scan the buffer with the interpreter's own token rules and record:
- definitions: top-level (define name ...) forms, with positions
- paren balance at end of buffer
- problems: unrecognized tokens, unterminated strings, unmatched ')'

The scan is tolerant: a bad token is recorded and skipped so one typo does
not hide every later definition.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from rscheme.errors import RSchemeLexingError
from rscheme.reader.lexer import TOKEN_RE, WHITESPACE_RE, classify
from rscheme.types.tokens import Keyword, Operator, Token, TokenKind


@dataclass
class SymbolDef:
    name: str
    kind: str  # "var" | "function"
    line: int
    col: int


@dataclass
class Problem:
    message: str
    line: int
    col: int
    length: int


@dataclass
class DocumentIndex:
    symbols: Dict[str, SymbolDef] = field(default_factory=dict)
    problems: List[Problem] = field(default_factory=list)
    paren_balance: int = 0


@dataclass
class _Item:
    text: str
    token: Optional[Token]
    start: int


def _position_from_offset(text: str, offset: int) -> Tuple[int, int]:
    # Return (line, col), 0-based
    line = text.count("\n", 0, offset)
    last_nl = text.rfind("\n", 0, offset)
    col = offset if last_nl == -1 else offset - last_nl - 1
    return line, col


def _problem(idx: DocumentIndex, text: str, message: str, start: int, length: int) -> None:
    line, col = _position_from_offset(text, start)
    idx.problems.append(Problem(message=message, line=line, col=col, length=max(length, 1)))


def _scan(text: str, idx: DocumentIndex) -> List[_Item]:
    items: List[_Item] = []
    pos = 0
    while True:
        pos = WHITESPACE_RE.match(text, pos).end()
        if pos >= len(text):
            return items
        m = TOKEN_RE.match(text, pos)
        raw = m.group(0)
        if m.group("unterminated") is not None:
            _problem(idx, text, "Unterminated string", pos, len(raw.split("\n", 1)[0].rstrip()))
        elif m.group("word"):
            try:
                items.append(_Item(raw, classify(raw), pos))
            except RSchemeLexingError:
                _problem(idx, text, f"Unrecognized token {raw}", pos, len(raw))
        else:
            # parens and strings never fail to classify
            items.append(_Item(raw, None, pos))
        pos = m.end()


def _is_left(item: _Item) -> bool:
    return item.text == "("


def _kind_of_value(items: List[_Item], i: int) -> str:
    # (define name (lambda ...)) is a function, anything else a var
    if i + 1 < len(items) and _is_left(items[i]):
        tok = items[i + 1].token
        if tok is not None and tok.kind is TokenKind.KEYWORD and tok.value is Keyword.LAMBDA:
            return "function"
    return "var"


def build_index(text: str) -> DocumentIndex:
    idx = DocumentIndex()
    items = _scan(text, idx)

    depth = 0
    for i, item in enumerate(items):
        if _is_left(item):
            depth += 1
            if depth != 1 or i + 2 >= len(items):
                continue
            head, name = items[i + 1].token, items[i + 2].token
            if (
                head is not None
                and head.kind is TokenKind.KEYWORD
                and head.value is Keyword.DEFINE
                and name is not None
                and name.kind is TokenKind.IDENTIFIER
            ):
                line, col = _position_from_offset(text, items[i + 2].start)
                idx.symbols[name.value] = SymbolDef(
                    name=name.value, kind=_kind_of_value(items, i + 3), line=line, col=col
                )
        elif item.text == ")":
            if depth == 0:
                _problem(idx, text, "Unmatched ')'", item.start, 1)
                continue
            depth -= 1

    idx.paren_balance = depth
    idx.problems.sort(key=lambda p: (p.line, p.col))
    return idx


# Signatures for quick hover/signature help without eval
BUILTIN_SIGNATURES: Dict[str, str] = {
    Keyword.QUOTE.value: "(quote datum)",
    Keyword.DEFINE.value: "(define name value)",
    Keyword.ASSIGN.value: "(set! name value)",
    Keyword.LAMBDA.value: "(lambda (formals) body)",
    Keyword.IF.value: "(if test then else)",
    Keyword.LET.value: "(let ((name value) ...) body)",
    Keyword.LETSEQ.value: "(let* ((name value) ...) body)",
    Keyword.LETREC.value: "(letrec ((name value) ...) body)",
    Keyword.CAR.value: "(car xs)",
    Keyword.CDR.value: "(cdr xs)",
    Keyword.CONS.value: "(cons x xs)",
    Operator.PLUS.value: "(+ nums...)",
    Operator.MINUS.value: "(- x nums...)",
    Operator.MULT.value: "(* nums...)",
    Operator.DIV.value: "(/ x nums...)",
    Operator.EQUAL.value: "(= x y...)",
    Operator.LT.value: "(< x y...)",
    Operator.LE.value: "(<= x y...)",
    Operator.GT.value: "(> x y...)",
    Operator.GE.value: "(>= x y...)",
    Operator.AND.value: "(and bools...)",
    Operator.OR.value: "(or bools...)",
    Operator.NOT.value: "(not bool)",
}
