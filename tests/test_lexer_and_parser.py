import pytest
from hypothesis import given, strategies as st

from rscheme.errors import RSchemeLexingError, RSchemeParsingError, RSchemeExprNotTerminatedError
from rscheme.reader.lexer import lex, tokenize
from rscheme.reader.parser import Incomplete, Parser, parse
from rscheme.types.symbol import Symbol
from rscheme.types.tokens import Keyword, Operator, Paren, Token, TokenKind

L = Token(TokenKind.PAREN, Paren.LEFT)
R = Token(TokenKind.PAREN, Paren.RIGHT)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("a", [Token(TokenKind.IDENTIFIER, "a")]),
        ("Foo-Bar?", [Token(TokenKind.IDENTIFIER, "foo-bar?")]),
        ("42", [Token(TokenKind.INTEGER, 42)]),
        ("3.25", [Token(TokenKind.REAL, 3.25)]),
        (".5", [Token(TokenKind.REAL, 0.5)]),
        ("#t #f", [Token(TokenKind.BOOLEAN, True), Token(TokenKind.BOOLEAN, False)]),
        ('"hello world"', [Token(TokenKind.STRING, "hello world")]),
        ('""', [Token(TokenKind.STRING, "")]),
        ("(a)", [L, Token(TokenKind.IDENTIFIER, "a"), R]),
        ("((", [L, L]),
        ("set! let* letrec", [
            Token(TokenKind.KEYWORD, Keyword.ASSIGN),
            Token(TokenKind.KEYWORD, Keyword.LETSEQ),
            Token(TokenKind.KEYWORD, Keyword.LETREC),
        ]),
        ("<= >= and not", [
            Token(TokenKind.OPERATOR, Operator.LE),
            Token(TokenKind.OPERATOR, Operator.GE),
            Token(TokenKind.OPERATOR, Operator.AND),
            Token(TokenKind.OPERATOR, Operator.NOT),
        ]),
        ("(+ 1 2)", [L, Token(TokenKind.OPERATOR, Operator.PLUS), Token(TokenKind.INTEGER, 1), Token(TokenKind.INTEGER, 2), R]),
    ]
)
def test_lexer_basic(source, expected):
    assert tokenize(source) == expected


def test_parens_split_adjacent_words():
    assert tokenize("(car(quote(x)))") == [
        L, Token(TokenKind.KEYWORD, Keyword.CAR),
        L, Token(TokenKind.KEYWORD, Keyword.QUOTE),
        L, Token(TokenKind.IDENTIFIER, "x"), R, R, R,
    ]


def test_string_is_never_subdivided():
    tokens = tokenize('(define s "a (quote b) define )")')
    assert tokens == [
        L,
        Token(TokenKind.KEYWORD, Keyword.DEFINE),
        Token(TokenKind.IDENTIFIER, "s"),
        Token(TokenKind.STRING, "a (quote b) define )"),
        R,
    ]


@pytest.mark.parametrize("source", ["@", "(+ 1 $x)", "12abc", "-5", "#x", "1.2.3", '"open'])
def test_lexer_rejects_unrecognized_tokens(source):
    with pytest.raises(RSchemeLexingError):
        tokenize(source)


def test_lexing_error_names_offending_token():
    with pytest.raises(RSchemeLexingError, match=r"\$x"):
        tokenize("(+ 1 $x)")


def test_lex_is_lazy():
    tokens = lex("a $")
    assert next(tokens) == Token(TokenKind.IDENTIFIER, "a")
    with pytest.raises(RSchemeLexingError):
        next(tokens)


@pytest.mark.parametrize(
    "source, expected",
    [
        ("123", 123),
        ("3.14", 3.14),
        ("#f", False),
        ('"hi"', "hi"),
        ("abc", Symbol("abc")),
        ("()", []),
        ("(a b c)", [Symbol("a"), Symbol("b"), Symbol("c")]),
        ("((a b) (c d))", [[Symbol("a"), Symbol("b")], [Symbol("c"), Symbol("d")]]),
        ("(quote (1 2))", [Keyword.QUOTE, [1, 2]]),
        ("(* x 2)", [Operator.MULT, Symbol("x"), 2]),
    ]
)
def test_parser(source, expected):
    result = parse(source)
    assert result == [expected]


def test_parse_multiple_top_level_expressions():
    assert parse("1 (a) b") == [1, [Symbol("a")], Symbol("b")]


def test_parse_unclosed_raises_not_terminated():
    with pytest.raises(RSchemeExprNotTerminatedError):
        parse("(a (b)")


def test_parse_unmatched_close_raises():
    with pytest.raises(RSchemeParsingError, match="unmatched"):
        parse("(a))")


# -------------------------------
# Incremental parsing
# -------------------------------
def test_feed_complete_line():
    parser = Parser()
    assert parser.feed("(+ 1 2)") == [[Operator.PLUS, 1, 2]]
    assert parser.buffer == ""
    assert not parser.pending


def test_feed_bare_atom_is_complete():
    parser = Parser()
    assert parser.feed("x") == [Symbol("x")]


def test_feed_blank_line_is_complete_and_empty():
    assert Parser().feed("   ") == []


def test_feed_incomplete_then_complete():
    parser = Parser()
    assert parser.feed("(define x") is Incomplete
    assert parser.pending
    assert parser.depth == 1
    assert parser.feed("(+ 1") is Incomplete
    assert parser.depth == 2
    # lines are joined with a newline, so words never merge across lines
    assert parser.feed("2))") == [[Keyword.DEFINE, Symbol("x"), [Operator.PLUS, 1, 2]]]
    assert parser.depth == 0
    assert parser.buffer == ""


def test_feed_lexing_error_discards_buffer():
    parser = Parser()
    assert parser.feed("(define x") is Incomplete
    with pytest.raises(RSchemeLexingError):
        parser.feed("$oops)")
    assert parser.buffer == ""
    assert parser.depth == 0
    assert parser.feed("1") == [1]


def test_feed_unmatched_close_discards_buffer():
    parser = Parser()
    with pytest.raises(RSchemeParsingError):
        parser.feed("(a))")
    assert parser.buffer == ""
    assert parser.feed("(b)") == [[Symbol("b")]]


def test_feed_incomplete_is_falsy_marker():
    assert not Incomplete
    assert repr(Incomplete) == "Incomplete"


# -------------------------------
# Strategies
# -------------------------------
identifier_strat = st.from_regex(r"[a-z_][a-z0-9.+?!-]{0,8}", fullmatch=True).filter(
    lambda s: s not in ("and", "or", "not", "if", "let", "car", "cdr", "cons", "quote", "define", "lambda", "letrec")
)
integer_strat = st.integers(min_value=0, max_value=10**6).map(str)
string_strat = st.text(st.characters(blacklist_characters='"', blacklist_categories=("Cs",)), max_size=10).map(lambda s: f'"{s}"')
atom_strat = st.one_of(identifier_strat, integer_strat, string_strat, st.sampled_from(["#t", "#f", "+", "<="]))

sexpr_strat = st.recursive(
    atom_strat,
    lambda children: st.lists(children, max_size=4).map(lambda xs: "(" + " ".join(xs) + ")"),
    max_leaves=20,
)


# -------------------------------
# Hypothesis tests
# -------------------------------
@given(sexpr_strat)
def test_balanced_input_parses_to_one_expression(source):
    assert len(parse(source)) == 1


@given(sexpr_strat, st.integers(min_value=1, max_value=5))
def test_extra_open_parens_stay_incomplete_until_balanced(source, extra):
    parser = Parser()
    assert parser.feed("(" * extra + source) is Incomplete
    for _ in range(extra - 1):
        assert parser.feed(")") is Incomplete
    result = parser.feed(")")
    assert result is not Incomplete
    assert len(result) == 1
