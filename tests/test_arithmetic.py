import pytest
from hypothesis import given, strategies as st

from rscheme.errors import RSchemeArityError, RSchemeRuntimeError, RSchemeTypeError
from rscheme.interpreter import Interpreter


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 1 2 3)", 6),
        ("(- 10 3 2)", 5),
        ("(* 2 3 4)", 24),
        ("(+ (* 2 3) (- 10 4))", 12),
        ("(+ 1 (* 2 (+ 3 4) (- 10 6)))", 57),
        ("(+)", 0),
        ("(*)", 1),
        ("(- 5)", -5),
        ("(- 2.5)", -2.5),
        ("(/ 12 3)", 4),
        ("(/ 12 3 2)", 2),
        ("(/ 1 2)", 0.5),
        ("(/ 2)", 0.5),
        ("(/ 1)", 1),
        ("(/ 7 2 2)", 1.75),
        ("(/ 9 1.5)", 6.0),
        ("(/ (+ 20 10) (* 2 5))", 3),
    ]
)
def test_arithmetic(run, source, expected):
    assert run(source) == expected


@pytest.mark.parametrize(
    "source,expected_type",
    [
        ("(+ 1 2)", int),
        ("(+ 1 2.5)", float),
        ("(+ 1.5 1.5)", float),
        ("(* 2 0.5)", float),
        ("(- 3 1.0)", float),
        ("(/ 6 3)", int),
        ("(/ 6 4)", float),
        ("(/ 6.0 3)", float),
    ]
)
def test_result_type(run, source, expected_type):
    assert type(run(source)) is expected_type


def test_mixed_addition(run):
    result = run("(+ 1 2.5)")
    assert result == 3.5 and isinstance(result, float)


@pytest.mark.parametrize("source", ["(/ 1 0)", "(/ 0)", "(/ 5 2 0)", "(/ 1 0.0)"])
def test_division_by_zero(run, source):
    with pytest.raises(RSchemeRuntimeError, match="division by zero"):
        run(source)


BIG = "1" * 400


@pytest.mark.parametrize(
    "source",
    [f"(+ {BIG} 0.5)", f"(* {BIG} 1.5)", f"(- {BIG} 0.5)", f"(/ {BIG} 3)", f"(/ 2.5 {BIG} {BIG})"],
)
def test_float_overflow_is_a_runtime_error(run, source):
    with pytest.raises(RSchemeRuntimeError, match="numeric overflow"):
        run(source)


def test_big_integers_stay_exact(run):
    assert run(f"(+ {BIG} 1)") == int(BIG) + 1
    assert run(f"(/ (* {BIG} 3) 3)") == int(BIG)


@pytest.mark.parametrize("source", ["(-)", "(/)"])
def test_minus_and_divide_need_an_operand(run, source):
    with pytest.raises(RSchemeArityError):
        run(source)


@pytest.mark.parametrize(
    "source", ["(+ 1 #t)", '(* 2 "3")', "(- (quote (1)))", "(/ 1 (quote x))", "(< 1 #f)", '(= "a" "a")']
)
def test_non_numbers_rejected(run, source):
    with pytest.raises(RSchemeTypeError, match="non-number"):
        run(source)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(= 1 1)", True),
        ("(= 1 1.0)", True),
        ("(= 1 1 2)", False),
        ("(< 1 2 3)", True),
        ("(< 1 3 2)", False),
        ("(<= 1 1 2)", True),
        ("(> 3 2.5 1)", True),
        ("(>= 3 3 4)", False),
        ("(<)", True),
        ("(= 5)", True),
    ]
)
def test_comparisons(run, source, expected):
    assert run(source) is expected


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(and)", True),
        ("(or)", False),
        ("(and #t #t)", True),
        ("(and #t #f)", False),
        ("(or #f #t)", True),
        ("(or #f #f)", False),
        ("(not #f)", True),
        ("(not (< 1 2))", False),
        # short-circuit: the unbound name is never evaluated
        ("(and #f undefined-name)", False),
        ("(or #t undefined-name)", True),
    ]
)
def test_boolean_operators(run, source, expected):
    assert run(source) is expected


@pytest.mark.parametrize("source", ["(and #t 1)", "(or #f 0)", "(not 0)"])
def test_boolean_operators_require_booleans(run, source):
    with pytest.raises(RSchemeTypeError, match="non-boolean"):
        run(source)


@pytest.mark.parametrize("source", ["(not)", "(not #t #f)"])
def test_not_is_unary(run, source):
    with pytest.raises(RSchemeArityError):
        run(source)


# -------------------------------
# Hypothesis tests
# -------------------------------
ints = st.integers(min_value=0, max_value=10**9)
reals = st.floats(min_value=0, max_value=1e6, allow_nan=False, allow_infinity=False)


def _literal(n):
    return repr(n) if isinstance(n, int) else f"{n:.6f}"


@given(st.lists(ints, min_size=1, max_size=6))
def test_integer_sums_stay_integer(values):
    result = Interpreter().eval("(+ " + " ".join(map(str, values)) + ")")
    assert result == sum(values)
    assert type(result) is int


@given(st.lists(ints, min_size=1, max_size=4), reals)
def test_any_real_operand_makes_result_real(values, real):
    source = "(* " + " ".join(map(_literal, values)) + " " + _literal(real) + ")"
    assert type(Interpreter().eval(source)) is float


@given(st.lists(st.integers(min_value=0, max_value=1000), min_size=2, max_size=6))
def test_chained_less_than_matches_python(values):
    result = Interpreter().eval("(< " + " ".join(map(str, values)) + ")")
    assert result is all(a < b for a, b in zip(values, values[1:]))
