"""Tests for ratalg.numbers: modes, scalar dispatch and formatting."""
import pytest

from ratalg.errors import DivisionByZero, EntryError
from ratalg.numbers import mode as mode_module
from ratalg.numbers import scalar as S
from ratalg.numbers.formatting import format_matrix, format_scalar, format_vector, vector_text
from ratalg.numbers.mode import DEFAULT_MODE, NumericMode
from ratalg.numbers.rational import RationalNumber


RATIONAL = NumericMode(format_type="rational")
DECIMAL = NumericMode(format_type="decimal", precision=4)
INTEGER = NumericMode(format_type="integer")


# --- NumericMode ---

def test_default_mode():
    assert DEFAULT_MODE.format_type == "rational"
    assert DEFAULT_MODE.precision == 10
    assert DEFAULT_MODE.max_iterations == 20
    assert DEFAULT_MODE.exact


def test_decimal_is_not_exact():
    assert not DECIMAL.exact
    assert NumericMode(format_type="fraction").exact
    assert INTEGER.exact


def test_unknown_format_type():
    with pytest.raises(EntryError):
        NumericMode(format_type="hex")


def test_negative_precision_rejected():
    with pytest.raises(EntryError):
        NumericMode(precision=-1)


@pytest.mark.parametrize(
    "field, value",
    [("precision", "3"), ("precision", 2.5), ("max_iterations", "20"), ("max_order", True), ("zero_tolerance", "1e-10")],
)
def test_mode_rejects_wrong_types(field, value):
    with pytest.raises(EntryError):
        NumericMode(**{field: value})


def test_mode_is_immutable():
    with pytest.raises(AttributeError):
        RATIONAL.precision = 3


def test_replace_returns_new_mode():
    m = RATIONAL.replace(precision=3)
    assert m.precision == 3
    assert RATIONAL.precision == 10


def test_from_env(monkeypatch):
    monkeypatch.setattr(mode_module, "RATALG_FORMAT", "decimal")
    monkeypatch.setattr(mode_module, "RATALG_PRECISION", "6")
    m = NumericMode.from_env()
    assert m.format_type == "decimal"
    assert m.precision == 6


def test_from_env_bad_precision(monkeypatch):
    monkeypatch.setattr(mode_module, "RATALG_PRECISION", "six")
    with pytest.raises(EntryError):
        NumericMode.from_env()


# --- coercion ---

def test_coerce_exact_mode():
    assert S.coerce(3, RATIONAL) == RationalNumber(3)
    assert S.coerce("2/4", RATIONAL) == RationalNumber(1, 2)
    assert S.coerce(0.25, RATIONAL) == RationalNumber(1, 4)
    assert isinstance(S.coerce(0.25, RATIONAL), RationalNumber)


def test_coerce_decimal_mode():
    x = S.coerce("1/4", DECIMAL)
    assert isinstance(x, float)
    assert x == 0.25
    assert S.coerce(RationalNumber(1, 2), DECIMAL) == 0.5


@pytest.mark.parametrize("bad", [True, None, [1], {"a": 1}, float("nan")])
def test_coerce_rejects(bad):
    with pytest.raises(EntryError):
        S.coerce(bad, RATIONAL)


# --- promotion and dispatch ---

def test_float_pair_stays_float_in_decimal_mode():
    assert isinstance(S.add(0.5, 0.25, DECIMAL), float)


def test_mixed_operands_promote_to_rational():
    r = S.add(RationalNumber(1, 2), 0.25, DECIMAL)
    assert isinstance(r, RationalNumber)
    assert r == RationalNumber(3, 4)


def test_exact_mode_promotes_floats():
    r = S.multiply(0.5, 0.5, RATIONAL)
    assert r == RationalNumber(1, 4)


def test_all_operand_combinations():
    half = RationalNumber(1, 2)
    for a in (half, 0.5):
        for b in (half, 0.5):
            assert S.to_float(S.add(a, b, DECIMAL)) == 1.0
            assert S.to_float(S.subtract(a, b, DECIMAL)) == 0.0
            assert S.to_float(S.multiply(a, b, DECIMAL)) == 0.25
            assert S.to_float(S.divide(a, b, DECIMAL)) == 1.0


def test_divide_by_zero_rational():
    with pytest.raises(DivisionByZero):
        S.divide(RationalNumber(1), RationalNumber(0), RATIONAL)


def test_divide_by_zero_float():
    with pytest.raises(DivisionByZero):
        S.divide(1.0, 0.0, DECIMAL)


def test_square_root_is_float():
    assert S.square_root(RationalNumber(9, 4)) == 1.5
    with pytest.raises(EntryError):
        S.square_root(RationalNumber(-1))


# --- zero tests ---

def test_is_zero_exact_for_rationals():
    tiny = RationalNumber(1, 10**15)
    assert not S.is_zero(tiny, RATIONAL)
    assert S.is_zero(RationalNumber(0), RATIONAL)


def test_is_zero_tolerance_for_floats():
    assert S.is_zero(1e-12, DECIMAL)
    assert not S.is_zero(1e-8, DECIMAL)
    assert S.is_zero(1e-8, DECIMAL.replace(zero_tolerance=1e-6))


def test_equals():
    assert S.equals(RationalNumber(1, 3), RationalNumber(2, 6), RATIONAL)
    assert S.equals(0.1 + 0.2, 0.3, DECIMAL)


# --- formatting ---

def test_format_rational():
    assert format_scalar(RationalNumber(-3, 4), RATIONAL) == "-3/4"
    assert format_scalar(RationalNumber(5), RATIONAL) == "5"


def test_format_fraction_same_as_rational():
    m = NumericMode(format_type="fraction")
    assert format_scalar(RationalNumber(2, 3), m) == "2/3"


def test_format_decimal_strips_zeros():
    assert format_scalar(0.5, DECIMAL) == "0.5"
    assert format_scalar(RationalNumber(1, 3), DECIMAL) == "0.3333"
    assert format_scalar(2.0, DECIMAL) == "2"
    assert format_scalar(-0.00001, DECIMAL) == "0"


def test_format_integer_rounds_half_up():
    assert format_scalar(RationalNumber(5, 2), INTEGER) == "3"
    assert format_scalar(RationalNumber(-5, 2), INTEGER) == "-2"
    assert format_scalar(RationalNumber(7, 3), INTEGER) == "2"


def test_format_large_fraction_falls_back_to_decimal():
    m = RATIONAL.replace(precision=6)
    big = RationalNumber(1, 3_000_001)
    assert format_scalar(big, m) == "0"
    assert format_scalar(RationalNumber(3_000_001, 2), m) == "1500000.5"
    assert format_scalar(RationalNumber(1, 999_999), m) == "1/999999"


def test_format_vector_and_matrix():
    row = [RationalNumber(1, 2), RationalNumber(2)]
    assert format_vector(row, RATIONAL) == ["1/2", "2"]
    assert format_matrix([row, row], RATIONAL) == [["1/2", "2"], ["1/2", "2"]]
    assert vector_text(row, RATIONAL) == "(1/2, 2)"


def test_format_huge_rational_without_float_overflow():
    huge = RationalNumber(10 ** 400 + 1, 2)
    assert format_scalar(huge, DECIMAL) == "5" + "0" * 399 + ".5"
    assert format_scalar(huge, RATIONAL).endswith(".5")
    assert format_scalar(RationalNumber(-1, 10 ** 400), DECIMAL) == "0"


def test_format_decimal_rounds_half_away_from_zero():
    assert format_scalar(RationalNumber(1, 8), DECIMAL.replace(precision=2)) == "0.13"
    assert format_scalar(RationalNumber(-1, 8), DECIMAL.replace(precision=2)) == "-0.13"


def test_larger_magnitude_is_exact_for_rationals():
    a = RationalNumber(1, 10 ** 400)
    b = RationalNumber(-2, 10 ** 400)
    assert S.larger_magnitude(b, a)
    assert not S.larger_magnitude(a, b)
    assert not S.larger_magnitude(a, a)
    assert S.larger_magnitude(-3.0, 2.0)
