import math

import numpy as np
import pytest

from minilisp.errors import MiniLispTypeError
from minilisp.types.numeric import (
    BYTE, SHORT, INT, LONG, FLOAT, DOUBLE, INT_MAX, INT_MIN,
    absolute, add, as_number, atom, is_zero, multiply, result_width,
)
from minilisp.types.symbol import Symbol


@pytest.mark.parametrize(
    "token,width,value",
    [
        ("3", INT, 3),
        ("-7", INT, -7),
        ("+7", INT, 7),
        ("2147483647", INT, INT_MAX),
        ("-2147483648", INT, INT_MIN),
        ("2147483648", DOUBLE, 2147483648.0),
        ("3.0", DOUBLE, 3.0),
        ("3.14e10", DOUBLE, 3.14e10),
        (".5", DOUBLE, 0.5),
        ("1.", DOUBLE, 1.0),
        ("1e5", DOUBLE, 100000.0),
        ("2d", DOUBLE, 2.0),
        ("2.5f", FLOAT, 2.5),
        ("-1.5F", FLOAT, -1.5),
        ("Infinity", DOUBLE, math.inf),
        ("-Infinity", DOUBLE, -math.inf),
    ]
)
def test_atom_numbers(token, width, value):
    result = atom(token)
    assert type(result) is width
    assert result == value


def test_atom_nan():
    result = atom("NaN")
    assert type(result) is DOUBLE
    assert np.isnan(result)


@pytest.mark.parametrize("token", ["abc", "+", "-", ".", "1_000", "inf", "nan", "0x10", "1e", "x1"])
def test_atom_symbols(token):
    assert atom(token) == Symbol(token)


@pytest.mark.parametrize(
    "one,two,width",
    [
        (DOUBLE(1), FLOAT(1), DOUBLE),
        (INT(1), DOUBLE(1), DOUBLE),
        (FLOAT(1), INT(1), FLOAT),
        (FLOAT(1), LONG(1), FLOAT),
        (INT(1), LONG(1), INT),
        (LONG(1), SHORT(1), LONG),
        (LONG(1), LONG(1), LONG),
        (SHORT(1), BYTE(1), INT),
        (SHORT(1), SHORT(1), INT),
        (BYTE(1), BYTE(1), BYTE),
    ]
)
def test_widening_table(one, two, width):
    assert result_width(one, two) is width
    assert type(add(one, two)) is width
    assert type(multiply(two, one)) is width


def test_add_ints():
    result = add(INT(1), INT(2))
    assert type(result) is INT
    assert result == 3


def test_add_int_and_double():
    result = add(DOUBLE(1.0), INT(2))
    assert type(result) is DOUBLE
    assert result == 3.0


def test_float_arithmetic_stays_single_precision():
    result = multiply(FLOAT(0.1), INT(3))
    assert type(result) is FLOAT
    assert result == np.float32(0.1) * np.float32(3)


def test_long_mixed_with_int_truncates_to_int():
    result = add(LONG(2 ** 32 + 5), INT(1))
    assert type(result) is INT
    assert result == 6


def test_int_overflow_wraps():
    assert add(INT(INT_MAX), INT(1)) == INT_MIN
    assert multiply(INT(65536), INT(65536)) == 0


def test_byte_overflow_wraps():
    result = add(BYTE(100), BYTE(100))
    assert type(result) is BYTE
    assert result == -56


def test_short_pair_widens_to_int():
    result = add(SHORT(30000), SHORT(30000))
    assert type(result) is INT
    assert result == 60000


def test_python_numbers_are_long_and_double():
    assert type(as_number(5)) is LONG
    assert type(as_number(2.5)) is DOUBLE
    assert type(add(5, 6)) is LONG
    assert type(add(INT(5), 6)) is INT


@pytest.mark.parametrize(
    "value,width,expected",
    [
        (INT(-5), INT, 5),
        (DOUBLE(-2.5), DOUBLE, 2.5),
        (FLOAT(-1.5), FLOAT, 1.5),
        (LONG(-(2 ** 40)), LONG, 2 ** 40),
        (SHORT(-3), INT, 3),
        (BYTE(-4), INT, 4),
        (INT(7), INT, 7),
    ]
)
def test_absolute(value, width, expected):
    result = absolute(value)
    assert type(result) is width
    assert result == expected


def test_absolute_of_int_min_is_int_min():
    assert absolute(INT(INT_MIN)) == INT_MIN


@pytest.mark.parametrize("bad", [Symbol("x"), [1, 2], None, True, "3"])
def test_non_numbers_rejected(bad):
    with pytest.raises(MiniLispTypeError):
        add(INT(1), bad)
    with pytest.raises(MiniLispTypeError):
        absolute(bad)


@pytest.mark.parametrize(
    "value,expected",
    [
        (INT(0), True),
        (LONG(0), True),
        (0, True),
        (INT(1), False),
        (DOUBLE(0.0), False),
        (FLOAT(0.0), False),
        (Symbol("0"), False),
        ([], False),
    ]
)
def test_is_zero(value, expected):
    assert is_zero(value) is expected
