"""Numeric values and the widening rules used by the arithmetic built-ins.

Numbers are numpy scalars so that every value keeps its machine width:

    - byte   -> numpy.int8
    - short  -> numpy.int16
    - int    -> numpy.int32
    - long   -> numpy.int64
    - float  -> numpy.float32
    - double -> numpy.float64

The reader only produces int, float and double. Binary operations pick the
result width from a fixed precedence table (double, float, int, long, short,
byte). The table is not a numeric tower: a long mixed with an int yields an
int, truncating the long.
"""

from __future__ import annotations

import re

import numpy as np

from minilisp import LispValue
from minilisp.errors import MiniLispTypeError
from minilisp.types.symbol import Symbol

BYTE = np.int8
SHORT = np.int16
INT = np.int32
LONG = np.int64
FLOAT = np.float32
DOUBLE = np.float64

NUMBER_TYPES = (BYTE, SHORT, INT, LONG, FLOAT, DOUBLE)

# (operand width, result width), first match wins
WIDENING = (
    (DOUBLE, DOUBLE),
    (FLOAT, FLOAT),
    (INT, INT),
    (LONG, LONG),
    (SHORT, INT),
)

INT_MIN = -(2 ** 31)
INT_MAX = 2 ** 31 - 1

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_DECIMAL_RE = re.compile(
    r"[+-]?(?:NaN|Infinity"
    r"|(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)(?P<suffix>[fFdD])?)"
)


def as_number(value: LispValue) -> np.number:
    """Return `value` as one of the supported numpy widths.

    Plain Python ints are treated as longs and floats as doubles, so host code
    can bind ordinary numbers into an environment.
    """
    if isinstance(value, np.generic):
        for t in NUMBER_TYPES:
            if value.dtype == t:
                return value
    elif isinstance(value, int) and not isinstance(value, bool):
        return cast(value, LONG)
    elif isinstance(value, float):
        return DOUBLE(value)
    raise MiniLispTypeError(f"Expected a number, got {value!r}")


def cast(value: LispValue, width: type) -> np.number:
    """Convert to `width` with C semantics (integral narrowing wraps)."""
    with np.errstate(over="ignore", invalid="ignore"):
        return np.asarray(value).astype(width)[()]


def result_width(one: np.number, two: np.number) -> type:
    for operand, result in WIDENING:
        if one.dtype == operand or two.dtype == operand:
            return result
    return BYTE


def _binary(one: LispValue, two: LispValue, op):
    one, two = as_number(one), as_number(two)
    width = result_width(one, two)
    with np.errstate(over="ignore", invalid="ignore"):
        return width(op(cast(one, width), cast(two, width)))


def add(one: LispValue, two: LispValue) -> np.number:
    return _binary(one, two, np.add)


def multiply(one: LispValue, two: LispValue) -> np.number:
    return _binary(one, two, np.multiply)


def absolute(value: LispValue) -> np.number:
    """Magnitude of `value`; double, float and long keep their width, anything else becomes int."""
    value = as_number(value)
    width = INT
    for t in (DOUBLE, FLOAT, LONG):
        if value.dtype == t:
            width = t
            break
    with np.errstate(over="ignore"):
        return width(np.abs(cast(value, width)))


def is_zero(value: LispValue) -> bool:
    """True only for an integral zero; 0.0 and non-numbers are not zero."""
    if isinstance(value, np.integer):
        return bool(value == 0)
    return isinstance(value, int) and not isinstance(value, bool) and value == 0


def parse_int(token: str) -> np.int32 | None:
    if not _INTEGER_RE.fullmatch(token):
        return None
    n = int(token)
    if n < INT_MIN or n > INT_MAX:
        return None
    return INT(n)


def parse_float(token: str) -> np.float32 | None:
    """Single precision literal: decimal digits with an explicit f/F suffix."""
    m = _DECIMAL_RE.fullmatch(token)
    if m is None or m.group("suffix") not in ("f", "F"):
        return None
    with np.errstate(over="ignore"):
        return FLOAT(float(token[:-1]))


def parse_double(token: str) -> np.float64 | None:
    m = _DECIMAL_RE.fullmatch(token)
    if m is None:
        return None
    if m.group("suffix"):
        token = token[:-1]
    return DOUBLE(float(token))


def atom(token: str) -> LispValue:
    """Classify one token: int, then float, then double, otherwise a Symbol."""
    for parse in (parse_int, parse_float, parse_double):
        value = parse(token)
        if value is not None:
            return value
    return Symbol(token)
