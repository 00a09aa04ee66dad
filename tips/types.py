"""Type definitions and helpers for TIPS.

A TIPS value is either an Integer or a Real. The interpreter represents
them directly as Python ``int`` and ``float`` objects; this module holds
the small set of helpers that implement promotion, strict integer access
and slot coercion on top of those two representations. Integer results
are wrapped to the 64-bit signed range the language defines.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union
import math


INTEGER = 'INTEGER'
REAL = 'REAL'

Value = Union[int, float]

_INT64_MIN = -(1 << 63)
_INT64_SPAN = 1 << 64


@dataclass
class ErrorVal:
    """Name and message of a TIPS error.

    ``name`` classifies the failure (``SyntaxError``, ``TypeError`` ...),
    ``message`` is the exact text shown to the user.
    """
    name: str
    message: str

    def __repr__(self) -> str:
        return f"Error(name={self.name!r}, message={self.message!r})"


def wrap_integer(x: int) -> int:
    """Wrap an integer into the signed 64-bit range (two's complement)."""
    return (x - _INT64_MIN) % _INT64_SPAN + _INT64_MIN


def is_integer(v: Value) -> bool:
    return isinstance(v, int) and not isinstance(v, bool)


def default_value(kind: str) -> Value:
    if kind == INTEGER:
        return 0
    if kind == REAL:
        return 0.0
    raise TypeError(f'unknown type {kind}')


def as_real(v: Value) -> float:
    """Widen a value to Real."""
    return float(v)


def as_int_strict(v: Value) -> int:
    """Return ``v`` if it is an Integer, otherwise fail."""
    if not is_integer(v):
        raise TypeError('MOD requires INTEGER operands')
    return v


def truncate(v: float) -> int:
    """Truncate a Real toward zero."""
    if math.isnan(v) or math.isinf(v):
        raise ValueError(f'cannot convert {to_string(v)} to INTEGER')
    return wrap_integer(int(v))


def coerce(value: Value, kind: str) -> Value:
    """Convert ``value`` to the variant ``kind`` of the slot receiving it."""
    if kind == INTEGER:
        return value if is_integer(value) else truncate(value)
    if kind == REAL:
        return as_real(value)
    raise TypeError(f'unknown type {kind}')


def int_divide(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    if b == 0:
        raise ZeroDivisionError('division by zero')
    q = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        q = -q
    return wrap_integer(q)


def int_remainder(a: int, b: int) -> int:
    """Remainder whose sign follows the dividend."""
    if b == 0:
        raise ZeroDivisionError('division by zero')
    return wrap_integer(a - b * int_divide(a, b))


def real_divide(a: float, b: float) -> float:
    # IEEE-754: x/0 is +-inf, 0/0 is nan
    if b == 0.0:
        if a == 0.0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def real_power(a: float, b: float) -> float:
    if a == 0.0 and b < 0.0:
        return math.inf
    try:
        return math.pow(a, b)
    except OverflowError:
        return math.inf
    except ValueError:
        return math.nan


def to_string(v: Value) -> str:
    """Textual form used by WRITE and the symbol dump."""
    if is_integer(v):
        return str(v)
    return format(v, 'g')


def to_fixed(v: Value) -> str:
    """Fixed six-decimal form used by the tree printer for Real literals."""
    if is_integer(v):
        return str(v)
    return f'{v:f}'
