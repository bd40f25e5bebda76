"""Exact rational constants limited to the 64-bit signed integer range."""

from __future__ import annotations

import operator
from fractions import Fraction
from typing import Union

from .integral import abs_value, gcd
from .integral import sign as _int_sign

__all__ = [
    "INTMAX_MAX",
    "RATIO_INTMAX_T_MAX",
    "RatioError",
    "RatioOverflowError",
    "Ratio",
    "ratio_add",
    "ratio_subtract",
    "ratio_multiply",
    "ratio_divide",
    "ratio_negate",
    "ratio_abs",
    "ratio_sign",
    "ratio_equal",
    "ratio_not_equal",
    "ratio_less",
    "ratio_less_equal",
    "ratio_greater",
    "ratio_greater_equal",
    "plus",
    "times",
]

INTMAX_MAX = 2**63 - 1
RATIO_INTMAX_T_MAX = 0x7FFFFFFFFFFFFFFE

OVERFLOW_IN_ADD = "overflow in ratio add"
OVERFLOW_IN_SUB = "overflow in ratio sub"
OVERFLOW_IN_MUL = "overflow in ratio mul"
OVERFLOW_IN_DIV = "overflow in ratio div"
NUMERATOR_OUT_OF_RANGE = "ratio numerator is out of range"
DENOMINATOR_OUT_OF_RANGE = "ratio denominator is out of range"
DIVIDE_BY_ZERO = "ratio divide by 0"


class RatioError(ArithmeticError):
    """Raised when a ratio cannot be formed."""


class RatioOverflowError(RatioError, OverflowError):
    """Raised when a numerator or denominator leaves the representable range."""


RatioLike = Union["Ratio", int, Fraction]


class Ratio:
    """An immutable rational number kept in lowest terms with a positive denominator."""

    __slots__ = ("_num", "_den")

    def __init__(self, num: int, den: int = 1) -> None:
        num = operator.index(num)
        den = operator.index(den)
        if den == 0:
            raise RatioError(DIVIDE_BY_ZERO)
        if abs_value(num) > INTMAX_MAX:
            raise RatioOverflowError(NUMERATOR_OUT_OF_RANGE)
        if abs_value(den) > INTMAX_MAX:
            raise RatioOverflowError(DENOMINATOR_OUT_OF_RANGE)
        g = gcd(num, den)
        s = _int_sign(den)
        self._num = s * num // g
        self._den = abs_value(den) // g

    @property
    def num(self) -> int:
        return self._num

    @property
    def den(self) -> int:
        return self._den

    @classmethod
    def coerce(cls, value: RatioLike) -> "Ratio":
        """Turn an int, Fraction or Ratio into a Ratio."""
        if isinstance(value, Ratio):
            return value
        if isinstance(value, Fraction):
            return cls(value.numerator, value.denominator)
        if isinstance(value, int):
            return cls(value, 1)
        raise TypeError(f"cannot convert {type(value).__name__} to Ratio")

    @classmethod
    def _from_exact(cls, value: Fraction, message: str) -> "Ratio":
        if (
            abs_value(value.numerator) > INTMAX_MAX
            or abs_value(value.denominator) > INTMAX_MAX
        ):
            raise RatioOverflowError(message)
        return cls(value.numerator, value.denominator)

    def _fraction(self) -> Fraction:
        return Fraction(self._num, self._den)

    @staticmethod
    def _other(other: object) -> "Ratio | None":
        if isinstance(other, (Ratio, Fraction, int)):
            return Ratio.coerce(other)
        return None

    def __add__(self, other: object) -> "Ratio":
        rhs = self._other(other)
        if rhs is None:
            return NotImplemented
        return ratio_add(self, rhs)

    def __radd__(self, other: object) -> "Ratio":
        lhs = self._other(other)
        if lhs is None:
            return NotImplemented
        return ratio_add(lhs, self)

    def __sub__(self, other: object) -> "Ratio":
        rhs = self._other(other)
        if rhs is None:
            return NotImplemented
        return ratio_subtract(self, rhs)

    def __rsub__(self, other: object) -> "Ratio":
        lhs = self._other(other)
        if lhs is None:
            return NotImplemented
        return ratio_subtract(lhs, self)

    def __mul__(self, other: object) -> "Ratio":
        rhs = self._other(other)
        if rhs is None:
            return NotImplemented
        return ratio_multiply(self, rhs)

    def __rmul__(self, other: object) -> "Ratio":
        lhs = self._other(other)
        if lhs is None:
            return NotImplemented
        return ratio_multiply(lhs, self)

    def __truediv__(self, other: object) -> "Ratio":
        rhs = self._other(other)
        if rhs is None:
            return NotImplemented
        return ratio_divide(self, rhs)

    def __rtruediv__(self, other: object) -> "Ratio":
        lhs = self._other(other)
        if lhs is None:
            return NotImplemented
        return ratio_divide(lhs, self)

    def __neg__(self) -> "Ratio":
        return Ratio(-self._num, self._den)

    def __abs__(self) -> "Ratio":
        return Ratio(abs_value(self._num), self._den)

    def __eq__(self, other: object) -> bool:
        rhs = self._other(other)
        if rhs is None:
            return NotImplemented
        return self._num == rhs._num and self._den == rhs._den

    def __lt__(self, other: object) -> bool:
        rhs = self._other(other)
        if rhs is None:
            return NotImplemented
        return self._num * rhs._den < rhs._num * self._den

    def __le__(self, other: object) -> bool:
        rhs = self._other(other)
        if rhs is None:
            return NotImplemented
        return not rhs < self

    def __gt__(self, other: object) -> bool:
        rhs = self._other(other)
        if rhs is None:
            return NotImplemented
        return rhs < self

    def __ge__(self, other: object) -> bool:
        rhs = self._other(other)
        if rhs is None:
            return NotImplemented
        return not self < rhs

    def __hash__(self) -> int:
        return hash(self._fraction())

    def __float__(self) -> float:
        return self._num / self._den

    def __repr__(self) -> str:
        return f"Ratio({self._num}, {self._den})"

    def sign(self) -> int:
        """Return -1, 0 or 1 according to the sign of the ratio."""
        return _int_sign(self._num)


def ratio_add(r1: RatioLike, r2: RatioLike) -> Ratio:
    a, b = Ratio.coerce(r1), Ratio.coerce(r2)
    return Ratio._from_exact(a._fraction() + b._fraction(), OVERFLOW_IN_ADD)


def ratio_subtract(r1: RatioLike, r2: RatioLike) -> Ratio:
    a, b = Ratio.coerce(r1), Ratio.coerce(r2)
    return Ratio._from_exact(a._fraction() - b._fraction(), OVERFLOW_IN_SUB)


def ratio_multiply(r1: RatioLike, r2: RatioLike) -> Ratio:
    a, b = Ratio.coerce(r1), Ratio.coerce(r2)
    return Ratio._from_exact(a._fraction() * b._fraction(), OVERFLOW_IN_MUL)


def ratio_divide(r1: RatioLike, r2: RatioLike) -> Ratio:
    a, b = Ratio.coerce(r1), Ratio.coerce(r2)
    if b.num == 0:
        raise RatioError(DIVIDE_BY_ZERO)
    return Ratio._from_exact(a._fraction() / b._fraction(), OVERFLOW_IN_DIV)


def ratio_negate(r: RatioLike) -> Ratio:
    return -Ratio.coerce(r)


def ratio_abs(r: RatioLike) -> Ratio:
    return abs(Ratio.coerce(r))


def ratio_sign(r: RatioLike) -> int:
    return Ratio.coerce(r).sign()


def ratio_equal(r1: RatioLike, r2: RatioLike) -> bool:
    return Ratio.coerce(r1) == Ratio.coerce(r2)


def ratio_not_equal(r1: RatioLike, r2: RatioLike) -> bool:
    return not ratio_equal(r1, r2)


def ratio_less(r1: RatioLike, r2: RatioLike) -> bool:
    return Ratio.coerce(r1) < Ratio.coerce(r2)


def ratio_less_equal(r1: RatioLike, r2: RatioLike) -> bool:
    return not ratio_less(r2, r1)


def ratio_greater(r1: RatioLike, r2: RatioLike) -> bool:
    return ratio_less(r2, r1)


def ratio_greater_equal(r1: RatioLike, r2: RatioLike) -> bool:
    return not ratio_less(r1, r2)


def _fold(op, args, name: str) -> Ratio:
    if len(args) < 2:
        raise TypeError(f"{name} requires at least two operands")
    result = Ratio.coerce(args[0])
    for arg in args[1:]:
        result = op(result, arg)
    return result


def plus(*args: RatioLike) -> Ratio:
    """Sum two or more ratios or integers, left to right."""
    return _fold(ratio_add, args, "plus")


def times(*args: RatioLike) -> Ratio:
    """Multiply two or more ratios or integers, left to right."""
    return _fold(ratio_multiply, args, "times")


ATTO = Ratio(1, 10**18)
FEMTO = Ratio(1, 10**15)
PICO = Ratio(1, 10**12)
NANO = Ratio(1, 10**9)
MICRO = Ratio(1, 10**6)
MILLI = Ratio(1, 10**3)
CENTI = Ratio(1, 100)
DECI = Ratio(1, 10)
UNIT = Ratio(1, 1)
DECA = Ratio(10, 1)
HECTO = Ratio(100, 1)
KILO = Ratio(10**3, 1)
MEGA = Ratio(10**6, 1)
GIGA = Ratio(10**9, 1)
TERA = Ratio(10**12, 1)
PETA = Ratio(10**15, 1)
EXA = Ratio(10**18, 1)

KIBI = Ratio(2**10, 1)
MEBI = Ratio(2**20, 1)
GIBI = Ratio(2**30, 1)
TEBI = Ratio(2**40, 1)
PEBI = Ratio(2**50, 1)
EXBI = Ratio(2**60, 1)

__all__ += [
    "ATTO", "FEMTO", "PICO", "NANO", "MICRO", "MILLI", "CENTI", "DECI", "UNIT",
    "DECA", "HECTO", "KILO", "MEGA", "GIGA", "TERA", "PETA", "EXA",
    "KIBI", "MEBI", "GIBI", "TEBI", "PEBI", "EXBI",
]