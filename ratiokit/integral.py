"""Integer helpers used when normalising rational constants."""

from __future__ import annotations

import math
import operator

__all__ = ["abs_value", "gcd", "sign"]


def abs_value(n: int) -> int:
    """Return the absolute value of the integer ``n``."""
    n = operator.index(n)
    return -n if n < 0 else n


def gcd(a: int, b: int) -> int:
    """Return the non-negative greatest common divisor of ``a`` and ``b``.

    When one argument is zero the result is the absolute value of the other.
    """
    return math.gcd(operator.index(a), operator.index(b))


def sign(n: int) -> int:
    """Return -1, 0 or 1 according to the sign of ``n``."""
    n = operator.index(n)
    if n == 0:
        return 0
    return -1 if n < 0 else 1