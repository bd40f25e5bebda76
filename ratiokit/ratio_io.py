"""Textual forms of ratios: SI prefix names and symbols, or a bracketed fraction."""

from __future__ import annotations

from fractions import Fraction
from typing import Union

from .prefixes import lookup_prefix
from .ratio import Ratio

__all__ = ["symbol", "prefix"]

RatioLike = Union[Ratio, int, Fraction]


def prefix(ratio: RatioLike) -> str:
    """Return the SI prefix name of ``ratio``, or ``[num/den]`` when it has none."""
    r = Ratio.coerce(ratio)
    named = lookup_prefix(r)
    if named is not None:
        return named.name
    return f"[{r.num}/{r.den}]"


def symbol(ratio: RatioLike) -> str:
    """Return the SI prefix symbol of ``ratio``, or ``[num/den]`` when it has none."""
    r = Ratio.coerce(ratio)
    named = lookup_prefix(r)
    if named is not None:
        return named.symbol
    return prefix(r)