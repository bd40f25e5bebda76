"""Short and long names of ratios, covering both SI and binary prefixes."""

from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction
from typing import Union

from .binary_prefixes import lookup_binary_prefix
from .prefixes import lookup_prefix
from .ratio import Ratio

__all__ = [
    "RatioNames",
    "ratio_names",
    "short_name",
    "long_name",
    "symbol",
    "prefix",
]

RatioLike = Union[Ratio, int, Fraction]


@dataclass(frozen=True)
class RatioNames:
    """The short and long textual names of a ratio."""

    short_name: str
    long_name: str

    @property
    def symbol(self) -> str:
        """Same as the short name."""
        return self.short_name

    @property
    def prefix(self) -> str:
        """Same as the long name."""
        return self.long_name


def ratio_names(ratio: RatioLike) -> RatioNames:
    """Return the names of ``ratio``.

    SI and binary prefixes have their own short and long names; any other
    ratio is written ``[num/den]`` in both forms.
    """
    r = Ratio.coerce(ratio)
    named = lookup_prefix(r) or lookup_binary_prefix(r)
    if named is not None:
        return RatioNames(named.symbol, named.name)
    text = f"[{r.num}/{r.den}]"
    return RatioNames(text, text)


def short_name(ratio: RatioLike) -> str:
    """Return the short name of ``ratio``, e.g. ``k`` for kilo."""
    return ratio_names(ratio).short_name


def long_name(ratio: RatioLike) -> str:
    """Return the long name of ``ratio``, e.g. ``kilo``."""
    return ratio_names(ratio).long_name


def symbol(ratio: RatioLike) -> str:
    """Return the symbol of ``ratio``; the same as its short name."""
    return short_name(ratio)


def prefix(ratio: RatioLike) -> str:
    """Return the prefix of ``ratio``; the same as its long name."""
    return long_name(ratio)