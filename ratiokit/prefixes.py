"""Decimal SI prefixes and the names and symbols they are written with."""

from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction
from typing import Union

from .ratio import (
    ATTO,
    CENTI,
    DECA,
    DECI,
    EXA,
    FEMTO,
    GIGA,
    HECTO,
    KILO,
    MEGA,
    MICRO,
    MILLI,
    NANO,
    PETA,
    PICO,
    TERA,
    Ratio,
)

__all__ = ["Prefix", "si_prefixes", "lookup_prefix"]


@dataclass(frozen=True)
class Prefix:
    """A named scale factor such as kilo (k) for 1000/1."""

    ratio: Ratio
    symbol: str
    name: str


_SI_PREFIXES: tuple[Prefix, ...] = (
    Prefix(ATTO, "a", "atto"),
    Prefix(FEMTO, "f", "femto"),
    Prefix(PICO, "p", "pico"),
    Prefix(NANO, "n", "nano"),
    Prefix(MICRO, "\u00b5", "micro"),
    Prefix(MILLI, "m", "milli"),
    Prefix(CENTI, "c", "centi"),
    Prefix(DECI, "d", "deci"),
    Prefix(DECA, "da", "deca"),
    Prefix(HECTO, "h", "hecto"),
    Prefix(KILO, "k", "kilo"),
    Prefix(MEGA, "M", "mega"),
    Prefix(GIGA, "G", "giga"),
    Prefix(TERA, "T", "tera"),
    Prefix(PETA, "P", "peta"),
    Prefix(EXA, "E", "exa"),
)

_BY_RATIO: dict[Ratio, Prefix] = {p.ratio: p for p in _SI_PREFIXES}


def si_prefixes() -> tuple[Prefix, ...]:
    """Return the SI prefixes from atto to exa, smallest first."""
    return _SI_PREFIXES


def lookup_prefix(ratio: Union[Ratio, int, Fraction]) -> "Prefix | None":
    """Return the SI prefix for ``ratio``, or None when it has no SI name."""
    return _BY_RATIO.get(Ratio.coerce(ratio))