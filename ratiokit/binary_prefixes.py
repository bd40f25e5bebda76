"""Binary (IEC) prefixes from kibi to exbi and their names and symbols."""

from __future__ import annotations

from fractions import Fraction
from typing import Union

from .prefixes import Prefix
from .ratio import EXBI, GIBI, KIBI, MEBI, PEBI, TEBI, Ratio

__all__ = ["binary_prefixes", "lookup_binary_prefix"]


_BINARY_PREFIXES: tuple[Prefix, ...] = (
    Prefix(KIBI, "Ki", "kibi"),
    Prefix(MEBI, "Mi", "mebi"),
    Prefix(GIBI, "Gi", "gibi"),
    Prefix(TEBI, "Ti", "tebi"),
    Prefix(PEBI, "Pi", "pebi"),
    Prefix(EXBI, "Ei", "exbi"),
)

_BY_RATIO: dict[Ratio, Prefix] = {p.ratio: p for p in _BINARY_PREFIXES}


def binary_prefixes() -> tuple[Prefix, ...]:
    """Return the binary prefixes from kibi to exbi, smallest first."""
    return _BINARY_PREFIXES


def lookup_binary_prefix(ratio: Union[Ratio, int, Fraction]) -> "Prefix | None":
    """Return the binary prefix for ``ratio``, or None when it has no binary name."""
    return _BY_RATIO.get(Ratio.coerce(ratio))