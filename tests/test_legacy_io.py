from fractions import Fraction

import pytest

from ratiokit.binary_prefixes import binary_prefixes
from ratiokit.legacy_io import (
    RatioNames,
    long_name,
    prefix,
    ratio_names,
    short_name,
    symbol,
)
from ratiokit.prefixes import si_prefixes
from ratiokit.ratio import DECA, KIBI, KILO, MICRO, Ratio


def test_kilo_names():
    assert short_name(KILO) == "k"
    assert long_name(KILO) == "kilo"


def test_micro_short_name_is_micro_sign():
    assert short_name(MICRO) == "\u00b5"
    assert long_name(MICRO) == "micro"


def test_deca_has_two_letter_symbol():
    assert short_name(DECA) == "da"
    assert long_name(DECA) == "deca"


def test_binary_prefix_names():
    assert short_name(KIBI) == "Ki"
    assert long_name(KIBI) == "kibi"


@pytest.mark.parametrize("p", si_prefixes() + binary_prefixes())
def test_every_prefix_matches_table(p):
    names = ratio_names(p.ratio)
    assert names == RatioNames(p.symbol, p.name)


@pytest.mark.parametrize("p", si_prefixes() + binary_prefixes())
def test_symbol_and_prefix_alias_short_and_long(p):
    assert symbol(p.ratio) == short_name(p.ratio)
    assert prefix(p.ratio) == long_name(p.ratio)


@pytest.mark.parametrize("num,den", [(3, 7), (-2, 5), (1, 1)])
def test_unnamed_ratio_is_bracketed(num, den):
    expected = f"[{num}/{den}]"
    assert short_name(Ratio(num, den)) == expected
    assert long_name(Ratio(num, den)) == expected


def test_unnamed_ratio_uses_reduced_form():
    assert long_name(Ratio(10, 12)) == long_name(Ratio(5, 6))
    assert long_name(Ratio(10, 12)) == "[5/6]"


def test_accepts_int_and_fraction():
    assert short_name(1000) == short_name(KILO)
    assert long_name(Fraction(1, 1000000)) == long_name(MICRO)


def test_names_properties():
    names = ratio_names(KILO)
    assert names.symbol == names.short_name
    assert names.prefix == names.long_name


def test_rejects_non_ratio():
    with pytest.raises(TypeError):
        ratio_names(1.5)