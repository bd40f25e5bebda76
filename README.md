# ratiokit

ratiokit provides exact rational numbers whose numerator and denominator must fit in a signed 64-bit integer. It also names SI and binary prefixes and includes a small dimension-checked physics toolkit. It has no dependencies beyond the standard library.

## Installation

```
pip install ratiokit
```

## Ratios

`ratiokit.ratio.Ratio` is immutable. It is always stored in lowest terms, and its denominator is always positive:

```python
from ratiokit.ratio import Ratio, plus, times

r = Ratio(12, -4)
r.num, r.den                 # (-3, 1)

Ratio(1, 2) + Ratio(1, 3)    # Ratio(5, 6)
plus(Ratio(1, 2), 1)         # Ratio(3, 2)
times(Ratio(1, 2), Ratio(-1, 1))   # Ratio(-1, 2)
```

Arithmetic and comparison operators accept a `Ratio`, an `int` or a `fractions.Fraction` on either side. `Ratio.coerce` converts any of these to a `Ratio`. A `Ratio` also supports the following:

- `float()`;
- `hash()`, which agrees with the hash of the equal `Fraction`;
- `abs()` and unary minus;
- `sign()`, which returns -1, 0 or 1.

The package raises these errors:

- `RatioError` for a zero denominator, and for division by a zero ratio;
- `RatioOverflowError` when a numerator or denominator has an absolute value above 2**63 - 1, or when an arithmetic result cannot be represented. This class is a subclass of both `RatioError` and `OverflowError`.

The operators are also available as functions:

- arithmetic: `ratio_add`, `ratio_subtract`, `ratio_multiply`, `ratio_divide`, `ratio_negate`, `ratio_abs` and `ratio_sign`;
- comparison: `ratio_equal`, `ratio_not_equal`, `ratio_less`, `ratio_less_equal`, `ratio_greater` and `ratio_greater_equal`.

`plus` and `times` fold two or more operands from left to right.

The module defines these named constants:

- SI: `ATTO` through `EXA`, plus `UNIT`;
- binary: `KIBI` through `EXBI`;
- limits: `INTMAX_MAX` and `RATIO_INTMAX_T_MAX`.

The `ratiokit.integral` module offers the integer helpers `abs_value`, `gcd` and `sign`.

## Prefixes and names

A `ratiokit.prefixes.Prefix` is a frozen dataclass with the fields `ratio`, `symbol` and `name`.

- `si_prefixes()` returns the SI prefixes from atto to exa, smallest first.
- `lookup_prefix(ratio)` returns the matching prefix, or `None` when there is no match.
- `ratiokit.binary_prefixes` offers `binary_prefixes()` and `lookup_binary_prefix(ratio)` for kibi through exbi.

`ratiokit.ratio_io` turns a ratio into text using SI prefixes:

```python
from ratiokit.ratio import Ratio
from ratiokit.ratio_io import symbol, prefix

symbol(Ratio(1000, 1))   # "k"
prefix(Ratio(1, 1000))   # "milli"
prefix(Ratio(3, 7))      # "[3/7]"
```

`ratiokit.legacy_io` recognises both SI and binary prefixes. It provides:

- `short_name` and `long_name`;
- `symbol` and `prefix`, which are aliases of those two;
- `ratio_names(ratio)`, which returns a `RatioNames` holding both names.

A ratio that has no prefix is written as `[num/den]` in both forms.

## Physics toolkit

`ratiokit.physics` provides the following:

- `Length(count, unit)` and `Duration(count, unit)`: floating-point counts in a unit given as a ratio of the meter or the second. Unit constants include `METER`, `INCH`, `FOOT`, `MILE`, `SECOND`, `HOUR` and `ATTOSECOND`. `.to(unit)` converts a value to another unit. `Length` also supports `+`, `-`, unary minus and plus, and `*` and `/` by a number.
- `Quantity(value, time_dim, distance_dim)`: a value in SI base units that carries rational exponents for time and distance. `Quantity.scalar`, `Quantity.from_length` and `Quantity.from_duration` build quantities. Multiplying and dividing combine the exponents. Adding or subtracting quantities with different dimensions raises `TypeError`.
- `compute_distance(v0, t, a)`: checks that its arguments are a speed, a time and an acceleration, then evaluates `v0*t + a*t*t/2`.

To run the demonstration:

```
ratiokit-physics
```