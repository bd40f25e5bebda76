"""Type-checked lengths, durations and SI quantities built on exact ratios.

Lengths and durations carry a unit expressed as a ratio of the base unit
(meter or second). Quantities carry rational exponents for time and distance.
Arithmetic on quantities combines those exponents, and adding or subtracting
mismatched dimensions is rejected.
"""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from fractions import Fraction
from typing import Sequence, Union

from .ratio import (
    ATTO,
    CENTI,
    FEMTO,
    KILO,
    PICO,
    UNIT,
    Ratio,
    ratio_add,
    ratio_divide,
    ratio_subtract,
)

__all__ = [
    "METER",
    "CENTIMETER",
    "KILOMETER",
    "INCH",
    "FOOT",
    "MILE",
    "SECOND",
    "MINUTE",
    "HOUR",
    "PICOSECOND",
    "FEMTOSECOND",
    "ATTOSECOND",
    "Length",
    "Duration",
    "Quantity",
    "compute_distance",
    "main",
]

RatioLike = Union[Ratio, int, Fraction]

METER = UNIT
CENTIMETER = CENTI
KILOMETER = KILO
INCH = Ratio(254, 10000)
FOOT = Ratio(12) * INCH
MILE = Ratio(5280) * FOOT

SECOND = UNIT
MINUTE = Ratio(60)
HOUR = Ratio(3600)
PICOSECOND = PICO
FEMTOSECOND = FEMTO
ATTOSECOND = ATTO


def _convert(count: float, source: Ratio, target: Ratio) -> float:
    """Re-express ``count`` units of ``source`` in units of ``target``."""
    factor = ratio_divide(source, target)
    return count * factor.num / factor.den


@dataclass(frozen=True)
class Length:
    """A floating-point length measured in ``unit`` meters."""

    count: float = 1.0
    unit: Ratio = METER

    def __post_init__(self) -> None:
        object.__setattr__(self, "count", float(self.count))
        object.__setattr__(self, "unit", Ratio.coerce(self.unit))

    def to(self, unit: RatioLike) -> "Length":
        """Return the same length expressed in ``unit``."""
        target = Ratio.coerce(unit)
        return Length(_convert(self.count, self.unit, target), target)

    def _same_unit(self, other: object) -> "Length | None":
        if isinstance(other, Length):
            return other.to(self.unit)
        return None

    def __add__(self, other: object) -> "Length":
        rhs = self._same_unit(other)
        if rhs is None:
            return NotImplemented
        return Length(self.count + rhs.count, self.unit)

    def __sub__(self, other: object) -> "Length":
        rhs = self._same_unit(other)
        if rhs is None:
            return NotImplemented
        return Length(self.count - rhs.count, self.unit)

    def __neg__(self) -> "Length":
        return Length(-self.count, self.unit)

    def __pos__(self) -> "Length":
        return self

    def __mul__(self, factor: object) -> "Length":
        if isinstance(factor, (int, float)) and not isinstance(factor, bool):
            return Length(self.count * factor, self.unit)
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, factor: object) -> "Length":
        if isinstance(factor, (int, float)) and not isinstance(factor, bool):
            return Length(self.count / factor, self.unit)
        return NotImplemented


@dataclass(frozen=True)
class Duration:
    """A floating-point duration measured in ``unit`` seconds."""

    count: float = 0.0
    unit: Ratio = SECOND

    def __post_init__(self) -> None:
        object.__setattr__(self, "count", float(self.count))
        object.__setattr__(self, "unit", Ratio.coerce(self.unit))

    def to(self, unit: RatioLike) -> "Duration":
        """Return the same duration expressed in ``unit``."""
        target = Ratio.coerce(unit)
        return Duration(_convert(self.count, self.unit, target), target)


@dataclass(frozen=True)
class Quantity:
    """A value in SI base units with rational time and distance exponents."""

    value: float = 1.0
    time_dim: Ratio = Ratio(0)
    distance_dim: Ratio = Ratio(0)

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", float(self.value))
        object.__setattr__(self, "time_dim", Ratio.coerce(self.time_dim))
        object.__setattr__(self, "distance_dim", Ratio.coerce(self.distance_dim))

    @property
    def dimensions(self) -> tuple[Ratio, Ratio]:
        """The (time, distance) exponents."""
        return (self.time_dim, self.distance_dim)

    @classmethod
    def scalar(cls, value: float = 1.0) -> "Quantity":
        """A dimensionless quantity."""
        return cls(value, 0, 0)

    @classmethod
    def from_length(cls, length: Length) -> "Quantity":
        """A distance in meters."""
        return cls(length.to(METER).count, 0, 1)

    @classmethod
    def from_duration(cls, duration: Duration) -> "Quantity":
        """A time in seconds."""
        return cls(duration.to(SECOND).count, 1, 0)

    @staticmethod
    def _operand(other: object) -> "Quantity | None":
        if isinstance(other, Quantity):
            return other
        if isinstance(other, (int, float)) and not isinstance(other, bool):
            return Quantity.scalar(other)
        return None

    def _check_same(self, other: "Quantity", op: str) -> None:
        if self.dimensions != other.dimensions:
            raise TypeError(
                f"cannot {op} quantities of dimensions "
                f"{self.dimensions!r} and {other.dimensions!r}"
            )

    def __add__(self, other: object) -> "Quantity":
        rhs = self._operand(other)
        if rhs is None:
            return NotImplemented
        self._check_same(rhs, "add")
        return Quantity(self.value + rhs.value, self.time_dim, self.distance_dim)

    def __sub__(self, other: object) -> "Quantity":
        rhs = self._operand(other)
        if rhs is None:
            return NotImplemented
        self._check_same(rhs, "subtract")
        return Quantity(self.value - rhs.value, self.time_dim, self.distance_dim)

    def __mul__(self, other: object) -> "Quantity":
        rhs = self._operand(other)
        if rhs is None:
            return NotImplemented
        return Quantity(
            self.value * rhs.value,
            ratio_add(self.time_dim, rhs.time_dim),
            ratio_add(self.distance_dim, rhs.distance_dim),
        )

    def __rmul__(self, other: object) -> "Quantity":
        lhs = self._operand(other)
        if lhs is None:
            return NotImplemented
        return lhs * self

    def __truediv__(self, other: object) -> "Quantity":
        rhs = self._operand(other)
        if rhs is None:
            return NotImplemented
        return Quantity(
            self.value / rhs.value,
            ratio_subtract(self.time_dim, rhs.time_dim),
            ratio_subtract(self.distance_dim, rhs.distance_dim),
        )

    def __rtruediv__(self, other: object) -> "Quantity":
        lhs = self._operand(other)
        if lhs is None:
            return NotImplemented
        return lhs / self


_TIME = (Ratio(1), Ratio(0))
_SPEED = (Ratio(-1), Ratio(1))
_ACCELERATION = (Ratio(-2), Ratio(1))


def compute_distance(v0: Quantity, t: Quantity, a: Quantity) -> Quantity:
    """Distance covered from initial speed ``v0`` under acceleration ``a`` in time ``t``."""
    for name, q, dims in (("v0", v0, _SPEED), ("t", t, _TIME), ("a", a, _ACCELERATION)):
        if q.dimensions != dims:
            raise TypeError(f"{name} has dimensions {q.dimensions!r}, expected {dims!r}")
    return v0 * t + Quantity.scalar(0.5) * a * t * t


def main(argv: Sequence[str] | None = None) -> int:
    """Print a short demonstration of unit-safe physics calculations."""
    parser = argparse.ArgumentParser(
        prog="ratiokit-physics",
        description="Demonstrate unit-safe physics with exact unit ratios.",
    )
    parser.parse_args(argv)

    print("*************")
    print("* testUser1 *")
    print("*************")
    d = Quantity.from_length(Length(110, MILE))
    t = Quantity.from_duration(Duration(2, HOUR))
    s = d / t
    print(f"Speed = {s.value:g} meters/sec")
    a = Quantity.from_length(Length(32.2, FOOT)) / Quantity(1, 1, 0) / Quantity(1, 1, 0)
    print(f"Acceleration = {a.value:g} meters/sec^2")
    df = compute_distance(s, Quantity.from_duration(Duration(0.5, SECOND)), a)
    print(f"Distance = {df.value:g} meters")
    mi = Length(1, METER).to(MILE)
    print(
        f"There are {MILE.den}/{MILE.num} miles/meter"
        f" which is approximately {mi.count:g}"
    )
    mt = Length(1, MILE).to(METER)
    print(
        f"There are {MILE.num}/{MILE.den} meters/mile"
        f" which is approximately {mt.count:g}"
    )
    sec = Duration(1, ATTOSECOND).to(SECOND)
    print(f"1 attosecond is {sec.count:g} seconds")
    print("sec = as;  // compiles")
    atto = Duration(1, SECOND).to(ATTOSECOND)
    print(f"1 second is {atto.count:g} attoseconds")
    print("as = sec;  // compiles")
    print()
    return 0