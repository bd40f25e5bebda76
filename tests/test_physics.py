import pytest

from ratiokit.physics import (
    ATTOSECOND,
    CENTIMETER,
    FOOT,
    HOUR,
    INCH,
    KILOMETER,
    METER,
    MILE,
    SECOND,
    Duration,
    Length,
    Quantity,
    compute_distance,
    main,
)
from ratiokit.ratio import Ratio


def test_unit_ratios_follow_definitions():
    assert INCH == Ratio(254, 10000)
    assert FOOT == Ratio(12) * INCH
    assert MILE == Ratio(5280) * FOOT


def test_mile_to_feet():
    assert Length(1, MILE).to(FOOT).count == pytest.approx(5280)


def test_foot_to_inches():
    assert Length(1, FOOT).to(INCH).count == pytest.approx(12)


def test_kilometer_to_meters():
    assert Length(1, KILOMETER).to(METER).count == pytest.approx(1000)


def test_length_round_trip():
    original = Length(110, MILE)
    back = original.to(CENTIMETER).to(MILE)
    assert back.unit == MILE
    assert back.count == pytest.approx(110)


def test_length_default_is_one_meter():
    length = Length()
    assert length.count == 1.0
    assert length.unit == METER


def test_length_add_converts_to_left_unit():
    total = Length(1, FOOT) + Length(12, INCH)
    assert total.unit == FOOT
    assert total.count == pytest.approx(2)


def test_length_sub_and_neg():
    diff = Length(3, METER) - Length(1, METER)
    assert diff.count == pytest.approx(2)
    assert (-diff).count == pytest.approx(-2)
    assert (+diff) == diff


def test_length_scaling():
    assert (Length(4, METER) * 2).count == pytest.approx(8)
    assert (Length(4, METER) / 2).count == pytest.approx(2)
    assert (3 * Length(1, METER)).count == pytest.approx(3)


def test_duration_round_trip():
    assert Duration(1, ATTOSECOND).to(SECOND).to(ATTOSECOND).count == pytest.approx(1)


def test_hours_to_seconds():
    assert Duration(2, HOUR).to(SECOND).count == pytest.approx(7200)


def test_quantity_from_length_is_in_meters():
    q = Quantity.from_length(Length(1, KILOMETER))
    assert q.value == pytest.approx(1000)
    assert q.dimensions == (Ratio(0), Ratio(1))


def test_quantity_division_subtracts_dimensions():
    d = Quantity.from_length(Length(110, MILE))
    t = Quantity.from_duration(Duration(2, HOUR))
    speed = d / t
    assert speed.dimensions == (Ratio(-1), Ratio(1))
    assert (speed * t).value == pytest.approx(d.value)
    assert (speed * t).dimensions == d.dimensions


def test_acceleration_dimensions():
    a = Quantity.from_length(Length(32.2, FOOT)) / Quantity(1, 1, 0) / Quantity(1, 1, 0)
    assert a.dimensions == (Ratio(-2), Ratio(1))
    assert a.value == pytest.approx(Length(32.2, FOOT).to(METER).count)


def test_adding_mismatched_dimensions_raises():
    with pytest.raises(TypeError):
        Quantity(1, 1, 0) + Quantity(1, 0, 1)


def test_adding_same_dimensions():
    total = Quantity(1, 0, 1) + Quantity(2, 0, 1)
    assert total.value == pytest.approx(3)
    assert total.dimensions == (Ratio(0), Ratio(1))


def test_compute_distance_without_acceleration():
    v0 = Quantity(3, -1, 1)
    t = Quantity(4, 1, 0)
    a = Quantity(0, -2, 1)
    result = compute_distance(v0, t, a)
    assert result.dimensions == (Ratio(0), Ratio(1))
    assert result.value == pytest.approx((v0 * t).value)


def test_compute_distance_rejects_wrong_dimensions():
    with pytest.raises(TypeError):
        compute_distance(Quantity(1, 1, 0), Quantity(1, 1, 0), Quantity(1, -2, 1))


def test_main_prints_demo(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "* testUser1 *" in out
    assert f"There are {MILE.den}/{MILE.num} miles/meter" in out
    assert "1 attosecond is 1e-18 seconds" in out