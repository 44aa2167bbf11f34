from __future__ import annotations

from backlightd.clamped import ClampedValue, Intermediate, Max, Min


def test_new_classifies_against_bounds() -> None:
    assert ClampedValue.new(5, 0, 10) == Intermediate(5)
    assert ClampedValue.new(0, 0, 10) == Min(0)
    assert ClampedValue.new(-3, 0, 10) == Min(0)
    assert ClampedValue.new(10, 0, 10) == Max(10)
    assert ClampedValue.new(42, 0, 10) == Max(10)


def test_predicates_and_value() -> None:
    for v in range(0, 11):
        cv = ClampedValue.new(v, 0, 10)
        assert cv.is_intermediate() is (0 < v < 10)
        assert cv.is_min() is (v == 0)
        assert cv.is_max() is (v == 10)
        assert cv.value == v


def test_tag_is_part_of_equality() -> None:
    assert Min(3) != Max(3)
    assert Min(3) != Intermediate(3)


def test_ceiling_wins_when_bounds_are_inverted() -> None:
    assert ClampedValue.new(5, 10, 0) == Max(0)


def test_map_keeps_tag() -> None:
    assert Max(100).map(float) == Max(100.0)
    assert Intermediate(7).map(lambda x: x * 2) == Intermediate(14)


def test_replace_and_swap_keep_tag() -> None:
    cv = ClampedValue.new(0, 0, 10)
    cv.replace(3)
    assert cv == Min(3)

    old = cv.swap(4)
    assert old == Min(3)
    assert cv == Min(4)


def test_int_conversion() -> None:
    assert int(Intermediate(12)) == 12
