from __future__ import annotations

import pytest

from backlightd.clamped import Intermediate, Max, Min
from backlightd.errors import ConfigError, InvalidScale, MissingCeiling
from backlightd.scale import DEFAULT_LEVEL, Exp2, Linear, ScaleBuilder


def test_make_requires_ceiling() -> None:
    with pytest.raises(MissingCeiling):
        ScaleBuilder().make()


def test_missing_ceiling_is_a_config_error() -> None:
    with pytest.raises(ConfigError):
        ScaleBuilder().min_value(1).make()


def test_defaults_with_only_ceiling() -> None:
    scale = ScaleBuilder().max_value(255).make()
    assert scale.min_value == 0
    assert scale.max_value == 255
    assert scale.ref_min == 0.0
    assert scale.ref_max == 255.0
    assert scale.kind == Linear()
    assert scale.level == DEFAULT_LEVEL
    assert scale.idx_factor == pytest.approx(255 / 9)


def test_linear_scale_points() -> None:
    scale = ScaleBuilder().max_value(100).make()
    assert scale.value_for(0) == Max(100)
    assert scale.value_for(-1) == Max(100)
    assert scale.value_for(8) == Intermediate(11)
    # 100 - 9 * (100 / 9) lands on the floor.
    assert scale.value_for(9).is_min()
    assert scale.value_for(9).value == 0


def test_exponential_scale_points() -> None:
    scale = (
        ScaleBuilder()
        .kind(Exp2(2.0))
        .min_value(1)
        .max_value(512)
        .ref_min_value(1)
        .ref_max_value(512)
        .make()
    )
    assert scale.idx_factor == pytest.approx(1.0)
    assert scale.value_for(0) == Max(512)
    assert scale.value_for(1) == Intermediate(256)
    assert scale.value_for(4) == Intermediate(32)
    assert scale.value_for(9) == Min(1)


def test_device_bounds_clamp_beyond_reference_range() -> None:
    scale = (
        ScaleBuilder()
        .kind(Exp2(2.0))
        .min_value(1)
        .max_value(1000)
        .ref_min_value(2)
        .ref_max_value(512)
        .make()
    )
    # Brighter than the reference range but still inside the hardware range.
    assert scale.value_for(-1).is_intermediate()
    assert scale.value_for(-10) == Max(1000)


def test_up_and_down_sign_convention() -> None:
    scale = ScaleBuilder().max_value(100).level(4).make()
    start = scale.current()

    brighter = scale.up()
    assert scale.level == 3
    assert brighter.value > start.value

    scale.down()
    dimmer = scale.down()
    assert scale.level == 5
    assert dimmer.value < start.value


def test_down_then_up_returns_to_start() -> None:
    scale = ScaleBuilder().kind(Exp2(2.0)).min_value(1).max_value(512).make()
    start = scale.current()
    for _ in range(3):
        scale.down()
    for _ in range(3):
        scale.up()
    assert scale.current() == start


def test_set_level_and_default() -> None:
    scale = ScaleBuilder().max_value(90).steps(9).make()
    assert scale.set_level(2) == Intermediate(70)
    assert scale.level == 2
    scale.set_to_default(6)
    assert scale.level == 6


def test_custom_step_count() -> None:
    scale = ScaleBuilder().max_value(100).steps(4).make()
    assert scale.idx_factor == pytest.approx(25.0)
    assert scale.value_for(1) == Intermediate(75)


@pytest.mark.parametrize(
    "builder",
    [
        ScaleBuilder().max_value(100).steps(0),
        ScaleBuilder().kind(Exp2(2.0)).max_value(100),  # ref_min defaults to 0
        ScaleBuilder().kind(Exp2(0.0)).min_value(1).max_value(100),
    ],
)
def test_invalid_scales(builder: ScaleBuilder) -> None:
    with pytest.raises(InvalidScale):
        builder.make()


def test_exponential_scale_saturates_at_extreme_levels() -> None:
    scale = (
        ScaleBuilder()
        .kind(Exp2(10.0))
        .min_value(1)
        .max_value(1024)
        .ref_min_value(1)
        .ref_max_value(1024)
        .make()
    )
    # 10 ** 444 overflows a float and 10 ** -444 underflows to zero.
    assert scale.set_level(400) == Min(1)
    assert scale.set_level(-400) == Max(1024)
