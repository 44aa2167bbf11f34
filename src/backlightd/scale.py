from __future__ import annotations

import math
import sys
from dataclasses import dataclass

from backlightd.clamped import ClampedValue
from backlightd.errors import InvalidScale, MissingCeiling

STEPS_IN_REFERENCE_RANGE = 9
DEFAULT_LEVEL = 4


@dataclass(frozen=True)
class Linear:
    pass


@dataclass(frozen=True)
class Exp2:
    gamma: float


ScaleKind = Linear | Exp2


def _to_native(x: float) -> int:
    # Same result as an unsigned float-to-int cast: truncate, saturate.
    if math.isnan(x) or x <= 0:
        return 0
    if math.isinf(x):
        return sys.maxsize
    return int(x)


def _exp2_value(ref_max: float, gamma: float, f: float) -> float:
    # An overflowing divisor dims to 0, an underflowing one saturates to +inf.
    try:
        divisor = math.pow(gamma, f)
    except OverflowError:
        return 0.0
    if divisor == 0:
        return math.inf
    return ref_max / divisor


@dataclass
class BrightnessScale:
    kind: ScaleKind
    # Step size for a linear scale, stops per step for an exponential one.
    idx_factor: float
    max_value: int
    min_value: int
    ref_max: float
    ref_min: float
    _level: int = DEFAULT_LEVEL

    @property
    def level(self) -> int:
        return self._level

    def value_for(self, level: int) -> ClampedValue[int]:
        f = level * self.idx_factor
        if isinstance(self.kind, Exp2):
            x = _exp2_value(self.ref_max, self.kind.gamma, f)
        else:
            x = self.ref_max - f
        return ClampedValue.new(_to_native(x), self.min_value, self.max_value)

    def current(self) -> ClampedValue[int]:
        return self.value_for(self._level)

    # A higher level means a dimmer display.
    def up(self) -> ClampedValue[int]:
        self._level -= 1
        return self.current()

    def down(self) -> ClampedValue[int]:
        self._level += 1
        return self.current()

    def set_level(self, level: int) -> ClampedValue[int]:
        self._level = int(level)
        return self.current()

    def set_to_default(self, default_level: int = DEFAULT_LEVEL) -> ClampedValue[int]:
        return self.set_level(default_level)


@dataclass
class ScaleBuilder:
    """Collects scale parameters; ``make`` validates them and derives the step factor."""

    _kind: ScaleKind | None = None
    _max_value: int | None = None
    _min_value: int | None = None
    _ref_max: float | None = None
    _ref_min: float | None = None
    _steps: float = STEPS_IN_REFERENCE_RANGE
    _level: int = DEFAULT_LEVEL

    def kind(self, v: ScaleKind) -> ScaleBuilder:
        self._kind = v
        return self

    def max_value(self, v: int) -> ScaleBuilder:
        self._max_value = int(v)
        return self

    def min_value(self, v: int) -> ScaleBuilder:
        self._min_value = int(v)
        return self

    def ref_max_value(self, v: float) -> ScaleBuilder:
        self._ref_max = float(v)
        return self

    def ref_min_value(self, v: float) -> ScaleBuilder:
        self._ref_min = float(v)
        return self

    def steps(self, v: float) -> ScaleBuilder:
        self._steps = float(v)
        return self

    def level(self, v: int) -> ScaleBuilder:
        self._level = int(v)
        return self

    def make(self) -> BrightnessScale:
        if self._max_value is None:
            raise MissingCeiling()
        max_value = self._max_value
        min_value = 0 if self._min_value is None else self._min_value
        ref_max = float(max_value) if self._ref_max is None else self._ref_max
        ref_min = float(min_value) if self._ref_min is None else self._ref_min
        kind = Linear() if self._kind is None else self._kind

        if self._steps <= 0:
            raise InvalidScale(f"steps must be > 0, got {self._steps}")
        if isinstance(kind, Exp2):
            if kind.gamma <= 0:
                raise InvalidScale(f"gamma must be > 0, got {kind.gamma}")
            if ref_min <= 0 or ref_max <= 0:
                raise InvalidScale("an exponential scale needs positive reference bounds")

        return BrightnessScale(
            kind=kind,
            idx_factor=_idx_factor(kind, ref_max, ref_min, self._steps),
            max_value=max_value,
            min_value=min_value,
            ref_max=ref_max,
            ref_min=ref_min,
            _level=self._level,
        )


def _idx_factor(kind: ScaleKind, ref_max: float, ref_min: float, steps: float) -> float:
    if isinstance(kind, Exp2):
        stops = math.log2(ref_max) - math.log2(ref_min)
        return stops / steps
    return (ref_max - ref_min) / steps
