from __future__ import annotations

import copy
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")
A = TypeVar("A")


@dataclass
class ClampedValue(Generic[T]):
    """A value together with where it sits relative to the bounds that produced it.

    The tag is the subclass (``Min``, ``Max`` or ``Intermediate``), so the
    judgement and the payload always travel together.
    """

    value: T

    @staticmethod
    def new(value: Any, floor: Any, ceiling: Any) -> ClampedValue[Any]:
        if value >= ceiling:
            return Max(ceiling)
        if value <= floor:
            return Min(floor)
        return Intermediate(value)

    def is_min(self) -> bool:
        return isinstance(self, Min)

    def is_max(self) -> bool:
        return isinstance(self, Max)

    def is_intermediate(self) -> bool:
        return isinstance(self, Intermediate)

    def map(self, f: Callable[[T], A]) -> ClampedValue[A]:
        return type(self)(f(self.value))

    def replace(self, value: T) -> None:
        self.value = value

    def swap(self, value: T) -> ClampedValue[T]:
        previous = copy.copy(self)
        self.replace(value)
        return previous

    def __int__(self) -> int:
        return int(self.value)  # type: ignore[call-overload]


class Min(ClampedValue[T]):
    pass


class Max(ClampedValue[T]):
    pass


class Intermediate(ClampedValue[T]):
    pass
