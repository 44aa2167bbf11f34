from __future__ import annotations

import logging
from dataclasses import dataclass

from backlightd.clamped import ClampedValue
from backlightd.errors import NoPowerStatus
from backlightd.scale import BrightnessScale
from backlightd.system import (
    ControlContext,
    ControlMethod,
    apply_brightness,
    apply_power,
    read_power_state,
)

logger = logging.getLogger(__name__)


@dataclass
class Display:
    name: str
    scale: BrightnessScale
    brightness_control: ControlMethod | None = None
    power_control: ControlMethod | None = None

    @property
    def brightness(self) -> ClampedValue[int]:
        return self.scale.current()

    def is_on(self) -> bool:
        if self.power_control is None:
            raise NoPowerStatus(f"{self.name} has no power control")
        return read_power_state(self.power_control)

    def _write_brightness(self, value: ClampedValue[int]) -> ClampedValue[int]:
        if self.brightness_control is None:
            logger.info("%s has no brightness control, ignoring", self.name)
            return value
        apply_brightness(self.brightness_control, value.value)
        return value

    def set_brightness_level(self, level: int) -> ClampedValue[int]:
        logger.debug("Setting brightness on %s to level %d", self.name, level)
        return self._write_brightness(self.scale.set_level(level))

    def brightness_up(self) -> ClampedValue[int]:
        logger.debug("Brightness up on %s", self.name)
        return self._write_brightness(self.scale.up())

    def brightness_down(self) -> ClampedValue[int]:
        logger.debug("Brightness down on %s", self.name)
        return self._write_brightness(self.scale.down())

    def _set_power(self, on: bool, ctx: ControlContext) -> None:
        if self.power_control is None:
            logger.info("%s has no power control, ignoring", self.name)
            return
        apply_power(self.power_control, on, ctx)

    def turn_on(self, ctx: ControlContext) -> None:
        logger.debug("Turning on %s", self.name)
        self._set_power(True, ctx)

    def turn_off(self, ctx: ControlContext) -> None:
        logger.debug("Turning off %s", self.name)
        self._set_power(False, ctx)
