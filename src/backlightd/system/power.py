from __future__ import annotations

import logging

from backlightd.errors import HardwareError, NoPowerStatus
from backlightd.system.control import ControlContext, ControlMethod, SwayDPMS, SysFS, run_tool

logger = logging.getLogger(__name__)

SWAYMSG = "swaymsg"
# DRM dpms attribute values.
DPMS_ON = "0"
DPMS_OFF = "4"


def apply_power(method: ControlMethod, on: bool, ctx: ControlContext) -> None:
    logger.debug("Turning %s via %s", "on" if on else "off", method)
    if isinstance(method, SysFS):
        try:
            method.path.write_text(DPMS_ON if on else DPMS_OFF, encoding="utf-8")
        except OSError as e:
            raise HardwareError(f"Could not write {method.path}: {e}") from e
    elif isinstance(method, SwayDPMS):
        run_tool(
            [SWAYMSG, "-q", "output", method.output, "power", "on" if on else "off"],
            env=ctx.env(),
        )
    else:
        logger.error("Cannot use %s to turn a display %s", method, "on" if on else "off")


def read_power_state(method: ControlMethod) -> bool:
    """Return True when the display is on. Only sysfs attributes can be read."""

    if not isinstance(method, SysFS):
        raise NoPowerStatus(f"Cannot read power state through {method}")
    try:
        return method.path.read_text(encoding="utf-8").strip() == DPMS_ON
    except OSError as e:
        raise HardwareError(f"Could not read {method.path}: {e}") from e
