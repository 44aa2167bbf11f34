from __future__ import annotations

import logging

from backlightd.errors import HardwareError
from backlightd.system.control import ControlMethod, DDCUtil, SysFS, run_tool

logger = logging.getLogger(__name__)

DDCUTIL = "ddcutil"
# MCCS feature code for luminance.
VCP_BRIGHTNESS = "10"


def apply_brightness(method: ControlMethod, value: int) -> None:
    logger.debug("Setting brightness to %d via %s", value, method)
    if isinstance(method, SysFS):
        try:
            method.path.write_text(str(int(value)), encoding="utf-8")
        except OSError as e:
            raise HardwareError(f"Could not write {method.path}: {e}") from e
    elif isinstance(method, DDCUtil):
        run_tool(
            [
                DDCUTIL,
                "setvcp",
                VCP_BRIGHTNESS,
                str(int(value)),
                "--noverify",
                "--display",
                str(method.display),
            ]
        )
    else:
        logger.error("Cannot use %s to set brightness", method)
