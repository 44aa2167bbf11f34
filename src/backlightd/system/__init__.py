from backlightd.system.backlight import apply_brightness
from backlightd.system.control import (
    ControlContext,
    ControlMethod,
    DDCUtil,
    SwayDPMS,
    SysFS,
    parse_control_method,
)
from backlightd.system.power import apply_power, read_power_state

__all__ = [
    "ControlContext",
    "ControlMethod",
    "DDCUtil",
    "SwayDPMS",
    "SysFS",
    "apply_brightness",
    "apply_power",
    "parse_control_method",
    "read_power_state",
]
