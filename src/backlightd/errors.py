from __future__ import annotations


class BacklightError(Exception):
    pass


class ConfigError(BacklightError, ValueError):
    pass


class ScaleError(ConfigError):
    pass


class MissingCeiling(ScaleError):
    def __init__(self) -> None:
        super().__init__("A brightness scale needs a maximum value")


class InvalidScale(ScaleError):
    pass


class CommandParseError(BacklightError, ValueError):
    pass


class CommandNotImplemented(BacklightError, NotImplementedError):
    pass


class HardwareError(BacklightError, OSError):
    pass


class NoPowerStatus(HardwareError):
    pass
