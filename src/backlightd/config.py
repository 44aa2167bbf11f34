from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from backlightd.display import Display
from backlightd.errors import ConfigError, ScaleError
from backlightd.paths import config_candidates
from backlightd.scale import DEFAULT_LEVEL, STEPS_IN_REFERENCE_RANGE, Exp2, Linear, ScaleBuilder
from backlightd.system import ControlMethod, parse_control_method

LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


@dataclass
class Config:
    displays: list[Display]
    steps_in_reference_range: float = STEPS_IN_REFERENCE_RANGE
    default_level: int = DEFAULT_LEVEL
    socket_path: Path | None = None
    log_level: int = logging.INFO
    log_timestamp: bool = True
    dbus_enabled: bool = False


def _require(cfg: dict[str, Any], key: str) -> Any:
    if key not in cfg:
        raise ConfigError(f"Missing required config key: {key}")
    return cfg[key]


def _get_int(cfg: dict[str, Any], key: str) -> int | None:
    v = cfg.get(key)
    if v is None:
        return None
    if isinstance(v, bool) or not isinstance(v, int):
        raise ConfigError(f"{key} must be an integer, got {v!r}")
    return v


def _get_bool(cfg: dict[str, Any], key: str, default: bool) -> bool:
    v = cfg.get(key, default)
    if not isinstance(v, bool):
        raise ConfigError(f"{key} must be true or false, got {v!r}")
    return v


def _get_number(cfg: dict[str, Any], key: str) -> float | None:
    v = cfg.get(key)
    if v is None:
        return None
    if isinstance(v, bool) or not isinstance(v, (int, float)):
        raise ConfigError(f"{key} must be a number, got {v!r}")
    return float(v)


def _control(cfg: dict[str, Any], key: str) -> ControlMethod | None:
    raw = cfg.get(key)
    if raw is None:
        return None
    if not isinstance(raw, str):
        raise ConfigError(f"Could not parse {key} configuration: {raw!r}")
    return parse_control_method(raw)


def build_display(cfg: dict[str, Any], steps: float, level: int) -> Display:
    name = _require(cfg, "name")
    if not isinstance(name, str) or not name:
        raise ConfigError("Display name must be a non-empty string")

    builder = ScaleBuilder().steps(steps).level(level)
    gamma = _get_number(cfg, "gamma")
    if gamma is not None:
        if gamma == 1.0:
            # Linear scales default to a 0-100 range.
            builder.kind(Linear()).max_value(100).min_value(0)
        else:
            builder.kind(Exp2(gamma))

    for key, setter in (
        ("min", builder.min_value),
        ("max", builder.max_value),
        ("ref_max", builder.ref_max_value),
        ("ref_min", builder.ref_min_value),
    ):
        v = _get_int(cfg, key)
        if v is not None:
            if v < 0:
                raise ConfigError(f"{name}: {key} must be >= 0")
            setter(v)

    try:
        scale = builder.make()
    except ScaleError as e:
        raise ConfigError(f"{name}: {e}") from e

    return Display(
        name=name,
        scale=scale,
        brightness_control=_control(cfg, "brightness_control"),
        power_control=_control(cfg, "onoff_control"),
    )


def parse(data: Any) -> Config:
    if not isinstance(data, dict):
        raise ConfigError("Top-level config must be a mapping")

    displays_cfg = _require(data, "displays")
    if not isinstance(displays_cfg, list) or not displays_cfg:
        raise ConfigError("displays must be a non-empty list")

    steps = _get_int(data, "steps")
    steps = STEPS_IN_REFERENCE_RANGE if steps is None else steps
    if steps <= 0:
        raise ConfigError("steps must be > 0")
    default_level = _get_int(data, "default_level")
    default_level = DEFAULT_LEVEL if default_level is None else default_level

    displays: list[Display] = []
    for item in displays_cfg:
        if not isinstance(item, dict):
            raise ConfigError("displays items must be mappings")
        displays.append(build_display(item, steps, default_level))

    log_level = str(data.get("log_level", "info")).lower()
    if log_level not in LOG_LEVELS:
        raise ConfigError(f"log_level must be one of {', '.join(LOG_LEVELS)}")

    socket_path = data.get("socket_path")
    dbus = data.get("dbus") or {}
    if not isinstance(dbus, dict):
        raise ConfigError("dbus must be a mapping")

    return Config(
        displays=displays,
        steps_in_reference_range=float(steps),
        default_level=default_level,
        socket_path=Path(str(socket_path)) if socket_path else None,
        log_level=LOG_LEVELS[log_level],
        log_timestamp=_get_bool(data, "log_timestamp", True),
        dbus_enabled=_get_bool(dbus, "enabled", False),
    )


def find_config(explicit: str | Path | None = None) -> Path:
    if explicit is not None:
        p = Path(explicit)
        if not p.exists():
            raise ConfigError(f"Config file does not exist: {p}")
        return p
    for p in config_candidates():
        if p.exists():
            return p
    raise ConfigError("No config file found")


def load(path: str | Path | None = None) -> Config:
    p = find_config(path)
    try:
        data = yaml.safe_load(p.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigError(f"Could not parse the configuration document: {e}") from e
    except OSError as e:
        raise ConfigError(f"Could not read {p}: {e}") from e
    return parse(data)
