from __future__ import annotations

import os
from pathlib import Path

APP_NAME = "backlightd"
SYSTEM_CONFIG = Path("/etc") / APP_NAME / "config"


def config_candidates() -> list[Path]:
    """Return the config file locations to try, most specific first."""

    out: list[Path] = []
    base = os.environ.get("XDG_CONFIG_HOME")
    if base:
        out.append(Path(base) / APP_NAME / "config")
    out.append(SYSTEM_CONFIG)
    return out


def default_socket_path() -> Path | None:
    """Return $XDG_RUNTIME_DIR/backlight, or None when the runtime dir is unknown."""

    base = os.environ.get("XDG_RUNTIME_DIR")
    if not base:
        return None
    return Path(base) / "backlight"
