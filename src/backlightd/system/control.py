from __future__ import annotations

import os
import re
import subprocess
from dataclasses import dataclass
from pathlib import Path

from backlightd.errors import ConfigError, HardwareError


@dataclass(frozen=True)
class SysFS:
    """A writable kernel attribute, e.g. /sys/class/drm/card0-eDP-1/dpms."""

    path: Path


@dataclass(frozen=True)
class DDCUtil:
    """Display number as reported by ``ddcutil detect``."""

    display: int


@dataclass(frozen=True)
class SwayDPMS:
    """Output name understood by swaymsg (e.g. eDP-1). Power only."""

    output: str


ControlMethod = SysFS | DDCUtil | SwayDPMS

_DDCUTIL_RE = re.compile(r"(\d+)(?:\.\d+)?$")


def parse_control_method(raw: str) -> ControlMethod:
    """Parse ``sysfs:<path>``, ``ddcutil:<n>`` or ``swaydpms:<output>``."""

    scheme, sep, rest = raw.partition(":")
    scheme = scheme.strip().lower()
    if sep:
        if scheme == "sysfs" and rest:
            return SysFS(Path(rest))
        if scheme == "swaydpms" and rest:
            return SwayDPMS(rest)
        if scheme == "ddcutil":
            m = _DDCUTIL_RE.match(rest)
            if m and 0 <= int(m.group(1)) <= 255:
                return DDCUtil(int(m.group(1)))
    raise ConfigError(f"Could not parse control method: {raw!r}")


@dataclass
class ControlContext:
    """State shared with the external control programs.

    ``sway_socket`` replaces a process-wide SWAYSOCK: it is set by the
    ``swaysock`` command and handed to every swaymsg call.
    """

    sway_socket: Path | None = None

    @classmethod
    def from_environ(cls) -> ControlContext:
        sock = os.environ.get("SWAYSOCK")
        return cls(sway_socket=Path(sock) if sock else None)

    def env(self) -> dict[str, str]:
        env = os.environ.copy()
        if self.sway_socket is not None:
            env["SWAYSOCK"] = str(self.sway_socket)
        return env


def run_tool(cmd: list[str], env: dict[str, str] | None = None) -> None:
    """Run an external control program to completion; failures become HardwareError."""

    try:
        subprocess.run(  # noqa: S603
            cmd,
            env=env,
            check=True,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.PIPE,
        )
    except subprocess.CalledProcessError as e:
        stderr = (e.stderr or b"").decode("utf-8", errors="replace").strip()
        raise HardwareError(f"{cmd[0]} exited with {e.returncode}: {stderr}") from e
    except OSError as e:
        raise HardwareError(f"Could not run {cmd[0]}: {e}") from e
