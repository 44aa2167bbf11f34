from __future__ import annotations

import enum
from dataclasses import dataclass
from pathlib import Path

from backlightd.errors import CommandParseError


@dataclass(frozen=True)
class AllDisplays:
    pass


@dataclass(frozen=True)
class NamedDisplay:
    name: str


TargetDisplay = AllDisplays | NamedDisplay


class Action(enum.Enum):
    ON = "on"
    OFF = "off"
    UP = "up"
    DOWN = "down"
    TOGGLE = "toggle"
    MAX = "max"
    MIN = "min"
    DEFAULT = "default"


@dataclass(frozen=True)
class DisplayCommand:
    action: Action
    target: TargetDisplay


@dataclass(frozen=True)
class SetSocketEnv:
    path: Path


BacklightCommand = DisplayCommand | SetSocketEnv

SWAYSOCK_VERB = "swaysock"

# Verbs match as case-insensitive prefixes, tried in this order.
_DISPLAY_VERBS: tuple[Action, ...] = (
    Action.TOGGLE,
    Action.DOWN,
    Action.UP,
    Action.OFF,
    Action.ON,
    Action.MAX,
    Action.MIN,
    Action.DEFAULT,
)


def _decode(raw: bytes | str) -> str:
    if isinstance(raw, str):
        text = raw
    else:
        try:
            text = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise CommandParseError("Command is not valid UTF-8") from e
    if text.endswith("\r\n"):
        return text[:-2]
    if text.endswith("\n"):
        return text[:-1]
    return text


def _strip_verb(text: str, verb: str) -> str | None:
    if text[: len(verb)].lower() != verb:
        return None
    return text[len(verb) :]


def parse_target(text: str) -> TargetDisplay:
    # Only the space character separates tokens; anything after the target is ignored.
    name = text.lstrip(" ").split(" ", 1)[0]
    if not name:
        raise CommandParseError("Missing display name")
    if name[:3].lower() == "all":
        return AllDisplays()
    return NamedDisplay(name)


def parse_command(raw: bytes | str) -> BacklightCommand:
    """Decode one command line, e.g. ``b"on DP-3"`` or ``b"TOGGLE all"``."""

    text = _decode(raw)

    rest = _strip_verb(text, SWAYSOCK_VERB)
    if rest is not None:
        path = rest.lstrip(" ")
        if not path:
            raise CommandParseError("swaysock needs a socket path")
        return SetSocketEnv(Path(path))

    for action in _DISPLAY_VERBS:
        rest = _strip_verb(text, action.value)
        if rest is not None:
            return DisplayCommand(action, parse_target(rest))

    raise CommandParseError(f"Unknown command: {text!r}")
