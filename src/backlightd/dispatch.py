from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field

from backlightd.command import (
    Action,
    BacklightCommand,
    NamedDisplay,
    SetSocketEnv,
)
from backlightd.display import Display
from backlightd.errors import CommandNotImplemented
from backlightd.system import ControlContext

logger = logging.getLogger(__name__)


@dataclass
class Dispatcher:
    """Applies decoded commands to the displays it owns.

    A hardware failure on one display is logged and never stops the
    remaining displays from receiving the same command.
    """

    displays: list[Display]
    context: ControlContext = field(default_factory=ControlContext)

    def execute(self, cmd: BacklightCommand) -> None:
        if isinstance(cmd, SetSocketEnv):
            logger.info("Using sway socket %s", cmd.path)
            self.context.sway_socket = cmd.path
            return

        handler = self._handlers().get(cmd.action)
        if handler is None:
            raise CommandNotImplemented(f"{cmd.action.value} is not implemented")

        named, everything = handler
        if isinstance(cmd.target, NamedDisplay):
            named(cmd.target.name)
        else:
            everything()

    def _handlers(
        self,
    ) -> dict[Action, tuple[Callable[[str], None], Callable[[], None]]]:
        return {
            Action.ON: (self.turn_on_display, self.turn_on_all),
            Action.OFF: (self.turn_off_display, self.turn_off_all),
            Action.TOGGLE: (self.toggle_display, self.toggle_all),
            Action.UP: (self.display_brightness_up, self.all_brightness_up),
            Action.DOWN: (self.display_brightness_down, self.all_brightness_down),
        }

    def named(self, name: str) -> Iterator[Display]:
        # Names need not be unique; every match gets the command.
        return (d for d in self.displays if d.name == name)

    def _attempt(self, display: Display, what: str, op: Callable[[], object]) -> None:
        try:
            op()
        except OSError as e:
            logger.warning("Could not %s %s: %s", what, display.name, e)

    def turn_on_display(self, name: str) -> None:
        for d in self.named(name):
            self._attempt(d, "turn on", lambda d=d: d.turn_on(self.context))

    def turn_on_all(self) -> None:
        for d in self.displays:
            self._attempt(d, "turn on", lambda d=d: d.turn_on(self.context))

    def turn_off_display(self, name: str) -> None:
        for d in self.named(name):
            self._attempt(d, "turn off", lambda d=d: d.turn_off(self.context))

    def turn_off_all(self) -> None:
        for d in self.displays:
            self._attempt(d, "turn off", lambda d=d: d.turn_off(self.context))

    def toggle_display(self, name: str) -> None:
        for d in self.named(name):
            try:
                on = d.is_on()
            except OSError as e:
                logger.error("Error getting state of %s: %s", d.name, e)
                continue
            if on:
                self._attempt(d, "turn off", lambda d=d: d.turn_off(self.context))
            else:
                self._attempt(d, "turn on", lambda d=d: d.turn_on(self.context))

    def toggle_all(self) -> None:
        """Follow the first display: if it is on, everything goes off, and vice versa."""

        if not self.displays:
            return
        lead = self.displays[0]
        try:
            on = lead.is_on()
        except OSError as e:
            logger.error("Error getting state of lead display %s: %s", lead.name, e)
            return
        if on:
            self.turn_off_all()
        else:
            self.turn_on_all()

    def display_brightness_up(self, name: str) -> None:
        for d in self.named(name):
            if not d.brightness.is_max():
                self._attempt(d, "raise brightness of", d.brightness_up)

    def display_brightness_down(self, name: str) -> None:
        for d in self.named(name):
            if not d.brightness.is_min():
                self._attempt(d, "lower brightness of", d.brightness_down)

    def all_brightness_up(self) -> None:
        # Once any display has room, every display steps, saturated ones included.
        if any(not d.brightness.is_max() for d in self.displays):
            for d in self.displays:
                self._attempt(d, "raise brightness of", d.brightness_up)

    def all_brightness_down(self) -> None:
        if any(not d.brightness.is_min() for d in self.displays):
            for d in self.displays:
                self._attempt(d, "lower brightness of", d.brightness_down)

    def apply_default_level(self, level: int) -> None:
        for d in self.displays:
            self._attempt(d, "set default brightness on", lambda d=d: d.set_brightness_level(level))
