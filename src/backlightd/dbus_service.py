from __future__ import annotations

from collections.abc import Callable

from dbus_next.aio import MessageBus
from dbus_next.service import ServiceInterface, method

# Annotations below are D-Bus signature strings ("s", "b"), read by dbus-next.
# Ruff sees them as undefined names.


BUS_NAME = "io.github.backlightd"
OBJ_PATH = "/io/github/backlightd"


class BacklightInterface(ServiceInterface):
    """D-Bus mirror of the socket protocol; every call ends up as one command line."""

    def __init__(self, command: Callable[[str], bool]):
        super().__init__(BUS_NAME)
        self._command = command

    @method()
    def Command(self, line: "s") -> "b":  # noqa: N802, F821
        return bool(self._command(line))

    @method()
    def On(self, target: "s") -> "b":  # noqa: N802, F821
        return bool(self._command(f"on {target}"))

    @method()
    def Off(self, target: "s") -> "b":  # noqa: N802, F821
        return bool(self._command(f"off {target}"))

    @method()
    def Toggle(self, target: "s") -> "b":  # noqa: N802, F821
        return bool(self._command(f"toggle {target}"))

    @method()
    def Up(self, target: "s") -> "b":  # noqa: N802, F821
        return bool(self._command(f"up {target}"))

    @method()
    def Down(self, target: "s") -> "b":  # noqa: N802, F821
        return bool(self._command(f"down {target}"))


async def serve(iface: BacklightInterface) -> MessageBus:
    bus = await MessageBus().connect()
    bus.export(OBJ_PATH, iface)
    await bus.request_name(BUS_NAME)
    return bus
