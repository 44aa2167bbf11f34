from __future__ import annotations

from backlightd.dbus_service import BUS_NAME, BacklightInterface


def test_methods_forward_command_lines() -> None:
    lines: list[str] = []

    def command(line: str) -> bool:
        lines.append(line)
        return True

    iface = BacklightInterface(command)
    assert iface.name == BUS_NAME

    iface.Up("all")
    iface.Down("eDP-1")
    iface.On("DP-3")
    iface.Off("all")
    iface.Toggle("all")
    iface.Command("swaysock /tmp/sway.sock")
    assert lines == [
        "up all",
        "down eDP-1",
        "on DP-3",
        "off all",
        "toggle all",
        "swaysock /tmp/sway.sock",
    ]
