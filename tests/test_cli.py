from __future__ import annotations

from pathlib import Path

import pytest

from backlightd.cli import main, resolve_socket
from backlightd.config import parse

DOCUMENT = """
displays:
  - name: eDP-1
    brightness_control: "sysfs:/sys/class/backlight/intel_backlight/brightness"
    max: 255
"""


def test_check_lists_displays(tmp_path: Path, capsys) -> None:
    p = tmp_path / "config"
    p.write_text(DOCUMENT, encoding="utf-8")
    main(["check", "-c", str(p)])
    out = capsys.readouterr().out
    assert "eDP-1" in out
    assert "range=0-255" in out


def test_check_exits_on_bad_config(tmp_path: Path) -> None:
    p = tmp_path / "config"
    p.write_text("displays: []\n", encoding="utf-8")
    with pytest.raises(SystemExit, match="displays must be a non-empty list"):
        main(["check", "-c", str(p)])


def test_resolve_socket_order(monkeypatch) -> None:
    monkeypatch.setenv("XDG_RUNTIME_DIR", "/run/user/1000")
    assert resolve_socket("/tmp/explicit") == Path("/tmp/explicit")
    assert resolve_socket(None) == Path("/run/user/1000/backlight")

    cfg = parse({"displays": [{"name": "x", "max": 1}], "socket_path": "/tmp/from-config"})
    assert resolve_socket(None, cfg) == Path("/tmp/from-config")

    monkeypatch.delenv("XDG_RUNTIME_DIR")
    with pytest.raises(SystemExit):
        resolve_socket(None)
