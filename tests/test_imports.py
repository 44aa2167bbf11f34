from __future__ import annotations

import compileall
import importlib
from pathlib import Path


def test_compileall_src() -> None:
    src = Path(__file__).resolve().parents[1] / "src"
    ok = compileall.compile_dir(str(src), quiet=1)
    assert ok


def test_import_packages() -> None:
    for name in (
        "backlightd",
        "backlightd.cli",
        "backlightd.config",
        "backlightd.command",
        "backlightd.dispatch",
        "backlightd.daemon",
        "backlightd.dbus_service",
        "backlightd.system",
    ):
        importlib.import_module(name)
