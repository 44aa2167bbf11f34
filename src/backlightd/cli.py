from __future__ import annotations

import argparse
import asyncio
import logging
import os
import sys
from pathlib import Path

from backlightd import __version__
from backlightd.config import Config, load
from backlightd.daemon import Daemon
from backlightd.errors import ConfigError
from backlightd.paths import default_socket_path
from backlightd.server import send_command

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="backlightd")
    ap.add_argument("--version", action="version", version=__version__)

    sub = ap.add_subparsers(dest="cmd", required=True)

    config_help = "Config file, defaults to $XDG_CONFIG_HOME/backlightd/config"
    socket_help = "Unix socket path, defaults to $XDG_RUNTIME_DIR/backlight"

    run = sub.add_parser("run", help="Run the backlight daemon")
    run.add_argument(
        "-c", "--config", default=os.environ.get("BACKLIGHTD_CONFIG"), help=config_help
    )
    run.add_argument(
        "-s", "--socket", default=os.environ.get("BACKLIGHTD_SOCKET_PATH"), help=socket_help
    )

    send = sub.add_parser("send", help="Send one command to a running daemon")
    send.add_argument(
        "-s", "--socket", default=os.environ.get("BACKLIGHTD_SOCKET_PATH"), help=socket_help
    )
    send.add_argument("words", nargs="+", help='e.g. "up all" or "toggle eDP-1"')

    check = sub.add_parser("check", help="Validate the configuration and list displays")
    check.add_argument(
        "-c", "--config", default=os.environ.get("BACKLIGHTD_CONFIG"), help=config_help
    )

    return ap


def setup_logging(level: int, timestamp: bool) -> None:
    # journald reads stderr and stamps lines itself.
    fmt = "%(levelname)s %(name)s: %(message)s"
    if timestamp:
        fmt = "%(asctime)s " + fmt
    logging.basicConfig(level=level, format=fmt, stream=sys.stderr)


def resolve_socket(explicit: str | None, cfg: Config | None = None) -> Path:
    if explicit:
        return Path(explicit)
    if cfg is not None and cfg.socket_path is not None:
        return cfg.socket_path
    p = default_socket_path()
    if p is None:
        raise SystemExit("No socket path given and XDG_RUNTIME_DIR is not set")
    return p


def _load_or_exit(path: str | None) -> Config:
    try:
        return load(path)
    except ConfigError as e:
        raise SystemExit(f"backlightd: {e}") from e


def main(argv: list[str] | None = None) -> None:
    args = _build_parser().parse_args(argv)
    if args.cmd == "run":
        cfg = _load_or_exit(args.config)
        setup_logging(cfg.log_level, cfg.log_timestamp)
        logger.info("Logging enabled. Level is %s", logging.getLevelName(cfg.log_level))
        daemon = Daemon(cfg, resolve_socket(args.socket, cfg))
        asyncio.run(daemon.run())
    elif args.cmd == "send":
        send_command(resolve_socket(args.socket), " ".join(args.words))
    elif args.cmd == "check":
        cfg = _load_or_exit(args.config)
        for d in cfg.displays:
            print(
                f"{d.name}: brightness={d.brightness_control} power={d.power_control} "
                f"range={d.scale.min_value}-{d.scale.max_value} kind={d.scale.kind}"
            )
