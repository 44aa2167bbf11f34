from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from pathlib import Path

from backlightd.command import parse_command
from backlightd.config import Config
from backlightd.dbus_service import BacklightInterface, serve
from backlightd.dispatch import Dispatcher
from backlightd.errors import CommandNotImplemented, CommandParseError
from backlightd.server import serve_socket
from backlightd.system import ControlContext

logger = logging.getLogger(__name__)


@dataclass
class Daemon:
    cfg: Config
    socket_path: Path

    def __post_init__(self) -> None:
        self.dispatcher = Dispatcher(self.cfg.displays, ControlContext.from_environ())
        self._server: asyncio.AbstractServer | None = None
        self._bus = None

    def handle(self, raw: bytes | str) -> bool:
        """Parse and run one command. Returns False when it was refused."""

        try:
            cmd = parse_command(raw)
        except CommandParseError as e:
            logger.warning("Backlight command error: %s", e)
            return False
        logger.debug("Executing %s", cmd)
        try:
            self.dispatcher.execute(cmd)
        except CommandNotImplemented as e:
            logger.warning("%s", e)
            return False
        return True

    async def start(self) -> None:
        self.dispatcher.apply_default_level(self.cfg.default_level)
        self._server = await serve_socket(self.socket_path, self.handle)
        if self.cfg.dbus_enabled:
            self._bus = await serve(BacklightInterface(self.handle))
            logger.info("Listening on D-Bus")

    async def stop(self) -> None:
        if self._server:
            self._server.close()
            await self._server.wait_closed()
            self.socket_path.unlink(missing_ok=True)
        if self._bus:
            self._bus.disconnect()

    async def run(self) -> None:
        await self.start()
        assert self._server
        try:
            await self._server.serve_forever()
        finally:
            await self.stop()
