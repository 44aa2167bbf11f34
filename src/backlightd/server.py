from __future__ import annotations

import asyncio
import logging
import socket
from collections.abc import Callable
from pathlib import Path

logger = logging.getLogger(__name__)


def remove_stale_socket(path: Path) -> None:
    if path.exists() or path.is_symlink():
        logger.warning("Removing existing socket at %s", path)
        path.unlink()


async def serve_socket(
    path: Path, on_command: Callable[[bytes], object]
) -> asyncio.AbstractServer:
    """Listen on a unix socket; each connection carries exactly one command.

    The callback runs inline on the event loop, so commands are handled one
    at a time in arrival order.
    """

    remove_stale_socket(path)

    async def handle(reader: asyncio.StreamReader, writer: asyncio.StreamWriter) -> None:
        try:
            raw = await reader.read()
        finally:
            writer.close()
        on_command(raw)

    server = await asyncio.start_unix_server(handle, path=str(path))
    logger.debug("Made socket at %s", path)
    return server


def send_command(path: Path, line: str) -> None:
    """Client side: write one command and close the connection."""

    with socket.socket(socket.AF_UNIX, socket.SOCK_STREAM) as sock:
        sock.connect(str(path))
        sock.sendall(line.encode("utf-8"))
        sock.shutdown(socket.SHUT_WR)
