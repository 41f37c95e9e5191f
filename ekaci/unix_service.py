"""Unix socket service answering command-line client requests."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from .dirs import default_socket_path
from .types import (
    InfoRequest,
    InfoResponse,
    Request,
    Response,
    ServerStatus,
    decode_request,
    encode_response,
)

logger = logging.getLogger(__name__)

SERVER_VERSION = "0.1.0"


def prepare_path(socket_path: str | Path) -> None:
    """Create the socket's parent directory and remove a stale socket file."""
    path = Path(socket_path)
    parent = path.parent
    if parent == path:
        raise ValueError("socket file cannot be located directly under root")
    if not parent.exists():
        logger.info("Creating socket directory: %s", parent)
        try:
            parent.mkdir(parents=True, exist_ok=True)
        except OSError:
            pass
    if path.exists():
        logger.debug("Previous socket file %s found, attempting to remove", path)
        try:
            path.unlink()
        except OSError as err:
            raise OSError(f"failed to remove previous socket file: {err}") from err


def handle_request(request: Request) -> Response:
    """Compute the server's answer to a client request."""
    if isinstance(request, InfoRequest):
        return InfoResponse(status=ServerStatus.ACTIVE, version=SERVER_VERSION)
    raise TypeError(f"not a request: {request!r}")


async def handle_client(
    reader: asyncio.StreamReader, writer: asyncio.StreamWriter
) -> None:
    """Read one request until end of stream, answer it and close the stream."""
    logger.info("Got unix socket client")
    data = await reader.read()
    message = decode_request(data)
    logger.debug("Got message from client: %r", message)
    writer.write(encode_response(handle_request(message)).encode())
    await writer.drain()
    logger.debug("Shutting down socket")
    writer.close()
    await writer.wait_closed()


async def _serve_client(reader: asyncio.StreamReader, writer: asyncio.StreamWriter) -> None:
    try:
        await handle_client(reader, writer)
    except Exception as err:  # a failing client must not stop the service
        logger.warning("Failed to handle socket connection: %r", err)
    finally:
        writer.close()


class UnixService:
    """A listening unix socket serving client requests."""

    def __init__(self, server: asyncio.AbstractServer) -> None:
        self._server = server

    def bind_addr(self) -> Path | None:
        """Return the path the socket is bound to, or None if it is unnamed."""
        sockets = self._server.sockets
        name = sockets[0].getsockname() if sockets else ""
        if isinstance(name, str) and name:
            return Path(name)
        return None

    async def run(self) -> None:
        """Serve clients until cancelled or closed."""
        await self._server.serve_forever()

    async def close(self) -> None:
        """Stop accepting clients."""
        self._server.close()
        await self._server.wait_closed()

    async def __aenter__(self) -> UnixService:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()


async def bind_unix_service(socket_path: str | Path | None = None) -> UnixService:
    """Bind a unix socket at the given or the default path."""
    path = Path(socket_path) if socket_path is not None else default_socket_path()
    prepare_path(path)
    server = await asyncio.start_unix_server(_serve_client, path=str(path))
    return UnixService(server)