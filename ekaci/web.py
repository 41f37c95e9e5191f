"""HTTP service: the API and the optional single-page frontend."""

from __future__ import annotations

import asyncio
import ipaddress
import socket
from pathlib import Path, PurePosixPath

from aiohttp import web

DISABLED_MESSAGE = (
    "This instance of Eka CI has been started with the web interface disabled."
)


async def _api_root(request: web.Request) -> web.Response:
    return web.Response(text="API")


async def _disabled(request: web.Request) -> web.Response:
    return web.Response(status=404, text=DISABLED_MESSAGE)


def _resolve(root: Path, tail: str) -> Path | None:
    parts = PurePosixPath(tail).parts
    if any(part in ("/", "..") or "\\" in part for part in parts):
        return None
    return root.joinpath(*parts)


def _spa_handler(bundle: str | Path):
    root = Path(bundle)
    index = root / "index.html"

    async def handler(request: web.Request) -> web.StreamResponse:
        if request.method not in ("GET", "HEAD"):
            raise web.HTTPMethodNotAllowed(request.method, ["GET", "HEAD"])
        target = _resolve(root, request.match_info["tail"])
        if target is not None:
            if target.is_dir():
                if not request.path.endswith("/"):
                    raise web.HTTPTemporaryRedirect(request.path + "/")
                target = target / "index.html"
            if target.is_file():
                return web.FileResponse(target)
        # Unknown paths get the frontend, which routes them itself.
        if index.is_file():
            return web.FileResponse(index, status=404)
        raise web.HTTPNotFound()

    return handler


def create_app(bundle: str | Path | None = None) -> web.Application:
    """Build the web application, serving the frontend bundle if one is given."""
    app = web.Application()
    app.router.add_get("/api", _api_root)
    fallback = _spa_handler(bundle) if bundle is not None else _disabled
    app.router.add_route("*", "/{tail:.*}", fallback)
    return app


class WebService:
    """A bound TCP listener ready to serve the web application."""

    def __init__(self, sock: socket.socket) -> None:
        self._sock = sock
        self._runner: web.AppRunner | None = None

    def bind_addr(self) -> tuple[str, int]:
        """Return the address and port actually bound."""
        host, port = self._sock.getsockname()[:2]
        return host, port

    async def run(self, bundle: str | Path | None = None) -> None:
        """Serve until cancelled."""
        runner = web.AppRunner(create_app(bundle))
        self._runner = runner
        await runner.setup()
        try:
            await web.SockSite(runner, self._sock).start()
            await asyncio.Event().wait()
        finally:
            self._runner = None
            await runner.cleanup()

    async def close(self) -> None:
        """Stop serving and release the socket."""
        if self._runner is not None:
            runner, self._runner = self._runner, None
            await runner.cleanup()
        self._sock.close()


async def bind_web_service(addr: str, port: int) -> WebService:
    """Bind a TCP listener on an IPv4 address and port."""
    try:
        address = ipaddress.IPv4Address(addr)
    except ValueError as err:
        raise ValueError(f"failed to determine listen address: {err}") from err
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    try:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        sock.bind((str(address), port))
        sock.listen(1024)
        sock.setblocking(False)
    except OSError as err:
        sock.close()
        raise OSError(f"failed to bind to tcp socket at {address}:{port}: {err}") from err
    return WebService(sock)