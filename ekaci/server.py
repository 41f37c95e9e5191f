"""Server entry point: runs the unix socket and web services."""

from __future__ import annotations

import argparse
import asyncio
import logging
import os
import sys
from pathlib import Path

from .dirs import DirectoryError
from .unix_service import bind_unix_service
from .web import bind_web_service

logger = logging.getLogger(__name__)

_LEVELS = {
    "trace": logging.DEBUG,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def _configure_logging() -> None:
    level = _LEVELS.get(os.environ.get("EKACI_LOG", "").lower(), logging.INFO)
    logging.basicConfig(
        level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )


def _describe(err: BaseException) -> str:
    messages = []
    current: BaseException | None = err
    while current is not None:
        messages.append(str(current))
        current = current.__cause__
    return ": ".join(messages)


def _port(value: str) -> int:
    try:
        port = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid port: {value!r}") from None
    if not 0 <= port <= 65535:
        raise argparse.ArgumentTypeError(f"port out of range: {port}")
    return port


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse the server's command line."""
    parser = argparse.ArgumentParser(
        prog="eka_ci_server", description="Continuous Integration server for Nix"
    )
    parser.add_argument("-V", "--version", action="version", version="%(prog)s 0.1.0")
    parser.add_argument(
        "-p", "--port", type=_port, default=3030, help="Port for server to host http traffic"
    )
    parser.add_argument(
        "-a", "--addr", default="127.0.0.1", help="IPv4 address to bind http traffic"
    )
    parser.add_argument(
        "-s",
        "--socket",
        type=Path,
        help="Socket for ekaci client. Defaults to $XDG_RUNTIME_DIR/ekaci.",
    )
    parser.add_argument(
        "-b",
        "--bundle",
        type=Path,
        help="Path for the frontend bundle. Frontend will be disabled if not provided.",
    )
    return parser.parse_args(argv)


async def serve(args: argparse.Namespace) -> None:
    """Bind both services and serve until cancelled."""
    try:
        unix_service = await bind_unix_service(args.socket)
    except (OSError, ValueError, DirectoryError) as err:
        raise RuntimeError("failed to start unix service") from err
    try:
        try:
            web_service = await bind_web_service(args.addr, args.port)
        except (OSError, ValueError) as err:
            raise RuntimeError("failed to start web service") from err
        host, port = web_service.bind_addr()
        logger.info("Serving Eka CI web service on http://%s:%s", host, port)
        socket_path = unix_service.bind_addr()
        logger.info(
            "Listening for client connection on %s",
            socket_path if socket_path is not None else "<<unnamed socket>>",
        )
        unix_task = asyncio.create_task(unix_service.run())
        try:
            await web_service.run(args.bundle)
        finally:
            unix_task.cancel()
            await asyncio.gather(unix_task, return_exceptions=True)
            await web_service.close()
    finally:
        await unix_service.close()


def main(argv: list[str] | None = None) -> int:
    """Run the server; return the process exit status."""
    _configure_logging()
    args = parse_args(argv)
    try:
        asyncio.run(serve(args))
    except KeyboardInterrupt:
        return 130
    except Exception as err:
        print(f"Error: {_describe(err)}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())