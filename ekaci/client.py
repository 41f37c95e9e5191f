"""Command-line client talking to a local server over its unix socket."""

from __future__ import annotations

import argparse
import json
import logging
import socket
import sys
from pathlib import Path

from .dirs import DirectoryError, default_socket_path
from .server import _configure_logging
from .types import (
    InfoRequest,
    InfoResponse,
    ProtocolError,
    Request,
    Response,
    decode_response,
    encode_request,
)

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse the client's command line; with no arguments show help and exit."""
    parser = argparse.ArgumentParser(prog="ekaci")
    parser.add_argument("-V", "--version", action="version", version="%(prog)s 0.0.1")
    parser.add_argument("-s", "--socket", type=Path)
    commands = parser.add_subparsers(dest="command")
    commands.add_parser("info", help="Information about EkaCI running on host")
    commands.add_parser("status", help="Brief status and summary of EkaCI")
    arguments = sys.argv[1:] if argv is None else list(argv)
    if not arguments:
        parser.print_help(sys.stderr)
        raise SystemExit(2)
    return parser.parse_args(arguments)


def send_request(socket_path: str | Path | None, request: Request) -> Response:
    """Send one request to the server and return its response."""
    path = Path(socket_path) if socket_path is not None else default_socket_path()
    logger.debug("Attempting to connect to %s", path)
    chunks = []
    with socket.socket(socket.AF_UNIX, socket.SOCK_STREAM) as stream:
        try:
            stream.connect(str(path))
        except OSError as err:
            raise ConnectionError(f"failed to connect to server socket {path}: {err}") from err
        try:
            stream.sendall(encode_request(request).encode())
            stream.shutdown(socket.SHUT_WR)
        except OSError as err:
            raise ConnectionError(f"failed to write request data: {err}") from err
        logger.debug("Attempting to read response message")
        try:
            while chunk := stream.recv(65536):
                chunks.append(chunk)
        except OSError as err:
            raise ConnectionError(f"failed to read server response: {err}") from err
    try:
        return decode_response(b"".join(chunks))
    except ProtocolError as err:
        raise ProtocolError(f"failed to interpret server response: {err}") from err


def format_info(info: InfoResponse) -> str:
    """Render an info response for the terminal."""
    return (
        f"Server status: {info.status.value}\n"
        f"EkaCI server version: {json.dumps(info.version, ensure_ascii=False)}"
    )


def main(argv: list[str] | None = None) -> int:
    """Run the client; return the process exit status."""
    _configure_logging()
    args = parse_args(argv)
    if args.command == "info":
        try:
            response = send_request(args.socket, InfoRequest())
        except (OSError, ProtocolError, DirectoryError) as err:
            print(f"Error: failed to send info request to server: {err}", file=sys.stderr)
            return 1
        print(format_info(response))
    return 0


if __name__ == "__main__":
    sys.exit(main())