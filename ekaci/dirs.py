"""Locations of runtime files."""

from __future__ import annotations

import os
from pathlib import Path

PREFIX = "ekaci"
SOCKET_NAME = "ekaci.socket"


class DirectoryError(RuntimeError):
    """A runtime location could not be determined."""


def _runtime_directory() -> Path:
    value = os.environ.get("XDG_RUNTIME_DIR", "")
    base = Path(value)
    if not value or not base.is_absolute():
        raise DirectoryError("XDG_RUNTIME_DIR is not set")
    try:
        mode = base.stat().st_mode
    except OSError as err:
        raise DirectoryError(f"cannot access runtime directory {base}: {err}") from err
    if mode & 0o077:
        raise DirectoryError(f"runtime directory {base} is accessible by other users")
    return base


def runtime_file(name: str) -> Path:
    """Return the path of a runtime file under the user's runtime directory."""
    return _runtime_directory() / PREFIX / name


def default_socket_path() -> Path:
    """Return the default path of the server's unix socket."""
    try:
        return runtime_file(SOCKET_NAME)
    except DirectoryError as err:
        raise DirectoryError(
            "failed to determine default path for unix socket, "
            f"consider setting it explicitly: {err}"
        ) from err