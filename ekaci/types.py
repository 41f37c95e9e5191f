"""Messages exchanged between the command-line client and the server."""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

TAG = "type"


class ProtocolError(ValueError):
    """A message could not be understood."""


class ServerStatus(Enum):
    """Health of a running server."""

    ACTIVE = "Active"
    DEGRADED = "Degraded"
    DEAD = "Dead"


@dataclass(frozen=True)
class InfoRequest:
    """Ask the server for general information about itself."""


@dataclass(frozen=True)
class InfoResponse:
    """General information about a running server."""

    status: ServerStatus
    version: str


Request = Union[InfoRequest]
Response = Union[InfoResponse]


def _dumps(value: dict[str, Any]) -> str:
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def _load_tagged(text: str | bytes) -> tuple[Any, dict[str, Any]]:
    try:
        value = json.loads(text)
    except (json.JSONDecodeError, UnicodeDecodeError) as err:
        raise ProtocolError(f"invalid JSON: {err}") from err
    if not isinstance(value, dict):
        raise ProtocolError("expected a JSON object")
    if TAG not in value:
        raise ProtocolError(f"missing field `{TAG}`")
    return value[TAG], value


def encode_request(request: Request) -> str:
    """Serialise a request to its JSON wire form."""
    if isinstance(request, InfoRequest):
        return _dumps({TAG: "Info"})
    raise TypeError(f"not a request: {request!r}")


def decode_request(text: str | bytes) -> Request:
    """Parse a request from its JSON wire form."""
    tag, _ = _load_tagged(text)
    if tag == "Info":
        return InfoRequest()
    raise ProtocolError(f"unknown request variant {tag!r}")


def encode_response(response: Response) -> str:
    """Serialise a response to its JSON wire form."""
    if isinstance(response, InfoResponse):
        return _dumps(
            {TAG: "Info", "status": response.status.value, "version": response.version}
        )
    raise TypeError(f"not a response: {response!r}")


def decode_response(text: str | bytes) -> Response:
    """Parse a response from its JSON wire form."""
    tag, value = _load_tagged(text)
    if tag != "Info":
        raise ProtocolError(f"unknown response variant {tag!r}")
    for field in ("status", "version"):
        if field not in value:
            raise ProtocolError(f"missing field `{field}`")
    try:
        status = ServerStatus(value["status"])
    except (ValueError, TypeError) as err:
        raise ProtocolError(f"unknown server status {value['status']!r}") from err
    version = value["version"]
    if not isinstance(version, str):
        raise ProtocolError("field `version` must be a string")
    return InfoResponse(status=status, version=version)