# ekaci

A small continuous integration service made of three commands:

- `ekaci-server` serves an HTTP interface and listens on a unix socket for
  local clients.
- `ekaci` talks to a running server over that unix socket.
- `ekaci-evaluator` is the evaluator entry point.

## Installation

```
pip install .
```

## Running the server

```
ekaci-server --port 3030 --addr 127.0.0.1 --bundle ./frontend/dist
```

Options:

| Option | Default | Meaning |
| --- | --- | --- |
| `-p`, `--port` | `3030` | Port for HTTP traffic, 0 to 65535 (`0` picks a free port) |
| `-a`, `--addr` | `127.0.0.1` | IPv4 address to bind HTTP traffic to |
| `-s`, `--socket` | `$XDG_RUNTIME_DIR/ekaci/ekaci.socket` | Unix socket for `ekaci` clients |
| `-b`, `--bundle` | none | Directory holding the frontend bundle |
| `-V`, `--version` | | Print the version and exit |

The default socket path needs `XDG_RUNTIME_DIR` to be set to an absolute path
of a directory that only its owner can access; otherwise pass `--socket`.
Any socket file left over from an earlier run is removed before binding, and
missing parent directories are created.

On startup the server logs the HTTP address and the socket path it actually
bound. The log level is read from the `EKACI_LOG` environment variable
(`trace`, `debug`, `info`, `warn`, `warning` or `error`; default `info`).
Startup failures are printed as `Error: ...` and the command exits with
status 1; Ctrl-C exits with status 130.

### HTTP routes

- `GET /api` answers `API`.
- With `--bundle`, every other path serves the matching file from the bundle.
  A directory requested with a trailing slash serves its `index.html`; without
  the slash the client is redirected to it. Paths that match nothing get the
  bundle's `index.html` with status `404`, so a single-page application can
  handle its own routing. Only `GET` and `HEAD` are allowed.
- Without `--bundle`, every other path answers `404` with the text
  "This instance of Eka CI has been started with the web interface disabled."

## Querying the server

```
ekaci info
```

prints something like:

```
Server status: Active
EkaCI server version: "0.1.0"
```

Use `-s PATH` / `--socket PATH` to reach a server listening somewhere other
than the default path. `ekaci status` is accepted but does nothing yet, and
`ekaci` with no arguments prints its help and exits with status 2.

## Using it from Python

```python
from ekaci.types import InfoRequest, encode_request, decode_response

message = encode_request(InfoRequest())      # '{"type":"Info"}'
response = decode_response(
    '{"type": "Info", "status": "Active", "version": "0.1.0"}'
)
print(response.status, response.version)     # ServerStatus.ACTIVE 0.1.0
```

Malformed messages raise `ekaci.types.ProtocolError`.
`ekaci.client.send_request(socket_path, request)` sends one request and
returns the decoded response; `ekaci.unix_service.bind_unix_service` and
`ekaci.web.bind_web_service` bind the two services for use in your own
asyncio program.

## What it does not do

This package only provides the plumbing between the commands: the unix socket
protocol (currently just the `info` request), the HTTP listener and the
frontend file serving. It does not run builds, evaluate anything or talk to
any code hosting service. `ekaci-evaluator` only parses its command line
(`--help`, `--version`) and exits.

## Tests

```
pip install .[test]
pytest
```