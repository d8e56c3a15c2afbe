# cogwire

`cogwire` implements `cog/1`, a line-oriented JSON protocol. Clients use it
to send requests for workspace services (mail, calendar, drive, docs, sheets,
tasks and others) to a server. Each message is one JSON object followed by a
newline. The server listens on a Unix domain socket. The package uses only
the standard library.

## Modules

- `cogwire.protocol` defines the messages: `CogRequest`, `CogResponse` and
  `CogEvent`. Each has `to_dict()` and `from_dict()`.
- `cogwire.request` defines the request payloads `Ping`, `Shutdown` and
  `ServiceRequest(service, op, params)`. It also provides
  `payload_to_dict`, `payload_from_dict` and `service_catalog(features)`.
- `cogwire.response` holds the following:
  - `Success` and `Failure` results;
  - `ErrorResponse` with its constructors (`not_found`, `internal`, and so on);
  - the `ErrorCode` values;
  - the success payload types: `Signal`, `Binary`, `MonitorStatus`,
    `IndexResults`, `AuthStatus` and others.
- `cogwire.schema` is the declarative description of operations and their
  parameters. It provides `Service`, `Operation`, `Struct`, `Field`, the
  `Feature` flags and `SchemaError`.
- `cogwire.services_mail` and `cogwire.services_files` hold the catalogue of
  operations for each service. Call `mail_services()` or `file_services()` to
  get it.
- `cogwire.wire` encodes and decodes NDJSON lines (`encode`, `decode`,
  `encode_request`, `decode_request`, `encode_response`, `decode_response`,
  `encode_event`, `decode_event`, `read_line`). It raises `WireError`.
- `cogwire.handshake` has the opening exchange: `HandshakeRequest`,
  `HandshakeResponse`, `server_handshake` and `client_handshake`.
- `cogwire.handler` has the abstract `RequestHandler` and the `DefaultHandler`.
- `cogwire.server` has `UdsServer`.
- `cogwire.exit` has `ExitCode`. `ExitCode.from_status(code)` maps any status
  that is not listed to `ERROR`.
- `cogwire.confirm` has `confirm_destructive(message, force=False, no_input=False)`.
  It asks on stderr and reads the answer from stdin. Only `y` or `yes` counts
  as agreement. `force` always agrees. `no_input` always declines.

## Wire format

Requests are flat. A service operation is named as `"service.op"`, and its
parameters sit next to it:

```
{"id":1,"type":"gmail.search","query":"from:alice","max":10}
{"id":2,"type":"ping"}
{"id":3,"type":"shutdown","reason":"done"}
```

Responses carry either a result or an error:

```
{"id":1,"result":...}
{"id":1,"error":{"code":3,"message":"message not found"}}
```

The payloads `Signal.PONG`, `Signal.SHUTDOWN_ACK` and `Signal.EMPTY` are all
written as `null`. `Binary` data is written base64-encoded. When a response
is read back, its success payload is plain JSON.

## Encoding and decoding

```python
from cogwire.protocol import CogRequest, CogResponse
from cogwire.request import ServiceRequest
from cogwire.wire import decode_request, decode_response, encode_request, encode_response

line = encode_request(CogRequest.ping(1))   # b'{"id":1,"type":"ping"}\n'
assert decode_request(line).id == 1

search = CogRequest(2, ServiceRequest("gmail", "search", {"query": "from:alice", "max": 10}))
decoded = decode_request(encode_request(search))
assert decoded.payload.params == {"query": "from:alice", "max": 10}

reply = decode_response(encode_response(CogResponse.pong(1)))
assert reply.id == 1
```

Parameters are checked against the service's catalogue in two places:

- When a request is decoded, missing required fields, wrong types, and
  unknown services or operations all raise an error. Optional fields that are
  missing come back filled with `None`, `False` or `[]`.
- When a request is encoded, optional fields whose value is `None` are left
  out.

A `WireError` is raised in these cases:

- a line is not valid JSON;
- the message does not fit the expected type;
- an encoded line would be larger than 16 MiB;
- `read_line` meets a line over the limit.

### Feature-gated operations

Some operations are only accepted on decoding when their `Feature` is passed
in `features`:

- `Feature.DESTRUCTIVE_PERMANENT` gates the permanent deletes, for example
  `calendar.delete` and `drive.empty_trash`.
- `Feature.GEMINI_WEB` gates the whole `gemini` service.
- `Feature.NOTEBOOKLM` gates the whole `notebooklm` service.

```python
from cogwire.schema import Feature

decode_request(line, features={Feature.DESTRUCTIVE_PERMANENT})
```

Encoding accepts every operation, whatever features are enabled.

## Running a server

```python
import asyncio

from cogwire.handler import DefaultHandler
from cogwire.server import UdsServer

server = UdsServer(DefaultHandler())
asyncio.run(server.listen("/tmp/cog/cog.sock"))
```

Before the server binds the socket, `listen` removes any file already at the
socket path and creates any missing parent directories.

A connection then goes as follows:

1. The client sends `{"protocol":"cog/1"}`.
2. The server answers `{"protocol":"cog/1","status":"ok"}`. If the client
   asked for any other version, the server writes an error status instead
   and drops the connection.
3. The client sends requests, one per line, and gets one response line for
   each.
4. The connection ends when the client closes it, or when the server has
   answered a `shutdown` request.

If a request cannot be decoded, that connection is closed and the error is
logged. The server keeps accepting other connections.

On the client side, `client_handshake(reader, writer)` sends the handshake.
It raises `HandshakeRejected` if the server refuses it.

`UdsServer(handler, features=...)` passes `features` on to request decoding.

## Writing a handler

Subclass `RequestHandler` and implement `async def handle(self, request)` so
that it returns a `CogResponse`:

```python
from cogwire.handler import RequestHandler
from cogwire.protocol import CogResponse
from cogwire.response import ErrorResponse


class EchoHandler(RequestHandler):
    async def handle(self, request):
        if request.id == 0:
            return CogResponse.error(request.id, ErrorResponse.invalid_request("id 0 is reserved"))
        return CogResponse.ok(request.id, {"echo": request.to_dict()})
```

## What this package does not do

- It does not call any workspace service. `DefaultHandler` answers `ping`
  and `shutdown`. It answers every other request with an internal error,
  "no handler registered for this service". To do real work, you supply your
  own `RequestHandler`.
- It has no command-line program. `ExitCode` and `confirm_destructive` are
  helpers for a front end that you write yourself.
- It does not store credentials, accounts or monitor subscriptions. The
  `auth.*`, `monitor.*` and `index.*` requests, and their response types, are
  only message shapes.