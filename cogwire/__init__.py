"""NDJSON request/response protocol: messages, service catalogue, wire codec, handshake and Unix-socket server."""

__version__ = "0.1.0"