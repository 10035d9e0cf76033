"""DAP base protocol codec.

Messages are framed as::

    Content-Length: <n>\\r\\n
    \\r\\n
    <n bytes of UTF-8 JSON>

The reader side returns a :class:`DecodedMessage`, which pairs the JSON
object with the kind tag assigned by :func:`daptest.protocol.registry.classify`.
"""

from __future__ import annotations

import json
import logging
from typing import Any
from typing import BinaryIO
from typing import NamedTuple

from daptest.errors import FramingError
from daptest.errors import MessageDecodeError
from daptest.protocol.registry import MessageKind
from daptest.protocol.registry import classify

logger = logging.getLogger(__name__)

CONTENT_LENGTH = "Content-Length"
HEADER_DELIMITER = b"\r\n"
MAX_HEADER_LINE = 8192


class DecodedMessage(NamedTuple):
    kind: MessageKind
    message: dict[str, Any]


def encode_protocol_message(message: dict[str, Any]) -> bytes:
    """Return the framed wire bytes for ``message``."""
    content = json.dumps(message, separators=(",", ":"), ensure_ascii=False).encode("utf-8")
    header = f"{CONTENT_LENGTH}: {len(content)}\r\n\r\n".encode("ascii")
    return header + content


def write_protocol_message(stream: BinaryIO, message: dict[str, Any]) -> None:
    """Frame ``message`` and write it to ``stream``."""
    stream.write(encode_protocol_message(message))
    stream.flush()
    logger.debug("Sent message: %s", message)


def _read_headers(reader: BinaryIO) -> dict[str, str]:
    headers: dict[str, str] = {}
    while True:
        line = reader.readline(MAX_HEADER_LINE + 1)
        if len(line) > MAX_HEADER_LINE:
            msg = f"Header line exceeds {MAX_HEADER_LINE} bytes"
            raise FramingError(msg)
        if not line:
            if headers:
                raise FramingError("Connection closed while reading message headers")
            raise FramingError("Connection closed")
        if not line.endswith(HEADER_DELIMITER):
            msg = f"Header line not terminated by CRLF: {line!r}"
            raise FramingError(msg)

        text = line.decode("ascii", errors="replace").strip()
        if not text:
            return headers

        key, sep, value = text.partition(":")
        if not sep:
            msg = f"Malformed header line: {text!r}"
            raise FramingError(msg)
        headers[key.strip()] = value.strip()


def read_protocol_message(reader: BinaryIO) -> DecodedMessage:
    """Read and decode exactly one framed message from ``reader``.

    Raises:
        FramingError: If the header is malformed or the stream ends early
        MessageDecodeError: If the body is not a known protocol message
    """
    headers = _read_headers(reader)
    if CONTENT_LENGTH not in headers:
        raise FramingError(f"{CONTENT_LENGTH} header missing")

    try:
        content_length = int(headers[CONTENT_LENGTH])
    except ValueError as e:
        msg = f"Invalid {CONTENT_LENGTH}: {headers[CONTENT_LENGTH]!r}"
        raise FramingError(msg, cause=e) from e
    if content_length < 0:
        msg = f"Invalid {CONTENT_LENGTH}: {content_length}"
        raise FramingError(msg)

    content = reader.read(content_length)
    if len(content) < content_length:
        msg = f"Connection closed after {len(content)} of {content_length} body bytes"
        raise FramingError(msg)

    return decode_protocol_message(content)


def decode_protocol_message(content: bytes) -> DecodedMessage:
    """Parse a message body and tag it with its kind."""
    try:
        message = json.loads(content.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        msg = f"Failed to parse message as JSON: {e}"
        raise MessageDecodeError(msg, cause=e) from e

    if not isinstance(message, dict):
        raise MessageDecodeError("Message is not a JSON object")

    kind = classify(message)
    logger.debug("Received %s: %s", kind.__name__, message)
    return DecodedMessage(kind, message)
