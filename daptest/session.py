"""Blocking TCP session with a DAP server.

A :class:`Session` owns one socket and the sequence counter that numbers the
requests sent over it. It is not safe to share between threads.
"""

from __future__ import annotations

import logging
import socket
from typing import TYPE_CHECKING
from typing import Any
from typing import BinaryIO
from typing import Tuple
from typing import Union

from daptest.config import get_config
from daptest.errors import DapConnectionError
from daptest.protocol.codec import read_protocol_message
from daptest.protocol.codec import write_protocol_message

if TYPE_CHECKING:
    import types

    from daptest.protocol.codec import DecodedMessage

logger = logging.getLogger(__name__)

Address = Union[str, Tuple[str, int]]


def parse_address(address: Address) -> tuple[str, int]:
    """Split ``host:port`` (or pass through a ``(host, port)`` pair)."""
    if isinstance(address, tuple):
        host, port = address
        return host, int(port)

    host, sep, port = address.rpartition(":")
    if not sep or not port.isdigit():
        msg = f"Invalid address {address!r}, expected host:port"
        raise DapConnectionError(msg, address=address)
    # [::1]:4711 style IPv6 literals
    return host.strip("[]") or "localhost", int(port)


class Session:
    """Connection and sequence state for one test."""

    def __init__(self, address: Address, *, seq_start: int | None = None) -> None:
        self.host, self.port = parse_address(address)
        self.seq = get_config().seq_start if seq_start is None else seq_start
        self.socket: socket.socket | None = None
        self.reader: BinaryIO | None = None
        self.writer: BinaryIO | None = None

    @property
    def address(self) -> str:
        return f"{self.host}:{self.port}"

    @property
    def is_open(self) -> bool:
        return self.socket is not None

    def open(self) -> None:
        """Connect to the server.

        A failure raises :class:`DapConnectionError`, which fails the current
        test; other tests in the run still execute.
        """
        logger.info("Connecting to server at: %s", self.address)
        try:
            sock = socket.create_connection((self.host, self.port))
        except OSError as e:
            msg = f"Failed to connect to {self.address}"
            raise DapConnectionError(msg, address=self.address, cause=e) from e

        self.socket = sock
        self.reader = sock.makefile("rb")
        self.writer = sock.makefile("wb")

    def close(self) -> None:
        """Release the connection; errors are logged and ignored."""
        for stream in (self.writer, self.reader):
            if stream is None:
                continue
            try:
                stream.close()
            except OSError as e:
                logger.debug("Ignoring error while closing stream: %s", e)

        if self.socket is not None:
            try:
                self.socket.close()
            except OSError as e:
                logger.debug("Ignoring error while closing socket: %s", e)
            logger.info("Disconnected from %s", self.address)

        self.socket = None
        self.reader = None
        self.writer = None

    def next_sequence(self) -> int:
        """Return the current sequence number and advance the counter."""
        seq = self.seq
        self.seq += 1
        return seq

    def send(self, message: dict[str, Any]) -> None:
        if self.writer is None:
            raise DapConnectionError("No active connection", address=self.address)
        write_protocol_message(self.writer, message)

    def read_message(self) -> DecodedMessage:
        """Block until one message has been decoded from the stream."""
        if self.reader is None:
            raise DapConnectionError("No active connection", address=self.address)
        return read_protocol_message(self.reader)

    def __enter__(self) -> Session:
        self.open()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: types.TracebackType | None,
    ) -> None:
        self.close()
