"""Tests for the connection session: addressing, sequencing, lifecycle."""

from __future__ import annotations

import socket

import pytest

from daptest.config import config_context
from daptest.errors import DapConnectionError
from daptest.session import Session
from daptest.session import parse_address


@pytest.mark.parametrize(
    ("address", "expected"),
    [
        ("localhost:4711", ("localhost", 4711)),
        ("127.0.0.1:0", ("127.0.0.1", 0)),
        ("[::1]:5000", ("::1", 5000)),
        (":4711", ("localhost", 4711)),
        (("example.com", "80"), ("example.com", 80)),
    ],
)
def test_parse_address(address, expected):
    assert parse_address(address) == expected


@pytest.mark.parametrize("address", ["localhost", "localhost:", "host:port"])
def test_parse_address_rejects_garbage(address):
    with pytest.raises(DapConnectionError) as excinfo:
        parse_address(address)

    assert excinfo.value.details["address"] == address


def test_sequence_starts_at_one_and_increments():
    session = Session("localhost:4711")

    assert [session.next_sequence() for _ in range(5)] == [1, 2, 3, 4, 5]
    assert session.seq == 6


def test_sequence_start_follows_config():
    with config_context(seq_start=100):
        session = Session("localhost:4711")

    assert session.next_sequence() == 100
    assert Session("localhost:4711").next_sequence() == 1


def test_sessions_do_not_share_counters():
    first = Session("localhost:4711")
    second = Session("localhost:4711")

    first.next_sequence()
    first.next_sequence()

    assert second.next_sequence() == 1


def _unused_port() -> int:
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.bind(("127.0.0.1", 0))
    port = sock.getsockname()[1]
    sock.close()
    return port


def test_open_failure_is_fatal():
    session = Session(f"127.0.0.1:{_unused_port()}")

    with pytest.raises(DapConnectionError) as excinfo:
        session.open()

    assert isinstance(excinfo.value.cause, OSError)
    assert not session.is_open


def test_use_before_open_raises():
    session = Session("localhost:4711")

    with pytest.raises(DapConnectionError, match="No active connection"):
        session.send({"seq": 1, "type": "request", "command": "threads"})
    with pytest.raises(DapConnectionError, match="No active connection"):
        session.read_message()


def test_open_close_and_close_again():
    listener = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    listener.bind(("127.0.0.1", 0))
    listener.listen(1)
    try:
        with Session(listener.getsockname()) as session:
            assert session.is_open
            peer, _ = listener.accept()
            peer.close()

        assert not session.is_open
        session.close()
        assert not session.is_open
    finally:
        listener.close()
