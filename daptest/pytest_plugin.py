"""pytest fixtures for tests that drive a DAP server.

Enable with ``pytest_plugins = ["daptest.pytest_plugin"]`` in a conftest.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from typing import Callable
from typing import Iterator

import pytest

from daptest.client import Client
from daptest.errors import FailureRecorder

if TYPE_CHECKING:
    from daptest.session import Address


@pytest.fixture
def dap_reporter() -> Iterator[FailureRecorder]:
    """Collect soft failures and fail the test at teardown if there were any."""
    recorder = FailureRecorder()
    yield recorder
    if recorder.failed:
        try:
            recorder.check()
        except AssertionError as exc:
            pytest.fail(str(exc), pytrace=False)


@pytest.fixture
def dap_client(dap_reporter: FailureRecorder) -> Iterator[Callable[[Address], Client]]:
    """Factory fixture: connect clients that report into ``dap_reporter``.

    Every client created through the factory is closed at teardown.
    """
    clients: list[Client] = []

    def connect(address: Address) -> Client:
        client = Client(address, reporter=dap_reporter)
        clients.append(client)
        return client

    yield connect

    for client in clients:
        client.close()
