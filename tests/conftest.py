from __future__ import annotations

import pytest

from daptest.config import reset_config
from tests.dap_server_harness import ScriptedServer

pytest_plugins = ["daptest.pytest_plugin", "pytester"]


@pytest.fixture(autouse=True)
def _restore_config():
    """Undo any process-wide configuration changes made by a test."""
    yield
    reset_config()


@pytest.fixture
def dap_server():
    """A started conformant scripted server, closed on teardown."""
    server = ScriptedServer().start()
    yield server
    server.close()


@pytest.fixture
def client(dap_client, dap_server):
    """A client connected to ``dap_server`` and reporting into ``dap_reporter``."""
    return dap_client(dap_server.address)
