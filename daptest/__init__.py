"""daptest - synchronous Debug Adapter Protocol test client."""

from __future__ import annotations

import logging

from daptest.client import Client
from daptest.config import get_config
from daptest.errors import DapConnectionError
from daptest.errors import FailureRecorder
from daptest.errors import UnexpectedMessageError
from daptest.session import Session

__all__ = [
    "Client",
    "DapConnectionError",
    "FailureRecorder",
    "Session",
    "UnexpectedMessageError",
    "__version__",
    "configure_logging",
]
__version__ = "0.1.0"


def configure_logging(level: str | None = None) -> None:
    """Send daptest logs to the console.

    Only for scripts and interactive use; the library never configures
    logging on import.
    """
    config = get_config()
    logging.basicConfig(
        level=config.level if level is None else level.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[logging.StreamHandler()],
    )
