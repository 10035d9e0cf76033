"""Error handling for the daptest client."""

from daptest.errors.client_errors import ConfigurationError
from daptest.errors.client_errors import DapConnectionError
from daptest.errors.client_errors import DapTestError
from daptest.errors.client_errors import FramingError
from daptest.errors.client_errors import MessageDecodeError
from daptest.errors.client_errors import ProtocolError
from daptest.errors.client_errors import UnexpectedMessageError
from daptest.errors.reporting import FailureRecorder
from daptest.errors.reporting import FailureReporter

__all__ = [
    "ConfigurationError",
    "DapConnectionError",
    "DapTestError",
    "FailureRecorder",
    "FailureReporter",
    "FramingError",
    "MessageDecodeError",
    "ProtocolError",
    "UnexpectedMessageError",
]
