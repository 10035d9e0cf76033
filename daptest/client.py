"""Synchronous DAP client for driving server tests.

Every ``*_request`` method builds one request, stamps it with the next
sequence number and writes it without waiting for a reply. Every
``expect_*`` method reads exactly one message and narrows it to the expected
kind:

* a read or decode failure is reported to the client's
  :class:`~daptest.errors.FailureReporter` and ``None`` is returned, so the
  test keeps going but is marked failed;
* a message of another kind raises :class:`~daptest.errors.UnexpectedMessageError`.

Typical use::

    client = Client(server_address)
    client.initialize_request()
    client.expect_initialize_response()
    client.expect_initialized_event()
    ...
    client.close()
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING
from typing import Any
from typing import Sequence
from typing import TypeVar
from typing import cast

from daptest.config import get_config
from daptest.errors import FailureRecorder
from daptest.errors import ProtocolError
from daptest.errors import UnexpectedMessageError
from daptest.protocol import events
from daptest.protocol import requests
from daptest.protocol.capabilities import CONFIGURATION_DONE_CAPABILITY
from daptest.protocol.messages import EVENT_SEQ_SENTINEL
from daptest.protocol.messages import ErrorResponse
from daptest.protocol.registry import kind_name
from daptest.session import Session

if TYPE_CHECKING:
    import types

    from daptest.config import ClientConfig
    from daptest.errors import FailureReporter
    from daptest.protocol.codec import DecodedMessage
    from daptest.protocol.messages import Event
    from daptest.protocol.messages import Request
    from daptest.session import Address

T = TypeVar("T")


class Client:
    """DAP test client over one TCP connection. All methods are blocking."""

    def __init__(
        self,
        address: Address,
        *,
        reporter: FailureReporter | None = None,
        config: ClientConfig | None = None,
    ) -> None:
        self.config = config or get_config()
        # A recorder the client creates itself is checked on close
        self._own_recorder: FailureRecorder | None = None
        if reporter is None:
            reporter = self._own_recorder = FailureRecorder()
        self.reporter: FailureReporter = reporter
        self.session = Session(address, seq_start=self.config.seq_start)
        self.session.open()

    def close(self) -> None:
        """Close the session.

        Without an injected reporter, soft failures recorded so far raise
        ``AssertionError`` here.
        """
        self.session.close()
        if self._own_recorder is not None:
            self._own_recorder.check()

    def __enter__(self) -> Client:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: types.TracebackType | None,
    ) -> None:
        if exc_type is None:
            self.close()
        else:
            self.session.close()

    # ---- Reading -----------------------------------------------------------

    def read_message(self) -> DecodedMessage:
        """Read the next message; framing and decode errors propagate."""
        return self.session.read_message()

    def expect_message(self, kind: type[T]) -> T | None:
        """Read one message and narrow it to ``kind``."""
        try:
            decoded = self.session.read_message()
        except (ProtocolError, OSError) as e:
            self.reporter.error(f"failed to read {kind_name(kind)}: {e}")
            return None

        if decoded.kind is not kind:
            raise UnexpectedMessageError(
                kind_name(kind), kind_name(decoded.kind), decoded.message
            )
        return cast("T", decoded.message)

    def expect_initialize_response(self) -> requests.InitializeResponse | None:
        response = self.expect_message(requests.InitializeResponse)
        if response is None:
            return None
        body = response.get("body")
        if not isinstance(body, dict) or not body.get(CONFIGURATION_DONE_CAPABILITY):
            self.reporter.error(f"got {response!r}, want {CONFIGURATION_DONE_CAPABILITY}=true")
        return response

    def expect_initialized_event(self) -> events.InitializedEvent | None:
        return self.expect_message(events.InitializedEvent)

    def expect_launch_response(self) -> requests.LaunchResponse | None:
        return self.expect_message(requests.LaunchResponse)

    def expect_disconnect_response(self) -> requests.DisconnectResponse | None:
        return self.expect_message(requests.DisconnectResponse)

    def expect_error_response(self) -> ErrorResponse | None:
        return self.expect_message(ErrorResponse)

    def expect_continue_response(self) -> requests.ContinueResponse | None:
        return self.expect_message(requests.ContinueResponse)

    def expect_terminated_event(self) -> events.TerminatedEvent | None:
        return self.expect_message(events.TerminatedEvent)

    def expect_set_breakpoints_response(self) -> requests.SetBreakpointsResponse | None:
        return self.expect_message(requests.SetBreakpointsResponse)

    def expect_set_exception_breakpoints_response(
        self,
    ) -> requests.SetExceptionBreakpointsResponse | None:
        return self.expect_message(requests.SetExceptionBreakpointsResponse)

    def expect_stopped_event(self) -> events.StoppedEvent | None:
        return self.expect_message(events.StoppedEvent)

    def expect_configuration_done_response(self) -> requests.ConfigurationDoneResponse | None:
        return self.expect_message(requests.ConfigurationDoneResponse)

    def expect_threads_response(self) -> requests.ThreadsResponse | None:
        return self.expect_message(requests.ThreadsResponse)

    def expect_stack_trace_response(self) -> requests.StackTraceResponse | None:
        return self.expect_message(requests.StackTraceResponse)

    # ---- Requests ----------------------------------------------------------

    def _new_request(self, command: str, arguments: Any = None) -> Request:
        request: dict[str, Any] = {
            "seq": self.session.next_sequence(),
            "type": "request",
            "command": command,
        }
        if arguments is not None:
            request["arguments"] = arguments
        return cast("Request", request)

    def _send_request(self, command: str, arguments: Any = None) -> Request:
        request = self._new_request(command, arguments)
        self.session.send(cast("dict[str, Any]", request))
        return request

    def initialize_request(self) -> Request:
        """Send an 'initialize' request."""
        return self._send_request("initialize", self.config.initialize.to_arguments())

    def launch_request(self, mode: str, program: str, stop_on_entry: bool) -> Request:
        """Send a 'launch' request with the specified args."""
        arguments: requests.LaunchRequestArguments = {
            "request": "launch",
            "mode": mode,
            "program": program,
            "stopOnEntry": stop_on_entry,
        }
        return self._send_request("launch", arguments)

    def launch_request_with_args(self, arguments: dict[str, Any]) -> Request:
        """Send a 'launch' request with untyped, implementation-specific arguments.

        Use this to probe the server with values of unexpected types or
        unspecified keys; nothing is checked before sending.
        """
        return self._send_request("launch", arguments)

    def disconnect_request(self) -> Request:
        """Send a 'disconnect' request."""
        return self._send_request("disconnect")

    def set_breakpoints_request(self, file: str, lines: Sequence[int]) -> Request:
        """Send a 'setBreakpoints' request, one breakpoint per line in order."""
        arguments: requests.SetBreakpointsArguments = {
            "source": {"name": os.path.basename(file), "path": file},
            "breakpoints": [{"line": line} for line in lines],
        }
        return self._send_request("setBreakpoints", arguments)

    def set_exception_breakpoints_request(self, filters: Sequence[str] | None = None) -> Request:
        """Send a 'setExceptionBreakpoints' request."""
        arguments: requests.SetExceptionBreakpointsArguments = {
            "filters": list(filters or []),
        }
        return self._send_request("setExceptionBreakpoints", arguments)

    def configuration_done_request(self) -> Request:
        """Send a 'configurationDone' request."""
        return self._send_request("configurationDone")

    def continue_request(self, thread_id: int) -> Request:
        """Send a 'continue' request."""
        arguments: requests.ContinueArguments = {"threadId": thread_id}
        return self._send_request("continue", arguments)

    def threads_request(self) -> Request:
        """Send a 'threads' request."""
        return self._send_request("threads")

    def stack_trace_request(
        self,
        thread_id: int = 0,
        start_frame: int | None = None,
        levels: int | None = None,
    ) -> Request:
        """Send a 'stackTrace' request."""
        arguments: requests.StackTraceArguments = {"threadId": thread_id}
        if start_frame is not None:
            arguments["startFrame"] = start_frame
        if levels is not None:
            arguments["levels"] = levels
        return self._send_request("stackTrace", arguments)

    # ---- Malformed messages ------------------------------------------------

    def unknown_request(self) -> Request:
        """Send a request whose command no server can decode."""
        return self._send_request("unknown")

    def _send_event(self, name: str) -> Event:
        event: Event = {"type": "event", "seq": EVENT_SEQ_SENTINEL, "event": name}
        self.session.send(cast("dict[str, Any]", event))
        return event

    def unknown_event(self) -> Event:
        """Send an event whose name no server can decode."""
        return self._send_event("unknown")

    def known_event(self) -> Event:
        """Send an event that decodes but that servers have no handler for.

        Servers receive events from adapters, never from clients, so a
        well-formed 'terminated' event reaches dispatch and is rejected
        there rather than by the decoder.
        """
        return self._send_event("terminated")
