"""
Request/response TypedDicts for every command the test client sends.

Argument shapes follow the DAP schema. ``launch`` arguments are
implementation specific, so the launch request also accepts an open mapping.
"""
from __future__ import annotations

from typing import TYPE_CHECKING
from typing import Any
from typing import Literal
from typing import TypedDict

if TYPE_CHECKING:
    from typing_extensions import NotRequired

    from daptest.protocol.capabilities import Capabilities
    from daptest.protocol.structures import Breakpoint
    from daptest.protocol.structures import Source
    from daptest.protocol.structures import SourceBreakpoint
    from daptest.protocol.structures import StackFrame
    from daptest.protocol.structures import Thread


# Initialize Request and Response
class InitializeRequestArguments(TypedDict):
    """Arguments for 'initialize' request."""

    clientID: NotRequired[str]
    clientName: NotRequired[str]
    adapterID: str
    locale: NotRequired[str]
    linesStartAt1: bool
    columnsStartAt1: bool
    pathFormat: NotRequired[Literal["path", "uri"]]
    supportsVariableType: NotRequired[bool]
    supportsVariablePaging: NotRequired[bool]
    supportsRunInTerminalRequest: NotRequired[bool]


class InitializeRequest(TypedDict):
    seq: int
    type: Literal["request"]
    command: Literal["initialize"]
    arguments: InitializeRequestArguments


class InitializeResponse(TypedDict):
    seq: int
    type: Literal["response"]
    request_seq: int
    success: bool
    command: Literal["initialize"]
    body: NotRequired[Capabilities]


# Launch
class LaunchRequestArguments(TypedDict, total=False):
    """Arguments for the `launch` request.

    Only ``noDebug`` is defined by DAP; the rest are the
    adapter-specific fields sent by ``Client.launch_request``.
    """

    noDebug: bool
    request: Literal["launch"]
    mode: str
    program: str
    stopOnEntry: bool


class LaunchRequest(TypedDict):
    seq: int
    type: Literal["request"]
    command: Literal["launch"]
    # Either the typed shape or an arbitrary mapping for malformed input
    arguments: LaunchRequestArguments | dict[str, Any]


class LaunchResponse(TypedDict):
    seq: int
    type: Literal["response"]
    request_seq: int
    success: bool
    command: Literal["launch"]
    message: NotRequired[str]
    body: NotRequired[Any]


# Disconnect
class DisconnectArguments(TypedDict, total=False):
    restart: bool
    terminateDebuggee: bool
    suspendDebuggee: bool


class DisconnectRequest(TypedDict):
    seq: int
    type: Literal["request"]
    command: Literal["disconnect"]
    arguments: NotRequired[DisconnectArguments]


class DisconnectResponse(TypedDict):
    seq: int
    type: Literal["response"]
    request_seq: int
    success: bool
    command: Literal["disconnect"]
    message: NotRequired[str]
    body: NotRequired[Any]


# Breakpoints
class SetBreakpointsArguments(TypedDict):
    source: Source
    breakpoints: NotRequired[list[SourceBreakpoint]]
    lines: NotRequired[list[int]]
    sourceModified: NotRequired[bool]


class SetBreakpointsRequest(TypedDict):
    seq: int
    type: Literal["request"]
    command: Literal["setBreakpoints"]
    arguments: SetBreakpointsArguments


class SetBreakpointsResponseBody(TypedDict):
    breakpoints: list[Breakpoint]


class SetBreakpointsResponse(TypedDict):
    seq: int
    type: Literal["response"]
    request_seq: int
    success: bool
    command: Literal["setBreakpoints"]
    message: NotRequired[str]
    body: SetBreakpointsResponseBody


class SetExceptionBreakpointsArguments(TypedDict):
    filters: list[str]


class SetExceptionBreakpointsRequest(TypedDict):
    seq: int
    type: Literal["request"]
    command: Literal["setExceptionBreakpoints"]
    arguments: SetExceptionBreakpointsArguments


class SetExceptionBreakpointsResponse(TypedDict):
    seq: int
    type: Literal["response"]
    request_seq: int
    success: bool
    command: Literal["setExceptionBreakpoints"]
    message: NotRequired[str]
    body: NotRequired[Any]


# Configuration Done
class ConfigurationDoneRequest(TypedDict):
    seq: int
    type: Literal["request"]
    command: Literal["configurationDone"]
    arguments: NotRequired[dict[str, Any]]


class ConfigurationDoneResponse(TypedDict):
    seq: int
    type: Literal["response"]
    request_seq: int
    success: bool
    command: Literal["configurationDone"]
    message: NotRequired[str]


# Continue
class ContinueArguments(TypedDict):
    threadId: int
    singleThread: NotRequired[bool]


class ContinueRequest(TypedDict):
    seq: int
    type: Literal["request"]
    command: Literal["continue"]
    arguments: ContinueArguments


class ContinueResponseBody(TypedDict):
    allThreadsContinued: NotRequired[bool]


class ContinueResponse(TypedDict):
    seq: int
    type: Literal["response"]
    request_seq: int
    success: bool
    command: Literal["continue"]
    message: NotRequired[str]
    body: NotRequired[ContinueResponseBody]


# Threads
class ThreadsRequest(TypedDict):
    seq: int
    type: Literal["request"]
    command: Literal["threads"]


class ThreadsResponseBody(TypedDict):
    threads: list[Thread]


class ThreadsResponse(TypedDict):
    seq: int
    type: Literal["response"]
    request_seq: int
    success: bool
    command: Literal["threads"]
    message: NotRequired[str]
    body: ThreadsResponseBody


# Stack trace
class StackTraceArguments(TypedDict):
    threadId: int
    startFrame: NotRequired[int]
    levels: NotRequired[int]


class StackTraceRequest(TypedDict):
    seq: int
    type: Literal["request"]
    command: Literal["stackTrace"]
    arguments: StackTraceArguments


class StackTraceResponseBody(TypedDict):
    stackFrames: list[StackFrame]
    totalFrames: NotRequired[int]


class StackTraceResponse(TypedDict):
    seq: int
    type: Literal["response"]
    request_seq: int
    success: bool
    command: Literal["stackTrace"]
    message: NotRequired[str]
    body: StackTraceResponseBody
