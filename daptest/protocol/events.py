"""Event TypedDicts sent by a debug adapter."""

from __future__ import annotations

from typing import TYPE_CHECKING
from typing import Any
from typing import Literal
from typing import TypedDict

if TYPE_CHECKING:
    from typing_extensions import NotRequired

    from daptest.protocol.structures import Breakpoint


class InitializedEvent(TypedDict):
    seq: int
    type: Literal["event"]
    event: Literal["initialized"]
    body: NotRequired[Any]


class StoppedEventBody(TypedDict):
    reason: str  # 'step', 'breakpoint', 'exception', 'pause', 'entry', ...
    description: NotRequired[str]
    threadId: NotRequired[int]
    preserveFocusHint: NotRequired[bool]
    text: NotRequired[str]
    allThreadsStopped: NotRequired[bool]
    hitBreakpointIds: NotRequired[list[int]]


class StoppedEvent(TypedDict):
    seq: int
    type: Literal["event"]
    event: Literal["stopped"]
    body: StoppedEventBody


class TerminatedEventBody(TypedDict, total=False):
    restart: Any


class TerminatedEvent(TypedDict):
    seq: int
    type: Literal["event"]
    event: Literal["terminated"]
    body: NotRequired[TerminatedEventBody]


class ExitedEventBody(TypedDict):
    exitCode: int


class ExitedEvent(TypedDict):
    seq: int
    type: Literal["event"]
    event: Literal["exited"]
    body: ExitedEventBody


class OutputEventBody(TypedDict):
    category: NotRequired[str]
    output: str


class OutputEvent(TypedDict):
    seq: int
    type: Literal["event"]
    event: Literal["output"]
    body: OutputEventBody


class ThreadEventBody(TypedDict):
    reason: str  # 'started' or 'exited'
    threadId: int


class ThreadEvent(TypedDict):
    seq: int
    type: Literal["event"]
    event: Literal["thread"]
    body: ThreadEventBody


class BreakpointEventBody(TypedDict):
    reason: str  # 'changed', 'new' or 'removed'
    breakpoint: Breakpoint


class BreakpointEvent(TypedDict):
    seq: int
    type: Literal["event"]
    event: Literal["breakpoint"]
    body: BreakpointEventBody
