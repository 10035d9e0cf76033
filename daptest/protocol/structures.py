"""
Common object shapes used by several requests/responses: Source, Breakpoint, StackFrame, Thread
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from typing import Any
from typing import Literal
from typing import TypedDict

if TYPE_CHECKING:
    from typing_extensions import NotRequired


class Source(TypedDict):
    """A source is a descriptor for source code."""

    name: NotRequired[str]  # The short name of the source
    path: NotRequired[str]  # The path of the source to be shown in the UI
    sourceReference: NotRequired[int]  # If > 0, contents come from the source request
    presentationHint: NotRequired[Literal["normal", "emphasize", "deemphasize"]]
    origin: NotRequired[str]
    adapterData: NotRequired[Any]


class SourceBreakpoint(TypedDict):
    """Properties of a breakpoint passed to the setBreakpoints request."""

    line: int
    column: NotRequired[int]
    condition: NotRequired[str]
    hitCondition: NotRequired[str]
    logMessage: NotRequired[str]


class Breakpoint(TypedDict):
    """Information about a breakpoint created in setBreakpoints."""

    verified: bool  # If true, the breakpoint could be set
    message: NotRequired[str]
    id: NotRequired[int]
    source: NotRequired[Source]
    line: NotRequired[int]  # The start line of the actual range covered by the breakpoint
    column: NotRequired[int]
    endLine: NotRequired[int]
    endColumn: NotRequired[int]


class StackFrame(TypedDict):
    """A Stackframe contains the source location."""

    id: int
    name: str  # Typically a function name
    source: NotRequired[Source]
    line: int
    column: int
    endLine: NotRequired[int]
    endColumn: NotRequired[int]
    canRestart: NotRequired[bool]
    instructionPointerReference: NotRequired[str]
    presentationHint: NotRequired[Literal["normal", "label", "subtle"]]


class Thread(TypedDict):
    """A Thread."""

    id: int
    name: str
