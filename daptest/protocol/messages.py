"""Base protocol message shapes.

Every message on the wire is one of the three ``type`` variants below. The
concrete per-command and per-event shapes live in ``requests`` and
``events``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from typing import Any
from typing import Literal
from typing import TypedDict

if TYPE_CHECKING:
    from typing_extensions import NotRequired

# Type for the top-level 'type' field in protocol messages.
MessageType = Literal["request", "response", "event"]

# Events injected by the client are outside request/response sequencing.
EVENT_SEQ_SENTINEL = -1


class ProtocolMessage(TypedDict):
    """Base class of requests, responses, and events."""

    seq: int
    # Common keys are NotRequired so code handling any message can index
    # them without narrowing first.
    type: NotRequired[MessageType]
    command: NotRequired[str]
    arguments: NotRequired[Any]
    request_seq: NotRequired[int]
    success: NotRequired[bool]
    event: NotRequired[str]
    body: NotRequired[Any]
    message: NotRequired[str]


class Request(TypedDict):
    """A client initiated request."""

    seq: int
    type: Literal["request"]
    command: str
    arguments: NotRequired[Any]


class Response(TypedDict):
    """Response for a request."""

    seq: int
    type: Literal["response"]
    request_seq: int
    success: bool
    command: str
    message: NotRequired[str]
    body: NotRequired[Any]


class Event(TypedDict):
    """A debug adapter initiated event, or a synthetic one injected by a test."""

    seq: int
    type: Literal["event"]
    event: str
    body: NotRequired[Any]


class Message(TypedDict):
    """Structured error detail carried in an error response body."""

    id: int
    format: str
    variables: NotRequired[dict[str, str]]
    sendTelemetry: NotRequired[bool]
    showUser: NotRequired[bool]
    url: NotRequired[str]
    urlLabel: NotRequired[str]


class ErrorResponseBody(TypedDict, total=False):
    error: Message


class ErrorResponse(TypedDict):
    """On error (whenever success is false), the body can provide more details."""

    seq: int
    type: Literal["response"]
    request_seq: int
    success: Literal[False]
    command: str
    message: NotRequired[str]
    body: NotRequired[ErrorResponseBody]
