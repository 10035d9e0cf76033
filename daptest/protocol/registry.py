"""Message kinds known to the decoder.

A decoded message is tagged with the TypedDict class that describes it. The
tables below are the closed set of tags: anything outside them fails to
decode.
"""

from __future__ import annotations

from typing import Any
from typing import Mapping

from daptest.errors import MessageDecodeError
from daptest.protocol import events
from daptest.protocol import requests
from daptest.protocol.messages import ErrorResponse

MessageKind = type

REQUEST_KINDS: Mapping[str, MessageKind] = {
    "initialize": requests.InitializeRequest,
    "launch": requests.LaunchRequest,
    "disconnect": requests.DisconnectRequest,
    "setBreakpoints": requests.SetBreakpointsRequest,
    "setExceptionBreakpoints": requests.SetExceptionBreakpointsRequest,
    "configurationDone": requests.ConfigurationDoneRequest,
    "continue": requests.ContinueRequest,
    "threads": requests.ThreadsRequest,
    "stackTrace": requests.StackTraceRequest,
}

RESPONSE_KINDS: Mapping[str, MessageKind] = {
    "initialize": requests.InitializeResponse,
    "launch": requests.LaunchResponse,
    "disconnect": requests.DisconnectResponse,
    "setBreakpoints": requests.SetBreakpointsResponse,
    "setExceptionBreakpoints": requests.SetExceptionBreakpointsResponse,
    "configurationDone": requests.ConfigurationDoneResponse,
    "continue": requests.ContinueResponse,
    "threads": requests.ThreadsResponse,
    "stackTrace": requests.StackTraceResponse,
}

EVENT_KINDS: Mapping[str, MessageKind] = {
    "initialized": events.InitializedEvent,
    "stopped": events.StoppedEvent,
    "terminated": events.TerminatedEvent,
    "exited": events.ExitedEvent,
    "output": events.OutputEvent,
    "thread": events.ThreadEvent,
    "breakpoint": events.BreakpointEvent,
}


def kind_name(kind: MessageKind | None) -> str:
    if kind is None:
        return "nothing"
    return kind.__name__


def _lookup(table: Mapping[str, MessageKind], field: str, message: dict[str, Any]) -> MessageKind:
    if field not in message:
        msg = f"{message['type'].capitalize()} message missing '{field}' field"
        raise MessageDecodeError(msg, field=field, sequence=message.get("seq"))

    value = message[field]
    kind = table.get(value) if isinstance(value, str) else None
    if kind is None:
        msg = f"Unknown {message['type']} {field}: {value!r}"
        raise MessageDecodeError(msg, field=field, value=value, sequence=message.get("seq"))
    return kind


def classify(message: dict[str, Any]) -> MessageKind:
    """Return the kind tag for a decoded JSON object.

    Raises:
        MessageDecodeError: If the object is not a known protocol message
    """
    if "seq" not in message:
        raise MessageDecodeError("Message missing 'seq' field", field="seq")

    if "type" not in message:
        raise MessageDecodeError("Message missing 'type' field", field="type")

    msg_type = message["type"]

    if msg_type == "request":
        return _lookup(REQUEST_KINDS, "command", message)

    if msg_type == "response":
        for key in ("request_seq", "success", "command"):
            if key not in message:
                msg = f"Response message missing '{key}' field"
                raise MessageDecodeError(msg, field=key, sequence=message.get("seq"))
        success = message["success"]
        if not isinstance(success, bool):
            msg = f"Response 'success' must be a boolean, got {success!r}"
            raise MessageDecodeError(
                msg, field="success", value=success, sequence=message.get("seq")
            )
        # Failed responses share one shape whatever the command
        if success is False:
            return ErrorResponse
        return _lookup(RESPONSE_KINDS, "command", message)

    if msg_type == "event":
        return _lookup(EVENT_KINDS, "event", message)

    msg = f"Invalid message type: {msg_type!r}"
    raise MessageDecodeError(msg, field="type", value=msg_type, sequence=message.get("seq"))
