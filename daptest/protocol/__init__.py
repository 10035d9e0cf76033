"""Debug Adapter Protocol message types and wire codec."""

from daptest.protocol.codec import DecodedMessage
from daptest.protocol.codec import decode_protocol_message
from daptest.protocol.codec import encode_protocol_message
from daptest.protocol.codec import read_protocol_message
from daptest.protocol.codec import write_protocol_message
from daptest.protocol.messages import EVENT_SEQ_SENTINEL
from daptest.protocol.messages import ErrorResponse
from daptest.protocol.messages import Event
from daptest.protocol.messages import ProtocolMessage
from daptest.protocol.messages import Request
from daptest.protocol.messages import Response
from daptest.protocol.registry import EVENT_KINDS
from daptest.protocol.registry import REQUEST_KINDS
from daptest.protocol.registry import RESPONSE_KINDS
from daptest.protocol.registry import MessageKind
from daptest.protocol.registry import classify
from daptest.protocol.registry import kind_name

__all__ = [
    "EVENT_KINDS",
    "EVENT_SEQ_SENTINEL",
    "REQUEST_KINDS",
    "RESPONSE_KINDS",
    "DecodedMessage",
    "ErrorResponse",
    "Event",
    "MessageKind",
    "ProtocolMessage",
    "Request",
    "Response",
    "classify",
    "decode_protocol_message",
    "encode_protocol_message",
    "kind_name",
    "read_protocol_message",
    "write_protocol_message",
]
