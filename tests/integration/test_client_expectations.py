"""Typed expectation accessors: narrowing, soft failures and hard mismatches."""

from __future__ import annotations

import pytest

from daptest import Client
from daptest.errors import FailureRecorder
from daptest.errors import FramingError
from daptest.errors import MessageDecodeError
from daptest.errors import UnexpectedMessageError
from daptest.protocol import ErrorResponse
from daptest.protocol.events import InitializedEvent
from daptest.protocol.requests import ThreadsResponse
from tests.dap_server_harness import ScriptedServer
from tests.dap_server_harness import scripted_handler


@pytest.fixture
def recorder():
    return FailureRecorder()


@pytest.fixture
def connect(recorder):
    """Connect clients whose soft failures the test inspects itself."""
    clients: list[Client] = []

    def _connect(server: ScriptedServer) -> Client:
        client = Client(server.address, reporter=recorder)
        clients.append(client)
        return client

    yield _connect
    for client in clients:
        client.close()


@pytest.mark.parametrize(
    ("send", "args", "expect"),
    [
        ("launch_request", ("debug", "/tmp/main.go", False), "expect_launch_response"),
        ("disconnect_request", (), "expect_disconnect_response"),
        ("set_breakpoints_request", ("/tmp/main.go", [4]), "expect_set_breakpoints_response"),
        ("set_exception_breakpoints_request", (), "expect_set_exception_breakpoints_response"),
        ("continue_request", (1,), "expect_continue_response"),
        ("threads_request", (), "expect_threads_response"),
        ("stack_trace_request", (1,), "expect_stack_trace_response"),
    ],
)
def test_responses_correlate_with_requests(client, send, args, expect):
    client.initialize_request()
    client.expect_initialize_response()
    client.expect_initialized_event()

    request = getattr(client, send)(*args)
    response = getattr(client, expect)()

    assert response["type"] == "response"
    assert response["success"] is True
    assert response["command"] == request["command"]
    assert response["request_seq"] == request["seq"]


def test_full_session_flow(client):
    client.initialize_request()
    init = client.expect_initialize_response()
    client.expect_initialized_event()
    client.launch_request("exec", "/tmp/__debug_bin", True)
    client.expect_launch_response()
    client.set_breakpoints_request("/tmp/main.go", [8])
    client.expect_set_breakpoints_response()
    client.set_exception_breakpoints_request()
    client.expect_set_exception_breakpoints_response()
    client.configuration_done_request()
    client.expect_configuration_done_response()
    stopped = client.expect_stopped_event()
    client.threads_request()
    threads = client.expect_threads_response()
    client.stack_trace_request(stopped["body"]["threadId"])
    trace = client.expect_stack_trace_response()
    client.continue_request(stopped["body"]["threadId"])
    client.expect_continue_response()
    client.expect_terminated_event()
    client.disconnect_request()
    client.expect_disconnect_response()

    assert init["body"]["supportsConfigurationDoneRequest"] is True
    assert stopped["body"]["reason"] == "breakpoint"
    assert threads["body"]["threads"] == [{"id": 1, "name": "main"}]
    assert trace["body"]["stackFrames"][0]["name"] == "main.main"


@pytest.mark.parametrize("capabilities", [{}, {"supportsConfigurationDoneRequest": False}])
def test_initialize_response_requires_configuration_done(connect, recorder, capabilities):
    with ScriptedServer() as server:
        server.capabilities = capabilities
        client = connect(server)
        client.initialize_request()

        response = client.expect_initialize_response()
        event = client.expect_initialized_event()

    assert response is not None
    assert event is not None
    assert len(recorder.failures) == 1
    assert "want supportsConfigurationDoneRequest=true" in recorder.failures[0]


def test_initialize_response_without_body(connect, recorder):
    reply = {"type": "response", "request_seq": 1, "success": True, "command": "initialize"}
    with ScriptedServer(scripted_handler(reply)) as server:
        client = connect(server)
        client.initialize_request()
        response = client.expect_initialize_response()

    assert response["command"] == "initialize"
    assert recorder.failed


@pytest.mark.parametrize("body", [[1, 2], "caps", 5])
def test_initialize_response_with_non_object_body(connect, recorder, body):
    reply = {"type": "response", "request_seq": 1, "success": True, "command": "initialize",
             "body": body}
    with ScriptedServer(scripted_handler(reply)) as server:
        client = connect(server)
        client.initialize_request()
        response = client.expect_initialize_response()

    assert response["body"] == body
    assert len(recorder.failures) == 1
    assert "want supportsConfigurationDoneRequest=true" in recorder.failures[0]


def test_initialize_response_with_capability_records_nothing(connect, recorder):
    with ScriptedServer() as server:
        client = connect(server)
        client.initialize_request()
        client.expect_initialize_response()

    assert recorder.failures == []


def test_wrong_kind_raises(connect, recorder):
    with ScriptedServer() as server:
        client = connect(server)
        client.initialize_request()

        with pytest.raises(UnexpectedMessageError) as excinfo:
            client.expect_initialized_event()

    assert excinfo.value.expected == "InitializedEvent"
    assert excinfo.value.received == "InitializeResponse"
    assert excinfo.value.received_message["command"] == "initialize"
    assert recorder.failures == []


def test_error_response_is_not_the_requested_kind(connect):
    with ScriptedServer() as server:
        client = connect(server)
        client.unknown_request()

        with pytest.raises(UnexpectedMessageError, match="got ErrorResponse"):
            client.expect_threads_response()


def test_undecodable_message_is_a_soft_failure(connect, recorder):
    unknown = {"type": "event", "event": "progressUpdate", "body": {}}
    with ScriptedServer(scripted_handler(unknown)) as server:
        client = connect(server)
        client.threads_request()

        assert client.expect_threads_response() is None

    assert len(recorder.failures) == 1
    assert "failed to read ThreadsResponse" in recorder.failures[0]
    assert "progressUpdate" in recorder.failures[0]


def test_bad_framing_is_a_soft_failure(connect, recorder):
    with ScriptedServer(scripted_handler(b"Content-Length: nope\r\n\r\n")) as server:
        client = connect(server)
        client.threads_request()

        assert client.expect_threads_response() is None

    assert "Invalid Content-Length" in recorder.failures[0]


def test_closed_connection_is_a_soft_failure(connect, recorder):
    server = ScriptedServer().start()
    client = connect(server)
    server.wait_for_client()
    server.close()

    assert client.expect_stopped_event() is None
    assert len(recorder.failures) == 1
    assert "failed to read StoppedEvent" in recorder.failures[0]


def test_each_expectation_consumes_exactly_one_message(connect, recorder):
    replies = (
        {"type": "event", "event": "initialized"},
        {"type": "response", "request_seq": 1, "success": True, "command": "threads",
         "body": {"threads": []}},
        {"type": "response", "request_seq": 1, "success": False, "command": "threads",
         "message": "no"},
    )
    with ScriptedServer(scripted_handler(*replies)) as server:
        client = connect(server)
        client.threads_request()

        assert client.expect_initialized_event()["event"] == "initialized"
        assert client.expect_threads_response()["body"] == {"threads": []}
        assert client.expect_error_response()["message"] == "no"

    assert recorder.failures == []


def test_read_message_propagates_errors(connect):
    with ScriptedServer(scripted_handler(b"Content-Length: 2\r\n\r\n[]")) as server:
        client = connect(server)
        client.threads_request()

        with pytest.raises(MessageDecodeError):
            client.read_message()


def test_read_message_returns_tagged_message(connect):
    reply = {"type": "event", "event": "initialized"}
    with ScriptedServer(scripted_handler(reply)) as server:
        client = connect(server)
        client.threads_request()
        decoded = client.read_message()

    assert decoded.kind is InitializedEvent
    assert decoded.message["event"] == "initialized"


def test_read_message_on_eof(connect):
    server = ScriptedServer().start()
    client = connect(server)
    server.wait_for_client()
    server.close()

    with pytest.raises(FramingError):
        client.read_message()


def test_expect_message_generic(client):
    client.threads_request()
    response = client.expect_message(ThreadsResponse)
    client.unknown_request()
    error = client.expect_message(ErrorResponse)

    assert response["body"]["threads"]
    assert error["success"] is False


def test_client_context_manager(dap_server):
    with Client(dap_server.address) as client:
        assert client.session.is_open
        assert isinstance(client.reporter, FailureRecorder)

    assert not client.session.is_open


def test_client_own_recorder_fails_on_close():
    server = ScriptedServer().start()
    try:
        with pytest.raises(AssertionError, match="1 soft failure"):
            with Client(server.address) as client:
                server.wait_for_client()
                server.close()
                assert client.expect_stopped_event() is None
    finally:
        server.close()

    assert not client.session.is_open


def test_client_own_recorder_does_not_mask_exceptions(dap_server):
    with pytest.raises(RuntimeError, match="boom"):
        with Client(dap_server.address) as client:
            client.reporter.error("recorded")
            raise RuntimeError("boom")

    assert not client.session.is_open


def test_injected_reporter_is_left_to_its_owner(dap_server, recorder):
    client = Client(dap_server.address, reporter=recorder)
    client.reporter.error("recorded")
    client.close()

    assert recorder.failures == ["recorded"]


def test_dap_reporter_fails_test_at_teardown(pytester):
    pytester.makeconftest('pytest_plugins = ["daptest.pytest_plugin"]')
    pytester.makepyfile(
        """
        def test_soft(dap_reporter):
            dap_reporter.error("first problem")
            dap_reporter.error("second problem")

        def test_clean(dap_reporter):
            pass
        """
    )

    result = pytester.runpytest_inprocess()

    result.assert_outcomes(passed=2, errors=1)
    result.stdout.fnmatch_lines(["*2 soft failure(s) recorded*"])
