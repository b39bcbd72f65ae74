import base64
import io
import socket

import pytest
import requests

from twilio_client import (
    Options,
    ResponseDecodeError,
    SMSSendMessageResponse,
    UnexpectedStatusError,
    execute,
)


class FakeRaw(io.BytesIO):
    pass


class RecordingSession:
    """Transport stand-in that records what it was asked to send"""

    def __init__(self, status_code=200, body=b"{}"):
        self.status_code = status_code
        self.body = body
        self.sent = []
        self.responses = []

    def send(self, request, **kwargs):
        self.sent.append((request, kwargs))
        response = requests.Response()
        response.status_code = self.status_code
        response.raw = FakeRaw(self.body)
        self.responses.append(response)
        return response


def make_request():
    return requests.Request("GET", "http://example.test/resource").prepare()


def make_options(session):
    opts = Options("sid", "token")
    opts.http_client = session
    return opts


def test_execute_attaches_basic_auth_and_timeout():
    session = RecordingSession(body=b'{"status": "queued"}')
    opts = make_options(session)
    opts.timeout = 3

    resp = execute(opts, make_request(), True, 200, SMSSendMessageResponse)

    request, kwargs = session.sent[0]
    expected = "Basic " + base64.b64encode(b"sid:token").decode("ascii")
    assert request.headers["Authorization"] == expected
    assert kwargs == {"stream": True, "timeout": 3}
    assert resp.status == "queued"


def test_execute_without_authorize_sends_no_credentials():
    session = RecordingSession()

    execute(make_options(session), make_request(), False, 200, SMSSendMessageResponse)

    request, _ = session.sent[0]
    assert "Authorization" not in request.headers


def test_execute_skips_body_without_response_type():
    session = RecordingSession(body=b"not json at all")
    opts = make_options(session)
    calls = []
    opts.reader_func = lambda stream: calls.append(stream) or stream

    assert execute(opts, make_request(), True, 200) is None
    assert calls == []


def test_execute_reads_body_through_reader_func():
    session = RecordingSession(body=b"ignored")
    opts = make_options(session)
    opts.reader_func = lambda stream: io.BytesIO(b'{"status": "delivered"}')

    resp = execute(opts, make_request(), True, 200, SMSSendMessageResponse)

    assert resp.status == "delivered"


def test_execute_closes_response_on_status_mismatch():
    session = RecordingSession(status_code=201)

    with pytest.raises(UnexpectedStatusError) as exc_info:
        execute(make_options(session), make_request(), True, 200, SMSSendMessageResponse)

    assert exc_info.value.actual == 201
    assert session.responses[0].raw.closed


def test_execute_rejects_non_object_json():
    session = RecordingSession(body=b'["sent"]')

    with pytest.raises(ResponseDecodeError):
        execute(make_options(session), make_request(), True, 200, SMSSendMessageResponse)


def test_execute_rejects_mismatched_field_type():
    session = RecordingSession(body=b'{"status": "sent", "error_code": "30003"}')

    with pytest.raises(ResponseDecodeError):
        execute(make_options(session), make_request(), True, 200, SMSSendMessageResponse)


def test_execute_empty_body_is_decode_error():
    session = RecordingSession(body=b"")

    with pytest.raises(ValueError):
        execute(make_options(session), make_request(), True, 200, SMSSendMessageResponse)


def test_connection_refused_is_transport_error():
    # Grab a free port, then close it so nothing listens there
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind(("127.0.0.1", 0))
        port = s.getsockname()[1]

    opts = Options("sid", "token")
    request = requests.Request("GET", f"http://127.0.0.1:{port}/v1/PhoneNumbers/1").prepare()

    with pytest.raises(requests.exceptions.ConnectionError):
        execute(opts, request, True, 200, SMSSendMessageResponse)


def test_execute_non_utf8_body_is_decode_error():
    session = RecordingSession(body=b'{"status": "\xff"}')

    with pytest.raises(UnicodeDecodeError):
        execute(make_options(session), make_request(), True, 200, SMSSendMessageResponse)
