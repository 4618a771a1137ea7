"""Unit tests for mapping httpx responses and errors to transport outcomes."""

import httpx
import respx

from account_client import AsyncHttpxTransport, HttpxTransport, TransportFailure, TransportSuccess
from account_client.transport import failure_from_error, outcome_from_response


class TestOutcomeFromResponse:
    def test_success_payload(self):
        outcome = outcome_from_response(httpx.Response(200, json={"token": "t"}))
        assert outcome == TransportSuccess(200, {"token": "t"})

    def test_success_empty_body(self):
        assert outcome_from_response(httpx.Response(204)) == TransportSuccess(204, None)

    def test_failure_with_code_and_detail(self):
        outcome = outcome_from_response(
            httpx.Response(400, json={"code": "invalid_token", "detail": "Expired"})
        )
        assert isinstance(outcome, TransportFailure)
        assert outcome.has_response
        assert outcome.code == "invalid_token"
        assert outcome.detail == "Expired"
        assert str(outcome) == "Request failed with status code 400"

    def test_failure_with_html_body(self):
        outcome = outcome_from_response(httpx.Response(503, text="<h1>Service Unavailable</h1>"))
        assert outcome == TransportFailure(
            "Request failed with status code 503", status_code=503, code=None, detail=None
        )

    def test_failure_with_non_object_json(self):
        outcome = outcome_from_response(httpx.Response(400, json=["login_failed"]))
        assert outcome.code is None

    def test_non_string_code_is_ignored(self):
        outcome = outcome_from_response(httpx.Response(400, json={"code": 42, "detail": "x"}))
        assert outcome.code is None
        assert outcome.detail == "x"

    def test_structured_detail_is_stringified(self):
        outcome = outcome_from_response(
            httpx.Response(400, json={"code": "unknown_error", "detail": ["a", "b"]})
        )
        assert outcome.detail == "['a', 'b']"


class TestFailureFromError:
    def test_message(self):
        failure = failure_from_error(httpx.ConnectError("Connection refused"))
        assert str(failure) == "Connection refused"
        assert not failure.has_response

    def test_empty_message_uses_class_name(self):
        assert str(failure_from_error(httpx.ReadTimeout(""))) == "ReadTimeout"


class TestHttpxTransport:
    def test_base_url_trailing_slash(self):
        with HttpxTransport("http://api.example.com/") as transport:
            assert transport.base_url == "http://api.example.com"

    def test_defaults_from_settings(self):
        with HttpxTransport() as transport:
            assert transport.base_url == "http://localhost:8000"

    @respx.mock
    def test_send(self):
        route = respx.post("http://api.example.com/api/auth/login/").mock(
            return_value=httpx.Response(200, json={"ok": True})
        )
        with HttpxTransport("http://api.example.com") as transport:
            outcome = transport.send("POST", "/api/auth/login/", {"email": "a@b.c"})
        assert outcome == TransportSuccess(200, {"ok": True})
        assert route.called

    @respx.mock
    def test_send_connection_error(self):
        respx.post("http://api.example.com/api/auth/login/").mock(
            side_effect=httpx.ConnectError("Connection refused")
        )
        with HttpxTransport("http://api.example.com") as transport:
            outcome = transport.send("POST", "/api/auth/login/", {})
        assert outcome == TransportFailure("Connection refused")


class TestAsyncHttpxTransport:
    @respx.mock
    async def test_send_failure(self):
        respx.post("http://api.example.com/api/auth/register/").mock(
            return_value=httpx.Response(400, json={"code": "unknown_error", "detail": "Exists"})
        )
        async with AsyncHttpxTransport("http://api.example.com") as transport:
            outcome = await transport.send("POST", "/api/auth/register/", {})
        assert outcome.code == "unknown_error"
        assert outcome.status_code == 400
