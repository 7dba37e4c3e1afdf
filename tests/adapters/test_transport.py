"""Tests for the shared HTTP request primitive."""

import io
import json
import socket
from unittest.mock import MagicMock, patch
from urllib.error import HTTPError, URLError

import pytest

from metaquery.adapters.base import RequestDescription
from metaquery.adapters.transport import decode_body, send_request
from metaquery.errors import NetworkError


def _response(body: bytes) -> MagicMock:
    response = MagicMock()
    response.read.return_value = body
    context = MagicMock()
    context.__enter__.return_value = response
    return context


class TestDecodeBody:
    """Test suite for response decoding."""

    def test_json_body(self) -> None:
        """Test JSON bodies are decoded."""
        assert decode_body(b'{"data": [1, 2]}') == {"data": [1, 2]}

    def test_non_json_body_returned_as_text(self) -> None:
        """Test non-JSON bodies come back as raw text."""
        assert decode_body(b"<html>oops</html>") == "<html>oops</html>"

    def test_empty_body(self) -> None:
        """Test an empty body is the empty string."""
        assert decode_body(b"") == ""


class TestSendRequest:
    """Test suite for send_request."""

    def test_post_with_json_body(self) -> None:
        """Test method, headers, body and timeout are passed to urllib."""
        request = RequestDescription(
            host="api.linear.app",
            path="/graphql",
            method="POST",
            headers={"Authorization": "key"},
            body={"query": "{ viewer { id } }", "variables": {}},
        )

        with patch("metaquery.adapters.transport.urlopen",
                   return_value=_response(b'{"data": {"viewer": {"id": "u"}}}')) as mock_urlopen:
            result = send_request(request, timeout_seconds=12)

        assert result == {"data": {"viewer": {"id": "u"}}}
        sent, = mock_urlopen.call_args.args
        assert sent.full_url == "https://api.linear.app/graphql"
        assert sent.get_method() == "POST"
        assert sent.get_header("Authorization") == "key"
        assert json.loads(sent.data) == {"query": "{ viewer { id } }", "variables": {}}
        assert mock_urlopen.call_args.kwargs["timeout"] == 12

    def test_get_without_body(self) -> None:
        """Test GET requests carry no body."""
        request = RequestDescription(host="api.github.com", path="/user")

        with patch("metaquery.adapters.transport.urlopen",
                   return_value=_response(b"[]")) as mock_urlopen:
            assert send_request(request) == []

        sent, = mock_urlopen.call_args.args
        assert sent.data is None
        assert sent.get_method() == "GET"

    def test_http_error_body_is_returned(self) -> None:
        """Test HTTP error responses are decoded rather than raised."""
        request = RequestDescription(host="api.github.com", path="/repos/x/y/issues")
        error = HTTPError(request.url, 404, "Not Found", {},
                          io.BytesIO(b'{"message": "Not Found"}'))

        with patch("metaquery.adapters.transport.urlopen", side_effect=error):
            assert send_request(request) == {"message": "Not Found"}

    def test_connection_refused(self) -> None:
        """Test connection failures raise NetworkError with the reason."""
        request = RequestDescription(host="api.maestroverse.io", path="/v1/tasks")
        error = URLError(ConnectionRefusedError(111, "Connection refused"))

        with patch("metaquery.adapters.transport.urlopen", side_effect=error):
            with pytest.raises(NetworkError, match="Connection refused") as exc_info:
                send_request(request)

        assert exc_info.value.url == "https://api.maestroverse.io/v1/tasks"

    def test_timeout(self) -> None:
        """Test timeouts raise NetworkError."""
        request = RequestDescription(host="api.linear.app", path="/graphql", method="POST", body={})

        with patch("metaquery.adapters.transport.urlopen", side_effect=socket.timeout("timed out")):
            with pytest.raises(NetworkError, match="timed out"):
                send_request(request, timeout_seconds=0.1)
