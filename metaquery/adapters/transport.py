"""HTTP request primitive shared by every service adapter."""

import json
import socket
from typing import Any, Optional
from urllib.error import HTTPError, URLError
from urllib.request import Request, urlopen

import structlog

from ..errors import NetworkError
from .base import RequestDescription

logger = structlog.get_logger(__name__)


def decode_body(raw: bytes) -> Any:
    """Decode a response body as JSON, falling back to the raw text."""
    text = raw.decode("utf-8", errors="replace")
    try:
        return json.loads(text)
    except ValueError:
        return text


def send_request(request: RequestDescription, timeout_seconds: Optional[float] = 30.0) -> Any:
    """
    Send a request and return the decoded response body.

    Non-2xx responses still carry a body describing the problem; it is decoded
    and returned like any other response. Connection-level failures raise
    NetworkError with the underlying message.
    """
    req = Request(
        request.url,
        data=request.encoded_body(),
        headers=dict(request.headers),
        method=request.method,
    )

    try:
        with urlopen(req, timeout=timeout_seconds) as response:
            return decode_body(response.read())

    except HTTPError as e:
        logger.warning(
            "Backend returned HTTP error",
            host=request.host,
            method=request.method,
            error_code=e.code,
            error_reason=str(e.reason)
        )
        try:
            return decode_body(e.read())
        finally:
            e.close()

    except (URLError, socket.timeout, OSError) as e:
        reason = getattr(e, "reason", None) or e
        raise NetworkError(str(reason), url=request.url) from e
