"""
Per-entry execution error classifications.

Raised by service adapters while executing a single query definition. The
runner converts them into failure outcomes; they never abort a run.
"""

from typing import Optional

from .base import MetaQueryError


class QueryExecutionError(MetaQueryError):
    """Base class for errors scoped to one template entry."""

    def __init__(self, message: str, service: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.service = service
        self.recoverable = True


class CredentialError(QueryExecutionError):
    """Required credential is absent from the environment."""

    def __init__(self, credential: str, service: Optional[str] = None, **kwargs):
        super().__init__(f"{credential} environment variable not set",
                         service=service, **kwargs)
        self.credential = credential


class NetworkError(QueryExecutionError):
    """Transport-level failure: connection refused, DNS failure, timeout."""

    def __init__(self, message: str, service: Optional[str] = None,
                 url: Optional[str] = None, **kwargs):
        super().__init__(message, service=service, **kwargs)
        self.url = url
