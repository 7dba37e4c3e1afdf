"""Base classes for service adapters."""

import json
import threading
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Optional
from urllib.parse import urlencode

from ..config.defaults import DefaultConfig, get_default_config
from ..config.environment import EnvironmentProvider
from ..config.models import QueryDefinition
from ..errors import QueryExecutionError
from ..logging.config import get_adapter_logger
from ..resolution import extract, find_placeholders, render_value, resolve, resolve_string


@dataclass(frozen=True)
class RequestDescription:
    """Fully resolved request, ready for the transport."""
    host: str
    path: str
    method: str = "GET"
    headers: dict[str, str] = field(default_factory=dict)
    body: Any = None
    scheme: str = "https"

    @property
    def url(self) -> str:
        return f"{self.scheme}://{self.host}{self.path}"

    def encoded_body(self) -> Optional[bytes]:
        """JSON-encoded body, or None when there is nothing to send."""
        if self.body is None:
            return None
        return json.dumps(self.body).encode("utf-8")


Transport = Callable[[RequestDescription, Optional[float]], Any]


class BaseServiceAdapter(ABC):
    """
    Turns a query definition into a request for one backend and runs it.

    Subclasses declare the service name and credential variable and build the
    backend-specific RequestDescription. Sending, response decoding and path
    extraction are shared.
    """

    name: str = ""

    def __init__(
        self,
        environment: Optional[EnvironmentProvider] = None,
        timeout_seconds: Optional[float] = None,
        transport: Optional[Transport] = None,
        defaults: Optional[DefaultConfig] = None,
    ):
        self.environment = environment if environment is not None else EnvironmentProvider()
        self.defaults = defaults or get_default_config()
        self.timeout_seconds = (
            timeout_seconds if timeout_seconds is not None
            else self.defaults.transport.timeout_seconds
        )
        if transport is None:
            from .transport import send_request
            transport = send_request
        self.transport = transport
        self.logger = get_adapter_logger(__name__, self.name)
        self._lock = threading.Lock()
        self._call_count = 0
        self._error_count = 0

    @property
    @abstractmethod
    def credential_env(self) -> str:
        """Environment variable holding this backend's credential."""

    @abstractmethod
    def build_request(self, definition: QueryDefinition, params: dict[str, Any]) -> RequestDescription:
        """
        Build the wire-level request for a definition.

        Args:
            definition: Query definition from the service schema
            params: Effective parameters for the run

        Returns:
            Resolved request description

        Raises:
            CredentialError: If the backend credential is not configured
        """

    def require_credential(self) -> str:
        """Return the backend credential or raise CredentialError."""
        return self.environment.require(self.credential_env, service=self.name)

    def resolve(self, value: Any, params: dict[str, Any]) -> Any:
        """Resolve placeholders against params, then the environment."""
        return resolve(value, params, self.environment)

    def resolve_path(self, endpoint: str, query_params: Any, params: dict[str, Any]) -> str:
        """Resolve an endpoint template and append its URL-encoded query string."""
        path = resolve_string(endpoint or "", params, self.environment)
        resolved = self.resolve(query_params or {}, params)
        pairs = {key: render_value(value) for key, value in resolved.items() if value is not None}
        query_string = urlencode(pairs)
        return f"{path}?{query_string}" if query_string else path

    def graphql_body(self, definition: QueryDefinition, params: dict[str, Any]) -> dict[str, Any]:
        """POST body for a GraphQL definition."""
        return {
            "query": definition.document,
            "variables": self.resolve(definition.variables or {}, params),
        }

    def fetch(self, definition: QueryDefinition, params: dict[str, Any]) -> Any:
        """Send the definition's request and return the decoded response."""
        request = self.build_request(definition, params)

        unresolved = find_placeholders([request.path, request.body])
        if unresolved:
            self.logger.debug(
                "Request contains unresolved placeholders",
                query=definition.name,
                placeholders=unresolved
            )

        self.logger.debug(
            "Dispatching request",
            query=definition.name,
            method=request.method,
            host=request.host,
            path=request.path
        )

        with self._lock:
            self._call_count += 1

        try:
            return self.transport(request, self.timeout_seconds)
        except QueryExecutionError as e:
            if e.service is None:
                e.service = self.name
            with self._lock:
                self._error_count += 1
            raise

    def execute(self, definition: QueryDefinition, params: dict[str, Any]) -> Any:
        """Run a definition and extract its declared response path."""
        response = self.fetch(definition, params)
        return extract(response, definition.response_path)

    def get_stats(self) -> dict[str, Any]:
        """Get request statistics."""
        with self._lock:
            calls, errors = self._call_count, self._error_count
        return {
            "name": self.name,
            "call_count": calls,
            "error_count": errors,
            "success_rate": (calls - errors) / calls if calls > 0 else 0.0,
        }

    def reset_stats(self):
        """Reset request statistics."""
        with self._lock:
            self._call_count = 0
            self._error_count = 0
