"""Linear GraphQL adapter."""

from typing import Any

from ..config.models import QueryDefinition
from .base import BaseServiceAdapter, RequestDescription


class LinearAdapter(BaseServiceAdapter):
    """Sends every definition as a GraphQL POST to the Linear API."""

    name = "linear"

    @property
    def credential_env(self) -> str:
        return self.defaults.linear.credential_env

    def build_request(self, definition: QueryDefinition, params: dict[str, Any]) -> RequestDescription:
        api_key = self.require_credential()
        linear = self.defaults.linear

        return RequestDescription(
            host=linear.host,
            path=linear.graphql_path,
            method="POST",
            headers={
                "Content-Type": "application/json",
                # Linear personal API keys are sent without a scheme prefix
                "Authorization": api_key,
            },
            body=self.graphql_body(definition, params),
        )
