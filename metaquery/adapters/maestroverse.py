"""Maestroverse REST adapter."""

from typing import Any

from ..config.models import QueryDefinition
from .base import BaseServiceAdapter, RequestDescription


class MaestroverseAdapter(BaseServiceAdapter):
    """REST calls under the versioned Maestroverse API, scoped to a workspace."""

    name = "maestroverse"

    @property
    def credential_env(self) -> str:
        return self.defaults.maestroverse.credential_env

    def build_request(self, definition: QueryDefinition, params: dict[str, Any]) -> RequestDescription:
        api_key = self.require_credential()
        maestroverse = self.defaults.maestroverse
        endpoint = f"{maestroverse.base_path}{definition.endpoint or ''}"

        return RequestDescription(
            host=maestroverse.host,
            path=self.resolve_path(endpoint, definition.params, params),
            method=definition.method,
            headers={
                "Content-Type": "application/json",
                "X-API-Key": api_key,
                "X-Workspace-ID": self.environment.get_value(maestroverse.workspace_env) or "",
            },
            body=self.resolve(definition.body, params) if definition.body is not None else None,
        )
