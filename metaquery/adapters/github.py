"""GitHub adapter covering both the GraphQL and REST APIs."""

from typing import Any

from ..config.models import QueryDefinition
from .base import BaseServiceAdapter, RequestDescription


class GitHubAdapter(BaseServiceAdapter):
    """
    GitHub adapter.

    Definitions with ``type: graphql`` go to the GraphQL endpoint; everything
    else is a REST call built from ``endpoint``, ``method``, ``params`` and
    ``body``. ``OWNER`` and ``REPO`` default to ``DEFAULT_OWNER`` and
    ``DEFAULT_REPO`` from the environment when the caller does not pass them.
    """

    name = "github"

    @property
    def credential_env(self) -> str:
        return self.defaults.github.credential_env

    def with_identity_defaults(self, params: dict[str, Any]) -> dict[str, Any]:
        """Params with OWNER/REPO filled from environment defaults."""
        github = self.defaults.github
        merged: dict[str, Any] = {}

        for key, env_name in (("OWNER", github.default_owner_env),
                              ("REPO", github.default_repo_env)):
            default = self.environment.get_value(env_name)
            if default is not None:
                merged[key] = default

        merged.update({key: value for key, value in params.items() if value is not None})
        return merged

    def build_request(self, definition: QueryDefinition, params: dict[str, Any]) -> RequestDescription:
        token = self.require_credential()
        github = self.defaults.github
        params = self.with_identity_defaults(params)

        if definition.is_graphql:
            return RequestDescription(
                host=github.host,
                path=github.graphql_path,
                method="POST",
                headers={
                    "Content-Type": "application/json",
                    "Authorization": f"Bearer {token}",
                    "User-Agent": self.defaults.transport.user_agent,
                },
                body=self.graphql_body(definition, params),
            )

        headers = {
            "Accept": github.accept,
            "Authorization": f"Bearer {token}",
            "User-Agent": self.defaults.transport.user_agent,
            "X-GitHub-Api-Version": github.api_version,
        }
        body = self.resolve(definition.body, params) if definition.body is not None else None
        if body is not None:
            headers["Content-Type"] = "application/json"

        return RequestDescription(
            host=github.host,
            path=self.resolve_path(definition.endpoint, definition.params, params),
            method=definition.method,
            headers=headers,
            body=body,
        )
