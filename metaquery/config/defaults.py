"""Default configuration parameters for the query runner."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TransportParams:
    """HTTP transport parameters shared by every adapter."""
    timeout_seconds: float = 30.0                    # Per-request budget
    user_agent: str = "Meta-Template-Query-Runner"


@dataclass(frozen=True)
class LinearParams:
    """Linear GraphQL endpoint."""
    host: str = "api.linear.app"
    graphql_path: str = "/graphql"
    credential_env: str = "LINEAR_API_KEY"


@dataclass(frozen=True)
class GitHubParams:
    """GitHub GraphQL and REST endpoints."""
    host: str = "api.github.com"
    graphql_path: str = "/graphql"
    api_version: str = "2022-11-28"
    accept: str = "application/vnd.github+json"
    credential_env: str = "GITHUB_TOKEN"
    default_owner_env: str = "DEFAULT_OWNER"
    default_repo_env: str = "DEFAULT_REPO"


@dataclass(frozen=True)
class MaestroverseParams:
    """Maestroverse REST endpoint."""
    host: str = "api.maestroverse.io"
    base_path: str = "/v1"
    credential_env: str = "MAESTROVERSE_API_KEY"
    workspace_env: str = "WORKSPACE_ID"


@dataclass(frozen=True)
class RunnerSettings:
    """Template runner execution settings."""
    max_workers: int = 1                             # 1 runs entries sequentially
    config_filenames: tuple[str, ...] = (
        "query-config.yaml",
        "query-config.yml",
        "query-config.json",
    )


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    transport: TransportParams
    linear: LinearParams
    github: GitHubParams
    maestroverse: MaestroverseParams
    runner: RunnerSettings


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        transport=TransportParams(),
        linear=LinearParams(),
        github=GitHubParams(),
        maestroverse=MaestroverseParams(),
        runner=RunnerSettings(),
    )
