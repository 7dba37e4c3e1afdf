"""Pytest configuration and shared fixtures."""

import pytest
from typing import Any, Callable, Dict, List, Optional

from metaquery.adapters.base import RequestDescription
from metaquery.adapters.registry import AdapterRegistry
from metaquery.config.environment import EnvironmentProvider
from metaquery.config.models import RunnerConfig
from metaquery.errors import NetworkError


class FakeTransport:
    """Records requests and answers them from a host -> response table."""

    def __init__(self, responses: Optional[Dict[str, Any]] = None):
        self.responses = responses or {}
        self.requests: List[RequestDescription] = []
        self.timeouts: List[Optional[float]] = []

    def __call__(self, request: RequestDescription, timeout_seconds: Optional[float] = None) -> Any:
        self.requests.append(request)
        self.timeouts.append(timeout_seconds)
        response = self.responses.get(request.host)
        if isinstance(response, Exception):
            raise response
        if callable(response):
            return response(request)
        return response


@pytest.fixture
def full_environment() -> EnvironmentProvider:
    """Environment with every backend credential set."""
    return EnvironmentProvider({
        "LINEAR_API_KEY": "lin_api_test",
        "GITHUB_TOKEN": "ghp_test",
        "MAESTROVERSE_API_KEY": "mv_test",
        "WORKSPACE_ID": "ws-42",
    })


@pytest.fixture
def sample_config() -> Dict[str, Any]:
    """Parsed query-config document."""
    return {
        "services": {
            "linear": {"enabled": True, "schema_file": "schemas/linear.json"},
            "github": {"enabled": True, "schema_file": "schemas/github.json"},
            "maestroverse": {"enabled": True, "schema_file": "schemas/maestroverse.json"},
        },
        "query_templates": {
            "all_open_items": {
                "description": "Get all open items across all services",
                "params": {"STATE": "open", "LIMIT": 50},
                "queries": [
                    {"service": "linear", "template": "open_issues"},
                    {"service": "github", "template": "open_issues"},
                    {"service": "maestroverse", "template": "open_tasks"},
                ],
            },
            "search": {
                "description": "Search across all services",
                "params": {"SEARCH_QUERY": ""},
                "queries": [
                    {"service": "github", "template": "search_issues"},
                ],
            },
        },
    }


@pytest.fixture
def sample_schemas() -> Dict[str, Dict[str, Any]]:
    """Parsed per-service schema documents."""
    return {
        "linear": {
            "queries": {
                "open_issues": {
                    "query": "query($first: Int) { issues(first: $first) { nodes { id title } } }",
                    "variables": {"first": "${LIMIT}", "filter": {"state": {"type": {"eq": "${STATE}"}}}},
                    "response_path": "data.issues.nodes[]",
                },
            },
        },
        "github": {
            "queries": {
                "open_issues": {
                    "type": "rest",
                    "endpoint": "/repos/${OWNER}/${REPO}/issues",
                    "method": "GET",
                    "params": {"state": "${STATE}", "per_page": "${LIMIT}"},
                    "response_path": ".",
                },
                "search_issues": {
                    "type": "graphql",
                    "query": "query($q: String!) { search(query: $q, type: ISSUE, first: 20) { nodes { ... on Issue { title } } } }",
                    "variables": {"q": "${SEARCH_QUERY} repo:${OWNER}/${REPO}"},
                    "response_path": "data.search.nodes[]",
                },
            },
        },
        "maestroverse": {
            "queries": {
                "open_tasks": {
                    "endpoint": "/workspaces/${WORKSPACE_ID}/tasks",
                    "params": {"status": "${STATE}"},
                    "response_path": "data.tasks",
                },
            },
        },
    }


@pytest.fixture
def runner_config(sample_config, sample_schemas) -> RunnerConfig:
    """RunnerConfig built from the sample documents."""
    return RunnerConfig.from_dict(sample_config, sample_schemas)


@pytest.fixture
def sample_responses() -> Dict[str, Any]:
    """Decoded responses keyed by backend host."""
    return {
        "api.linear.app": {"data": {"issues": {"nodes": [{"id": "LIN-1", "title": "Fix login"}]}}},
        "api.github.com": [{"number": 7, "title": "Crash on start"}, {"number": 9, "title": "Typo"}],
        "api.maestroverse.io": {"data": {"tasks": [{"id": "t-1", "status": "open"}]}},
    }


@pytest.fixture
def make_registry() -> Callable[..., AdapterRegistry]:
    """Factory for a default registry wired to a fake transport."""
    def factory(environment: EnvironmentProvider, transport: FakeTransport) -> AdapterRegistry:
        return AdapterRegistry.default(environment=environment, transport=transport)
    return factory


@pytest.fixture
def connection_refused() -> NetworkError:
    return NetworkError("[Errno 111] Connection refused")


@pytest.fixture
def transport_factory() -> Callable[..., FakeTransport]:
    """Factory for recording fake transports."""
    return FakeTransport
