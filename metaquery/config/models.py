"""
Configuration data models.

Immutable structures describing services, their query definitions and the
cross-service query templates. They are built once from parsed configuration
and shared read-only by every run.
"""

from dataclasses import dataclass, field
from typing import Any, Optional

GRAPHQL = "graphql"
REST = "rest"


@dataclass(frozen=True)
class ServiceConfig:
    """Per-backend enable flag and addressing metadata."""
    name: str
    enabled: bool = False
    schema_file: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, name: str, data: dict[str, Any]) -> "ServiceConfig":
        data = data or {}
        metadata = {k: v for k, v in data.items() if k not in ("enabled", "schema_file")}
        return cls(
            name=name,
            enabled=bool(data.get("enabled", False)),
            schema_file=data.get("schema_file"),
            metadata=metadata,
        )


@dataclass(frozen=True)
class QueryDefinition:
    """One backend-specific operation and how to read its response."""
    name: str
    type: Optional[str] = None          # graphql | rest
    query: Optional[str] = None
    mutation: Optional[str] = None
    variables: Any = None               # Nested placeholder structure
    endpoint: Optional[str] = None      # May contain placeholders
    method: str = "GET"
    params: Any = None                  # Query-string mapping
    body: Any = None
    response_path: Optional[str] = None
    description: Optional[str] = None

    @property
    def document(self) -> Optional[str]:
        """GraphQL document, query taking precedence over mutation."""
        return self.query or self.mutation

    @property
    def is_graphql(self) -> bool:
        return self.type == GRAPHQL

    @classmethod
    def from_dict(cls, name: str, data: dict[str, Any]) -> "QueryDefinition":
        return cls(
            name=name,
            type=data.get("type"),
            query=data.get("query"),
            mutation=data.get("mutation"),
            variables=data.get("variables"),
            endpoint=data.get("endpoint"),
            method=(data.get("method") or "GET").upper(),
            params=data.get("params"),
            body=data.get("body"),
            response_path=data.get("response_path"),
            description=data.get("description"),
        )


@dataclass(frozen=True)
class ServiceSchema:
    """Query definitions available for one service."""
    service: str
    queries: dict[str, QueryDefinition] = field(default_factory=dict)

    def get(self, query_name: str) -> Optional[QueryDefinition]:
        return self.queries.get(query_name)

    @classmethod
    def from_dict(cls, service: str, data: dict[str, Any]) -> "ServiceSchema":
        queries = (data or {}).get("queries") or {}
        return cls(
            service=service,
            queries={
                name: QueryDefinition.from_dict(name, definition or {})
                for name, definition in queries.items()
            },
        )


@dataclass(frozen=True)
class TemplateEntry:
    """Reference to one query definition of one service."""
    service: str
    template: str


@dataclass(frozen=True)
class QueryTemplate:
    """Named, ordered bundle of per-service query references."""
    name: str
    queries: tuple[TemplateEntry, ...] = ()
    params: dict[str, Any] = field(default_factory=dict)
    description: Optional[str] = None

    def merge_params(self, caller_params: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        """Template defaults overlaid with caller params; caller wins."""
        merged = dict(self.params)
        if caller_params:
            merged.update(caller_params)
        return merged

    @classmethod
    def from_dict(cls, name: str, data: dict[str, Any]) -> "QueryTemplate":
        data = data or {}
        return cls(
            name=name,
            queries=tuple(
                TemplateEntry(service=entry["service"], template=entry["template"])
                for entry in data.get("queries") or []
            ),
            params=dict(data.get("params") or {}),
            description=data.get("description"),
        )


@dataclass(frozen=True)
class RunnerConfig:
    """Services, schemas and templates consumed by the runner."""
    services: dict[str, ServiceConfig] = field(default_factory=dict)
    schemas: dict[str, ServiceSchema] = field(default_factory=dict)
    templates: dict[str, QueryTemplate] = field(default_factory=dict)

    def is_enabled(self, service: str) -> bool:
        config = self.services.get(service)
        return config is not None and config.enabled

    @classmethod
    def from_dict(
        cls,
        config: dict[str, Any],
        schemas: Optional[dict[str, dict[str, Any]]] = None
    ) -> "RunnerConfig":
        """
        Build from a parsed query config and parsed per-service schemas.

        Args:
            config: Mapping with ``services`` and ``query_templates`` sections
            schemas: Mapping of service name to parsed schema document
        """
        config = config or {}
        return cls(
            services={
                name: ServiceConfig.from_dict(name, data)
                for name, data in (config.get("services") or {}).items()
            },
            schemas={
                service: ServiceSchema.from_dict(service, data)
                for service, data in (schemas or {}).items()
            },
            templates={
                name: QueryTemplate.from_dict(name, data)
                for name, data in (config.get("query_templates") or {}).items()
            },
        )
