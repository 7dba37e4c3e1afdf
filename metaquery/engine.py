"""
Template runner.

Resolves a named query template into per-service query definitions, runs
each through its service adapter and collects one outcome per entry:

    Template → Planned Entries → Adapters → Outcomes → ResultSet

Broken templates (unknown template, missing query definition, no adapter)
abort before any request is sent. Failures of individual requests become
failure outcomes and never stop the remaining entries.
"""

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any, Optional

import structlog

from .adapters.base import BaseServiceAdapter
from .adapters.registry import AdapterRegistry
from .config.environment import EnvironmentProvider
from .config.models import QueryDefinition, QueryTemplate, RunnerConfig, TemplateEntry
from .errors import QueryExecutionError, QueryNotFoundError, TemplateNotFoundError
from .logging.config import log_query_outcome
from .results import QueryOutcome, ResultSet

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class PlannedQuery:
    """Template entry matched with its definition and adapter."""
    entry: TemplateEntry
    definition: QueryDefinition
    adapter: BaseServiceAdapter


class QueryTemplateRunner:
    """
    Runs query templates across the configured services.

    Configuration, environment and adapters are injected once and treated as
    read-only for the lifetime of the runner.
    """

    def __init__(
        self,
        config: RunnerConfig,
        environment: Optional[EnvironmentProvider] = None,
        registry: Optional[AdapterRegistry] = None,
        max_workers: int = 1,
        timeout_seconds: Optional[float] = None,
    ) -> None:
        self.config = config
        self.environment = environment if environment is not None else EnvironmentProvider.from_os()
        self.registry = registry or AdapterRegistry.default(
            environment=self.environment,
            timeout_seconds=timeout_seconds,
        )
        self.max_workers = max(1, max_workers)
        self.logger = logger

    def get_template(self, template_name: str) -> QueryTemplate:
        """Look up a template or raise TemplateNotFoundError."""
        template = self.config.templates.get(template_name)
        if template is None:
            raise TemplateNotFoundError(
                template_name,
                context={"available": sorted(self.config.templates)}
            )
        return template

    def list_templates(self) -> list[dict[str, Any]]:
        """Available templates with their descriptions, sorted by name."""
        return [
            {
                "name": name,
                "description": template.description,
                "services": [entry.service for entry in template.queries],
            }
            for name, template in sorted(self.config.templates.items())
        ]

    def get_definition(self, service: str, query_name: str) -> QueryDefinition:
        """Look up a service's query definition or raise QueryNotFoundError."""
        schema = self.config.schemas.get(service)
        if schema is None:
            raise QueryNotFoundError(
                service, query_name,
                reason=f"Schema not found for service: {service}"
            )

        definition = schema.get(query_name)
        if definition is None:
            raise QueryNotFoundError(service, query_name)
        return definition

    def plan(self, template: QueryTemplate) -> list[PlannedQuery]:
        """
        Match every enabled entry with its definition and adapter.

        Entries of disabled or unconfigured services are skipped. Any
        structural problem raises before a single request is made.
        """
        planned = []

        for entry in template.queries:
            if not self.config.is_enabled(entry.service):
                self.logger.debug(
                    "Skipping entry for disabled service",
                    template=template.name,
                    service=entry.service,
                    query=entry.template
                )
                continue

            definition = self.get_definition(entry.service, entry.template)
            adapter = self.registry.get_or_raise(entry.service)
            planned.append(PlannedQuery(entry=entry, definition=definition, adapter=adapter))

        return planned

    def run(self, template_name: str, caller_params: Optional[dict[str, Any]] = None) -> ResultSet:
        """
        Run a template and return one outcome per executed entry.

        Args:
            template_name: Name of the query template
            caller_params: Parameters overriding the template defaults

        Returns:
            ResultSet in template declaration order

        Raises:
            ConfigurationError: If the template or one of its references is invalid
        """
        template = self.get_template(template_name)
        params = template.merge_params(caller_params)
        planned = self.plan(template)

        self.logger.info(
            "Running query template",
            template=template_name,
            entries=len(template.queries),
            planned=len(planned),
            workers=self.max_workers
        )

        if self.max_workers > 1 and len(planned) > 1:
            with ThreadPoolExecutor(max_workers=min(self.max_workers, len(planned))) as executor:
                # map() yields in submission order, not completion order
                outcomes = list(executor.map(lambda item: self._execute(item, params), planned))
        else:
            outcomes = [self._execute(item, params) for item in planned]

        results = ResultSet(outcomes, template_name=template_name)

        self.logger.info(
            "Query template finished",
            template=template_name,
            succeeded=len(results.successes()),
            failed=len(results.failures())
        )
        return results

    def run_query(self, service: str, query_name: str,
                  params: Optional[dict[str, Any]] = None) -> Any:
        """
        Run a single query definition directly.

        Unlike run(), failures are raised instead of being captured.
        """
        definition = self.get_definition(service, query_name)
        adapter = self.registry.get_or_raise(service)
        return adapter.execute(definition, dict(params or {}))

    def _execute(self, item: PlannedQuery, params: dict[str, Any]) -> QueryOutcome:
        """Run one planned entry, converting any failure into an outcome."""
        service, query_name = item.entry.service, item.entry.template

        try:
            data = item.adapter.execute(item.definition, dict(params))
            outcome = QueryOutcome.ok(service, query_name, data)

        except QueryExecutionError as e:
            outcome = QueryOutcome.failed(service, query_name, e.message)

        except Exception as e:
            self.logger.error(
                "Unexpected error running query",
                service=service,
                query=query_name,
                error_type=type(e).__name__,
                error=str(e)
            )
            outcome = QueryOutcome.failed(service, query_name, str(e))

        log_query_outcome(self.logger, outcome)
        return outcome
