"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any

from .models import GRAPHQL, REST, QueryDefinition, RunnerConfig

HTTP_METHODS = frozenset({"GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"})

# Services whose definitions are always GraphQL or always REST, regardless of type
SERVICE_KINDS = {
    "linear": GRAPHQL,
    "maestroverse": REST,
}


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


class ConfigValidator:
    """Validates services, schemas and templates before a run."""

    @staticmethod
    def validate_query_definition(service: str, definition: QueryDefinition) -> list[ValidationError]:
        """Validate one query definition."""
        errors = []
        field_prefix = f"{service}.queries.{definition.name}"
        kind = SERVICE_KINDS.get(service) or (GRAPHQL if definition.is_graphql else REST)

        if definition.type is not None and definition.type not in (GRAPHQL, REST):
            errors.append(ValidationError(
                field=f"{field_prefix}.type",
                message="Must be 'graphql' or 'rest'",
                value=definition.type
            ))

        if kind == GRAPHQL and not definition.document:
            errors.append(ValidationError(
                field=f"{field_prefix}.query",
                message="GraphQL definitions need a query or mutation",
                value=None
            ))

        if kind == REST:
            if not definition.endpoint:
                errors.append(ValidationError(
                    field=f"{field_prefix}.endpoint",
                    message="REST definitions need an endpoint",
                    value=definition.endpoint
                ))
            if definition.method not in HTTP_METHODS:
                errors.append(ValidationError(
                    field=f"{field_prefix}.method",
                    message=f"Must be one of {', '.join(sorted(HTTP_METHODS))}",
                    value=definition.method
                ))
            if definition.params is not None and not isinstance(definition.params, dict):
                errors.append(ValidationError(
                    field=f"{field_prefix}.params",
                    message="Must be a mapping",
                    value=definition.params
                ))

        if definition.response_path is not None and not isinstance(definition.response_path, str):
            errors.append(ValidationError(
                field=f"{field_prefix}.response_path",
                message="Must be a dotted path string",
                value=definition.response_path
            ))

        return errors

    @staticmethod
    def validate_templates(config: RunnerConfig) -> list[ValidationError]:
        """Validate that template entries point at configured services and queries."""
        errors = []

        for template in config.templates.values():
            if not template.queries:
                errors.append(ValidationError(
                    field=f"query_templates.{template.name}.queries",
                    message="Template has no queries",
                    value=[]
                ))

            for index, entry in enumerate(template.queries):
                field_name = f"query_templates.{template.name}.queries[{index}]"

                if entry.service not in config.services:
                    errors.append(ValidationError(
                        field=field_name,
                        message="References an unconfigured service",
                        value=entry.service
                    ))
                    continue

                if not config.is_enabled(entry.service):
                    continue

                schema = config.schemas.get(entry.service)
                if schema is None or schema.get(entry.template) is None:
                    errors.append(ValidationError(
                        field=field_name,
                        message=f"Query '{entry.template}' not defined for service",
                        value=entry.service
                    ))

        return errors

    @staticmethod
    def validate_config(config: RunnerConfig) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        for service, schema in config.schemas.items():
            for definition in schema.queries.values():
                errors.extend(ConfigValidator.validate_query_definition(service, definition))

        errors.extend(ConfigValidator.validate_templates(config))

        return errors
