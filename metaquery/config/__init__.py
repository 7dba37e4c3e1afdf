"""Configuration models, loading and validation for the query runner."""

from .environment import EnvironmentProvider
from .models import (
    QueryDefinition,
    QueryTemplate,
    RunnerConfig,
    ServiceConfig,
    ServiceSchema,
    TemplateEntry,
)

__all__ = [
    "EnvironmentProvider",
    "QueryDefinition",
    "QueryTemplate",
    "RunnerConfig",
    "ServiceConfig",
    "ServiceSchema",
    "TemplateEntry",
]
