"""
Error classification for template runs.

Configuration errors describe a broken template or schema and abort a run
before any request is sent. Query execution errors are scoped to a single
template entry and end up as failure outcomes in the result set.
"""

from .base import MetaQueryError
from .configuration import (
    ConfigurationError,
    TemplateNotFoundError,
    QueryNotFoundError,
    UnknownServiceError,
    ConfigLoadError,
)
from .query_failures import (
    QueryExecutionError,
    CredentialError,
    NetworkError,
)

__all__ = [
    "MetaQueryError",
    # Configuration Errors
    "ConfigurationError",
    "TemplateNotFoundError",
    "QueryNotFoundError",
    "UnknownServiceError",
    "ConfigLoadError",
    # Query Execution Errors
    "QueryExecutionError",
    "CredentialError",
    "NetworkError",
]
