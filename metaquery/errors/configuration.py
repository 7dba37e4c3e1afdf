"""
Configuration error classifications.

These represent a malformed template or schema reference. They are fatal
to the whole run and are raised before any network call is made.
"""

from typing import Optional

from .base import MetaQueryError


class ConfigurationError(MetaQueryError):
    """Base class for structural errors in templates, schemas or services."""

    def __init__(self, message: str, **kwargs):
        super().__init__(message, **kwargs)
        self.recoverable = False


class TemplateNotFoundError(ConfigurationError):
    """Requested query template does not exist."""

    def __init__(self, template_name: str, **kwargs):
        super().__init__(f"Query template not found: {template_name}", **kwargs)
        self.template_name = template_name


class QueryNotFoundError(ConfigurationError):
    """Template entry references a query definition its service does not have."""

    def __init__(self, service: str, query_name: str,
                 reason: Optional[str] = None, **kwargs):
        message = reason or f"Query template '{query_name}' not found for service: {service}"
        super().__init__(message, **kwargs)
        self.service = service
        self.query_name = query_name


class UnknownServiceError(ConfigurationError):
    """No adapter is registered for the service identifier."""

    def __init__(self, service: str, **kwargs):
        super().__init__(f"Unknown service: {service}", **kwargs)
        self.service = service


class ConfigLoadError(ConfigurationError):
    """A configuration or schema file could not be read or parsed."""

    def __init__(self, message: str, path: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.path = path
