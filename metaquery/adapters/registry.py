"""Adapter registry - lookup of service adapters by service identifier."""

from typing import Optional

import structlog

from ..config.environment import EnvironmentProvider
from ..errors import UnknownServiceError
from .base import BaseServiceAdapter, Transport
from .github import GitHubAdapter
from .linear import LinearAdapter
from .maestroverse import MaestroverseAdapter

logger = structlog.get_logger(__name__)

BUILTIN_ADAPTERS: tuple[type[BaseServiceAdapter], ...] = (
    LinearAdapter,
    GitHubAdapter,
    MaestroverseAdapter,
)


class AdapterRegistry:
    """Maps service identifiers to adapter instances, built once per runner."""

    def __init__(self):
        self._adapters: dict[str, BaseServiceAdapter] = {}

    @classmethod
    def default(
        cls,
        environment: Optional[EnvironmentProvider] = None,
        timeout_seconds: Optional[float] = None,
        transport: Optional[Transport] = None,
    ) -> "AdapterRegistry":
        """Registry with the built-in Linear, GitHub and Maestroverse adapters."""
        registry = cls()
        for adapter_class in BUILTIN_ADAPTERS:
            registry.register(adapter_class(
                environment=environment,
                timeout_seconds=timeout_seconds,
                transport=transport,
            ))
        return registry

    def register(self, adapter: BaseServiceAdapter) -> BaseServiceAdapter:
        """Register an adapter under its service name."""
        if adapter.name in self._adapters:
            logger.warning(
                "Adapter overwritten",
                service=adapter.name,
                old=type(self._adapters[adapter.name]).__name__,
                new=type(adapter).__name__
            )
        self._adapters[adapter.name] = adapter
        logger.debug("Adapter registered", service=adapter.name, class_name=type(adapter).__name__)
        return adapter

    def get(self, service: str) -> Optional[BaseServiceAdapter]:
        """Get an adapter by service name."""
        return self._adapters.get(service)

    def get_or_raise(self, service: str) -> BaseServiceAdapter:
        """Get an adapter by service name, raising if none is registered."""
        adapter = self._adapters.get(service)
        if adapter is None:
            raise UnknownServiceError(service, context={"available": sorted(self._adapters)})
        return adapter

    def services(self) -> list[str]:
        """Registered service names, sorted."""
        return sorted(self._adapters)

    def __contains__(self, service: str) -> bool:
        return service in self._adapters
