"""Read-only view of the environment variables consumed by adapters."""

import os
from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Optional

from ..errors import CredentialError


class EnvironmentProvider(Mapping):
    """
    Immutable snapshot of credentials and identity defaults.

    Adapters read credentials, default owner/repository and workspace
    identifiers through this object only, so tests can supply a plain dict
    instead of touching the process environment.
    """

    def __init__(self, values: Optional[Mapping[str, str]] = None):
        self._values = MappingProxyType(dict(values or {}))

    @classmethod
    def from_os(cls) -> "EnvironmentProvider":
        """Snapshot the current process environment."""
        return cls(os.environ)

    def __getitem__(self, name: str) -> str:
        return self._values[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def get_value(self, name: str) -> Optional[str]:
        """Return the variable, treating empty strings as unset."""
        value = self._values.get(name)
        return value if value else None

    def require(self, name: str, service: Optional[str] = None) -> str:
        """Return a required credential or raise CredentialError."""
        value = self.get_value(name)
        if value is None:
            raise CredentialError(name, service=service)
        return value
