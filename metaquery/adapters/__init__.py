"""Service adapters turning query definitions into backend requests."""

from .base import BaseServiceAdapter, RequestDescription
from .github import GitHubAdapter
from .linear import LinearAdapter
from .maestroverse import MaestroverseAdapter
from .registry import AdapterRegistry
from .transport import send_request

__all__ = [
    "AdapterRegistry",
    "BaseServiceAdapter",
    "GitHubAdapter",
    "LinearAdapter",
    "MaestroverseAdapter",
    "RequestDescription",
    "send_request",
]
