"""Root of the metaquery exception hierarchy."""

from typing import Any, Dict, Optional


class MetaQueryError(Exception):
    """Base class for all errors raised by the query runner."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}
