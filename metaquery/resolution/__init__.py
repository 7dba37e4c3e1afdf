"""Placeholder resolution and response path extraction."""

from .extraction import extract
from .placeholders import find_placeholders, render_value, resolve, resolve_string

__all__ = [
    "extract",
    "find_placeholders",
    "render_value",
    "resolve",
    "resolve_string",
]
