"""Renderers turning a result set into text."""

from .formatters import FORMATS, format_json, format_markdown, format_results, format_yaml

__all__ = [
    "FORMATS",
    "format_json",
    "format_markdown",
    "format_results",
    "format_yaml",
]
