"""Stateless renderers for result sets (JSON, YAML, Markdown)."""

import json
from collections.abc import Iterable
from typing import Any

import yaml

from ..results import QueryOutcome

FORMATS = ("json", "yaml", "markdown")


def _records(results: Iterable[QueryOutcome]) -> list[dict[str, Any]]:
    return [outcome.to_dict() for outcome in results]


def format_json(results: Iterable[QueryOutcome]) -> str:
    """Pretty-printed JSON array of outcome records."""
    return json.dumps(_records(results), indent=2, default=str)


def format_yaml(results: Iterable[QueryOutcome]) -> str:
    """One YAML document per outcome."""
    documents = [
        yaml.safe_dump(record, sort_keys=False, default_flow_style=False, allow_unicode=True).rstrip("\n")
        for record in _records(results)
    ]
    return "\n---\n".join(documents)


def format_markdown(results: Iterable[QueryOutcome]) -> str:
    """Markdown report with one section per outcome."""
    lines = ["# Query Results", ""]

    for outcome in results:
        lines.append(f"## {outcome.service} - {outcome.template}")
        lines.append("")

        if outcome.success:
            if isinstance(outcome.data, list):
                lines.append(f"Found {len(outcome.data)} items")
                lines.append("")
            lines.append("```json")
            lines.append(json.dumps(outcome.data, indent=2, default=str))
            lines.append("```")
        else:
            lines.append(f"**Error:** {outcome.error}")
        lines.append("")

    return "\n".join(lines)


_FORMATTERS = {
    "json": format_json,
    "yaml": format_yaml,
    "markdown": format_markdown,
}


def format_results(results: Iterable[QueryOutcome], fmt: str = "json") -> str:
    """Render results in the named format; unknown formats fall back to JSON."""
    formatter = _FORMATTERS.get((fmt or "json").lower(), format_json)
    return formatter(results)
