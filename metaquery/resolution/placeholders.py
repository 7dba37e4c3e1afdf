"""
Placeholder substitution over strings and nested structures.

A placeholder is ``${NAME}``. Values come from the caller's parameters
first, then from the environment. Placeholders with no value anywhere are
left verbatim so a missing parameter shows up in the request instead of
silently turning into an empty string.
"""

import json
import re
from collections.abc import Mapping
from typing import Any, Optional

PLACEHOLDER_PATTERN = re.compile(r"\$\{(\w+)\}")


def render_value(value: Any) -> str:
    """
    String form of a parameter value.

    Booleans render as JSON literals, sequences as comma-joined elements
    (``["bug", "urgent"]`` -> ``bug,urgent``) and mappings as JSON. A ``None``
    element inside a sequence renders as an empty string.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(render_value(item) for item in value)
    if isinstance(value, Mapping):
        return json.dumps(value)
    return str(value)


def resolve_string(
    text: str,
    params: Mapping[str, Any],
    env: Optional[Mapping[str, str]] = None
) -> str:
    """
    Substitute every placeholder in ``text``.

    Precedence: ``params[NAME]`` when present and not None, then a non-empty
    ``env[NAME]``, otherwise the placeholder text is kept unchanged.
    """
    env = env if env is not None else {}

    def substitute(match: re.Match) -> str:
        name = match.group(1)
        value = params.get(name)
        if value is not None:
            return render_value(value)
        env_value = env.get(name)
        if env_value:
            return env_value
        return match.group(0)

    return PLACEHOLDER_PATTERN.sub(substitute, text)


def resolve(
    value: Any,
    params: Mapping[str, Any],
    env: Optional[Mapping[str, str]] = None
) -> Any:
    """
    Resolve placeholders throughout a nested structure.

    Strings are substituted, lists and tuples are resolved element-wise,
    mappings keep their keys (and order) with resolved values. Any other
    value is returned unchanged. The input is never mutated.
    """
    if isinstance(value, str):
        return resolve_string(value, params, env)
    if isinstance(value, list):
        return [resolve(item, params, env) for item in value]
    if isinstance(value, tuple):
        return tuple(resolve(item, params, env) for item in value)
    if isinstance(value, Mapping):
        return {key: resolve(item, params, env) for key, item in value.items()}
    return value


def find_placeholders(value: Any) -> list[str]:
    """Names of placeholders present anywhere in ``value``, first-seen order."""
    found: dict[str, None] = {}

    def walk(node: Any) -> None:
        if isinstance(node, str):
            for name in PLACEHOLDER_PATTERN.findall(node):
                found.setdefault(name, None)
        elif isinstance(node, (list, tuple)):
            for item in node:
                walk(item)
        elif isinstance(node, Mapping):
            for item in node.values():
                walk(item)

    walk(value)
    return list(found)
