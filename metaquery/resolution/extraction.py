"""
Dotted-path extraction from decoded responses.

Paths look like ``data.issues.nodes``. A segment ending in ``[]`` descends
into a list and applies the rest of the path to every element::

    extract({"items": [{"id": 1}, {"id": 2}]}, "items[].id")  # -> [1, 2]

Extraction never raises; anything that cannot be followed yields None.
"""

from collections.abc import Mapping, Sequence
from typing import Any, Optional

ARRAY_MARKER = "[]"


def extract(payload: Any, path: Optional[str]) -> Any:
    """Return the sub-value of ``payload`` addressed by ``path``."""
    if not path or path == ".":
        return payload
    return _walk(payload, path.split("."))


def _walk(current: Any, segments: list[str]) -> Any:
    for index, segment in enumerate(segments):
        if current is None:
            return None

        if segment.endswith(ARRAY_MARKER):
            key = segment[:-len(ARRAY_MARKER)]
            # a bare "[]" marks the current value itself
            if key:
                current = _step(current, key)
            remaining = segments[index + 1:]
            if isinstance(current, list) and remaining:
                return [_walk(item, remaining) for item in current]
            continue

        current = _step(current, segment)

    return current


def _step(current: Any, key: str) -> Any:
    if isinstance(current, Mapping):
        return current.get(key)
    if isinstance(current, Sequence) and not isinstance(current, (str, bytes)):
        try:
            return current[int(key)]
        except (ValueError, IndexError):
            return None
    return None
