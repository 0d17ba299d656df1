"""Shared serialization helpers for camelCase conversion.

The host speaks camelCase JSON; models are declared in snake_case
and use ``snake_to_camel`` as their alias generator.
"""

from __future__ import annotations


def snake_to_camel(name: str) -> str:
    """Convert a snake_case string to camelCase.

    Args:
        name: A snake_case identifier such as
            ``"entity_name"``.

    Returns:
        The camelCase equivalent, e.g. ``"entityName"``.
    """
    parts = name.split("_")
    return parts[0] + "".join(w.capitalize() for w in parts[1:])
