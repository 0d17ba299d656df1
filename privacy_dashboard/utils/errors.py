"""
Error types and helpers for consistent error message extraction.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

import pydantic


class RequestDataValidationError(ValueError):
    """A host payload did not match the request-data schema.

    Attributes:
        payload_index: Position of the offending payload in the
            call (always ``0`` for single-payload ingestion).
        errors: The pydantic error details for that payload.
    """

    def __init__(self, payload_index: int, cause: pydantic.ValidationError) -> None:
        self.payload_index = payload_index
        self.errors = cause.errors(include_url=False)
        super().__init__(
            f"Request data payload {payload_index} is invalid "
            f"({cause.error_count()} error(s)): {_summarise(self.errors)}"
        )


def _summarise(errors: Sequence[Mapping[str, Any]]) -> str:
    """Render the first few pydantic errors as ``loc: msg`` pairs."""
    parts = []
    for err in errors[:3]:
        loc = ".".join(str(p) for p in err["loc"]) or "<root>"
        parts.append(f"{loc}: {err['msg']}")
    if len(errors) > 3:
        parts.append(f"... and {len(errors) - 3} more")
    return "; ".join(parts)


def get_error_message(error: BaseException | object) -> str:
    """
    Safely extract an error message from an unknown error type.
    """
    if isinstance(error, Exception):
        return str(error) or type(error).__name__
    return "Unknown error"
