"""
Runtime configuration for the privacy dashboard engine.

Centralises environment variable names and default values.
Uses ``pydantic_settings.BaseSettings`` for automatic environment
variable binding, type coercion, and validation.
"""

from __future__ import annotations

import functools

import pydantic
import pydantic_settings

CONTENT_BLOCKING_FEATURE = "contentBlocking"


class DashboardSettings(pydantic_settings.BaseSettings):
    """Settings read from the environment.

    Attributes:
        debug_logging: Emit debug-level log lines (e.g. skipped
            allowed reasons).
        colour_output: Write ANSI colours to stderr.
        content_blocking_feature: Name of the feature flag that
            must be enabled for tracker blocking to be active.
    """

    debug_logging: bool = pydantic.Field(
        default=False, validation_alias="DASHBOARD_DEBUG"
    )
    colour_output: bool = pydantic.Field(
        default=True, validation_alias="DASHBOARD_COLOUR"
    )
    content_blocking_feature: str = pydantic.Field(
        default=CONTENT_BLOCKING_FEATURE,
        validation_alias="DASHBOARD_CONTENT_BLOCKING_FEATURE",
    )


@functools.lru_cache(maxsize=1)
def get_settings() -> DashboardSettings:
    """Return the process-wide settings, read once from the environment."""
    return DashboardSettings()
