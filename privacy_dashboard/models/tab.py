"""Pydantic models for the tab being shown in the dashboard."""

from __future__ import annotations

from typing import Any

import pydantic

from privacy_dashboard import config
from privacy_dashboard.analysis.request_details import PrivacyState, RequestDetails
from privacy_dashboard.utils.serialization import snake_to_camel


class Protections(pydantic.BaseModel):
    """Protection settings the browser applied to the page."""

    model_config = pydantic.ConfigDict(
        alias_generator=snake_to_camel, populate_by_name=True
    )

    unprotected_temporary: bool = False
    enabled_features: list[str] = pydantic.Field(
        default_factory=lambda: [config.get_settings().content_blocking_feature]
    )
    allowlisted: bool = False
    denylisted: bool = False

    @classmethod
    def default(cls) -> Protections:
        """Protections for an ordinary page: content blocking on."""
        return cls()

    @property
    def protections_enabled(self) -> bool:
        """Whether tracker blocking is active for the page.

        A denylisted site is always protected. Otherwise an
        allowlisted or temporarily unprotected site, or one where
        content blocking is not an enabled feature, is not.
        """
        if self.denylisted:
            return True
        content_blocking = config.get_settings().content_blocking_feature in self.enabled_features
        return not (self.allowlisted or self.unprotected_temporary or not content_blocking)


class ParentEntity(pydantic.BaseModel):
    """The company that owns the page itself."""

    model_config = pydantic.ConfigDict(
        alias_generator=snake_to_camel, populate_by_name=True
    )

    display_name: str
    prevalence: float


class TabData(pydantic.BaseModel):
    """Everything the dashboard knows about the current tab."""

    model_config = pydantic.ConfigDict(
        alias_generator=snake_to_camel,
        populate_by_name=True,
        arbitrary_types_allowed=True,
    )

    id: int | None = None
    url: str
    domain: str
    special_domain_name: str | None = None
    status: str = "complete"
    upgraded_https: bool
    protections: Protections
    request_details: RequestDetails
    parent_entity: ParentEntity | None = None
    locale: str | None = None
    permissions: list[Any] | None = None
    consent_managed: dict[str, Any] | None = None
    cta_screens: dict[str, Any] | None = None
    search: dict[str, Any] | None = None
    email_protection: dict[str, Any] | None = None
    is_pending_updates: bool | None = None
    certificate: list[Any] | None = None
    platform_limitations: bool | None = None

    def privacy_state(self) -> PrivacyState:
        """Privacy state for this tab's requests under its protections."""
        return self.request_details.state(self.protections.protections_enabled)
