"""Pydantic models for the request data the host sends to the dashboard.

Wire format (camelCase JSON)::

    {
      "requests": [
        {"url": "...", "state": {"blocked": {}} | {"allowed": {"reason": "..."}},
         "entityName"?: "...", "eTLDplus1"?: "...", "ownerName"?: "...",
         "prevalence"?: 1.5, "category"?: "..."}
      ],
      "installedSurrogates"?: ["..."]
    }
"""

from __future__ import annotations

import typing
from typing import Annotated, Any, Literal

import pydantic

from privacy_dashboard.utils.serialization import snake_to_camel

AllowedReason = Literal[
    "adClickAttribution",
    "ownedByFirstParty",
    "ruleException",
    "protectionDisabled",
    "otherThirdPartyRequest",
]

ALLOWED_REASONS: tuple[str, ...] = typing.get_args(AllowedReason)

# Tracker requests that were deliberately not blocked.
SPECIAL_ALLOWED_REASONS: tuple[str, ...] = (
    "adClickAttribution",
    "ownedByFirstParty",
    "ruleException",
    "protectionDisabled",
)

# Third-party requests that were never classified as trackers.
NON_SPECIAL_ALLOWED_REASON = "otherThirdPartyRequest"

# Owner name the host uses when it could not identify a company.
UNKNOWN_OWNER_NAME = "unknown"


class _WireModel(pydantic.BaseModel):
    """Base for immutable camelCase wire models."""

    model_config = pydantic.ConfigDict(
        alias_generator=snake_to_camel, populate_by_name=True, frozen=True
    )


class BlockedState(_WireModel):
    """The request was blocked."""

    blocked: dict[str, Any]


class AllowedDetail(_WireModel):
    """Why an allowed request was let through."""

    reason: str


class AllowedState(_WireModel):
    """The request was allowed, for ``allowed.reason``."""

    allowed: AllowedDetail

    @property
    def reason(self) -> str:
        return self.allowed.reason


RequestState = Annotated[BlockedState | AllowedState, pydantic.Field(union_mode="left_to_right")]


class RequestFact(_WireModel):
    """One classified network request observed on the page.

    The host's ``"unknown"`` owner name is held as the
    ``owner_unidentified`` flag (with ``owner_name`` left ``None``).
    The flag can only be set that way, and dumps back out as
    ``ownerName: "unknown"``.
    """

    url: str
    state: RequestState
    entity_name: str | None = None
    etld_plus1: str | None = pydantic.Field(default=None, alias="eTLDplus1")
    owner_name: str | None = None
    prevalence: float | None = None
    category: str | None = None

    _owner_unidentified: bool = pydantic.PrivateAttr(default=False)

    @pydantic.model_validator(mode="wrap")
    @classmethod
    def _mark_unidentified_owner(cls, data: Any, handler: pydantic.ValidatorFunctionWrapHandler) -> RequestFact:
        """Turn the ``"unknown"`` owner name into the private flag."""
        owner_keys = ("ownerName", "owner_name")
        unidentified = isinstance(data, dict) and any(data.get(k) == UNKNOWN_OWNER_NAME for k in owner_keys)
        if unidentified:
            data = {k: v for k, v in data.items() if k not in owner_keys}
        fact = handler(data)
        if unidentified:
            fact._owner_unidentified = True
        return fact

    @pydantic.field_serializer("owner_name")
    def _dump_owner_name(self, owner_name: str | None) -> str | None:
        return UNKNOWN_OWNER_NAME if self._owner_unidentified else owner_name

    @property
    def owner_unidentified(self) -> bool:
        """Whether the host could not identify the owning company."""
        return self._owner_unidentified


class RequestData(_WireModel):
    """A full payload of request facts from the host."""

    requests: list[RequestFact]
    installed_surrogates: list[str] | None = None
