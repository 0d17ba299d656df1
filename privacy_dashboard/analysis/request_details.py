"""
Request routing and page-level privacy state.

``RequestDetails`` owns one bucket for every request, one for
blocked requests and one per allowed reason. The bucket entity
counts reduce to one of twelve privacy states which the dashboard
uses to choose its text and icons.
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Collection, Iterable
from typing import Literal

from privacy_dashboard.analysis.aggregation import AggregateCompanyData, AggregatedCompanyResponseData
from privacy_dashboard.models.request_data import (
    ALLOWED_REASONS,
    NON_SPECIAL_ALLOWED_REASON,
    SPECIAL_ALLOWED_REASONS,
    AllowedState,
    BlockedState,
    RequestFact,
)
from privacy_dashboard.utils import logger

log = logger.create_logger("RequestDetails")

PrivacyState = Literal[
    "protectionsOn",
    "protectionsOn_blocked",
    "protectionsOn_blocked_allowedTrackers",
    "protectionsOn_blocked_allowedNonTrackers",
    "protectionsOn_blocked_allowedTrackers_allowedNonTrackers",
    "protectionsOn_allowedTrackers",
    "protectionsOn_allowedNonTrackers",
    "protectionsOn_allowedTrackers_allowedNonTrackers",
    "protectionsOff",
    "protectionsOff_allowedTrackers",
    "protectionsOff_allowedNonTrackers",
    "protectionsOff_allowedTrackers_allowedNonTrackers",
]

PRIVACY_STATES: tuple[PrivacyState, ...] = typing.get_args(PrivacyState)


def derive_state(
    protections_enabled: bool,
    blocked_count: int,
    allowed_special_count: int,
    allowed_non_special_count: int,
) -> PrivacyState:
    """Map bucket entity counts to a privacy state.

    With protections off nothing can be blocked, so only the two
    allowed counts matter. With protections on, the blocked count
    selects the family and the allowed counts select the member.
    Every input combination maps to exactly one state.
    """
    special = allowed_special_count > 0
    non_special = allowed_non_special_count > 0

    if not protections_enabled:
        if special and non_special:
            return "protectionsOff_allowedTrackers_allowedNonTrackers"
        if non_special:
            return "protectionsOff_allowedNonTrackers"
        if special:
            return "protectionsOff_allowedTrackers"
        return "protectionsOff"

    if blocked_count > 0:
        if special and non_special:
            return "protectionsOn_blocked_allowedTrackers_allowedNonTrackers"
        if special:
            return "protectionsOn_blocked_allowedTrackers"
        if non_special:
            return "protectionsOn_blocked_allowedNonTrackers"
        return "protectionsOn_blocked"

    if special and non_special:
        return "protectionsOn_allowedTrackers_allowedNonTrackers"
    if special:
        return "protectionsOn_allowedTrackers"
    if non_special:
        return "protectionsOn_allowedNonTrackers"
    return "protectionsOn"


class RequestDetails:
    """Request facts for one page view, grouped for display.

    Attributes:
        surrogates: Domains of installed surrogate scripts.
        all: Every request, whatever its disposition.
        blocked: Requests that were blocked.
        allowed: One bucket per recognised allowed reason.
    """

    def __init__(self, surrogates: Iterable[str] = ()) -> None:
        self.surrogates: tuple[str, ...] = tuple(surrogates)
        self.all = AggregatedCompanyResponseData()
        self.blocked = AggregatedCompanyResponseData()
        self.allowed: dict[str, AggregatedCompanyResponseData] = {
            reason: AggregatedCompanyResponseData() for reason in ALLOWED_REASONS
        }

    def add_request(self, request: RequestFact) -> None:
        """Route one request into ``all`` and its disposition bucket."""
        self.all.add_request(request)

        if isinstance(request.state, BlockedState):
            self.blocked.add_request(request)
        elif isinstance(request.state, AllowedState):
            bucket = self.allowed.get(request.state.reason)
            if bucket is None:
                log.debug("Skipping unrecognised allowed reason", {"reason": request.state.reason, "url": request.url})
                return
            bucket.add_request(request)

    def add_requests(self, requests: Iterable[RequestFact]) -> None:
        """Route *requests* in order."""
        for request in requests:
            self.add_request(request)

    def for_each_entity(self, fn: Callable[[AggregateCompanyData], object]) -> None:
        """Call *fn* for every company seen on the page."""
        for entity in self.all.entities.values():
            fn(entity)

    def blocked_count(self) -> int:
        return self.blocked.entities_count

    def allowed_special_count(self) -> int:
        """Number of companies with tracker requests that were not blocked.

        Counts the ad-click-attribution, first-party, rule-exception
        and protections-disabled buckets. Third-party requests that
        were never classified as trackers are excluded.
        """
        return sum(self.allowed[reason].entities_count for reason in SPECIAL_ALLOWED_REASONS)

    def allowed_non_special_count(self) -> int:
        """Number of companies with third-party requests not classified as trackers."""
        return self.allowed[NON_SPECIAL_ALLOWED_REASON].entities_count

    def blocked_company_names(self) -> list[str]:
        """Display names of blocked companies, most prevalent first.

        Companies the host could not identify are left out.
        """
        return [
            entity.display_name
            for entity in self.blocked.sorted_by_prevalence()
            if not entity.unidentified
        ]

    def state(self, protections_enabled: bool) -> PrivacyState:
        """Return the privacy state for the current bucket counts."""
        return derive_state(
            protections_enabled,
            self.blocked_count(),
            self.allowed_special_count(),
            self.allowed_non_special_count(),
        )

    def matches(self, protections_enabled: bool, states: Collection[str]) -> bool:
        """Check whether the current privacy state is one of *states*."""
        return self.state(protections_enabled) in states
