"""
Per-company rollups of classified requests.

An ``AggregatedCompanyResponseData`` is one bucket (e.g. "blocked"):
it groups the requests routed into it by company display name and
keeps running request and entity counts.
"""

from __future__ import annotations

import pydantic

from privacy_dashboard.analysis.company_map import EntityMap
from privacy_dashboard.models.request_data import RequestFact
from privacy_dashboard.utils import company_name, url


class TrackerUrl(pydantic.BaseModel):
    """A hostname seen for a company, with its tracker category."""

    model_config = pydantic.ConfigDict(frozen=True)

    url: str
    category: str | None = None


class AggregateCompanyData(pydantic.BaseModel):
    """All hostnames observed for one company within a bucket.

    ``prevalence`` is taken from the first request that created the
    entry and never updated afterwards.
    """

    name: str | None
    display_name: str
    prevalence: float
    normalized_name: str
    unidentified: bool = False
    urls: dict[str, TrackerUrl] = pydantic.Field(default_factory=dict)

    @classmethod
    def create(
        cls,
        name: str | None,
        display_name: str,
        prevalence: float,
        *,
        unidentified: bool = False,
    ) -> AggregateCompanyData:
        """Build an empty rollup, deriving the normalized name."""
        return cls(
            name=name,
            display_name=display_name,
            prevalence=prevalence,
            normalized_name=company_name.normalize_company_name(display_name),
            unidentified=unidentified,
        )

    def add_url(self, hostname: str, category: str | None = None) -> None:
        """Record *hostname*; the url set only ever grows."""
        self.urls[hostname] = TrackerUrl(url=hostname, category=category)


def display_name_for(request: RequestFact) -> str:
    """Pick the company key for a request.

    Entity name (TLD stripped) first, then eTLD+1, then the raw
    request URL. Two requests with the same key count as the same
    company.
    """
    if request.entity_name:
        return company_name.remove_tld(request.entity_name)
    return request.etld_plus1 or request.url


class AggregatedCompanyResponseData:
    """A bucket of company rollups with running counts."""

    def __init__(self) -> None:
        self.entities_count = 0
        self.request_count = 0
        self.entities: EntityMap[AggregateCompanyData] = EntityMap()

    def add_request(self, request: RequestFact) -> None:
        """Fold one request into the bucket."""
        display_name = display_name_for(request)

        entity = self.entities.get_or_create(
            display_name,
            lambda: AggregateCompanyData.create(
                request.owner_name,
                display_name,
                request.prevalence or 0,
                unidentified=request.owner_unidentified,
            ),
        )
        entity.add_url(url.request_hostname(request.url), request.category)

        self.entities_count = len(self.entities)
        self.request_count += 1

    def sorted_by_prevalence(self) -> list[AggregateCompanyData]:
        """Return rollups by descending prevalence, ties in insertion order."""
        return sorted(self.entities.values(), key=lambda e: e.prevalence, reverse=True)

    def __repr__(self) -> str:
        return (
            f"AggregatedCompanyResponseData(entities_count={self.entities_count}, "
            f"request_count={self.request_count})"
        )
