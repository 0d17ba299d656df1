"""Shared fixtures for the test suite."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

import pytest

from privacy_dashboard import config
from privacy_dashboard.models import request_data
from privacy_dashboard.utils import logger


@pytest.fixture(autouse=True)
def _fresh_settings_and_logs() -> Iterator[None]:
    """Re-read settings from the environment and empty the log buffer."""
    config.get_settings.cache_clear()
    logger.clear_log_buffer()
    yield
    config.get_settings.cache_clear()


# ── Request Fact Factories ──────────────────────────────────────


def blocked(url: str, **fields: Any) -> request_data.RequestFact:
    """A blocked request fact, built from camelCase wire fields."""
    return request_data.RequestFact.model_validate({"url": url, "state": {"blocked": {}}, **fields})


def allowed(url: str, reason: str, **fields: Any) -> request_data.RequestFact:
    """An allowed request fact with the given reason."""
    return request_data.RequestFact.model_validate(
        {"url": url, "state": {"allowed": {"reason": reason}}, **fields}
    )


@pytest.fixture()
def blocked_tracker() -> request_data.RequestFact:
    """A blocked request for a well-known ad network."""
    return blocked(
        "https://www.doubleclick.net/pixel",
        entityName="Google LLC",
        ownerName="Google LLC",
        eTLDplus1="doubleclick.net",
        prevalence=80.5,
        category="Advertising",
    )


@pytest.fixture()
def first_party_tracker() -> request_data.RequestFact:
    """A tracker allowed because the page owner also owns it."""
    return allowed(
        "https://analytics.example.com/collect",
        "ownedByFirstParty",
        entityName="Example Corp",
        ownerName="Example Corp",
        prevalence=3,
        category="Analytics",
    )


@pytest.fixture()
def third_party_request() -> request_data.RequestFact:
    """A third-party request not classified as a tracker."""
    return allowed(
        "https://cdn.jsdelivr.net/npm/lib.js",
        "otherThirdPartyRequest",
        eTLDplus1="jsdelivr.net",
    )


@pytest.fixture()
def sample_payload() -> dict[str, Any]:
    """A host payload with one request of each main disposition."""
    return {
        "requests": [
            {
                "url": "https://www.doubleclick.net/pixel",
                "state": {"blocked": {}},
                "entityName": "Google LLC",
                "ownerName": "Google LLC",
                "eTLDplus1": "doubleclick.net",
                "prevalence": 80.5,
                "category": "Advertising",
            },
            {
                "url": "https://analytics.example.com/collect",
                "state": {"allowed": {"reason": "ownedByFirstParty"}},
                "entityName": "Example Corp",
                "prevalence": 3,
            },
            {
                "url": "https://cdn.jsdelivr.net/npm/lib.js",
                "state": {"allowed": {"reason": "otherThirdPartyRequest"}},
                "eTLDplus1": "jsdelivr.net",
            },
        ],
        "installedSurrogates": ["google-analytics.com"],
    }
