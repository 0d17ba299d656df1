"""
Ingestion boundary for host-supplied request data.

Payloads are validated against ``RequestData`` before any request
is routed. A payload that does not validate raises
``RequestDataValidationError`` and nothing is built from the call.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

import pydantic

from privacy_dashboard.analysis.request_details import RequestDetails
from privacy_dashboard.models.request_data import RequestData, RequestFact
from privacy_dashboard.models.tab import Protections, TabData
from privacy_dashboard.utils import logger, url
from privacy_dashboard.utils.errors import RequestDataValidationError, get_error_message

log = logger.create_logger("Ingest")


def _validate(payload: Any, index: int) -> RequestData:
    """Validate one payload, wrapping schema errors with its index."""
    if isinstance(payload, RequestData):
        return payload
    try:
        return RequestData.model_validate(payload)
    except pydantic.ValidationError as exc:
        error = RequestDataValidationError(index, exc)
        log.warn(
            "Rejected request data payload",
            {"payloadIndex": index, "errors": exc.error_count(), "message": get_error_message(error)},
        )
        raise error from exc


def create_request_details(
    requests: Iterable[RequestFact],
    installed_surrogates: Iterable[str],
) -> RequestDetails:
    """Group validated requests into a fresh ``RequestDetails``."""
    output = RequestDetails(installed_surrogates)
    output.add_requests(requests)
    log.info(
        "Request details built",
        {
            "requests": output.all.request_count,
            "entities": output.all.entities_count,
            "blocked": output.blocked_count(),
            "surrogates": len(output.surrogates),
        },
    )
    return output


def from_json(payload: Any) -> RequestDetails:
    """Build request details from one untrusted JSON payload.

    Raises:
        RequestDataValidationError: If the payload does not match
            the request data schema.
    """
    request_data = _validate(payload, 0)
    return create_request_details(request_data.requests, request_data.installed_surrogates or [])


def from_multi_json(*payloads: Any) -> RequestDetails:
    """Build one set of request details from several payloads.

    Requests and surrogate lists are concatenated in payload order.
    Every payload is validated before any request is routed.

    Raises:
        RequestDataValidationError: Naming the first payload that
            does not match the request data schema.
    """
    requests: list[RequestFact] = []
    installed_surrogates: list[str] = []
    for index, payload in enumerate(payloads):
        request_data = _validate(payload, index)
        requests.extend(request_data.requests)
        installed_surrogates.extend(request_data.installed_surrogates or [])
    return create_request_details(requests, installed_surrogates)


def create_tab_data(
    tab_url: str,
    upgraded_https: bool,
    protections: Protections,
    raw_request_data: RequestData | dict[str, Any],
) -> TabData:
    """Assemble the tab model for a page and its request data.

    *tab_url* must already be a valid absolute URL; the page domain
    is its host without a leading ``www.``.

    Raises:
        RequestDataValidationError: If *raw_request_data* is a dict
            that does not match the request data schema.
    """
    request_data = _validate(raw_request_data, 0)
    domain = url.page_domain(tab_url)
    request_details = create_request_details(
        request_data.requests, request_data.installed_surrogates or []
    )
    log.info(
        "Tab data created",
        {"domain": domain, "protectionsEnabled": protections.protections_enabled},
    )
    return TabData(
        url=tab_url,
        domain=domain,
        upgraded_https=upgraded_https,
        protections=protections,
        request_details=request_details,
    )
