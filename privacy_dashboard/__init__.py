# Privacy dashboard engine: request aggregation and privacy state.
# Prefer importing from the specific submodule (e.g. privacy_dashboard.analysis.ingest).

from privacy_dashboard.analysis.aggregation import (
    AggregateCompanyData as AggregateCompanyData,
    AggregatedCompanyResponseData as AggregatedCompanyResponseData,
    TrackerUrl as TrackerUrl,
)
from privacy_dashboard.analysis.ingest import (
    create_request_details as create_request_details,
    create_tab_data as create_tab_data,
    from_json as from_json,
    from_multi_json as from_multi_json,
)
from privacy_dashboard.analysis.request_details import (
    PRIVACY_STATES as PRIVACY_STATES,
    PrivacyState as PrivacyState,
    RequestDetails as RequestDetails,
    derive_state as derive_state,
)
from privacy_dashboard.models.request_data import (
    RequestData as RequestData,
    RequestFact as RequestFact,
)
from privacy_dashboard.models.tab import (
    Protections as Protections,
    TabData as TabData,
)
from privacy_dashboard.utils.errors import RequestDataValidationError as RequestDataValidationError
