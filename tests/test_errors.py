"""Tests for privacy_dashboard.utils.errors: error types and message extraction."""

from __future__ import annotations

import pydantic
import pytest

from privacy_dashboard.models.request_data import RequestData
from privacy_dashboard.utils.errors import RequestDataValidationError, get_error_message


def _validation_error(payload: object) -> pydantic.ValidationError:
    with pytest.raises(pydantic.ValidationError) as info:
        RequestData.model_validate(payload)
    return info.value


class TestRequestDataValidationError:
    """Tests for RequestDataValidationError."""

    def test_is_value_error(self) -> None:
        err = RequestDataValidationError(0, _validation_error({}))
        assert isinstance(err, ValueError)

    def test_message_names_payload_and_field(self) -> None:
        err = RequestDataValidationError(2, _validation_error({}))
        assert err.payload_index == 2
        assert "payload 2" in str(err)
        assert "requests" in str(err)

    def test_keeps_error_details(self) -> None:
        err = RequestDataValidationError(0, _validation_error({"requests": [{"state": {}}]}))
        locs = [tuple(e["loc"]) for e in err.errors]
        assert any(loc[:3] == ("requests", 0, "url") for loc in locs)

    def test_long_error_lists_are_truncated(self) -> None:
        payload = {"requests": [{} for _ in range(5)]}
        err = RequestDataValidationError(0, _validation_error(payload))
        assert "more" in str(err)


class TestGetErrorMessage:
    """Tests for get_error_message()."""

    def test_exception_with_message(self) -> None:
        assert get_error_message(ValueError("something broke")) == "something broke"

    def test_exception_without_message(self) -> None:
        assert get_error_message(ValueError()) == "ValueError"

    def test_non_exception(self) -> None:
        assert get_error_message("oops") == "Unknown error"
