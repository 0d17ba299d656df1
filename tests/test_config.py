"""Tests for privacy_dashboard.config: environment-driven settings."""

from __future__ import annotations

from unittest import mock

from privacy_dashboard.config import CONTENT_BLOCKING_FEATURE, DashboardSettings, get_settings


class TestDashboardSettings:
    """Tests for DashboardSettings."""

    def test_defaults(self) -> None:
        with mock.patch.dict("os.environ", {}, clear=True):
            cfg = DashboardSettings()
        assert cfg.debug_logging is False
        assert cfg.colour_output is True
        assert cfg.content_blocking_feature == CONTENT_BLOCKING_FEATURE

    def test_reads_environment(self) -> None:
        env = {
            "DASHBOARD_DEBUG": "true",
            "DASHBOARD_COLOUR": "false",
            "DASHBOARD_CONTENT_BLOCKING_FEATURE": "trackerBlocking",
        }
        with mock.patch.dict("os.environ", env, clear=True):
            cfg = DashboardSettings()
        assert cfg.debug_logging is True
        assert cfg.colour_output is False
        assert cfg.content_blocking_feature == "trackerBlocking"


class TestGetSettings:
    """Tests for get_settings()."""

    def test_is_cached(self) -> None:
        assert get_settings() is get_settings()

    def test_cache_clear_rereads_environment(self) -> None:
        with mock.patch.dict("os.environ", {"DASHBOARD_DEBUG": "1"}):
            get_settings.cache_clear()
            assert get_settings().debug_logging is True
