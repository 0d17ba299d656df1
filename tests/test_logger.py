"""Tests for privacy_dashboard.utils.logger: structured console logging."""

from __future__ import annotations

from unittest import mock

import pytest

from privacy_dashboard import config
from privacy_dashboard.utils import logger


class TestLogger:
    """Tests for Logger."""

    def test_info_is_buffered_without_ansi(self) -> None:
        log = logger.create_logger("Test")
        log.info("Hello", {"count": 3})
        lines = logger.get_log_buffer()
        assert len(lines) == 1
        assert "[Test] Hello" in lines[0]
        assert "count=3" in lines[0]
        assert "\033[" not in lines[0]

    def test_writes_to_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        logger.create_logger("Test").warn("Careful")
        assert "Careful" in capsys.readouterr().err

    def test_debug_suppressed_by_default(self) -> None:
        with mock.patch.dict("os.environ", {}, clear=True):
            config.get_settings.cache_clear()
            logger.create_logger("Test").debug("hidden")
        assert logger.get_log_buffer() == []

    def test_debug_emitted_when_enabled(self) -> None:
        with mock.patch.dict("os.environ", {"DASHBOARD_DEBUG": "true"}):
            config.get_settings.cache_clear()
            logger.create_logger("Test").debug("shown")
        assert any("shown" in line for line in logger.get_log_buffer())

    def test_colour_disabled(self, capsys: pytest.CaptureFixture[str]) -> None:
        with mock.patch.dict("os.environ", {"DASHBOARD_COLOUR": "false"}):
            config.get_settings.cache_clear()
            logger.create_logger("Test").warn("plain")
        assert "\033[" not in capsys.readouterr().err

    def test_clear_log_buffer(self) -> None:
        logger.create_logger("Test").info("one")
        logger.clear_log_buffer()
        assert logger.get_log_buffer() == []


class TestFormatValue:
    """Tests for _format_value()."""

    def test_truncates_long_strings(self) -> None:
        assert "..." in logger._format_value("x" * 300)

    def test_collections_show_size(self) -> None:
        assert "[2 items]" in logger._format_value(["a", "b"])
