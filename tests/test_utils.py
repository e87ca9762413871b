"""Tests for strscanner utility modules."""

import logging

import pytest


class TestGetLogger:
    """Tests for get_logger function."""

    def test_prefixes_name(self) -> None:
        from strscanner.utils.logger import get_logger

        assert get_logger("engine").name == "strscanner.engine"

    def test_keeps_package_names(self) -> None:
        from strscanner.utils.logger import get_logger

        assert get_logger("strscanner").name == "strscanner"
        assert get_logger("strscanner.scanner.core").name == "strscanner.scanner.core"

    def test_returns_stdlib_logger(self) -> None:
        from strscanner.utils import get_logger

        assert isinstance(get_logger(__name__), logging.Logger)


class TestDebugLogging:
    """Failures are logged at debug level before raising."""

    def test_pattern_error_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        from strscanner import PatternError, Scanner

        with caplog.at_level(logging.DEBUG, logger="strscanner"):
            with pytest.raises(PatternError):
                Scanner("abc").scan("(")
        assert any("Failed to compile pattern" in r.message for r in caplog.records)
