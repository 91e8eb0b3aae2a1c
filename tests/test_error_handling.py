"""
Tests for error handling helpers.
"""

import logging

import pytest

from satellite_console.core.error_handling import error_context, log_and_continue
from satellite_console.core.exceptions import (
    ConfigurationError,
    InputStreamClosed,
    SatelliteConsoleError,
    is_fatal,
)


@pytest.mark.unit
class TestErrorContext:
    def test_wraps_foreign_exceptions(self):
        with pytest.raises(SatelliteConsoleError, match="Parsing failed: boom") as info:
            with error_context("Parsing"):
                raise RuntimeError("boom")
        assert isinstance(info.value.__cause__, RuntimeError)

    def test_key_error_message_keeps_quotes(self):
        with pytest.raises(SatelliteConsoleError, match="Lookup failed: 'satellite'"):
            with error_context("Lookup"):
                raise KeyError("satellite")

    def test_wrap_as_subclass(self):
        with pytest.raises(ConfigurationError):
            with error_context("Loading", wrap_as=ConfigurationError):
                raise ValueError("bad value")

    def test_console_errors_pass_through(self):
        with pytest.raises(InputStreamClosed):
            with error_context("Reading"):
                raise InputStreamClosed("closed")

    def test_suppress_when_not_reraising(self, caplog):
        with caplog.at_level(logging.ERROR, logger="satellite_console"):
            with error_context("Optional step", reraise=False):
                raise RuntimeError("ignored")
        assert "Optional step failed: ignored" in caplog.text


@pytest.mark.unit
class TestLogAndContinue:
    def test_returns_none_on_error(self, caplog):
        @log_and_continue("Flaky step")
        def flaky():
            raise RuntimeError("nope")

        with caplog.at_level(logging.WARNING, logger="satellite_console"):
            assert flaky() is None
        assert "Flaky step failed (continuing): nope" in caplog.text

    def test_passes_result_through(self):
        @log_and_continue()
        def fine(x):
            return x * 2

        assert fine(21) == 42

    def test_fatal_errors_propagate(self):
        @log_and_continue()
        def reading():
            raise InputStreamClosed("gone")

        with pytest.raises(InputStreamClosed):
            reading()


@pytest.mark.unit
def test_is_fatal():
    assert is_fatal(InputStreamClosed("x"))
    assert not is_fatal(ConfigurationError("x"))
    assert not is_fatal(ValueError("x"))
