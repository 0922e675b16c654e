"""Pytest configuration and fixtures for gregorian tests."""

from __future__ import annotations

import logging

import pytest

from gregorian._internal.constants import LOGGER_NAME


@pytest.fixture
def debug_logs(caplog: pytest.LogCaptureFixture) -> pytest.LogCaptureFixture:
    """Capture gregorian debug events, which are silent by default."""
    caplog.set_level(logging.DEBUG, logger=LOGGER_NAME)
    return caplog
