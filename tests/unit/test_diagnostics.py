r"""Unit tests for the default warning sink."""

from __future__ import annotations

import logging

import pytest

from arcedit.diagnostics import warn


def test_warn_logs_warning(caplog: pytest.LogCaptureFixture) -> None:
    """Test that warn logs the message at WARNING level."""
    with caplog.at_level(logging.WARNING, logger="arcedit.diagnostics"):
        warn("deprecated")

    assert [(r.name, r.levelno, r.getMessage()) for r in caplog.records] == [
        ("arcedit.diagnostics", logging.WARNING, "deprecated")
    ]
