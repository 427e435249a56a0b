"""Shared fixtures for utm-lib tests."""

import pytest

from utm_lib.config import UTMConfig, set_config
from utm_lib.core.diagnostics import capture_diagnostics


@pytest.fixture
def diagnostics():
    """Route diagnostics to a fresh collector for the duration of a test."""
    with capture_diagnostics() as collector:
        yield collector


@pytest.fixture
def utm_config():
    """Install a config for one test and restore the previous one afterwards."""
    installed = []

    def _install(**kwargs):
        installed.append(set_config(UTMConfig(**kwargs)))

    yield _install

    if installed:
        set_config(installed[0])
