"""Pytest configuration for jsscope tests."""

import logging
import signal
import sys

import pytest

from jsscope import ScopeResolver


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "timeout(seconds): set custom timeout for test")


def timeout_handler(signum, frame):
    """Handle timeout signal."""
    pytest.fail("Test timed out")


@pytest.fixture(autouse=True)
def test_timeout(request):
    """Apply a timeout to all tests.

    Resolution is a single pass, so anything slower than a few seconds is
    a runaway walk. Tests can allow more with @pytest.mark.timeout(30).
    """
    if sys.platform == "win32":
        yield
        return
    marker = request.node.get_closest_marker("timeout")
    timeout_seconds = marker.args[0] if marker else 5

    # Unix only
    old_handler = signal.signal(signal.SIGALRM, timeout_handler)
    signal.alarm(timeout_seconds)
    yield
    signal.alarm(0)
    signal.signal(signal.SIGALRM, old_handler)


@pytest.fixture(autouse=True)
def debug_logging(caplog):
    """Run every test with resolver debug logging enabled."""
    caplog.set_level(logging.DEBUG, logger="jsscope")


@pytest.fixture
def resolver():
    """A resolver with the default environment globals."""
    return ScopeResolver()
