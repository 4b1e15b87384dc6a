"""pytest configuration and shared fixtures."""

import pytest

from dynval import ConversionRegistry, init


@pytest.fixture(autouse=True)
def restore_builtins():
    """Re-register built-ins on the process-wide registry after each test."""
    yield
    init()


@pytest.fixture
def request_context():
    """A request-shaped context as a binding layer would pass it."""
    return {
        "request": {
            "ip": "10.0.0.7",
            "method": "GET",
            "query": {"limit": "25", "verbose": "false"},
            "headers": {"x-debug": "1"},
        },
        "defaults": {"limit": 10},
    }


@pytest.fixture
def empty_registry():
    """Registry with no converters."""
    return ConversionRegistry()
