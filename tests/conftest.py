"""
Global test configuration and fixtures
"""

import time

import pytest

from deplint.config import get_config

SLOW_TEST_THRESHOLD = 1.0


@pytest.fixture(autouse=True)
def track_test_duration(request):
    """Warn about unit tests slower than SLOW_TEST_THRESHOLD."""
    start_time = time.time()

    yield

    duration = time.time() - start_time
    if duration > SLOW_TEST_THRESHOLD:
        print(f"\nSLOW TEST ({duration:.2f}s): {request.node.nodeid}")


@pytest.fixture(autouse=True)
def fresh_config():
    """Drop the cached DepLintConfig so env changes in one test don't leak."""
    get_config.cache_clear()
    yield
    get_config.cache_clear()


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")


def pytest_collection_modifyitems(config, items):
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


def pytest_report_header(config):
    return [f"Slow test threshold: {SLOW_TEST_THRESHOLD}s"]
