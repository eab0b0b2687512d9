import os
import pytest

DEFAULT_MOCK_MONITOR_URL = "http://localhost:9090"


def pytest_addoption(parser):
    parser.addoption(
        "--mock-monitor-url",
        default=None,
        help="base URL of a running mock monitor; enables integration tests",
    )


def pytest_configure(config):
    config.addinivalue_line("markers", "integration: needs a mock monitor listening on --mock-monitor-url")


def _integration_enabled(config) -> bool:
    if config.getoption("--mock-monitor-url"):
        return True
    if os.getenv("RUN_INTEGRATION") == "1":
        return True
    return "integration" in (getattr(config.option, "markexpr", "") or "")


def pytest_collection_modifyitems(config, items):
    if _integration_enabled(config):
        return
    skip = pytest.mark.skip(reason="no live mock monitor; pass --mock-monitor-url or set RUN_INTEGRATION=1")
    for item in items:
        if item.get_closest_marker("integration"):
            item.add_marker(skip)


@pytest.fixture(scope="session")
def mock_monitor_url(pytestconfig) -> str:
    return (
        pytestconfig.getoption("--mock-monitor-url")
        or os.getenv("MOCK_MONITOR_URL")
        or DEFAULT_MOCK_MONITOR_URL
    )
