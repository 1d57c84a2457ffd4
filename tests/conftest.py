"""
Pytest configuration shared by the unit and UI tests.
"""
import pytest

from portfolio.local_storage import BrowserStorage, SessionFlag
from portfolio.mock_api import MockApi
from portfolio.seed import initial_profile


@pytest.fixture(autouse=True)
def fast_config(monkeypatch):
    """No simulated latency and no log file."""
    monkeypatch.setenv("PORTFOLIO_API_DELAY", "0")
    monkeypatch.delenv("PORTFOLIO_LOG_FILE", raising=False)


@pytest.fixture
def storage():
    return BrowserStorage()


@pytest.fixture
def session_flag(storage):
    return SessionFlag(storage)


@pytest.fixture
def api():
    return MockApi(delay=0)


@pytest.fixture
def profile():
    return initial_profile()
