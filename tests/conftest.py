"""
Pytest configuration and shared fixtures.

Adds the project root to the Python path so tests can import `common`,
`controllers` and `models` the same way the Streamlit app does.
"""

import sys
from datetime import datetime
from pathlib import Path

import pytest

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from common.auth import AuthSimulator, CredentialStore  # noqa: E402
from common.catalog import build_sample_games  # noqa: E402


@pytest.fixture
def today() -> datetime:
    return datetime(2025, 3, 1, 12, 0, 0)


@pytest.fixture
def sample_games(today):
    return build_sample_games(today)


@pytest.fixture
def store() -> CredentialStore:
    """A fresh store holding only the demo account."""
    return CredentialStore()


@pytest.fixture
def auth(store) -> AuthSimulator:
    return AuthSimulator(store)
