"""Root pytest configuration.

Test Structure:
    tests/
    ├── unit/              # Fast, isolated tests (mocks, no database)
    │   ├── portier_auth/
    │   ├── domain/
    │   ├── application/
    │   ├── client/
    │   └── presentation/
    └── integration/       # SQLite-backed persistence and API tests
        ├── persistence/
        └── api/
"""

import pytest

from portier_config import clear_settings_cache

TEST_JWT_SECRET = "test-jwt-secret-for-testing-only"  # NOQA: S105


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: Tests that verify database/persistence behavior",
    )


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch, tmp_path):
    """Give every test fresh settings and its own session file."""
    monkeypatch.setenv("JWT_SECRET_KEY", TEST_JWT_SECRET)
    monkeypatch.setenv("CLIENT_SESSION_FILE", str(tmp_path / "session.json"))
    clear_settings_cache()
    yield
    clear_settings_cache()
