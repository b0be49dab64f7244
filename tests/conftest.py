"""
Shared test fixtures for matrix-format tests.

The default number format follows the process locale, so every test runs
with the locale pinned to ``en_US`` to keep expected text stable.
"""

import pytest

from matrix_format.config import DelimiterConfig


@pytest.fixture(autouse=True)
def _pin_default_locale(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LC_NUMERIC", "en_US")
    monkeypatch.setenv("LANGUAGE", "en_US")


@pytest.fixture
def default_config() -> DelimiterConfig:
    return DelimiterConfig.default()


# ---------------------------------------------------------------------------
# Pytest markers
# ---------------------------------------------------------------------------
def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test (exercises several modules together)",
    )
