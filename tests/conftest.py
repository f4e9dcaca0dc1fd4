"""Shared test fixtures."""

import pytest

from fjc.models import Config, TicketSummary


@pytest.fixture(autouse=True)
def clear_fjc_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's FJC_* environment out of the tests."""
    for name in ("FJC_CONFIG_DIR", "FJC_API_KEY", "FJC_JIRA_API_URL", "FJC_TIMEOUT", "FJC_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def full_config() -> Config:
    return Config(api_key="secret-token", jira_api_url="https://jira.example.com/rest/api/2")


@pytest.fixture
def ticket() -> TicketSummary:
    return TicketSummary(project_component_name="Billing", key="PROJ-123", title=" Fix bug ")
