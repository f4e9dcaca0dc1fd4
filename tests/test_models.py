"""Tests for fjc.models."""

from pathlib import Path

import pytest

from fjc.models import Config, Options, ResolvedIssue, RunState, TicketSummary


def test_ticket_frozen(ticket: TicketSummary) -> None:
    with pytest.raises(Exception):  # ValidationError or TypeError depending on pydantic version
        ticket.title = "changed"  # type: ignore[misc]


def test_options_defaults() -> None:
    options = Options()
    assert options.commit_message_suffix is None
    assert options.delete_config is False
    assert options.explicit_issue_id is None


def test_config_accepts_json_aliases() -> None:
    config = Config.model_validate({"apiKey": "k", "jiraApiUrl": "u"})
    assert config.api_key == "k"
    assert config.jira_api_url == "u"


def test_config_ignores_unknown_fields() -> None:
    config = Config.model_validate({"apiKey": "k", "project": "PROJ"})
    assert config.model_dump(by_alias=True, exclude_none=True) == {"apiKey": "k"}


def test_resolved_issue_without_match() -> None:
    assert ResolvedIssue(project="PROJ").issue_id is None


def test_run_state_copy_leaves_original(tmp_path: Path) -> None:
    state = RunState(options=Options(), config_path=tmp_path / "config.json")
    updated = state.model_copy(update={"config": Config(api_key="k")})
    assert state.config.api_key is None
    assert updated.config.api_key == "k"
