"""Shared pydantic models — the contract between providers, settings and main.py."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class Options(BaseModel):
    """Parsed command-line flags."""

    model_config = ConfigDict(frozen=True)

    commit_message_suffix: str | None = None  # -m<text>, "" when the flag has no payload
    delete_config: bool = False  # -r
    explicit_issue_id: str | None = None  # -i<text>


class Config(BaseModel):
    """User configuration persisted as config.json.

    Only apiKey and jiraApiUrl are part of the file format; anything else found
    in the file is ignored on load and dropped on the next write.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    api_key: str | None = Field(default=None, alias="apiKey")
    jira_api_url: str | None = Field(default=None, alias="jiraApiUrl")


class TicketSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    project_component_name: str  # first component, spaces replaced by hyphens
    key: str  # PROJ-123
    title: str  # raw summary, untrimmed


class ResolvedIssue(BaseModel):
    model_config = ConfigDict(frozen=True)

    project: str
    issue_id: str | None = None  # None when nothing in the source matched


class RunState(BaseModel):
    """State threaded through the pipeline; each stage returns a new copy."""

    model_config = ConfigDict(frozen=True)

    options: Options
    config_path: Path
    config: Config = Config()
