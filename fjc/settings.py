"""Settings resolution and the persisted user config file."""

import errno
import logging
import os
import sys
from collections.abc import Callable
from pathlib import Path

from pydantic import SecretStr, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from fjc.errors import ErrorKind, FjcError
from fjc.models import Config

logger = logging.getLogger(__name__)

CONFIG_FOLDER_NAME = "FastJiraCommit"
CONFIG_FILE_NAME = "config.json"

Prompt = Callable[[str], str]


class FjcSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="FJC_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    config_dir: Path | None = None  # overrides the per-user location

    # Take precedence over config.json and are never written back
    api_key: SecretStr | None = None
    jira_api_url: str | None = None

    timeout: float = 30.0  # seconds, Jira search request
    log_level: str = "WARNING"


def config_dir(settings: FjcSettings) -> Path:
    """Return the per-user configuration folder.

    %APPDATA%\\FastJiraCommit on Windows, ~/FastJiraCommit elsewhere.
    """
    if settings.config_dir:
        return settings.config_dir.expanduser()
    if sys.platform == "win32" and os.environ.get("APPDATA"):
        return Path(os.environ["APPDATA"]) / CONFIG_FOLDER_NAME
    return Path.home() / CONFIG_FOLDER_NAME


def config_path(settings: FjcSettings) -> Path:
    return config_dir(settings) / CONFIG_FILE_NAME


def load_config(path: Path) -> Config | None:
    """Read config.json, returning None if it is missing, unreadable or invalid."""
    try:
        return Config.model_validate_json(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, ValidationError) as exc:
        logger.debug("No usable config at %s: %s", path, exc)
        return None


def save_config(path: Path, config: Config) -> bool:
    """Write apiKey/jiraApiUrl to path. Failures are logged and reported as False."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(config.model_dump_json(by_alias=True, exclude_none=True), encoding="utf-8")
    except OSError as exc:
        logger.warning("Could not write config to %s: %s", path, exc)
        return False
    return True


def delete_config(path: Path) -> None:
    """Remove config.json. A missing file counts as success."""
    try:
        path.unlink()
    except OSError as exc:
        if exc.errno == errno.ENOENT:
            return
        raise FjcError(ErrorKind.CONFIG_DELETE_FAILURE, f"Could not delete config {path}: {exc}") from exc


_REQUIRED_FIELDS = (
    ("api_key", "Provide API_KEY : ", "INVALID API_KEY"),
    ("jira_api_url", "Provide API URL : ", "INVALID URL"),
)


def fill_config(config: Config, prompt: Prompt) -> tuple[Config, dict[str, str]]:
    """Prompt for every required field missing from config.

    Returns the completed config and the answers collected, keyed by field name.
    An empty answer raises before anything is written.
    """
    answers: dict[str, str] = {}
    for field, question, invalid in _REQUIRED_FIELDS:
        if getattr(config, field):
            continue
        answer = (prompt(question) or "").strip()
        if not answer:
            raise FjcError(ErrorKind.INVALID_USER_INPUT, invalid)
        answers[field] = answer

    if not answers:
        return config, answers
    return config.model_copy(update=answers), answers


def apply_env_overrides(config: Config, settings: FjcSettings) -> Config:
    """Overlay FJC_API_KEY / FJC_JIRA_API_URL on top of the stored config."""
    overrides: dict[str, str] = {}
    if settings.api_key:
        overrides["api_key"] = settings.api_key.get_secret_value()
    if settings.jira_api_url:
        overrides["jira_api_url"] = settings.jira_api_url
    return config.model_copy(update=overrides) if overrides else config
