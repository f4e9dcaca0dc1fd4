"""fjc CLI — build a commit message from the Jira ticket behind the current branch."""

import logging
from collections.abc import Callable

import typer
from pydantic import ValidationError
from rich import print as rprint
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from fjc.errors import ErrorKind, FjcError
from fjc.git import commit as git_commit
from fjc.git import current_branch_name
from fjc.models import Config, Options, RunState, TicketSummary
from fjc.providers.base import TicketProvider
from fjc.providers.jira import JiraProvider
from fjc.resolver import resolve_issue
from fjc.settings import (
    FjcSettings,
    Prompt,
    apply_env_overrides,
    config_path,
    delete_config,
    fill_config,
    load_config,
    save_config,
)

app = typer.Typer(
    help="fast-jira-commit: commit with a message built from the branch's Jira ticket",
    add_completion=False,
)

# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------


def parse_options(args: list[str]) -> Options:
    """Parse -m<text>, -r and -i<text>. Unknown tokens are ignored, the last occurrence wins."""
    values: dict = {}
    for arg in args:
        if arg.startswith("-m"):
            values["commit_message_suffix"] = arg[2:]
        if arg.startswith("-r"):
            values["delete_config"] = True
        if arg.startswith("-i"):
            values["explicit_issue_id"] = arg[2:]
    return Options(**values)


# ---------------------------------------------------------------------------
# Provider factory
# ---------------------------------------------------------------------------


def get_provider(config: Config, settings: FjcSettings) -> TicketProvider:
    return JiraProvider(config.jira_api_url or "", config.api_key or "", timeout=settings.timeout)


# ---------------------------------------------------------------------------
# Commit message
# ---------------------------------------------------------------------------


def format_commit_message(ticket: TicketSummary) -> str:
    """[Billing][PROJ-123]: Fix bug"""
    return f"[{ticket.project_component_name}][{ticket.key}]: {ticket.title.strip()}"


def append_suffix(message: str, suffix: str | None) -> str:
    # An empty -m still appends the separator.
    if suffix is None:
        return message
    return f"{message} - {suffix}"


def confirm_and_commit(message: str, prompt: Prompt, committer: Callable[[str], bool]) -> bool:
    """Show the message, ask for confirmation and commit on "y"."""
    rprint(f"[bold yellow]Commit message:[/bold yellow] {escape(message)}")
    answer = prompt("Submit your commit? (Y/N) ")
    if (answer or "").strip().lower() != "y":
        rprint("[red]EXIT without commit[/red]")
        return False
    committer(message)
    return True


# ---------------------------------------------------------------------------
# Pipeline
# ---------------------------------------------------------------------------


def _load_state(options: Options, settings: FjcSettings) -> RunState:
    path = config_path(settings)
    if options.delete_config:
        delete_config(path)
    return RunState(options=options, config_path=path, config=load_config(path) or Config())


def _complete_config(state: RunState, prompt: Prompt, settings: FjcSettings) -> RunState:
    """Fill missing credentials, persisting only what the user typed in."""
    effective = apply_env_overrides(state.config, settings)
    filled, answers = fill_config(effective, prompt)
    if answers:
        save_config(state.config_path, state.config.model_copy(update=answers))
    return state.model_copy(update={"config": filled})


def run(options: Options, prompt: Prompt, settings: FjcSettings) -> bool:
    """Run the whole flow. Returns True when a commit was attempted."""
    state = _load_state(options, settings)
    state = _complete_config(state, prompt, settings)

    resolved = resolve_issue(state.options.explicit_issue_id, current_branch_name)
    if resolved.issue_id is None:
        rprint(
            "[red]ERROR[/red] : Couldn't find any jira issue related to the project: "
            f"[yellow]{escape(resolved.project)}[/yellow]"
        )
        return False

    provider = get_provider(state.config, settings)
    ticket = provider.get_ticket(resolved.project, resolved.issue_id)
    message = append_suffix(format_commit_message(ticket), state.options.commit_message_suffix)
    return confirm_and_commit(message, prompt, git_commit)


# ---------------------------------------------------------------------------
# Command
# ---------------------------------------------------------------------------


def _terminal_prompt(message: str) -> str:
    # default="" so an empty answer comes back instead of re-prompting
    return typer.prompt(typer.style(message, fg=typer.colors.YELLOW), default="", show_default=False, prompt_suffix="")


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_time=False, show_path=False)],
    )


@app.command(context_settings={"allow_extra_args": True, "ignore_unknown_options": True})
def main(ctx: typer.Context) -> None:
    """Commit with a message built from the Jira ticket of the current branch.

    \b
    -m<text>  append " - <text>" to the commit message
    -r        delete the saved configuration and ask for it again
    -i<id>    use this Jira issue instead of the current branch
    """
    try:
        settings = FjcSettings()
    except ValidationError as exc:
        typer.echo(f"Invalid FJC_* settings in the environment or .env:\n{exc}")
        raise typer.Exit(1) from exc
    _configure_logging(settings.log_level)
    options = parse_options(ctx.args)
    try:
        run(options, _terminal_prompt, settings)
    except FjcError as exc:
        rprint(f"[red]{escape('[ERROR]: ' + exc.message)}[/red]")
        if exc.kind is ErrorKind.AUTHENTICATION_SUSPECTED:
            rprint("[dim]Run again with -r to enter a new API key.[/dim]")
        raise typer.Exit(exc.kind.exit_code) from exc
