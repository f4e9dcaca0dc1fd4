"""Resolve the Jira project key and issue id from a branch name or explicit id."""

import re
from collections.abc import Callable

from fjc.errors import ErrorKind, FjcError
from fjc.models import ResolvedIssue


def extract_project(source: str) -> str | None:
    """Return the project key embedded in a branch name or issue id.

    feature/PROJ-123-fix → PROJ
    PROJ-123             → PROJ
    """
    head = source.split("-", 1)[0]
    if "/" in head:
        head = head.rsplit("/", 1)[1]
    return head or None


def extract_issue(source: str, project: str) -> str | None:
    """Return the first ``<project>-<1..4 digits>`` found in source.

    Ticket numbers longer than four digits are truncated: PROJ-12345 → PROJ-1234.
    """
    match = re.search(rf"{re.escape(project)}-\d{{1,4}}", source)
    return match.group(0) if match else None


def resolve_issue(explicit_issue_id: str | None, branch_getter: Callable[[], str]) -> ResolvedIssue:
    """Resolve from the explicit id when given, otherwise from the current branch."""
    if explicit_issue_id:
        source, origin = explicit_issue_id, "issue"
    else:
        source, origin = branch_getter(), "branch"

    project = extract_project(source)
    if not project:
        raise FjcError(ErrorKind.PROJECT_EXTRACTION_FAILURE, f"Couldn't extract project from {origin}")

    return ResolvedIssue(project=project, issue_id=extract_issue(source, project))
