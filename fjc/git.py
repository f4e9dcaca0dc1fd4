"""Git collaborator: current branch lookup and commit invocation."""

import logging
import subprocess

from fjc.errors import ErrorKind, FjcError

logger = logging.getLogger(__name__)


def current_branch_name() -> str:
    """Return the checked-out branch name."""
    try:
        result = subprocess.run(
            ["git", "rev-parse", "--abbrev-ref", "HEAD"],
            capture_output=True,
            text=True,
        )
    except OSError as exc:
        raise FjcError(ErrorKind.BRANCH_RESOLUTION_FAILURE, "Error retrieving branch name") from exc

    if result.returncode != 0:
        if "not a git repository" in (result.stderr or "").lower():
            raise FjcError(ErrorKind.NOT_A_REPOSITORY, "The command should run inside a git repository")
        logger.debug("git rev-parse failed: %s", (result.stderr or "").strip())
        raise FjcError(ErrorKind.BRANCH_RESOLUTION_FAILURE, "Error retrieving branch name")

    return result.stdout.strip()


def commit(message: str) -> bool:
    """Run git commit with message, inheriting the terminal's stdio.

    Failures (nothing to commit, hooks rejecting, git missing) are logged and
    swallowed; the return value says whether the commit went through.
    """
    try:
        result = subprocess.run(["git", "commit", "-m", message], check=False)
    except OSError as exc:
        logger.debug("git commit could not be started: %s", exc)
        return False
    if result.returncode != 0:
        logger.debug("git commit exited with %s", result.returncode)
        return False
    return True
