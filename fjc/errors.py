"""Error kinds raised by fjc components."""

from enum import Enum


class ErrorKind(Enum):
    CONFIG_DELETE_FAILURE = 2
    INVALID_USER_INPUT = 3
    NOT_A_REPOSITORY = 4
    BRANCH_RESOLUTION_FAILURE = 5
    PROJECT_EXTRACTION_FAILURE = 6
    AUTHENTICATION_SUSPECTED = 7
    NO_ISSUES_FOUND = 8
    MISSING_SUMMARY = 9
    MISSING_TICKET_NUMBER = 10
    MISSING_PROJECT = 11
    TRACKER_REQUEST_FAILURE = 12

    @property
    def exit_code(self) -> int:
        return self.value


class FjcError(Exception):
    """Fatal error for the current run. Branch on ``kind``, not on the message."""

    def __init__(self, kind: ErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message
