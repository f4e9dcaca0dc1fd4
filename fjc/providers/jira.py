"""Jira REST search provider."""

import logging

import httpx

from fjc.errors import ErrorKind, FjcError
from fjc.models import TicketSummary
from fjc.providers.base import TicketProvider

logger = logging.getLogger(__name__)

REAUTHENTICATE_MESSAGE = "Something went wrong, Maybe you need to re-authenticate with your jira provider..."


def _str_or_none(value: object) -> str | None:
    return value if isinstance(value, str) else None


class JiraProvider(TicketProvider):
    def __init__(self, base_url: str, api_key: str, timeout: float = 30) -> None:
        if not base_url or not api_key:
            raise RuntimeError("base_url and api_key are required")
        self._search_url = f"{base_url.rstrip('/')}/search"
        self._timeout = timeout
        self._headers = {"Authorization": f"Bearer {api_key}"}

    def _search(self, jql: str) -> dict:
        logger.debug("GET %s jql=%r", self._search_url, jql)
        try:
            response = httpx.get(
                self._search_url,
                params={"jql": jql},
                headers=self._headers,
                timeout=self._timeout,
            )
        except httpx.HTTPError as exc:
            raise FjcError(ErrorKind.TRACKER_REQUEST_FAILURE, f"Jira request failed: {exc}") from exc

        # An expired session is answered with the HTML login page instead of JSON.
        if "html" in response.headers.get("Content-Type", "").lower():
            raise FjcError(ErrorKind.AUTHENTICATION_SUSPECTED, REAUTHENTICATE_MESSAGE)
        if response.status_code in (401, 403):
            raise FjcError(
                ErrorKind.AUTHENTICATION_SUSPECTED,
                f"Jira API returned {response.status_code}. {REAUTHENTICATE_MESSAGE}",
            )
        if response.is_error:
            raise FjcError(
                ErrorKind.TRACKER_REQUEST_FAILURE,
                f"Jira API returned {response.status_code} for {self._search_url}",
            )

        try:
            data = response.json()
        except ValueError as exc:
            raise FjcError(ErrorKind.TRACKER_REQUEST_FAILURE, "Jira API returned a non-JSON response") from exc
        return data if isinstance(data, dict) else {}

    def _ticket_from_node(self, node: dict) -> TicketSummary:
        # Unexpected shapes count as absent values.
        fields = node.get("fields")
        if not isinstance(fields, dict):
            fields = {}
        summary = _str_or_none(fields.get("summary"))
        key = _str_or_none(node.get("key"))
        components = fields.get("components")
        first = components[0] if isinstance(components, list) and components else None
        name = _str_or_none(first.get("name")) if isinstance(first, dict) else None
        if name:
            name = "-".join(name.split(" "))

        if not summary:
            raise FjcError(ErrorKind.MISSING_SUMMARY, "Summary is missing...")
        if not key:
            raise FjcError(ErrorKind.MISSING_TICKET_NUMBER, "Ticket number is missing...")
        if not name:
            raise FjcError(ErrorKind.MISSING_PROJECT, "Project is missing...")

        return TicketSummary(project_component_name=name, key=key, title=summary)

    def get_ticket(self, project: str, issue_id: str) -> TicketSummary:
        data = self._search(f"project={project} AND key = {issue_id}")
        issues = data.get("issues")
        if not isinstance(issues, list) or not issues:
            raise FjcError(ErrorKind.NO_ISSUES_FOUND, "No issues found")
        node = issues[0]
        return self._ticket_from_node(node if isinstance(node, dict) else {})
