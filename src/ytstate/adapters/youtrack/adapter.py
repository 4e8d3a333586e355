"""
YouTrack Adapter - Implements IssueTrackerPort for JetBrains YouTrack.

This is the main entry point for YouTrack integration.
"""

import logging
from typing import Any, Optional
from urllib.parse import quote

from ...core.exceptions import (
    NotFoundError,
    ResponseDecodeError,
    ResponseError,
    TransitionError,
)
from ...core.ports.issue_tracker import IssueData, IssueTrackerPort
from ...core.ports.config_provider import TrackerConfig
from .client import YouTrackApiClient


class YouTrackAdapter(IssueTrackerPort):
    """
    YouTrack implementation of the IssueTrackerPort.

    Resolves task tokens through the issue search and changes state by
    posting a partial update of the State custom field.
    """

    # Fields requested from the search endpoint
    SEARCH_FIELDS = "idReadable,id,summary"

    # Fields returned by the update endpoint (not inspected)
    UPDATE_FIELDS = "customFields(id,name,value(name))"

    STATE_FIELD = "State"
    STATE_FIELD_TYPE = "StateIssueCustomField"

    def __init__(
        self,
        config: TrackerConfig,
        client: Optional[YouTrackApiClient] = None,
    ):
        """
        Initialize the YouTrack adapter.

        Args:
            config: Tracker configuration
            client: Optional pre-built API client
        """
        self.config = config
        self.logger = logging.getLogger("YouTrackAdapter")

        self._client = client or YouTrackApiClient(
            base_url=config.host,
            token=config.token,
            verify_ssl=config.verify_ssl,
            timeout=config.timeout,
        )

    def __enter__(self) -> "YouTrackAdapter":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    @property
    def name(self) -> str:
        return "YouTrack"

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def build_query(self, task: str) -> str:
        """Build the search query for a task token."""
        prefix = self.config.prefix
        if prefix and task.startswith(prefix) and len(task) > len(prefix):
            task = task[len(prefix):]

        if self.config.project:
            return f"project:{self.config.project} #{task}"
        return f"#{task}"

    def search_issues(self, query: str) -> list[IssueData]:
        """Run a search and decode every returned record."""
        data = self._client.get(
            "issues/",
            params={"fields": self.SEARCH_FIELDS, "query": query},
        )

        if not isinstance(data, list):
            raise ResponseDecodeError(
                f"Expected a list of issues, got {type(data).__name__}"
            )

        try:
            return [IssueData.from_api(item) for item in data]
        except ValueError as e:
            raise ResponseDecodeError(str(e), cause=e)

    def resolve_issue(self, task: str) -> str:
        query = self.build_query(task)
        self.logger.debug(f"Searching for {query!r}")

        try:
            issues = self.search_issues(query)
        except ResponseError as e:
            raise NotFoundError(issue_key=task, cause=e)

        if len(issues) != 1:
            self.logger.debug(f"{len(issues)} issues match {query!r}")
            raise NotFoundError(issue_key=task, match_count=len(issues))

        issue = issues[0]
        self.logger.info(
            f"Resolved task {task} to {issue.id_readable or issue.id} ({issue.id})"
        )
        return issue.id

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    def build_state_payload(self, new_state: str) -> dict[str, Any]:
        """Build the partial update that sets the State field."""
        return {
            "customFields": [
                {
                    "name": self.STATE_FIELD,
                    "$type": self.STATE_FIELD_TYPE,
                    "value": {"name": new_state},
                }
            ]
        }

    def set_issue_state(self, issue_id: str, new_state: str) -> None:
        try:
            self._client.post(
                f"issues/{quote(issue_id, safe='')}",
                json=self.build_state_payload(new_state),
                params={"fields": self.UPDATE_FIELDS},
                decode=False,
            )
        except ResponseError as e:
            raise TransitionError(
                f"Failed to set {issue_id} to {new_state!r}: HTTP {e.status_code}",
                issue_key=issue_id,
                cause=e,
            )

        self.logger.info(f"Set {issue_id} state to {new_state!r}")
