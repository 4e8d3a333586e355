"""
Issue Tracker Port - Abstract interface for issue trackers.

The application layer only talks to this interface; the YouTrack
adapter is the concrete implementation.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class IssueData:
    """Minimal projection of a tracker issue."""

    id: str
    id_readable: Optional[str] = None
    summary: Optional[str] = None

    @classmethod
    def from_api(cls, data: Any) -> "IssueData":
        """Build from one record of a search response. Unknown fields are ignored."""
        if not isinstance(data, dict) or not data.get("id"):
            raise ValueError(f"Issue record without an id: {data!r}")
        return cls(
            id=str(data["id"]),
            id_readable=data.get("idReadable"),
            summary=data.get("summary"),
        )


class IssueTrackerPort(ABC):
    """
    Abstract interface for issue tracker operations.

    Implementations raise subclasses of IssueTrackerError on failure.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Get the tracker name (e.g., 'YouTrack')."""
        ...

    @abstractmethod
    def resolve_issue(self, task: str) -> str:
        """
        Resolve a task token to the tracker's issue identifier.

        Args:
            task: Short task reference (e.g., '42')

        Returns:
            Identifier of the single matching issue

        Raises:
            NotFoundError: If zero or several issues match, or the search fails
        """
        ...

    @abstractmethod
    def set_issue_state(self, issue_id: str, new_state: str) -> None:
        """
        Set the State field of an issue.

        Raises:
            TransitionError: If the tracker does not accept the update
        """
        ...
