"""
Exceptions - Centralized exception hierarchy.

Every failure an invocation can hit derives from YtStateError, so the CLI
can treat them uniformly while tests still see the specific kind.
"""

from typing import Optional


class YtStateError(Exception):
    """Base class for all ytstate errors."""


class ConfigError(YtStateError):
    """Configuration could not be loaded or is incomplete."""


class IssueTrackerError(YtStateError):
    """Base exception for issue tracker errors."""

    def __init__(
        self,
        message: str,
        issue_key: Optional[str] = None,
        cause: Optional[BaseException] = None,
    ):
        super().__init__(message)
        self.issue_key = issue_key
        self.cause = cause


class TransportError(IssueTrackerError):
    """The request never produced a response (connection, TLS, timeout)."""


class ResponseError(IssueTrackerError):
    """The tracker answered with a status other than 200."""

    def __init__(
        self,
        message: str,
        status_code: int,
        body: str = "",
        issue_key: Optional[str] = None,
    ):
        super().__init__(message, issue_key=issue_key)
        self.status_code = status_code
        self.body = body


class AuthenticationError(ResponseError):
    """The bearer token was rejected."""


class ResponseDecodeError(IssueTrackerError):
    """The response body is not the JSON shape we asked for."""


class NotFoundError(IssueTrackerError):
    """The task token did not resolve to exactly one issue."""

    def __init__(
        self,
        message: str = "Issue not found",
        issue_key: Optional[str] = None,
        match_count: Optional[int] = None,
        cause: Optional[BaseException] = None,
    ):
        super().__init__(message, issue_key=issue_key, cause=cause)
        self.match_count = match_count


class TransitionError(IssueTrackerError):
    """The state update was not accepted."""


__all__ = [
    "YtStateError",
    "ConfigError",
    "IssueTrackerError",
    "TransportError",
    "ResponseError",
    "AuthenticationError",
    "ResponseDecodeError",
    "NotFoundError",
    "TransitionError",
]
