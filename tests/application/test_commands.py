"""Tests for application commands."""

import pytest
from unittest.mock import Mock

from ytstate.application.commands import (
    CommandResult,
    ResolveIssueCommand,
    SetIssueStateCommand,
    ChangeStateCommand,
)
from ytstate.core.exceptions import NotFoundError, TransitionError, TransportError


class TestCommandResult:
    """Tests for CommandResult."""

    def test_ok(self):
        result = CommandResult.ok("data")
        assert result.success
        assert result.data == "data"
        assert not result.dry_run

    def test_ok_dry_run(self):
        result = CommandResult.ok("data", dry_run=True)
        assert result.success
        assert result.dry_run

    def test_fail(self):
        result = CommandResult.fail("error message")
        assert not result.success
        assert result.error == "error message"


@pytest.fixture
def mock_tracker():
    tracker = Mock()
    tracker.resolve_issue.return_value = "2-42"
    tracker.set_issue_state.return_value = None
    return tracker


class TestResolveIssueCommand:
    """Tests for ResolveIssueCommand."""

    def test_validate_missing_task(self, mock_tracker):
        cmd = ResolveIssueCommand(tracker=mock_tracker, task="  ")
        assert cmd.validate() is not None

    def test_execute(self, mock_tracker):
        result = ResolveIssueCommand(tracker=mock_tracker, task=" 42 ").execute()

        assert result.success
        assert result.data == "2-42"
        mock_tracker.resolve_issue.assert_called_once_with("42")

    def test_not_found(self, mock_tracker):
        error = NotFoundError(issue_key="42", match_count=0)
        mock_tracker.resolve_issue.side_effect = error

        result = ResolveIssueCommand(tracker=mock_tracker, task="42").execute()

        assert not result.success
        assert result.error == "Issue not found"
        assert result.exception is error

    def test_invalid_command_not_executed(self, mock_tracker):
        result = ResolveIssueCommand(tracker=mock_tracker, task="").execute()

        assert not result.success
        mock_tracker.resolve_issue.assert_not_called()


class TestSetIssueStateCommand:
    """Tests for SetIssueStateCommand."""

    def test_validate_missing_state(self, mock_tracker):
        cmd = SetIssueStateCommand(tracker=mock_tracker, issue_id="2-42", new_state="")
        assert cmd.validate() is not None

    def test_validate_missing_issue(self, mock_tracker):
        cmd = SetIssueStateCommand(tracker=mock_tracker, issue_id="", new_state="Fixed")
        assert cmd.validate() is not None

    def test_execute_dry_run(self, mock_tracker):
        cmd = SetIssueStateCommand(
            tracker=mock_tracker,
            issue_id="2-42",
            new_state="Fixed",
            dry_run=True,
        )

        result = cmd.execute()

        assert result.success
        assert result.dry_run
        mock_tracker.set_issue_state.assert_not_called()

    def test_execute_success(self, mock_tracker):
        cmd = SetIssueStateCommand(
            tracker=mock_tracker,
            issue_id="2-42",
            new_state="Fixed",
        )

        result = cmd.execute()

        assert result.success
        mock_tracker.set_issue_state.assert_called_once_with("2-42", "Fixed")

    def test_execute_rejected(self, mock_tracker):
        mock_tracker.set_issue_state.side_effect = TransitionError("rejected")

        result = SetIssueStateCommand(mock_tracker, "2-42", "Bogus").execute()

        assert not result.success
        assert isinstance(result.exception, TransitionError)


class TestChangeStateCommand:
    """Tests for the resolve-then-mutate flow."""

    def test_uses_resolved_id(self, mock_tracker):
        result = ChangeStateCommand(mock_tracker, task="42", new_state="Fixed").execute()

        assert result.success
        assert result.data == "2-42"
        mock_tracker.set_issue_state.assert_called_once_with("2-42", "Fixed")

    def test_stops_when_resolution_fails(self, mock_tracker):
        mock_tracker.resolve_issue.side_effect = NotFoundError(match_count=2)

        result = ChangeStateCommand(mock_tracker, task="42", new_state="Fixed").execute()

        assert not result.success
        mock_tracker.set_issue_state.assert_not_called()

    def test_transport_failure(self, mock_tracker):
        mock_tracker.resolve_issue.side_effect = TransportError("Connection failed")

        result = ChangeStateCommand(mock_tracker, task="42", new_state="Fixed").execute()

        assert not result.success
        assert result.error == "Connection failed"

    def test_dry_run_resolves_only(self, mock_tracker):
        result = ChangeStateCommand(
            mock_tracker, task="42", new_state="Fixed", dry_run=True
        ).execute()

        assert result.success
        assert result.dry_run
        mock_tracker.resolve_issue.assert_called_once_with("42")
        mock_tracker.set_issue_state.assert_not_called()

    def test_missing_state(self, mock_tracker):
        result = ChangeStateCommand(mock_tracker, task="42", new_state="").execute()

        assert not result.success
        mock_tracker.resolve_issue.assert_not_called()
