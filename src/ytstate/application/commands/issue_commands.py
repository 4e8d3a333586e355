"""
Issue Commands - Resolve an issue and change its state.
"""

from typing import Optional

from ...core.ports.issue_tracker import IssueTrackerPort
from .base import Command, CommandResult


class ResolveIssueCommand(Command):
    """Resolve a task token to the tracker's issue identifier."""

    def __init__(self, tracker: IssueTrackerPort, task: str):
        super().__init__()
        self.tracker = tracker
        self.task = task

    def validate(self) -> Optional[str]:
        if not self.task or not self.task.strip():
            return "Task is required"
        return None

    def _execute(self) -> CommandResult:
        return CommandResult.ok(self.tracker.resolve_issue(self.task.strip()))


class SetIssueStateCommand(Command):
    """Set the State field of an already resolved issue."""

    def __init__(
        self,
        tracker: IssueTrackerPort,
        issue_id: str,
        new_state: str,
        dry_run: bool = False,
    ):
        super().__init__(dry_run=dry_run)
        self.tracker = tracker
        self.issue_id = issue_id
        self.new_state = new_state

    def validate(self) -> Optional[str]:
        if not self.issue_id:
            return "Issue id is required"
        if not self.new_state:
            return "New state is required"
        return None

    def _execute(self) -> CommandResult:
        if self.dry_run:
            self.logger.info(
                f"[DRY-RUN] Would set {self.issue_id} state to {self.new_state!r}"
            )
            return CommandResult.ok(self.issue_id, dry_run=True)

        self.tracker.set_issue_state(self.issue_id, self.new_state)
        return CommandResult.ok(self.issue_id)


class ChangeStateCommand(Command):
    """Resolve a task token, then move the issue to a new state."""

    def __init__(
        self,
        tracker: IssueTrackerPort,
        task: str,
        new_state: str,
        dry_run: bool = False,
    ):
        super().__init__(dry_run=dry_run)
        self.tracker = tracker
        self.task = task
        self.new_state = new_state

    def validate(self) -> Optional[str]:
        if not self.new_state:
            return "New state is required"
        return None

    def _execute(self) -> CommandResult:
        resolved = ResolveIssueCommand(self.tracker, self.task).execute()
        if not resolved.success:
            return resolved

        return SetIssueStateCommand(
            self.tracker,
            issue_id=resolved.data,
            new_state=self.new_state,
            dry_run=self.dry_run,
        ).execute()
