"""
Commands - Individual operations that can be executed.

Commands wrap tracker calls so that they can be:
- Validated before any request is sent
- Executed, or previewed in dry-run mode
- Reported as a uniform CommandResult
"""

from .base import Command, CommandResult
from .issue_commands import (
    ResolveIssueCommand,
    SetIssueStateCommand,
    ChangeStateCommand,
)

__all__ = [
    "Command",
    "CommandResult",
    "ResolveIssueCommand",
    "SetIssueStateCommand",
    "ChangeStateCommand",
]
