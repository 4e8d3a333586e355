"""
Application Layer - Use cases built on the ports.

This layer contains:
- commands/: Individual operations (ResolveIssue, SetIssueState, ChangeState)
"""

from .commands import (
    Command,
    CommandResult,
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
