"""
Exit Codes - Process exit statuses of the ytstate CLI.

Every failure exits with the same status; the log line tells them apart.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Process exit codes."""

    SUCCESS = 0
    ERROR = 200
