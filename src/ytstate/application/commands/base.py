"""
Command Base - Shared plumbing for executable operations.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional

from ...core.exceptions import YtStateError


@dataclass
class CommandResult:
    """Result of executing a command."""

    success: bool = True
    data: Any = None
    error: Optional[str] = None
    exception: Optional[YtStateError] = None
    dry_run: bool = False

    @classmethod
    def ok(cls, data: Any = None, dry_run: bool = False) -> "CommandResult":
        return cls(success=True, data=data, dry_run=dry_run)

    @classmethod
    def fail(
        cls,
        error: str,
        exception: Optional[YtStateError] = None,
    ) -> "CommandResult":
        return cls(success=False, error=error, exception=exception)


class Command(ABC):
    """
    Base class for commands.

    Subclasses implement validate() and _execute(); execute() runs them and
    turns tracker errors into a failed CommandResult.
    """

    def __init__(self, dry_run: bool = False):
        self.dry_run = dry_run
        self.logger = logging.getLogger(self.__class__.__name__)

    @property
    def name(self) -> str:
        return self.__class__.__name__

    def validate(self) -> Optional[str]:
        """Return an error message if the command cannot run."""
        return None

    def execute(self) -> CommandResult:
        error = self.validate()
        if error:
            return CommandResult.fail(error)

        try:
            return self._execute()
        except YtStateError as e:
            self.logger.debug(f"{self.name} failed: {e!r}")
            return CommandResult.fail(str(e), exception=e)

    @abstractmethod
    def _execute(self) -> CommandResult:
        ...
