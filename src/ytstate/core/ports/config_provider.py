"""
Config Provider Port - Abstract interface for configuration sources.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Optional


DEFAULT_TIMEOUT = 30.0


@dataclass(frozen=True)
class TrackerConfig:
    """Connection settings for the issue tracker."""

    host: str
    token: str
    project: Optional[str] = None
    prefix: Optional[str] = None
    verify_ssl: bool = True
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self) -> None:
        object.__setattr__(self, "host", self.host.rstrip("/"))


@dataclass(frozen=True)
class AppConfig:
    """Complete configuration for one invocation."""

    tracker: TrackerConfig
    task: str = ""
    new_state: str = ""
    dry_run: bool = False

    # Where the values came from, for log output only
    sources: tuple[str, ...] = field(default_factory=tuple)


class ConfigProviderPort(ABC):
    """Abstract interface for configuration providers."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Get the provider name."""
        ...

    @abstractmethod
    def load(self) -> AppConfig:
        """
        Load the complete configuration.

        Raises:
            ConfigError: If the configuration is missing or invalid
        """
        ...

    @abstractmethod
    def get(self, key: str, default: Any = None) -> Any:
        """Get a single configuration value."""
        ...

    @abstractmethod
    def validate(self) -> list[str]:
        """Return a list of validation errors (empty if valid)."""
        ...
