"""
Adapters - Concrete implementations of ports.

This module contains implementations for:
- Issue Trackers: YouTrack
- Config: YAML file, environment variables, CLI overrides
"""

from .youtrack import YouTrackAdapter, YouTrackApiClient
from .config import YamlConfigProvider

__all__ = [
    "YouTrackAdapter",
    "YouTrackApiClient",
    "YamlConfigProvider",
]
