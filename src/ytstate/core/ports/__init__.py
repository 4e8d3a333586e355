"""
Ports - Abstract interfaces for external dependencies.

Ports define the contracts that adapters must implement.
This enables dependency inversion and easy testing.
"""

from .issue_tracker import IssueTrackerPort, IssueData
from .config_provider import ConfigProviderPort, AppConfig, TrackerConfig

__all__ = [
    "IssueTrackerPort",
    "IssueData",
    "ConfigProviderPort",
    "AppConfig",
    "TrackerConfig",
]
