"""
YouTrack Adapter - Implementation of IssueTrackerPort for JetBrains YouTrack.
"""

from .adapter import YouTrackAdapter
from .client import YouTrackApiClient

__all__ = [
    "YouTrackAdapter",
    "YouTrackApiClient",
]
