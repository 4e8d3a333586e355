"""
ytstate - move a YouTrack issue to a new workflow state.

Resolves a short task reference to the tracker's issue identifier and
sets the issue's State custom field through the REST API.
"""

__version__ = "0.1.0"
