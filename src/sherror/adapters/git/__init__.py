"""
Git Adapter - Repository discovery from local version-control metadata.
"""

from .remote import GitRemoteLocator, parse_git_remote

__all__ = ["GitRemoteLocator", "parse_git_remote"]
