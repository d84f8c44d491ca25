"""
GitHub Adapter - Implementation of DiscussionPlatformPort for GitHub Discussions.
"""

from .adapter import GitHubDiscussionsAdapter
from .client import GitHubGraphQLClient

__all__ = [
    "GitHubDiscussionsAdapter",
    "GitHubGraphQLClient",
]
