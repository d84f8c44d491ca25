"""
Adapters - Concrete implementations of ports.

This module contains implementations for:
- Discussion platforms: GitHub Discussions
- Repository discovery: git remotes
- Config: Environment variables, TOML artifact loading and writeback
- Formatters: ANSI styling of app messages
"""

from .github import GitHubDiscussionsAdapter, GitHubGraphQLClient
from .git import GitRemoteLocator, parse_git_remote
from .config import EnvironmentConfigProvider, TomlConfigWriter, load_config
from .formatters import colorize

__all__ = [
    "GitHubDiscussionsAdapter",
    "GitHubGraphQLClient",
    "GitRemoteLocator",
    "parse_git_remote",
    "EnvironmentConfigProvider",
    "TomlConfigWriter",
    "load_config",
    "colorize",
]
