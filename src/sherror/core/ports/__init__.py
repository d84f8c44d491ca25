"""
Ports - Abstract interfaces for external dependencies.

Ports define the contracts that adapters must implement.
This enables dependency inversion and easy testing.
"""

from .discussion_platform import DiscussionPlatformPort
from .repository_locator import RepositoryLocatorPort
from .config_writer import ConfigWriterPort
from .config_provider import ConfigProviderPort, ClientSettings, DEFAULT_API_URL

__all__ = [
    "DiscussionPlatformPort",
    "RepositoryLocatorPort",
    "ConfigWriterPort",
    "ConfigProviderPort",
    "ClientSettings",
    "DEFAULT_API_URL",
]
