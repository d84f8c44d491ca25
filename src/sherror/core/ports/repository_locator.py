"""
Repository Locator Port - Find which remote repository the local checkout belongs to.
"""

from abc import ABC, abstractmethod

from ..domain.entities import RepositoryRef


class RepositoryLocatorPort(ABC):
    """Abstract interface for resolving the remote repository owner/name."""

    @abstractmethod
    def locate(self) -> RepositoryRef:
        """
        Resolve the remote repository.

        Raises:
            ConfigurationError: If the remote cannot be determined or parsed
        """
        ...
