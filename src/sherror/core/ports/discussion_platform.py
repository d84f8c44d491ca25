"""
Discussion Platform Port - Abstract interface for the remote discussion host.
"""

from abc import ABC, abstractmethod
from typing import Optional

from ..domain.entities import Discussion, RepositoryInfo


class DiscussionPlatformPort(ABC):
    """
    Abstract interface for a platform hosting discussion threads.

    Read operations return ``None`` when the platform reports the object as
    missing; transport and protocol failures raise ``RemoteProtocolError``.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Get the platform name."""
        ...

    # -------------------------------------------------------------------------
    # Read Operations
    # -------------------------------------------------------------------------

    @abstractmethod
    def get_repository(self, owner: str, name: str) -> Optional[RepositoryInfo]:
        """Fetch the repository id and its discussion categories."""
        ...

    @abstractmethod
    def get_discussion(self, owner: str, name: str, number: int) -> Optional[Discussion]:
        """Fetch a single discussion by its number."""
        ...

    @abstractmethod
    def list_discussions(
        self,
        owner: str,
        name: str,
        category_id: str,
        first: int = 100,
    ) -> list[Discussion]:
        """List up to ``first`` discussions in a category."""
        ...

    # -------------------------------------------------------------------------
    # Write Operations
    # -------------------------------------------------------------------------

    @abstractmethod
    def create_discussion(
        self,
        repository_id: str,
        category_id: str,
        title: str,
        body: str,
    ) -> Discussion:
        """Create a discussion. The returned discussion carries its URL."""
        ...

    @abstractmethod
    def update_discussion(self, discussion_id: str, title: str, body: str) -> Discussion:
        """Replace the title and body of a discussion."""
        ...

    @abstractmethod
    def delete_discussion(self, discussion_id: str) -> None:
        """Delete a discussion."""
        ...
