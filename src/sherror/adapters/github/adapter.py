"""
GitHub Adapter - Implements DiscussionPlatformPort for GitHub Discussions.

This is the main entry point for GitHub integration.
"""

import logging
from typing import Any, Optional

from ...core.domain.entities import Discussion, DiscussionCategory, RepositoryInfo
from ...core.exceptions import RemoteProtocolError
from ...core.ports.config_provider import DEFAULT_API_URL
from ...core.ports.discussion_platform import DiscussionPlatformPort
from . import queries
from .client import GitHubGraphQLClient


class GitHubDiscussionsAdapter(DiscussionPlatformPort):
    """
    GitHub implementation of the DiscussionPlatformPort.

    Translates between domain entities and GitHub's GraphQL API.
    """

    CATEGORY_PAGE_SIZE = 25
    DISCUSSION_PAGE_SIZE = 100

    def __init__(
        self,
        token: Optional[str] = None,
        api_url: str = DEFAULT_API_URL,
        timeout: Optional[float] = None,
        client: Optional[GitHubGraphQLClient] = None,
    ):
        """
        Initialize the GitHub adapter.

        Args:
            token: GitHub token (ignored when ``client`` is given)
            api_url: GraphQL endpoint
            timeout: Optional per-request timeout in seconds
            client: Optional pre-built GraphQL client
        """
        self.logger = logging.getLogger("GitHubDiscussionsAdapter")
        self._client = client or GitHubGraphQLClient(
            token=token or "",
            api_url=api_url,
            timeout=timeout,
        )

    # -------------------------------------------------------------------------
    # DiscussionPlatformPort Implementation - Properties
    # -------------------------------------------------------------------------

    @property
    def name(self) -> str:
        return "GitHub"

    # -------------------------------------------------------------------------
    # DiscussionPlatformPort Implementation - Read Operations
    # -------------------------------------------------------------------------

    def get_repository(self, owner: str, name: str) -> Optional[RepositoryInfo]:
        data = self._client.execute(
            queries.REPOSITORY_INFO,
            {"owner": owner, "repo": name, "categories": self.CATEGORY_PAGE_SIZE},
        )
        repository = data.get("repository")
        if not repository:
            return None

        nodes = (repository.get("discussionCategories") or {}).get("nodes") or []
        categories = [
            DiscussionCategory(id=node["id"], name=node["name"])
            for node in nodes
            if node
        ]

        return RepositoryInfo(
            id=repository["id"],
            owner=owner,
            name=name,
            categories=categories,
        )

    def get_discussion(self, owner: str, name: str, number: int) -> Optional[Discussion]:
        data = self._client.execute(
            queries.GET_DISCUSSION,
            {"owner": owner, "repo": name, "number": number},
        )
        node = (data.get("repository") or {}).get("discussion")
        if not node:
            return None
        return self._parse_discussion(node)

    def list_discussions(
        self,
        owner: str,
        name: str,
        category_id: str,
        first: int = DISCUSSION_PAGE_SIZE,
    ) -> list[Discussion]:
        data = self._client.execute(
            queries.LIST_DISCUSSIONS,
            {"owner": owner, "repo": name, "categoryId": category_id, "first": first},
        )
        repository = data.get("repository")
        if not repository:
            return []

        nodes = (repository.get("discussions") or {}).get("nodes") or []
        return [
            self._parse_discussion(node, category_id=category_id)
            for node in nodes
            if node
        ]

    # -------------------------------------------------------------------------
    # DiscussionPlatformPort Implementation - Write Operations
    # -------------------------------------------------------------------------

    def create_discussion(
        self,
        repository_id: str,
        category_id: str,
        title: str,
        body: str,
    ) -> Discussion:
        data = self._client.execute(
            queries.CREATE_DISCUSSION,
            {"repoId": repository_id, "catId": category_id, "title": title, "body": body},
        )
        node = self._mutation_payload(data, "createDiscussion")
        discussion = self._parse_discussion(node, category_id=category_id)

        if not discussion.url:
            raise RemoteProtocolError("createDiscussion returned no discussion URL")

        self.logger.info(f"Created discussion #{discussion.number}: {title}")
        return discussion

    def update_discussion(self, discussion_id: str, title: str, body: str) -> Discussion:
        data = self._client.execute(
            queries.UPDATE_DISCUSSION,
            {"id": discussion_id, "title": title, "body": body},
        )
        node = self._mutation_payload(data, "updateDiscussion")
        discussion = self._parse_discussion(node)
        self.logger.info(f"Updated discussion #{discussion.number}")
        return discussion

    def delete_discussion(self, discussion_id: str) -> None:
        self._client.execute(queries.DELETE_DISCUSSION, {"id": discussion_id})
        self.logger.info(f"Deleted discussion {discussion_id}")

    # -------------------------------------------------------------------------
    # Private Methods
    # -------------------------------------------------------------------------

    def _mutation_payload(self, data: dict[str, Any], mutation: str) -> dict[str, Any]:
        """Extract the discussion node from a mutation response."""
        node = (data.get(mutation) or {}).get("discussion")
        if not node:
            raise RemoteProtocolError(f"{mutation} returned no discussion")
        return node

    def _parse_discussion(
        self,
        node: dict[str, Any],
        category_id: Optional[str] = None,
    ) -> Discussion:
        """Parse a GraphQL discussion node into a Discussion."""
        return Discussion(
            id=node["id"],
            number=int(node.get("number") or 0),
            title=node.get("title") or "",
            body=node.get("body") or "",
            url=node.get("url"),
            category_id=category_id,
        )
