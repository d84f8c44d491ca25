"""
GitHub GraphQL Client - Low-level HTTP client for the GitHub GraphQL API.

This handles the raw HTTP communication with GitHub.
The GitHubDiscussionsAdapter uses this to implement the DiscussionPlatformPort.
"""

import logging
from typing import Any, Optional

import requests

from ...core.exceptions import AuthenticationError, RemoteProtocolError
from ...core.ports.config_provider import DEFAULT_API_URL


class GitHubGraphQLClient:
    """
    Low-level GitHub GraphQL client.

    Handles authentication, request/response, and error handling.
    """

    def __init__(
        self,
        token: str,
        api_url: str = DEFAULT_API_URL,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize the GitHub client.

        Args:
            token: GitHub token with discussion read/write access
            api_url: GraphQL endpoint
            timeout: Optional per-request timeout in seconds (no timeout by default)
            session: Optional pre-configured requests session
        """
        self.api_url = api_url
        self.timeout = timeout
        self.logger = logging.getLogger("GitHubGraphQLClient")

        self.headers = {
            "Accept": "application/json",
            "Content-Type": "application/json",
            "Authorization": f"bearer {token}",
        }

        self._session = session or requests.Session()
        self._session.headers.update(self.headers)

    # -------------------------------------------------------------------------
    # Core Request Methods
    # -------------------------------------------------------------------------

    def execute(
        self,
        query: str,
        variables: Optional[dict[str, Any]] = None,
    ) -> dict[str, Any]:
        """
        Execute a GraphQL query or mutation.

        Args:
            query: GraphQL document
            variables: Operation variables

        Returns:
            The ``data`` member of the response

        Raises:
            RemoteProtocolError: On transport, HTTP or GraphQL errors
        """
        payload = {"query": query, "variables": variables or {}}

        try:
            response = self._session.post(self.api_url, json=payload, timeout=self.timeout)
        except requests.exceptions.ConnectionError as e:
            raise RemoteProtocolError(f"Connection failed: {e}", cause=e)
        except requests.exceptions.Timeout as e:
            raise RemoteProtocolError(f"Request timed out: {e}", cause=e)

        return self._handle_response(response)

    # -------------------------------------------------------------------------
    # Response Handling
    # -------------------------------------------------------------------------

    def _handle_response(self, response: requests.Response) -> dict[str, Any]:
        """Handle API response and errors."""
        status = response.status_code

        if not response.ok:
            error_body = response.text[:500] if response.text else ""

            if status == 401:
                raise AuthenticationError(
                    "Authentication failed. Check GITHUB_TOKEN.",
                    status_code=status,
                )

            raise RemoteProtocolError(
                f"GitHub GraphQL error {status}: {error_body}",
                status_code=status,
            )

        try:
            body = response.json()
        except ValueError as e:
            raise RemoteProtocolError(
                f"Invalid JSON in GitHub response: {e}",
                status_code=status,
                cause=e,
            )

        errors = body.get("errors")
        if errors:
            messages = "; ".join(
                str(err.get("message", err)) if isinstance(err, dict) else str(err)
                for err in errors
            )
            raise RemoteProtocolError(
                f"GraphQL errors: {messages}",
                status_code=status,
                errors=errors,
            )

        data = body.get("data")
        self.logger.debug(f"GraphQL response received ({status})")
        return data or {}
