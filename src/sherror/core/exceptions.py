"""
Exceptions - Centralized exception hierarchy for sherror.

Every failure surfaces to the caller of the triggering operation;
nothing in the package retries or degrades silently.
"""

from typing import Any, Optional


class SherrorError(Exception):
    """Base exception for all sherror errors."""

    def __init__(self, message: str, cause: Optional[Exception] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause


class ConfigurationError(SherrorError):
    """Missing or invalid local configuration (fields, token, git remote)."""
    pass


class NotFoundError(SherrorError):
    """Unknown error code, repository or discussion."""
    pass


class CategoryNotFoundError(NotFoundError):
    """The configured discussion category does not exist remotely."""

    def __init__(self, category_name: str, repository: str, available: list[str]):
        self.category_name = category_name
        self.repository = repository
        self.available = list(available)

        listing = "\n".join(f"  - {name}" for name in self.available) or "  (none)"
        super().__init__(
            f'Discussion category "{category_name}" not found in {repository}.\n'
            f"\n"
            f"Available categories:\n"
            f"{listing}\n"
            f"\n"
            f"Categories cannot be created through the API. To fix this:\n"
            f"  1. Open the repository settings on GitHub and enable Discussions\n"
            f'  2. Create a discussion category named "{category_name}"\n'
            f"  3. Run the sync again"
        )


class ValidationError(SherrorError):
    """An error definition is malformed (e.g. missing post title or body)."""

    def __init__(self, message: str, code: Optional[int] = None, index: Optional[int] = None):
        super().__init__(message)
        self.code = code
        self.index = index


class StructuralError(SherrorError):
    """The configuration artifact does not have the expected shape."""
    pass


class RemoteProtocolError(SherrorError):
    """Non-success HTTP response or GraphQL errors from the platform."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        errors: Optional[list[Any]] = None,
        cause: Optional[Exception] = None,
    ):
        super().__init__(message, cause=cause)
        self.status_code = status_code
        self.errors = errors or []


class AuthenticationError(RemoteProtocolError):
    """The platform rejected the token."""
    pass


__all__ = [
    "SherrorError",
    "ConfigurationError",
    "NotFoundError",
    "CategoryNotFoundError",
    "ValidationError",
    "StructuralError",
    "RemoteProtocolError",
    "AuthenticationError",
]
