"""
Domain Entities - Error definitions and the remote objects they map to.
"""

import copy
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Optional
from urllib.parse import urlparse

from ..exceptions import ValidationError


DEFAULT_CONFIG_FILENAME = "sherror.toml"


@dataclass
class ErrorDefinition:
    """
    One declared application error.

    ``discussion_link`` is ``None`` until the error has been synchronized;
    it is a back-reference to the remote discussion, not an ownership link.
    """

    code: int
    app_message: str
    post_title: str = ""
    post_body: str = ""
    discussion_link: Optional[str] = None

    @property
    def is_synced(self) -> bool:
        return bool(self.discussion_link)

    def discussion_number(self) -> int:
        """Extract the discussion number from the trailing path segment of the link."""
        if not self.discussion_link:
            raise ValidationError(
                f"Error {self.code} has no discussion link",
                code=self.code,
            )

        path = urlparse(self.discussion_link).path.rstrip("/")
        segment = path.rsplit("/", 1)[-1]
        if not segment.isdigit():
            raise ValidationError(
                f"Invalid discussion link for error {self.code}: {self.discussion_link}",
                code=self.code,
            )
        return int(segment)

    def to_fields(self) -> dict[str, Any]:
        """Serialize in the fixed field order; the link is omitted when absent."""
        fields: dict[str, Any] = {
            "code": self.code,
            "app_message": self.app_message,
            "post_title": self.post_title,
            "post_body": self.post_body,
        }
        if self.discussion_link:
            fields["discussion_link"] = self.discussion_link
        return fields


@dataclass
class SherrorConfig:
    """
    Aggregate root: the category name plus the ordered error list.

    ``printer`` is a caller-supplied callback and is never persisted.
    ``source_path`` is the artifact the config was loaded from (and is
    written back to).
    """

    category_name: str
    errors: list[ErrorDefinition] = field(default_factory=list)
    printer: Optional[Callable[..., None]] = None
    source_path: Optional[Path] = None

    @property
    def path(self) -> Path:
        return Path(self.source_path) if self.source_path else Path(DEFAULT_CONFIG_FILENAME)

    def validate(self) -> list[str]:
        """Validate configuration. Returns a list of problems (empty if valid)."""
        problems = []

        if not isinstance(self.category_name, str) or not self.category_name.strip():
            problems.append("Missing category_name")

        if not isinstance(self.errors, list):
            problems.append("Missing errors list")
            return problems

        seen: set[int] = set()
        for index, error in enumerate(self.errors):
            if not isinstance(error, ErrorDefinition):
                problems.append(f"errors[{index}] is not an ErrorDefinition")
                continue
            if isinstance(error.code, bool) or not isinstance(error.code, int):
                problems.append(f"errors[{index}] has a non-integer code: {error.code!r}")
                continue
            if error.code in seen:
                problems.append(f"Duplicate error code {error.code} at errors[{index}]")
            seen.add(error.code)

        return problems

    def find(self, code: int) -> Optional[ErrorDefinition]:
        for error in self.errors:
            if error.code == code:
                return error
        return None

    def copy(self) -> "SherrorConfig":
        return SherrorConfig(
            category_name=self.category_name,
            errors=copy.deepcopy(self.errors),
            printer=self.printer,
            source_path=self.source_path,
        )


@dataclass(frozen=True)
class RepositoryRef:
    """Owner/name pair identifying a remote repository."""

    owner: str
    name: str

    @property
    def slug(self) -> str:
        return f"{self.owner}/{self.name}"

    def __str__(self) -> str:
        return self.slug


@dataclass(frozen=True)
class DiscussionCategory:
    id: str
    name: str


@dataclass
class RepositoryInfo:
    """A remote repository and its discussion categories."""

    id: str
    owner: str
    name: str
    categories: list[DiscussionCategory] = field(default_factory=list)

    @property
    def slug(self) -> str:
        return f"{self.owner}/{self.name}"

    @property
    def category_names(self) -> list[str]:
        return [c.name for c in self.categories]

    def find_category(self, name: str) -> Optional[DiscussionCategory]:
        for category in self.categories:
            if category.name == name:
                return category
        return None


@dataclass
class Discussion:
    """A remote discussion thread."""

    id: str
    number: int
    title: str = ""
    body: str = ""
    url: Optional[str] = None
    category_id: Optional[str] = None

    def matches(self, error: ErrorDefinition) -> bool:
        """Check whether title and body already reflect the error definition."""
        return self.title == error.post_title and self.body == error.post_body
