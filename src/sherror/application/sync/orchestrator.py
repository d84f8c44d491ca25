"""
Sync Orchestrator - Reconciles local error definitions with remote discussions.

This is the main entry point for sync and clear operations.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from ...core.domain.entities import (
    DiscussionCategory,
    ErrorDefinition,
    RepositoryInfo,
    RepositoryRef,
    SherrorConfig,
)
from ...core.domain.events import (
    ClearCompleted,
    ConfigWrittenBack,
    DiscussionCreated,
    DiscussionDeleted,
    DiscussionUpdated,
    EventBus,
    SyncCompleted,
    SyncStarted,
)
from ...core.exceptions import (
    CategoryNotFoundError,
    ConfigurationError,
    NotFoundError,
    ValidationError,
)
from ...core.ports.config_writer import ConfigWriterPort
from ...core.ports.discussion_platform import DiscussionPlatformPort
from ...core.ports.repository_locator import RepositoryLocatorPort


@dataclass
class SyncResult:
    """Result of a sync operation."""

    repository: str = ""
    category: str = ""

    # Error codes per outcome
    created: list[int] = field(default_factory=list)
    updated: list[int] = field(default_factory=list)
    unchanged: list[int] = field(default_factory=list)

    wrote_back: bool = False

    @property
    def dirty(self) -> bool:
        """True when new links were attached to the in-memory config."""
        return bool(self.created)


@dataclass
class ClearResult:
    """Result of a clear operation."""

    repository: str = ""
    category: str = ""
    category_found: bool = True

    deleted: list[int] = field(default_factory=list)
    links_cleared: int = 0
    wrote_back: bool = False


class SyncOrchestrator:
    """
    Orchestrates synchronization between the config and the discussion platform.

    Sync phases:
    1. Resolve the repository from the git remote
    2. Fetch repository id and discussion categories
    3. Resolve the configured category by name
    4. Create or update one discussion per error, in declaration order
    5. Write new links back to the config artifact (once)

    Runs are sequential and not atomic: a failure stops the run, and remote
    changes made before it stay in place.
    """

    def __init__(
        self,
        platform: DiscussionPlatformPort,
        locator: RepositoryLocatorPort,
        writer: ConfigWriterPort,
        event_bus: Optional[EventBus] = None,
    ):
        """
        Initialize the orchestrator.

        Args:
            platform: Discussion platform port
            locator: Repository locator port
            writer: Config writer port
            event_bus: Optional event bus
        """
        self.platform = platform
        self.locator = locator
        self.writer = writer
        self.event_bus = event_bus or EventBus()
        self.logger = logging.getLogger("SyncOrchestrator")

    # -------------------------------------------------------------------------
    # Main Entry Points
    # -------------------------------------------------------------------------

    def sync(self, config: SherrorConfig) -> SyncResult:
        """
        Create or update one discussion per error definition.

        Args:
            config: Config to synchronize (new links are attached in place)

        Returns:
            SyncResult with per-code outcomes

        Raises:
            ConfigurationError: Invalid config or unparseable git remote
            NotFoundError: Missing repository or linked discussion
            CategoryNotFoundError: Configured category does not exist
            ValidationError: An error definition lacks a post title or body
            RemoteProtocolError: Any platform failure
        """
        self._check_config(config)

        ref = self.locator.locate()
        repository = self._fetch_repository(ref)
        category = self._resolve_category(repository, config.category_name)

        result = SyncResult(repository=repository.slug, category=category.name)
        self.logger.info(f"Using existing category: {category.name} ({category.id})")

        self.event_bus.publish(SyncStarted(
            repository=repository.slug,
            category_name=category.name,
            error_count=len(config.errors),
        ))

        try:
            for index, error in enumerate(config.errors):
                self._sync_error(index, error, ref, repository, category, result)
        finally:
            # Links created before a failure are persisted so the next run
            # updates those discussions instead of creating duplicates.
            if result.dirty:
                self._writeback(config)
                result.wrote_back = True

        self.logger.info(
            f"Sync complete: {len(result.created)} created, "
            f"{len(result.updated)} updated, {len(result.unchanged)} unchanged"
        )
        self.event_bus.publish(SyncCompleted(
            repository=repository.slug,
            created=len(result.created),
            updated=len(result.updated),
            unchanged=len(result.unchanged),
        ))

        return result

    def clear(self, config: SherrorConfig) -> ClearResult:
        """
        Delete every discussion in the configured category and drop local links.

        Args:
            config: Config whose category is cleared (links are removed in place)

        Returns:
            ClearResult with the deleted discussion numbers

        Raises:
            ConfigurationError: Invalid config or unparseable git remote
            NotFoundError: Missing repository
            RemoteProtocolError: Any platform failure (remaining deletions are skipped)
        """
        self._check_config(config)

        ref = self.locator.locate()
        repository = self._fetch_repository(ref)
        result = ClearResult(repository=repository.slug, category=config.category_name)

        category = repository.find_category(config.category_name)
        if category is None:
            self.logger.info(f'No discussions found in category "{config.category_name}"')
            result.category_found = False
            return result

        discussions = self.platform.list_discussions(ref.owner, ref.name, category.id)
        if not discussions:
            # Local links may point at discussions outside this category.
            self.logger.info(f'No discussions found in category "{category.name}"')
            return result

        self.logger.info(f"Found {len(discussions)} discussions to delete...")

        for discussion in discussions:
            self.logger.info(f"Deleting discussion #{discussion.number}: {discussion.title}")
            try:
                self.platform.delete_discussion(discussion.id)
            except Exception:
                self.logger.error(f"Failed to delete discussion #{discussion.number}")
                raise
            result.deleted.append(discussion.number)
            self.event_bus.publish(DiscussionDeleted(
                number=discussion.number,
                title=discussion.title,
            ))

        self.logger.info(
            f"Successfully deleted {len(discussions)} discussions "
            f'from category "{category.name}"'
        )

        for error in config.errors:
            if error.is_synced:
                error.discussion_link = None
                result.links_cleared += 1

        if result.links_cleared:
            self._writeback(config)
            result.wrote_back = True

        self.event_bus.publish(ClearCompleted(
            repository=repository.slug,
            deleted=len(result.deleted),
            links_cleared=result.links_cleared,
        ))

        return result

    # -------------------------------------------------------------------------
    # Resolution
    # -------------------------------------------------------------------------

    def _check_config(self, config: SherrorConfig) -> None:
        problems = config.validate()
        if problems:
            raise ConfigurationError(
                "Invalid sherror config: " + "; ".join(problems)
            )

    def _fetch_repository(self, ref: RepositoryRef) -> RepositoryInfo:
        repository = self.platform.get_repository(ref.owner, ref.name)
        if repository is None:
            raise NotFoundError(f"Repository {ref.slug} not found")
        return repository

    def _resolve_category(
        self,
        repository: RepositoryInfo,
        category_name: str,
    ) -> DiscussionCategory:
        category = repository.find_category(category_name)
        if category is None:
            # Categories can only be created by hand in the repository settings.
            error = CategoryNotFoundError(
                category_name,
                repository.slug,
                repository.category_names,
            )
            self.logger.error(str(error))
            raise error
        return category

    # -------------------------------------------------------------------------
    # Per-error reconciliation
    # -------------------------------------------------------------------------

    def _sync_error(
        self,
        index: int,
        error: ErrorDefinition,
        ref: RepositoryRef,
        repository: RepositoryInfo,
        category: DiscussionCategory,
        result: SyncResult,
    ) -> None:
        self._validate_error(index, error)

        if error.is_synced:
            self._update_existing(error, ref, result)
        else:
            self._create_new(error, repository, category, result)

    def _validate_error(self, index: int, error: ErrorDefinition) -> None:
        for field_name in ("post_title", "post_body"):
            value = getattr(error, field_name)
            if not isinstance(value, str) or not value:
                raise ValidationError(
                    f"Invalid error entry errors[{index}] (code {error.code}): "
                    f"missing {field_name}",
                    code=error.code,
                    index=index,
                )

    def _update_existing(
        self,
        error: ErrorDefinition,
        ref: RepositoryRef,
        result: SyncResult,
    ) -> None:
        number = error.discussion_number()
        discussion = self.platform.get_discussion(ref.owner, ref.name, number)
        if discussion is None:
            raise NotFoundError(
                f"Discussion #{number} for error {error.code} not found in {ref.slug}"
            )

        if discussion.matches(error):
            self.logger.debug(f"Discussion #{number} is up to date (code {error.code})")
            result.unchanged.append(error.code)
            return

        changed = tuple(
            name for name, old, new in (
                ("title", discussion.title, error.post_title),
                ("body", discussion.body, error.post_body),
            )
            if old != new
        )
        self.platform.update_discussion(discussion.id, error.post_title, error.post_body)
        self.logger.info(f"Updated discussion #{number} (code {error.code}): {', '.join(changed)}")
        result.updated.append(error.code)
        self.event_bus.publish(DiscussionUpdated(
            error_code=error.code,
            number=number,
            changed_fields=changed,
        ))

    def _create_new(
        self,
        error: ErrorDefinition,
        repository: RepositoryInfo,
        category: DiscussionCategory,
        result: SyncResult,
    ) -> None:
        discussion = self.platform.create_discussion(
            repository.id,
            category.id,
            error.post_title,
            error.post_body,
        )
        error.discussion_link = discussion.url
        self.logger.info(f"Created discussion for code {error.code}: {discussion.url}")
        result.created.append(error.code)
        self.event_bus.publish(DiscussionCreated(
            error_code=error.code,
            url=discussion.url or "",
        ))

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _writeback(self, config: SherrorConfig) -> None:
        self.writer.writeback(config)
        self.event_bus.publish(ConfigWrittenBack(
            path=str(config.path),
            error_count=len(config.errors),
        ))
