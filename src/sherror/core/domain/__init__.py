"""
Domain - Entities and events with no external dependencies.
"""

from .entities import (
    DEFAULT_CONFIG_FILENAME,
    ErrorDefinition,
    SherrorConfig,
    RepositoryRef,
    RepositoryInfo,
    DiscussionCategory,
    Discussion,
)
from .events import (
    DomainEvent,
    EventBus,
    SyncStarted,
    SyncCompleted,
    DiscussionCreated,
    DiscussionUpdated,
    DiscussionDeleted,
    ConfigWrittenBack,
    ClearCompleted,
)

__all__ = [
    "DEFAULT_CONFIG_FILENAME",
    "ErrorDefinition",
    "SherrorConfig",
    "RepositoryRef",
    "RepositoryInfo",
    "DiscussionCategory",
    "Discussion",
    "DomainEvent",
    "EventBus",
    "SyncStarted",
    "SyncCompleted",
    "DiscussionCreated",
    "DiscussionUpdated",
    "DiscussionDeleted",
    "ConfigWrittenBack",
    "ClearCompleted",
]
