"""
Domain Events - Things that happened during a sync or clear run.

Events are immutable records of something that occurred.
They enable loose coupling and audit trails.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable
from uuid import uuid4


@dataclass(frozen=True)
class DomainEvent:
    """Base class for all domain events."""

    event_id: str = field(default_factory=lambda: str(uuid4()))
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def event_type(self) -> str:
        """Get the event type name."""
        return self.__class__.__name__


@dataclass(frozen=True)
class SyncStarted(DomainEvent):
    """Event: A sync operation started."""

    repository: str = ""
    category_name: str = ""
    error_count: int = 0


@dataclass(frozen=True)
class DiscussionCreated(DomainEvent):
    """Event: A discussion was created for an error code."""

    error_code: int = 0
    url: str = ""


@dataclass(frozen=True)
class DiscussionUpdated(DomainEvent):
    """Event: A discussion's title and/or body was updated."""

    error_code: int = 0
    number: int = 0
    changed_fields: tuple = ()


@dataclass(frozen=True)
class DiscussionDeleted(DomainEvent):
    """Event: A discussion was deleted by a clear run."""

    number: int = 0
    title: str = ""


@dataclass(frozen=True)
class ConfigWrittenBack(DomainEvent):
    """Event: The configuration artifact was rewritten."""

    path: str = ""
    error_count: int = 0


@dataclass(frozen=True)
class SyncCompleted(DomainEvent):
    """Event: A sync operation completed."""

    repository: str = ""
    created: int = 0
    updated: int = 0
    unchanged: int = 0


@dataclass(frozen=True)
class ClearCompleted(DomainEvent):
    """Event: A clear operation completed."""

    repository: str = ""
    deleted: int = 0
    links_cleared: int = 0


class EventBus:
    """
    Simple event bus for publishing and subscribing to domain events.

    This enables loose coupling between components.
    """

    def __init__(self):
        self._handlers: dict[type, list[Callable]] = {}
        self._history: list[DomainEvent] = []

    def subscribe(self, event_type: type, handler: Callable) -> None:
        """Subscribe a handler to an event type."""
        if event_type not in self._handlers:
            self._handlers[event_type] = []
        self._handlers[event_type].append(handler)

    def publish(self, event: DomainEvent) -> None:
        """Publish an event to all subscribers."""
        self._history.append(event)

        # Call specific handlers
        for handler in self._handlers.get(type(event), []):
            handler(event)

        # Call catch-all handlers
        for handler in self._handlers.get(DomainEvent, []):
            handler(event)

    def get_history(self) -> list[DomainEvent]:
        """Get all published events."""
        return self._history.copy()

    def clear_history(self) -> None:
        """Clear event history."""
        self._history.clear()
