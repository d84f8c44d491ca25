"""
Application Layer - Use cases and orchestration.

This layer contains:
- sync/: Synchronization orchestrator (sync and clear)
- accessor: Error lookup with print/exit behaviour
"""

from .sync import SyncOrchestrator, SyncResult, ClearResult
from .accessor import (
    NOT_AVAILABLE,
    Codepath,
    ErrorHandle,
    ErrorView,
    Printer,
    lookup,
)

__all__ = [
    "SyncOrchestrator",
    "SyncResult",
    "ClearResult",
    "NOT_AVAILABLE",
    "Codepath",
    "ErrorHandle",
    "ErrorView",
    "Printer",
    "lookup",
]
