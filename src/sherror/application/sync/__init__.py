"""
Sync Module - Orchestration of synchronization between the config and GitHub Discussions.
"""

from .orchestrator import SyncOrchestrator, SyncResult, ClearResult

__all__ = [
    "SyncOrchestrator",
    "SyncResult",
    "ClearResult",
]
