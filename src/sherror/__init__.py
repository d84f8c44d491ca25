"""
sherror - Keep application error codes in sync with GitHub Discussions.

Declare errors in ``sherror.toml``, run ``SherrorClient.sync()`` to create
or update one discussion per error, and use ``SherrorClient.get(code)`` in
application code to print the error with a link to its discussion.
"""

from .client import SherrorClient
from .core.domain.entities import ErrorDefinition, SherrorConfig
from .core.exceptions import (
    SherrorError,
    ConfigurationError,
    NotFoundError,
    CategoryNotFoundError,
    ValidationError,
    StructuralError,
    RemoteProtocolError,
    AuthenticationError,
)
from .application.accessor import NOT_AVAILABLE, Codepath, ErrorHandle, ErrorView
from .application.sync import SyncResult, ClearResult
from .adapters.config.loader import load_config
from .adapters.formatters.ansi import colorize

__version__ = "0.1.0"

__all__ = [
    "SherrorClient",
    "SherrorConfig",
    "ErrorDefinition",
    "ErrorHandle",
    "ErrorView",
    "Codepath",
    "NOT_AVAILABLE",
    "SyncResult",
    "ClearResult",
    "load_config",
    "colorize",
    "SherrorError",
    "ConfigurationError",
    "NotFoundError",
    "CategoryNotFoundError",
    "ValidationError",
    "StructuralError",
    "RemoteProtocolError",
    "AuthenticationError",
]
