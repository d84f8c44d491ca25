"""
Config Provider Port - Abstract interface for client settings sources.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from ..domain.entities import DEFAULT_CONFIG_FILENAME


DEFAULT_API_URL = "https://api.github.com/graphql"


@dataclass
class ClientSettings:
    """Settings needed to talk to the platform and find the artifact."""

    github_token: str = ""
    config_path: Path = Path(DEFAULT_CONFIG_FILENAME)
    api_url: str = DEFAULT_API_URL
    verbose: bool = False
    timeout: Optional[float] = None


class ConfigProviderPort(ABC):
    """Abstract interface for configuration providers."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Get the provider name."""
        ...

    @abstractmethod
    def load(self) -> ClientSettings:
        """Load complete settings."""
        ...

    @abstractmethod
    def get(self, key: str, default: Any = None) -> Any:
        """Get a single configuration value."""
        ...

    @abstractmethod
    def validate(self) -> list[str]:
        """Validate configuration. Returns a list of errors (empty if valid)."""
        ...
