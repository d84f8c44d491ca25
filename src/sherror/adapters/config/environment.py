"""
Environment Config Provider - Load client settings from environment variables.

Supports:
- Environment variables (GITHUB_TOKEN, SHERROR_CONFIG, SHERROR_API_URL, SHERROR_VERBOSE)
- .env files
- Explicit overrides
"""

import os
from pathlib import Path
from typing import Any, Optional

from ...core.domain.entities import DEFAULT_CONFIG_FILENAME
from ...core.exceptions import ConfigurationError
from ...core.ports.config_provider import (
    ConfigProviderPort,
    ClientSettings,
    DEFAULT_API_URL,
)


class EnvironmentConfigProvider(ConfigProviderPort):
    """
    Configuration provider that loads from environment variables and .env files.
    """

    def __init__(
        self,
        env_file: Optional[Path] = None,
        overrides: Optional[dict[str, Any]] = None,
        environ: Optional[dict[str, str]] = None,
    ):
        """
        Initialize the config provider.

        Args:
            env_file: Path to .env file (auto-detected if not specified)
            overrides: Explicit values that win over everything else
            environ: Environment mapping (defaults to ``os.environ``)
        """
        self._values: dict[str, Any] = {}
        self._env_file = env_file
        self._overrides = overrides or {}
        self._environ = os.environ if environ is None else environ

        # Load configuration
        self._load_env_file()
        self._load_environment()

    # -------------------------------------------------------------------------
    # ConfigProviderPort Implementation
    # -------------------------------------------------------------------------

    @property
    def name(self) -> str:
        return "Environment"

    def load(self) -> ClientSettings:
        """Load complete settings."""
        timeout = self.get("timeout")
        return ClientSettings(
            github_token=self.get("github_token", ""),
            config_path=Path(self.get("config_path", DEFAULT_CONFIG_FILENAME)),
            api_url=self.get("api_url", DEFAULT_API_URL),
            verbose=self.get("verbose", False) in (True, "1"),
            timeout=float(timeout) if timeout not in (None, "") else None,
        )

    def load_or_raise(self) -> ClientSettings:
        """Load settings, raising ConfigurationError if they are incomplete."""
        problems = self.validate()
        if problems:
            raise ConfigurationError("; ".join(problems))
        return self.load()

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value."""
        # Normalize key
        key = key.lower().replace("-", "_")

        # Check overrides first
        if key in self._overrides and self._overrides[key] is not None:
            return self._overrides[key]

        # Check loaded values
        return self._values.get(key, default)

    def set(self, key: str, value: Any) -> None:
        """Set a configuration value."""
        key = key.lower().replace("-", "_")
        self._values[key] = value

    def validate(self) -> list[str]:
        """Validate configuration."""
        errors = []

        if not self.get("github_token"):
            errors.append(
                "'GITHUB_TOKEN' must be set to configure GitHub Discussions "
                "(in the environment or a .env file)"
            )

        timeout = self.get("timeout")
        if timeout not in (None, ""):
            try:
                float(timeout)
            except (TypeError, ValueError):
                errors.append(f"Invalid SHERROR_TIMEOUT: {timeout!r}")

        return errors

    # -------------------------------------------------------------------------
    # Private Methods
    # -------------------------------------------------------------------------

    ENV_MAPPING = {
        "GITHUB_TOKEN": "github_token",
        "SHERROR_CONFIG": "config_path",
        "SHERROR_API_URL": "api_url",
        "SHERROR_VERBOSE": "verbose",
        "SHERROR_TIMEOUT": "timeout",
    }

    def _load_env_file(self) -> None:
        """Load values from .env file."""
        env_file = self._find_env_file()
        if not env_file:
            return

        for line in env_file.read_text().splitlines():
            line = line.strip()

            # Skip empty lines and comments
            if not line or line.startswith("#"):
                continue

            # Parse key=value
            if "=" not in line:
                continue

            key, value = line.split("=", 1)
            key = key.strip()
            if key.startswith("export "):
                key = key[len("export "):].strip()
            value = value.strip().strip('"').strip("'")

            if key in self.ENV_MAPPING:
                self._values[self.ENV_MAPPING[key]] = self._coerce(value)

    def _find_env_file(self) -> Optional[Path]:
        """Find .env file."""
        if self._env_file:
            return self._env_file if self._env_file.exists() else None

        # Check current directory
        cwd_env = Path.cwd() / ".env"
        if cwd_env.exists():
            return cwd_env

        return None

    def _load_environment(self) -> None:
        """Load values from environment variables."""
        for env_key, config_key in self.ENV_MAPPING.items():
            raw_value = self._environ.get(env_key)
            if raw_value is not None:
                self._values[config_key] = self._coerce(raw_value)

    @staticmethod
    def _coerce(raw_value: str) -> Any:
        """Convert boolean-ish values."""
        if raw_value.lower() in ("true", "yes"):
            return True
        if raw_value.lower() in ("false", "no"):
            return False
        return raw_value
