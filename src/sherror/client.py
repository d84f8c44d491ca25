"""
Sherror Client - Facade over the config, the sync orchestrator and the accessor.
"""

from pathlib import Path
from typing import Optional, Union

from .adapters.config.environment import EnvironmentConfigProvider
from .adapters.config.loader import load_config
from .adapters.config.writeback import TomlConfigWriter
from .adapters.git.remote import GitRemoteLocator
from .adapters.github.adapter import GitHubDiscussionsAdapter
from .application.accessor import ErrorHandle, Printer, lookup
from .application.sync import ClearResult, SyncOrchestrator, SyncResult
from .cli.output import default_printer, setup_logging
from .core.domain.entities import SherrorConfig
from .core.domain.events import EventBus
from .core.exceptions import ConfigurationError
from .core.ports.config_provider import DEFAULT_API_URL
from .core.ports.config_writer import ConfigWriterPort
from .core.ports.discussion_platform import DiscussionPlatformPort
from .core.ports.repository_locator import RepositoryLocatorPort


class SherrorClient:
    """
    Entry point for application code.

    ``get()`` works offline; ``sync()`` and ``clear()`` talk to GitHub and
    rewrite the config artifact. Calls on one instance must not overlap.
    """

    def __init__(
        self,
        config: SherrorConfig,
        token: Optional[str] = None,
        *,
        api_url: str = DEFAULT_API_URL,
        timeout: Optional[float] = None,
        platform: Optional[DiscussionPlatformPort] = None,
        locator: Optional[RepositoryLocatorPort] = None,
        writer: Optional[ConfigWriterPort] = None,
        event_bus: Optional[EventBus] = None,
    ):
        """
        Create a client for the given config.

        Args:
            config: Error definitions and category name
            token: GitHub token; required unless ``platform`` is given
            api_url: GraphQL endpoint
            timeout: Optional per-request timeout in seconds
            platform: Discussion platform (defaults to GitHub Discussions)
            locator: Repository locator (defaults to the git origin remote)
            writer: Config writer (defaults to TOML writeback at ``config.path``)
            event_bus: Optional event bus for sync/clear events

        Raises:
            ConfigurationError: Invalid config or missing token
        """
        if not isinstance(config, SherrorConfig):
            raise ConfigurationError("Invalid config: missing required fields")

        problems = config.validate()
        if problems:
            raise ConfigurationError("Invalid config: " + "; ".join(problems))

        if platform is None:
            if not token:
                raise ConfigurationError(
                    "A GitHub token is required to configure GitHub Discussions"
                )
            platform = GitHubDiscussionsAdapter(token=token, api_url=api_url, timeout=timeout)

        self._config = config
        self.event_bus = event_bus or EventBus()
        self.orchestrator = SyncOrchestrator(
            platform=platform,
            locator=locator or GitRemoteLocator(),
            writer=writer or TomlConfigWriter(),
            event_bus=self.event_bus,
        )

    @classmethod
    def from_environment(
        cls,
        config_path: Optional[Union[str, Path]] = None,
        env_file: Optional[Path] = None,
        printer: Optional[Printer] = None,
        **kwargs,
    ) -> "SherrorClient":
        """
        Build a client from ``GITHUB_TOKEN`` and the TOML artifact.

        Args:
            config_path: Artifact path (default: ``SHERROR_CONFIG`` or ``sherror.toml``)
            env_file: Optional .env file
            printer: Optional printer for ``ErrorHandle.print``
            **kwargs: Passed through to the constructor

        Raises:
            ConfigurationError: Missing token or invalid config
        """
        provider = EnvironmentConfigProvider(
            env_file=env_file,
            overrides={"config_path": config_path},
        )
        settings = provider.load_or_raise()
        if settings.verbose:
            setup_logging(verbose=True)

        config = load_config(settings.config_path, printer=printer)

        kwargs.setdefault("api_url", settings.api_url)
        kwargs.setdefault("timeout", settings.timeout)
        return cls(config, settings.github_token, **kwargs)

    # -------------------------------------------------------------------------
    # Operations
    # -------------------------------------------------------------------------

    def sync(self) -> SyncResult:
        """Create or update discussions and write new links back to the config."""
        return self.orchestrator.sync(self._config)

    def clear(self) -> ClearResult:
        """Delete all discussions in the configured category and drop local links."""
        return self.orchestrator.clear(self._config)

    def writeback(self) -> None:
        """Write the in-memory config back to its artifact."""
        self.orchestrator.writer.writeback(self._config)

    def get(self, code: int) -> ErrorHandle:
        """
        Get the error for ``code``.

        Raises:
            NotFoundError: If no error has this code
        """
        return lookup(self._config, code, self._config.printer or default_printer)

    def get_config(self) -> SherrorConfig:
        """Get a copy of the current config, including generated discussion links."""
        return self._config.copy()
