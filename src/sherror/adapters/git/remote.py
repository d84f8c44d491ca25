"""
Git Remote Locator - Derive the GitHub owner/repo from the local origin remote.
"""

import logging
import re
import subprocess
from pathlib import Path
from typing import Optional, Union
from urllib.parse import urlparse

from ...core.domain.entities import RepositoryRef
from ...core.exceptions import ConfigurationError
from ...core.ports.repository_locator import RepositoryLocatorPort


# user@host:owner/repo(.git)
SCP_REMOTE_PATTERN = re.compile(r"^[\w.-]+@[\w.-]+:(?P<path>.+)$")


def parse_git_remote(remote: str) -> RepositoryRef:
    """
    Parse a git remote URL into owner and repository name.

    Accepts ``git@github.com:owner/repo.git`` and
    ``https://github.com/owner/repo.git`` (plus ``http://`` and ``ssh://``).

    Raises:
        ConfigurationError: If the URL is not recognized
    """
    remote = (remote or "").strip()

    match = SCP_REMOTE_PATTERN.match(remote)
    if match and "://" not in remote:
        path = match.group("path")
    elif re.match(r"^(https?|ssh)://", remote):
        path = urlparse(remote).path
    else:
        raise ConfigurationError(f"Unrecognized git remote URL: {remote!r}")

    path = path.strip("/")
    if path.endswith(".git"):
        path = path[: -len(".git")]

    parts = path.split("/")
    if len(parts) != 2 or not all(parts):
        raise ConfigurationError(f"Invalid git remote path: {path!r}")

    owner, name = parts
    return RepositoryRef(owner=owner, name=name)


class GitRemoteLocator(RepositoryLocatorPort):
    """Resolve the repository from ``git config --get remote.<name>.url``."""

    def __init__(
        self,
        remote_name: str = "origin",
        cwd: Optional[Union[str, Path]] = None,
    ):
        self.remote_name = remote_name
        self.cwd = cwd
        self.logger = logging.getLogger("GitRemoteLocator")

    def get_remote_url(self) -> str:
        """Read the remote URL with the git CLI."""
        try:
            completed = subprocess.run(
                ["git", "config", "--get", f"remote.{self.remote_name}.url"],
                cwd=self.cwd,
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as e:
            raise ConfigurationError(f"Could not run git: {e}", cause=e)

        url = completed.stdout.strip()
        if completed.returncode != 0 or not url:
            raise ConfigurationError(
                f"No '{self.remote_name}' remote configured for this repository"
            )
        return url

    def locate(self) -> RepositoryRef:
        ref = parse_git_remote(self.get_remote_url())
        self.logger.debug(f"Resolved repository {ref.slug}")
        return ref
