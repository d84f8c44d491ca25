"""
Config Writer Port - Persist in-memory configuration back to its artifact.
"""

from abc import ABC, abstractmethod

from ..domain.entities import SherrorConfig


class ConfigWriterPort(ABC):
    """Abstract interface for writing a config back to where it came from."""

    @abstractmethod
    def writeback(self, config: SherrorConfig) -> None:
        """
        Rewrite the configuration artifact from the in-memory config.

        Raises:
            StructuralError: If the artifact does not have the expected shape.
                The artifact is left untouched in that case.
        """
        ...
