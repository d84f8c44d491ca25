"""
Config Writeback - Persist in-memory error definitions into the TOML artifact.

The artifact is edited structurally with tomlkit: only the ``errors``
elements are rewritten, so comments and formatting elsewhere survive.
Every element is rewritten with its fields in a fixed order
(``code, app_message, post_title, post_body[, discussion_link]``);
an element that already holds exactly those fields is left alone, which
keeps repeated writebacks byte-identical.
"""

import logging
from pathlib import Path
from typing import Any, Optional, Union

import tomlkit
from tomlkit.items import AoT, InlineTable

from ...core.domain.entities import SherrorConfig
from ...core.ports.config_writer import ConfigWriterPort
from .document import ErrorsArray, errors_array, locate_config_table, read_document


class TomlConfigWriter(ConfigWriterPort):
    """Write a SherrorConfig back into its TOML artifact."""

    def __init__(self, path: Optional[Union[str, Path]] = None):
        """
        Initialize the writer.

        Args:
            path: Artifact to rewrite. Defaults to the config's ``source_path``.
        """
        self._path = Path(path) if path else None
        self.logger = logging.getLogger("TomlConfigWriter")

    def target_path(self, config: SherrorConfig) -> Path:
        return self._path or config.path

    def writeback(self, config: SherrorConfig) -> None:
        path = self.target_path(config)
        text = self.render(config, path)
        path.write_text(text, encoding="utf-8")
        self.logger.info(f"Wrote {len(config.errors)} error definitions to {path}")

    def render(self, config: SherrorConfig, path: Path) -> str:
        """Compute the rewritten artifact text without touching the file."""
        doc = read_document(path)
        elements = errors_array(locate_config_table(doc))

        existing = len(elements)
        for index, error in enumerate(config.errors[:existing]):
            if _replace_element(elements, index, error.to_fields()):
                self.logger.debug(f"Rewrote errors[{index}] (code {error.code})")

        for error in config.errors[existing:]:
            _append_element(elements, error.to_fields())
            self.logger.debug(f"Appended error code {error.code}")

        return doc.as_string()


def _replace_element(elements: ErrorsArray, index: int, fields: dict[str, Any]) -> bool:
    """Rewrite one element in place. Returns False when it is already equal."""
    element = elements[index]
    if list(element.unwrap().items()) == list(fields.items()):
        return False

    if isinstance(elements, AoT):
        for key in list(element.keys()):
            del element[key]
        for key, value in fields.items():
            element[key] = value
    else:
        elements[index] = _inline_table(fields)
    return True


def _inline_table(fields: dict[str, Any]) -> InlineTable:
    inline = tomlkit.inline_table()
    inline.update(fields)
    return inline


def _append_element(elements: ErrorsArray, fields: dict[str, Any]) -> None:
    if isinstance(elements, AoT):
        table = tomlkit.table()
        for key, value in fields.items():
            table.add(key, value)
        # Keep a blank line before whatever follows the array.
        table.add(tomlkit.nl())
        elements.append(table)
    else:
        elements.append(_inline_table(fields))
