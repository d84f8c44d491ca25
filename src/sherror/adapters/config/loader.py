"""
Config Loader - Read a TOML artifact into a SherrorConfig.
"""

import logging
from pathlib import Path
from typing import Any, Callable, Optional, Union

from ...core.domain.entities import DEFAULT_CONFIG_FILENAME, ErrorDefinition, SherrorConfig
from ...core.exceptions import ConfigurationError
from .document import CATEGORY_KEY, errors_array, locate_config_table, read_document


logger = logging.getLogger("ConfigLoader")


def load_config(
    path: Union[str, Path] = DEFAULT_CONFIG_FILENAME,
    printer: Optional[Callable[..., None]] = None,
) -> SherrorConfig:
    """
    Load error definitions from a TOML artifact.

    Args:
        path: Path to ``sherror.toml`` or a ``pyproject.toml`` with ``[tool.sherror]``
        printer: Optional printer callback to attach to the config

    Returns:
        SherrorConfig whose ``source_path`` points at ``path``

    Raises:
        ConfigurationError: If the file is missing or a field has the wrong type
        StructuralError: If the artifact does not have the expected shape
    """
    path = Path(path)
    doc = read_document(path)
    table = locate_config_table(doc)
    elements = errors_array(table)

    category_name = table.get(CATEGORY_KEY)
    if category_name is not None:
        category_name = category_name.unwrap() if hasattr(category_name, "unwrap") else category_name
    if not isinstance(category_name, str):
        raise ConfigurationError(f"{path}: category_name must be a string")

    errors = [
        _parse_error(path, index, element.unwrap())
        for index, element in enumerate(elements)
    ]

    logger.debug(f"Loaded {len(errors)} error definitions from {path}")

    return SherrorConfig(
        category_name=category_name,
        errors=errors,
        printer=printer,
        source_path=path,
    )


def _parse_error(path: Path, index: int, data: dict[str, Any]) -> ErrorDefinition:
    """Build an ErrorDefinition from one unwrapped table."""
    where = f"{path}: errors[{index}]"

    code = data.get("code")
    if isinstance(code, bool) or not isinstance(code, int):
        raise ConfigurationError(f"{where}: code must be an integer")

    app_message = data.get("app_message")
    if not isinstance(app_message, str):
        raise ConfigurationError(f"{where}: app_message must be a string")

    for key in ("post_title", "post_body", "discussion_link"):
        if key in data and not isinstance(data[key], str):
            raise ConfigurationError(f"{where}: {key} must be a string")

    return ErrorDefinition(
        code=code,
        app_message=app_message,
        post_title=data.get("post_title", ""),
        post_body=data.get("post_body", ""),
        discussion_link=data.get("discussion_link") or None,
    )
