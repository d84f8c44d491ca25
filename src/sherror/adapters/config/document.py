"""
TOML Document Shape - Locate the sherror configuration inside a TOML artifact.

The configuration table is looked up, in order, at:

- ``[tool.sherror]`` (embedded in ``pyproject.toml``)
- ``[sherror]``
- the document root, when it carries ``category_name`` or ``errors``

Its ``errors`` key must be an array of tables (``[[errors]]``) or an
array of inline tables.
"""

from pathlib import Path
from typing import Any, Union

import tomlkit
from tomlkit.container import OutOfOrderTableProxy
from tomlkit.exceptions import ParseError as TomlkitParseError
from tomlkit.items import AoT, Array, InlineTable, Table

from ...core.exceptions import ConfigurationError, StructuralError


CONFIG_SECTION = "sherror"
ERRORS_KEY = "errors"
CATEGORY_KEY = "category_name"

ErrorsArray = Union[AoT, Array]


def _is_table(item: Any) -> bool:
    return isinstance(item, (Table, OutOfOrderTableProxy))


def read_document(path: Path) -> tomlkit.TOMLDocument:
    """Read and parse a TOML artifact losslessly."""
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise ConfigurationError(f"Config file not found: {path}", cause=e)

    try:
        return tomlkit.parse(text)
    except TomlkitParseError as e:
        raise StructuralError(f"Error parsing {path}: {e}", cause=e)


def locate_config_table(doc: tomlkit.TOMLDocument) -> Any:
    """Return the container holding ``category_name`` and ``errors``."""
    tool = doc.get("tool")
    if _is_table(tool) and _is_table(tool.get(CONFIG_SECTION)):
        return tool[CONFIG_SECTION]

    section = doc.get(CONFIG_SECTION)
    if _is_table(section):
        return section

    if CATEGORY_KEY in doc or ERRORS_KEY in doc:
        return doc

    raise StructuralError(
        "No sherror configuration found: expected [tool.sherror], [sherror] "
        "or top-level category_name/errors keys"
    )


def errors_array(table: Any) -> ErrorsArray:
    """Return the ``errors`` array after checking every element is a table."""
    if ERRORS_KEY not in table:
        raise StructuralError(f'Expected config to have a property "{ERRORS_KEY}"')

    errors = table[ERRORS_KEY]
    if not isinstance(errors, (AoT, Array)):
        raise StructuralError(
            f'Expected "{ERRORS_KEY}" to be an array of tables, '
            f"got {type(errors).__name__}"
        )

    for index, element in enumerate(errors):
        if not isinstance(element, (Table, InlineTable)):
            raise StructuralError(
                f"Expected {ERRORS_KEY}[{index}] to be a table, "
                f"got {type(element).__name__}"
            )

    return errors
