# topmark:header:start
#
#   project      : MarkOut
#   file         : io.py
#   file_relpath : src/markout/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load output properties from TOML files.

Two layouts are supported:

- ``markout.toml`` (or any other file) with an ``[output]`` table, and
- ``pyproject.toml`` with a ``[tool.markout.output]`` table.

Parsing is done with `tomlkit` and returned as a flat ``dict[str, str]`` property
bag ready for `markout.config.resolver.resolve_output_configuration`. Values are
coerced to strings; booleans become ``"yes"``/``"no"`` so the resolver treats them
exactly like property-bag strings.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from markout.config.keys import Toml
from markout.config.logging import get_logger
from markout.core.errors import PropertiesFileError

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

    from markout.config.logging import MarkoutLogger

logger: MarkoutLogger = get_logger(__name__)


def _coerce_value(key: str, value: Any) -> str | None:
    """Coerce a TOML scalar to a property string, or None when not a scalar."""
    if isinstance(value, bool):
        return "yes" if value else "no"
    if isinstance(value, (str, int, float)):
        return str(value)
    logger.warning("Ignoring non-scalar output property %r (%s)", key, type(value).__name__)
    return None


def properties_from_table(table: Mapping[str, Any]) -> dict[str, str]:
    """Flatten a TOML table into a string property bag.

    Args:
        table (Mapping[str, Any]): The ``[output]`` table (already unwrapped).

    Returns:
        dict[str, str]: Property keys mapped to string values. Non-scalar
            values (arrays, nested tables) are skipped with a warning.
    """
    props: dict[str, str] = {}
    for key, value in table.items():
        coerced: str | None = _coerce_value(str(key), value)
        if coerced is not None:
            props[str(key)] = coerced
    return props


def _find_output_table(doc: Mapping[str, Any], path: Path) -> Mapping[str, Any]:
    if path.name == "pyproject.toml":
        tool: Any = doc.get(Toml.SECTION_TOOL, {})
        markout: Any = tool.get(Toml.SECTION_MARKOUT, {}) if isinstance(tool, dict) else {}
        table: Any = markout.get(Toml.SECTION_OUTPUT, {}) if isinstance(markout, dict) else {}
    else:
        table = doc.get(Toml.SECTION_OUTPUT, {})
    if not isinstance(table, dict):
        logger.warning("[%s] in %s is not a table; ignoring", Toml.SECTION_OUTPUT, path)
        return {}
    return table


def load_properties_toml(path: Path) -> dict[str, str]:
    """Load output properties from a TOML file.

    Args:
        path (Path): Path to ``markout.toml`` (``[output]``) or ``pyproject.toml``
            (``[tool.markout.output]``).

    Returns:
        dict[str, str]: The property bag (empty when the file has no output table).

    Raises:
        PropertiesFileError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise PropertiesFileError(f"Cannot read property file {path}: {exc}") from exc
    try:
        doc: dict[str, Any] = tomlkit.parse(text).unwrap()
    except TomlkitParseError as exc:
        raise PropertiesFileError(f"Invalid TOML in {path}: {exc}") from exc

    props: dict[str, str] = properties_from_table(_find_output_table(doc, path))
    logger.debug("Loaded %d output properties from %s", len(props), path)
    return props


def merge_properties(*layers: Mapping[str, Any] | None) -> dict[str, Any]:
    """Merge property layers; later layers override earlier ones.

    Args:
        *layers (Mapping[str, Any] | None): Property bags in increasing precedence.
            ``None`` layers are skipped.

    Returns:
        dict[str, Any]: The merged property bag.
    """
    merged: dict[str, Any] = {}
    for layer in layers:
        if layer:
            merged.update(layer)
    return merged


def to_toml(properties: Mapping[str, str]) -> str:
    """Render a property bag as a ``markout.toml`` document.

    Args:
        properties (Mapping[str, str]): The properties to write under ``[output]``.

    Returns:
        str: TOML text.
    """
    doc = tomlkit.document()
    table = tomlkit.table()
    for key in sorted(properties):
        table.add(key, properties[key])
    doc.add(Toml.SECTION_OUTPUT, table)
    return tomlkit.dumps(doc)
