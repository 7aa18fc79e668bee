# topmark:header:start
#
#   project      : MarkOut
#   file         : options.py
#   file_relpath : src/markout/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities.

This module centralizes reusable options (verbosity, output properties) and
their resolution logic, so commands and the group can stay thin. The helpers
here are Click-aware.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Any, Callable, ParamSpec, TypeVar

import click

from markout.cli.cli_types import PropertyParam
from markout.cli.errors import MarkoutConfigError, MarkoutUsageError
from markout.config.io import load_properties_toml, merge_properties
from markout.config.logging import get_logger
from markout.constants import DEFAULT_PROPERTIES_FILE_NAME
from markout.core.errors import PropertiesFileError

if TYPE_CHECKING:
    from collections.abc import Iterable

P = ParamSpec("P")
R = TypeVar("R")

logger = get_logger(__name__)


class ReportFormat(str, Enum):
    """Output format of informational commands (`version`, `formats`, `resolve`)."""

    TEXT = "text"
    JSON = "json"


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the program-output verbosity from the ``-v`` / ``-q`` counts.

    Args:
        verbose_count: Number of times ``-v`` was passed.
        quiet_count: Number of times ``-q`` was passed.

    Returns:
        ``-1`` when quiet, ``0`` by default, otherwise the number of ``-v`` flags.

    Raises:
        MarkoutUsageError: If both verbose and quiet flags are used.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise MarkoutUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if quiet_count > 0:
        return -1
    return verbose_count


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``-v/--verbose`` and ``-q/--quiet`` counting options to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase program-output verbosity.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress informational output.",
    )(f)
    return f


def output_property_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``-p KEY=VALUE``, ``--config FILE`` and ``--no-config`` options to a command."""
    f = click.option(
        "-p",
        "--property",
        "properties",
        type=PropertyParam(),
        multiple=True,
        help="Output property as KEY=VALUE (e.g. -p method=html -p html-version=5).",
    )(f)
    f = click.option(
        "--config",
        "config_file",
        type=click.Path(dir_okay=False, path_type=Path),
        default=None,
        help=(
            "Read output properties from a TOML file ([output] table, or "
            "[tool.markout.output] in pyproject.toml)."
        ),
    )(f)
    f = click.option(
        "--no-config",
        is_flag=True,
        default=False,
        help=f"Do not read ./{DEFAULT_PROPERTIES_FILE_NAME} when --config is not given.",
    )(f)
    return f


def collect_properties(
    properties: Iterable[tuple[str, str]],
    *,
    config_file: Path | None,
    no_config: bool,
) -> dict[str, Any]:
    """Build the property bag for a command invocation.

    Precedence (lowest to highest): ``./markout.toml`` (unless ``--no-config`` or
    ``--config`` is given), the ``--config`` file, then ``-p`` options in order.

    Raises:
        MarkoutConfigError: If a property file cannot be read or parsed.
    """
    file_props: dict[str, str] = {}
    path: Path | None = config_file
    if path is None and not no_config:
        candidate = Path.cwd() / DEFAULT_PROPERTIES_FILE_NAME
        if candidate.is_file():
            path = candidate
    if path is not None:
        try:
            file_props = load_properties_toml(path)
        except PropertiesFileError as exc:
            raise MarkoutConfigError(str(exc)) from exc
    merged: dict[str, Any] = merge_properties(file_props, dict(properties))
    logger.debug("CLI output properties: %s", merged)
    return merged
