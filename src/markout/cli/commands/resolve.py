# topmark:header:start
#
#   project      : MarkOut
#   file         : resolve.py
#   file_relpath : src/markout/cli/commands/resolve.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""MarkOut `resolve` command.

Shows the output configuration a set of properties resolves to, including the
selected format and every default that was filled in.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import click

from markout.cli.cli_types import EnumChoiceParam
from markout.cli.console import ClickConsole
from markout.cli.options import ReportFormat, collect_properties, output_property_options
from markout.config.io import to_toml
from markout.config.resolver import resolve_output_configuration

if TYPE_CHECKING:
    from pathlib import Path

    from markout.config.model import OutputConfiguration


@click.command(
    name="resolve",
    help="Show the output configuration resolved from properties.",
)
@output_property_options
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(ReportFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in ReportFormat)}).",
)
@click.option(
    "--toml",
    "as_toml",
    is_flag=True,
    default=False,
    help="Print the resolved properties as a markout.toml document.",
)
def resolve_command(
    *,
    properties: tuple[tuple[str, str], ...],
    config_file: Path | None,
    no_config: bool,
    output_format: ReportFormat | None = None,
    as_toml: bool = False,
) -> None:
    """Resolve output properties and print the result.

    Args:
        properties (tuple[tuple[str, str], ...]): ``-p KEY=VALUE`` pairs.
        config_file (Path | None): Optional TOML property file.
        no_config (bool): Skip ``./markout.toml``.
        output_format (ReportFormat | None): Plain text (default) or JSON.
        as_toml (bool): Print the resolved properties as TOML instead.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]

    props: dict[str, Any] = collect_properties(
        properties, config_file=config_file, no_config=no_config
    )
    config: OutputConfiguration = resolve_output_configuration(props)

    if as_toml:
        console.print(to_toml(config.to_properties()), nl=False)
        return
    if output_format is ReportFormat.JSON:
        console.print(json.dumps(config.to_dict(), indent=2))
        return

    console.print(f"format: {console.styled(config.format.key, bold=True)}")
    for key, value in config.to_dict().items():
        if key == "format":
            continue
        console.print(f"  {key}: {value}")
