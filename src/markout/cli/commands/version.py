# topmark:header:start
#
#   project      : MarkOut
#   file         : version.py
#   file_relpath : src/markout/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""MarkOut `version` command.

Prints the MarkOut version as installed in the active Python environment.
"""

from __future__ import annotations

import json

import click

from markout.cli.cli_types import EnumChoiceParam
from markout.cli.console import ClickConsole
from markout.cli.options import ReportFormat
from markout.constants import MARKOUT_VERSION


@click.command(
    name="version",
    help="Show the current version of MarkOut.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(ReportFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in ReportFormat)}).",
)
def version_command(*, output_format: ReportFormat | None = None) -> None:
    """Show the current version of MarkOut.

    Args:
        output_format (ReportFormat | None): Plain text (default) or JSON.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]
    vlevel: int = int(ctx.obj.get("verbosity_level", 0))

    if output_format is ReportFormat.JSON:
        console.print(json.dumps({"version": MARKOUT_VERSION}))
    elif vlevel > 0:
        console.print(console.styled("MarkOut version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(MARKOUT_VERSION, bold=True)}")
    else:
        console.print(console.styled(MARKOUT_VERSION, bold=True))
