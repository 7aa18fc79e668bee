# topmark:header:start
#
#   project      : MarkOut
#   file         : formats.py
#   file_relpath : src/markout/cli/commands/formats.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""MarkOut `formats` command.

Lists the output formats and the ``method`` property values that select them.
"""

from __future__ import annotations

import json

import click

from markout.cli.cli_types import EnumChoiceParam
from markout.cli.console import ClickConsole
from markout.cli.options import ReportFormat
from markout.core.formats import OutputFormat

# How each format is selected through the `method` / `html-version` properties
FORMAT_SELECTORS: dict[OutputFormat, tuple[str, ...]] = {
    OutputFormat.XML: ("xml", "(default, and any unknown method)"),
    OutputFormat.XHTML: ("xhtml (html-version < 5)", "html (html-version < 5)"),
    OutputFormat.XHTML5: ("xhtml5", "xhtml (html-version >= 5)"),
    OutputFormat.HTML5: ("html5", "html (html-version >= 5)"),
    OutputFormat.TEXT: ("text",),
    OutputFormat.JSON: ("json",),
    OutputFormat.MICROXML: ("microxml",),
}


@click.command(
    name="formats",
    help="List the supported output formats.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(ReportFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in ReportFormat)}).",
)
def formats_command(*, output_format: ReportFormat | None = None) -> None:
    """List the output formats.

    Args:
        output_format (ReportFormat | None): Plain text (default) or JSON.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]
    vlevel: int = int(ctx.obj.get("verbosity_level", 0))

    if output_format is ReportFormat.JSON:
        payload = [
            {"name": fmt.key, "description": fmt.label, "methods": list(FORMAT_SELECTORS[fmt])}
            for fmt in OutputFormat
        ]
        console.print(json.dumps(payload, indent=2))
        return

    if vlevel > 0:
        console.print(console.styled("Output formats:\n", bold=True, underline=True))
    width: int = max(len(fmt.key) for fmt in OutputFormat)
    for idx, fmt in enumerate(OutputFormat, start=1):
        descr: str = console.styled(fmt.label, dim=True)
        console.print(f"{idx}. {fmt.key:<{width}} {descr}")
        if vlevel > 0:
            console.print(f"      method: {', '.join(FORMAT_SELECTORS[fmt])}")
