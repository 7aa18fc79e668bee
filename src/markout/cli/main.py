# topmark:header:start
#
#   project      : MarkOut
#   file         : main.py
#   file_relpath : src/markout/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""MarkOut command line entry point.

Group-level options are resolved once and placed into ``ctx.obj``:

- ``verbosity_level``: program-output verbosity from ``-v`` / ``-q``;
- ``log_level``: internal logging level, taken from ``MARKOUT_LOG_LEVEL``;
- ``console``: the `ClickConsole` used for user-facing output.
"""

from __future__ import annotations

import click

from markout.cli.commands.convert import convert_command
from markout.cli.commands.formats import formats_command
from markout.cli.commands.resolve import resolve_command
from markout.cli.commands.version import version_command
from markout.cli.console import ClickConsole
from markout.cli.options import common_verbose_options, resolve_verbosity
from markout.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(ctx: click.Context, *, verbose: int, quiet: int, no_color: bool) -> None:
    """Initialize shared state (verbosity, logging, console) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        no_color (bool): Whether ``--no-color`` was passed.
    """
    ctx.obj = ctx.obj or {}
    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    ctx.color = not no_color
    ctx.obj["console"] = ClickConsole(enable_color=not no_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="MarkOut: serialize documents as XML, XHTML, HTML5, text, JSON or MicroXML.",
)
@common_verbose_options
@click.option("--no-color", is_flag=True, default=False, help="Disable colored output.")
@click.pass_context
def cli(ctx: click.Context, verbose: int, quiet: int, no_color: bool) -> None:
    """Entry point for the MarkOut CLI."""
    init_common_state(ctx, verbose=verbose, quiet=quiet, no_color=no_color)
    console: ClickConsole = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'markout convert FILE -p method=...' to serialize a document.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(formats_command)

cli.add_command(resolve_command)

cli.add_command(convert_command)

if __name__ == "__main__":
    cli()
