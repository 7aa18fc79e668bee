# topmark:header:start
#
#   project      : MarkOut
#   file         : convert.py
#   file_relpath : src/markout/cli/commands/convert.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""MarkOut `convert` command.

Reads an XML document through the SAX bridge and serializes it with the output
properties given on the command line (and/or in a property file). Output goes
to standard output unless ``--output`` names a file; either way it is written as
bytes in the configured ``encoding``.

Exit codes:
    - `ExitCode.FILE_NOT_FOUND` when the input does not exist;
    - `ExitCode.INPUT_ERROR` when the input is not well-formed XML;
    - `ExitCode.SERIALIZATION_ERROR` when the selected format cannot express the
      input (e.g. a comment in MicroXML) or a character cannot be encoded;
    - `ExitCode.IO_ERROR` for read/write failures.
"""

from __future__ import annotations

from pathlib import Path
from typing import IO, TYPE_CHECKING, Any
from xml.sax import SAXParseException

import click

from markout.cli.errors import (
    MarkoutFileNotFoundError,
    MarkoutInputError,
    MarkoutIOError,
    MarkoutSerializationError,
)
from markout.cli.options import collect_properties, output_property_options
from markout.config.logging import get_logger
from markout.core.errors import MarkoutError
from markout.serializer import Serializer
from markout.sources.sax import serialize_xml_file

if TYPE_CHECKING:
    from markout.cli.console import ClickConsole

logger = get_logger(__name__)

STDIO_DASH: str = "-"


def _convert(source: Any, target: IO[bytes], props: dict[str, Any]) -> None:
    serializer = Serializer()
    try:
        serialize_xml_file(source, serializer, target, props)
    except SAXParseException as exc:
        raise MarkoutInputError(f"Input is not well-formed XML: {exc}") from exc
    except UnicodeEncodeError as exc:
        raise MarkoutSerializationError(f"Cannot encode output: {exc}") from exc
    except MarkoutError as exc:
        raise MarkoutSerializationError(str(exc)) from exc
    finally:
        serializer.reset()


@click.command(
    name="convert",
    help="Serialize an XML document in another output format.",
)
@click.argument("input_file", metavar="INPUT", type=click.Path(dir_okay=False, allow_dash=True))
@output_property_options
@click.option(
    "-o",
    "--output",
    "output_file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write to this file instead of standard output.",
)
def convert_command(
    *,
    input_file: str,
    properties: tuple[tuple[str, str], ...],
    config_file: Path | None,
    no_config: bool,
    output_file: Path | None = None,
) -> None:
    """Convert ``INPUT`` (a path, or ``-`` for standard input).

    Args:
        input_file (str): Path of the XML document, or ``-``.
        properties (tuple[tuple[str, str], ...]): ``-p KEY=VALUE`` pairs.
        config_file (Path | None): Optional TOML property file.
        no_config (bool): Skip ``./markout.toml``.
        output_file (Path | None): Destination file; standard output when omitted.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]
    vlevel: int = int(ctx.obj.get("verbosity_level", 0))

    props: dict[str, Any] = collect_properties(
        properties, config_file=config_file, no_config=no_config
    )

    source: Any
    if input_file == STDIO_DASH:
        source = click.get_binary_stream("stdin")
    else:
        path = Path(input_file)
        if not path.is_file():
            raise MarkoutFileNotFoundError(f"Input file not found: {input_file}")
        source = str(path)

    try:
        if output_file is None:
            _convert(source, click.get_binary_stream("stdout"), props)
        else:
            with output_file.open("wb") as target:
                _convert(source, target, props)
    except OSError as exc:
        raise MarkoutIOError(f"I/O error: {exc}") from exc

    if output_file is not None and vlevel > 0:
        console.print(f"Wrote {output_file}")
