# topmark:header:start
#
#   project      : MarkOut
#   file         : errors.py
#   file_relpath : src/markout/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the MarkOut CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no
    console is present in the Click context, they fall back to Click's default
    styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from markout.cli.exit_codes import ExitCode


class MarkoutCliError(click.ClickException):
    """Base class for all MarkOut CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorized by `show()` instead)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(self.format_message(), fg="bright_red"))
                return
        super().show(file)


class MarkoutUsageError(MarkoutCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class MarkoutConfigError(MarkoutCliError):
    """Error for property files that cannot be read or parsed."""

    exit_code = ExitCode.CONFIG_ERROR


class MarkoutFileNotFoundError(MarkoutCliError):
    """Error when the input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class MarkoutInputError(MarkoutCliError):
    """Error for input documents that are not well-formed XML."""

    exit_code = ExitCode.INPUT_ERROR


class MarkoutSerializationError(MarkoutCliError):
    """Error for writer failures (format invariants, contract violations)."""

    exit_code = ExitCode.SERIALIZATION_ERROR


class MarkoutIOError(MarkoutCliError):
    """Error for I/O errors reading or writing files."""

    exit_code = ExitCode.IO_ERROR
