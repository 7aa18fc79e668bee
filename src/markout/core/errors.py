# topmark:header:start
#
#   project      : MarkOut
#   file         : errors.py
#   file_relpath : src/markout/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by MarkOut writers and the serializer.

Taxonomy:
    - Configuration problems (unknown ``method``, unparsable ``html-version``, ...)
      are never raised; the resolver substitutes documented defaults.
    - `SerializerUsageError`: the event producer broke the writer contract
      (event outside the bound window, unbalanced end tag).
    - `FormatInvariantError`: the selected format cannot express an event
      (e.g. a comment sent to the MicroXML writer). Kept distinct so callers can
      attribute the failure to the format choice.
    - Sink I/O errors (``OSError``, ``UnicodeEncodeError``) propagate unmodified.

CLI-facing errors with exit codes live in `markout.cli.errors`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from markout.core.formats import OutputFormat


class MarkoutError(Exception):
    """Base class for all MarkOut serialization errors."""


class SerializerUsageError(MarkoutError):
    """A writer operation was invoked in violation of the event contract."""


class WriterStateError(SerializerUsageError):
    """An event was sent to a writer that is not bound to a sink (or has finished)."""


class UnbalancedElementError(SerializerUsageError):
    """An end tag does not match the innermost open element, or elements were left open."""


class FormatInvariantError(MarkoutError):
    """The selected output format cannot represent the received event.

    Attributes:
        format (OutputFormat): The format whose invariant was violated.
        event (str): Name of the offending event (e.g. ``"comment"``).
    """

    def __init__(self, fmt: OutputFormat, event: str, message: str) -> None:
        super().__init__(f"{fmt.value}: {message}")
        self.format = fmt
        self.event = event


class PropertiesFileError(MarkoutError):
    """A property file could not be read or parsed."""
