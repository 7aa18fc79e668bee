# topmark:header:start
#
#   project      : MarkOut
#   file         : text.py
#   file_relpath : src/markout/writers/text.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Plain text writer: emits character content only.

Element, attribute, comment, processing-instruction and document-type events
are accepted (and still checked for structural validity by `Writer`) but produce
no output. Text is written as-is, without escaping; ``indent`` has no effect.
"""

from __future__ import annotations

from markout.core.formats import OutputFormat
from markout.writers.base import Writer


class TextWriter(Writer):
    """Writer for the ``text`` output method."""

    format = OutputFormat.TEXT

    def _on_characters(self, text: str) -> None:
        self._write(text)

    def _on_cdata_section(self, text: str) -> None:
        self._write(text)
