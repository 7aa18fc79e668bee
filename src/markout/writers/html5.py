# topmark:header:start
#
#   project      : MarkOut
#   file         : html5.py
#   file_relpath : src/markout/writers/html5.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""HTML5 writer (HTML syntax).

Rules:
    - ``<!DOCTYPE html>`` precedes the root element of a document; there is never
      an XML declaration.
    - No element is ever written with a self-closing slash. Void elements
      (``br``, ``img``, ``meta``, ...) have no end tag; any content sent into a
      void element is a `FormatInvariantError`. Other empty elements get an
      explicit end tag.
    - HTML elements (no namespace or the XHTML namespace) are written by their
      lower-case local name, and XHTML namespace declarations are dropped.
    - Character content of ``script`` and ``style`` is written unescaped.
    - Attributes with an empty value, and boolean attributes whose value repeats
      their name (``checked="checked"``), are minimized to the bare name.
"""

from __future__ import annotations

from typing import Final

from markout.core.errors import FormatInvariantError
from markout.core.events import split_qname
from markout.core.formats import OutputFormat
from markout.writers.base import ElementFrame
from markout.writers.escaping import escape_html_attribute, escape_html_text
from markout.writers.xhtml import XHTML_NAMESPACE, XHTML5Writer

RAW_TEXT_ELEMENTS: Final[frozenset[str]] = frozenset({"script", "style"})

BOOLEAN_ATTRIBUTES: Final[frozenset[str]] = frozenset(
    {
        "allowfullscreen",
        "async",
        "autofocus",
        "autoplay",
        "checked",
        "controls",
        "default",
        "defer",
        "disabled",
        "formnovalidate",
        "hidden",
        "inert",
        "ismap",
        "itemscope",
        "loop",
        "multiple",
        "muted",
        "nomodule",
        "novalidate",
        "open",
        "playsinline",
        "readonly",
        "required",
        "reversed",
        "selected",
    }
)

# Events that would put content inside the innermost element
_CONTENT_EVENTS: Final[frozenset[str]] = frozenset(
    {"start_element", "characters", "cdata_section", "comment", "processing_instruction"}
)


class HTML5Writer(XHTML5Writer):
    """Writer for HTML5 in HTML syntax."""

    format = OutputFormat.HTML5

    declares_xhtml_namespace = False

    def _check_event(self, event: str, *payload: str) -> None:
        if event in _CONTENT_EVENTS and self._stack and self._stack[-1].void:
            raise FormatInvariantError(
                self.format,
                event,
                f"void element <{self._stack[-1].output_name}> cannot have content",
            )

    def _on_start_document(self) -> None:
        # HTML syntax has no XML declaration.
        pass

    def _output_name(self, frame: ElementFrame) -> str:
        if self._is_html_element(frame):
            return split_qname(frame.name)[1].lower()
        return frame.name

    def _on_start_element(self, frame: ElementFrame, parent: ElementFrame | None) -> None:
        if parent is not None and parent.raw_text:
            frame.raw_text = True
        elif self._is_html_element(frame) and self._local_name(frame) in RAW_TEXT_ELEMENTS:
            frame.raw_text = True
        super()._on_start_element(frame, parent)

    def _on_namespace(self, frame: ElementFrame, prefix: str, uri: str) -> None:
        if uri == XHTML_NAMESPACE:
            return
        super()._on_namespace(frame, prefix, uri)

    def _on_attribute(self, frame: ElementFrame, name: str, value: str) -> None:
        lowered: str = name.lower()
        if value == "" or (lowered in BOOLEAN_ATTRIBUTES and value.lower() == lowered):
            self._write(f" {name}")
            return
        self._write(f' {name}="{self._escape_attribute(value)}"')

    def _escape_text(self, text: str) -> str:
        return escape_html_text(text)

    def _escape_attribute(self, value: str) -> str:
        return escape_html_attribute(value)

    def _write_empty_element_end(self, frame: ElementFrame) -> None:
        if frame.void:
            self._write(">")
        else:
            self._write(f"></{frame.output_name}>")

    def _on_characters(self, text: str) -> None:
        if self._stack and self._stack[-1].raw_text:
            self._write(text)
        else:
            self._write(self._escape_text(text))

    def _on_cdata_section(self, text: str) -> None:
        # HTML syntax has no CDATA sections outside foreign content.
        self._on_characters(text)

    def _on_processing_instruction(self, target: str, data: str) -> None:
        self._mark_child_and_indent()
        self._write(f"<?{target} {data}>" if data else f"<?{target}>")
