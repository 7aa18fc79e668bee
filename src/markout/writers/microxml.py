# topmark:header:start
#
#   project      : MarkOut
#   file         : microxml.py
#   file_relpath : src/markout/writers/microxml.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""MicroXML writer.

MicroXML is a restricted XML subset: no XML declaration, no document type, no
comments, no processing instructions, no namespace prefixes and a smaller
character set. Events the subset cannot express raise `FormatInvariantError`
before anything is written for them, and the writer then stays silent until it
is reset or re-bound.

A default namespace binding is written as a plain ``xmlns`` attribute, which
MicroXML allows. CDATA sections are written as escaped character content.
"""

from __future__ import annotations

from markout.core.errors import FormatInvariantError
from markout.core.formats import OutputFormat
from markout.writers.base import ElementFrame
from markout.writers.escaping import find_forbidden_microxml_char
from markout.writers.xml import XMLWriter

_REJECTED_EVENTS: dict[str, str] = {
    "comment": "comments are not allowed",
    "processing_instruction": "processing instructions are not allowed",
    "document_type": "document type declarations are not allowed",
}


class MicroXmlWriter(XMLWriter):
    """Writer for MicroXML."""

    format = OutputFormat.MICROXML

    def _fail(self, event: str, message: str) -> FormatInvariantError:
        return FormatInvariantError(self.format, event, message)

    def _check_event(self, event: str, *payload: str) -> None:
        if event in _REJECTED_EVENTS:
            raise self._fail(event, _REJECTED_EVENTS[event])

        if event == "start_element":
            self._check_name(event, payload[0], "element")
        elif event == "attribute":
            name, value = payload
            if name == "xmlns" or name.startswith("xmlns:"):
                raise self._fail(event, f"namespace declarations as attributes: {name!r}")
            self._check_name(event, name, "attribute")
            self._check_chars(event, value)
        elif event == "namespace":
            prefix, uri = payload
            if prefix:
                raise self._fail(event, f"namespace prefix {prefix!r} is not allowed")
            self._check_chars(event, uri)
        elif event in ("characters", "cdata_section"):
            self._check_chars(event, payload[0])

    def _check_name(self, event: str, name: str, kind: str) -> None:
        if ":" in name:
            raise self._fail(event, f"{kind} name {name!r} contains a colon")
        self._check_chars(event, name)

    def _check_chars(self, event: str, text: str) -> None:
        bad: str | None = find_forbidden_microxml_char(text)
        if bad is not None:
            raise self._fail(event, f"character U+{ord(bad):04X} is not allowed")

    def _on_start_document(self) -> None:
        # MicroXML has no XML declaration.
        pass

    def _before_root(self, frame: ElementFrame) -> None:
        # MicroXML has no document type declaration.
        pass

    def _on_cdata_section(self, text: str) -> None:
        self._write(self._escape_text(text))
