# topmark:header:start
#
#   project      : MarkOut
#   file         : xml.py
#   file_relpath : src/markout/writers/xml.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""XML writer and the markup machinery shared by the XHTML, HTML5 and MicroXML writers.

`XMLWriter` writes canonical well-formed XML:

- the XML declaration at `start_document` when ``omit-xml-declaration=no``;
- a document type declaration before the root element when ``doctype-system`` is
  configured (or when the producer sends a `document_type` event);
- empty elements self-close (``<e/>``);
- with ``indent=yes``, element-only content is indented by ``indent-spaces``
  spaces per level. Elements containing character data, and everything below
  ``xml:space="preserve"``, are written verbatim.

Subclasses customize output through small overridable methods (`_output_name`,
`_escape_text`, `_escape_attribute`, `_write_empty_element_end`, ...) rather than
re-implementing the event hooks.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from markout.config.logging import get_logger
from markout.core.formats import OutputFormat
from markout.writers.base import ElementFrame, Writer, WriterState
from markout.writers.escaping import (
    cdata_sections,
    comment_text,
    escape_xml_attribute,
    escape_xml_text,
)

if TYPE_CHECKING:
    from markout.config.logging import MarkoutLogger

logger: MarkoutLogger = get_logger(__name__)

XML_SPACE_ATTRIBUTE: str = "xml:space"


class XMLWriter(Writer):
    """Writer for well-formed XML."""

    format = OutputFormat.XML

    def __init__(self) -> None:
        super().__init__()
        self._doctype_written: bool = False

    def _on_bind(self) -> None:
        self._doctype_written = False

    def _on_reset(self) -> None:
        self._doctype_written = False

    # --- Document level ---

    def _on_start_document(self) -> None:
        if not self.options.omit_xml_declaration:
            self._write_xml_declaration()

    def _write_xml_declaration(self) -> None:
        decl: str = f'<?xml version="1.0" encoding="{self.options.encoding}"'
        if self.options.standalone is not None:
            decl += f' standalone="{"yes" if self.options.standalone else "no"}"'
        self._write(decl + "?>\n")

    @property
    def in_document(self) -> bool:
        """Whether the current operation started with `start_document`."""
        return self.state is WriterState.IN_DOCUMENT

    def _before_root(self, frame: ElementFrame) -> None:
        """Write whatever precedes the root element (the configured DOCTYPE)."""
        if self._doctype_written or self.options.doctype_system is None:
            return
        self._write_doctype(frame.output_name, self.options.doctype_public, self.options.doctype_system)

    def _write_doctype(self, name: str, public_id: str | None, system_id: str | None) -> None:
        decl: str = f"<!DOCTYPE {name}"
        if public_id:
            decl += f' PUBLIC "{public_id}"'
            if system_id:
                decl += f' "{system_id}"'
        elif system_id:
            decl += f' SYSTEM "{system_id}"'
        self._write(decl + ">\n")
        self._doctype_written = True

    def _on_document_type(self, name: str, public_id: str | None, system_id: str | None) -> None:
        if self._doctype_written:
            logger.debug("Ignoring second document type declaration %r", name)
            return
        self._write_doctype(name, public_id, system_id)

    # --- Naming and escaping ---

    def _output_name(self, frame: ElementFrame) -> str:
        """Return the element name as written; the received name by default."""
        return frame.name

    def _escape_text(self, text: str) -> str:
        return escape_xml_text(text)

    def _escape_attribute(self, value: str) -> str:
        return escape_xml_attribute(value)

    def _is_preformatted(self, frame: ElementFrame) -> bool:
        """Return True if whitespace below ``frame`` must be written verbatim."""
        return frame.preserve_space

    # --- Indentation ---

    def _indent(self, depth: int) -> None:
        self._write("\n" + " " * (self.options.indent_spaces * depth))

    def _should_indent_in(self, parent: ElementFrame | None) -> bool:
        if not self.options.indent or parent is None:
            return False
        return not parent.has_text and not self._is_preformatted(parent)

    # --- Elements ---

    def _on_start_element(self, frame: ElementFrame, parent: ElementFrame | None) -> None:
        frame.output_name = self._output_name(frame)
        if parent is None:
            self._before_root(frame)
        elif self._should_indent_in(parent):
            self._indent(frame.depth)
        self._write("<" + frame.output_name)

    def _on_namespace(self, frame: ElementFrame, prefix: str, uri: str) -> None:
        attr: str = f"xmlns:{prefix}" if prefix else "xmlns"
        self._write(f' {attr}="{self._escape_attribute(uri)}"')

    def _on_attribute(self, frame: ElementFrame, name: str, value: str) -> None:
        if name == XML_SPACE_ATTRIBUTE:
            if value == "preserve":
                frame.preserve_space = True
            elif value == "default":
                frame.preserve_space = False
        self._write(f' {name}="{self._escape_attribute(value)}"')

    def _on_close_start_tag(self, frame: ElementFrame) -> None:
        self._write(">")

    def _on_end_element(self, frame: ElementFrame, empty: bool) -> None:
        if empty:
            self._write_empty_element_end(frame)
            return
        if (
            self.options.indent
            and frame.has_element_children
            and not frame.has_text
            and not self._is_preformatted(frame)
        ):
            self._indent(frame.depth)
        self._write(f"</{frame.output_name}>")

    def _write_empty_element_end(self, frame: ElementFrame) -> None:
        """Finish an element that received no content while its start tag was open."""
        self._write("/>")

    # --- Content ---

    def _on_characters(self, text: str) -> None:
        self._write(self._escape_text(text))

    def _on_cdata_section(self, text: str) -> None:
        self._write(cdata_sections(text))

    def _mark_child_and_indent(self) -> None:
        parent: ElementFrame | None = self._stack[-1] if self._stack else None
        if parent is None:
            return
        if self._should_indent_in(parent):
            self._indent(parent.depth + 1)
        parent.has_element_children = True

    def _on_comment(self, text: str) -> None:
        self._mark_child_and_indent()
        self._write(f"<!--{comment_text(text)}-->")

    def _on_processing_instruction(self, target: str, data: str) -> None:
        self._mark_child_and_indent()
        safe: str = data.replace("?>", "? >")
        self._write(f"<?{target} {safe}?>" if safe else f"<?{target}?>")
