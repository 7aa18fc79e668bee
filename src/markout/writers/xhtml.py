# topmark:header:start
#
#   project      : MarkOut
#   file         : xhtml.py
#   file_relpath : src/markout/writers/xhtml.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""XHTML 1.0 and XHTML5 writers.

Both write XML syntax. Elements in no namespace or in the XHTML namespace are
written with lower-case names, and only *known-empty* elements self-close
(``<br/>``); any other element without content gets an explicit end tag
(``<p></p>``) so the output also survives an HTML parser.

`XHTML5Writer` uses the HTML5 void element set, writes ``<!DOCTYPE html>``
before the root element of a document, and puts the root ``html`` element in the
XHTML namespace when the producer did not bind a default namespace.
"""

from __future__ import annotations

from typing import Final

from markout.core.errors import FormatInvariantError
from markout.core.events import split_qname
from markout.core.formats import OutputFormat
from markout.writers.base import ElementFrame
from markout.writers.xml import XMLWriter

XHTML_NAMESPACE: Final[str] = "http://www.w3.org/1999/xhtml"

# Elements declared EMPTY by the XHTML 1.0 DTDs
XHTML_EMPTY_ELEMENTS: Final[frozenset[str]] = frozenset(
    {
        "area",
        "base",
        "basefont",
        "br",
        "col",
        "frame",
        "hr",
        "img",
        "input",
        "isindex",
        "link",
        "meta",
        "param",
    }
)

# HTML5 void elements
HTML5_VOID_ELEMENTS: Final[frozenset[str]] = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    }
)

# Elements whose content is written without indentation
PREFORMATTED_ELEMENTS: Final[frozenset[str]] = frozenset({"pre", "textarea", "script", "style"})

HTML5_DOCTYPE: Final[str] = "<!DOCTYPE html>"


class XHTMLWriter(XMLWriter):
    """Writer for XHTML 1.0."""

    format = OutputFormat.XHTML

    empty_elements: frozenset[str] = XHTML_EMPTY_ELEMENTS

    def _is_html_element(self, frame: ElementFrame) -> bool:
        uri: str | None = self._element_namespace(frame)
        return uri is None or uri in ("", XHTML_NAMESPACE)

    def _local_name(self, frame: ElementFrame) -> str:
        return split_qname(frame.name)[1].lower()

    def _output_name(self, frame: ElementFrame) -> str:
        if not self._is_html_element(frame):
            return frame.name
        prefix, local = split_qname(frame.name)
        return f"{prefix}:{local.lower()}" if prefix else local.lower()

    def _on_start_element(self, frame: ElementFrame, parent: ElementFrame | None) -> None:
        if self._is_html_element(frame):
            local: str = self._local_name(frame)
            frame.void = local in self.empty_elements
            if local in PREFORMATTED_ELEMENTS:
                frame.preserve_space = True
        super()._on_start_element(frame, parent)

    def _write_empty_element_end(self, frame: ElementFrame) -> None:
        if frame.void:
            self._write("/>")
        else:
            self._write(f"></{frame.output_name}>")


class XHTML5Writer(XHTMLWriter):
    """Writer for HTML5 documents in XML syntax."""

    format = OutputFormat.XHTML5

    empty_elements = HTML5_VOID_ELEMENTS

    # Put a root `html` element without a default namespace into the XHTML namespace
    declares_xhtml_namespace: bool = True

    def _before_root(self, frame: ElementFrame) -> None:
        if self.in_document and not self._doctype_written:
            self._write(HTML5_DOCTYPE + "\n")
            self._doctype_written = True

    def _on_document_type(self, name: str, public_id: str | None, system_id: str | None) -> None:
        # HTML5 has a single, fixed document type declaration.
        if not self._doctype_written:
            self._write(HTML5_DOCTYPE + "\n")
            self._doctype_written = True

    def _on_start_element(self, frame: ElementFrame, parent: ElementFrame | None) -> None:
        super()._on_start_element(frame, parent)
        if (
            self.declares_xhtml_namespace
            and parent is None
            and self._local_name(frame) == "html"
            and self._lookup_namespace("") is None
        ):
            self._write(f' xmlns="{XHTML_NAMESPACE}"')
            frame.default_xmlns_written = True

    def _on_namespace(self, frame: ElementFrame, prefix: str, uri: str) -> None:
        if not prefix and frame.default_xmlns_written:
            if uri == XHTML_NAMESPACE:
                return
            raise FormatInvariantError(
                self.format,
                "namespace",
                f"default namespace {uri!r} conflicts with the XHTML namespace already"
                f" written on <{frame.output_name}>",
            )
        super()._on_namespace(frame, prefix, uri)
