# topmark:header:start
#
#   project      : MarkOut
#   file         : sax.py
#   file_relpath : src/markout/sources/sax.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SAX event bridge.

`EventBridge` receives the callbacks of a standard-library SAX parser and
forwards them to a MarkOut writer, so an existing XML document can be
re-serialized in any output format. The parser runs without namespace
processing: element names arrive as written and ``xmlns`` attributes are turned
into namespace bindings.

Adjacent character callbacks are merged before they reach the writer, and
characters reported between ``startCDATA``/``endCDATA`` become a single CDATA
event. Comments inside the internal DTD subset are dropped.

External entities are never resolved.
"""

from __future__ import annotations

import xml.sax
from typing import TYPE_CHECKING, Any
from xml.sax.handler import ContentHandler, LexicalHandler

from markout.config.logging import get_logger

if TYPE_CHECKING:
    from xml.sax.xmlreader import AttributesImpl

    from markout.config.logging import MarkoutLogger
    from markout.serializer.dispatcher import Properties, Serializer
    from markout.writers.base import Writer

logger: MarkoutLogger = get_logger(__name__)


def split_namespace_attributes(
    attrs: AttributesImpl,
) -> tuple[tuple[tuple[str, str], ...], tuple[tuple[str, str], ...]]:
    """Separate ``xmlns`` declarations from ordinary attributes.

    Args:
        attrs (AttributesImpl): Attributes as reported by a non-namespace SAX parser.

    Returns:
        tuple[tuple[tuple[str, str], ...], tuple[tuple[str, str], ...]]: The
        ordinary ``(name, value)`` attributes and the ``(prefix, uri)`` bindings,
        both in document order.
    """
    attributes: list[tuple[str, str]] = []
    bindings: list[tuple[str, str]] = []
    for name in attrs.getNames():
        value: str = attrs.getValue(name)
        if name == "xmlns":
            bindings.append(("", value))
        elif name.startswith("xmlns:"):
            bindings.append((name[len("xmlns:") :], value))
        else:
            attributes.append((name, value))
    return tuple(attributes), tuple(bindings)


class EventBridge(ContentHandler, LexicalHandler):
    """Forward SAX callbacks to a bound writer."""

    def __init__(self, writer: Writer) -> None:
        super().__init__()
        self.writer: Writer = writer
        self._text: list[str] = []
        self._in_cdata: bool = False
        self._in_dtd: bool = False

    def _flush_text(self) -> None:
        if not self._text:
            return
        text: str = "".join(self._text)
        self._text.clear()
        if self._in_cdata:
            self.writer.cdata_section(text)
        else:
            self.writer.characters(text)

    # --- ContentHandler ---

    def startDocument(self) -> None:
        self.writer.start_document()

    def endDocument(self) -> None:
        self._flush_text()
        self.writer.end_document()

    def startElement(self, name: str, attrs: AttributesImpl) -> None:
        self._flush_text()
        attributes, bindings = split_namespace_attributes(attrs)
        self.writer.start_element(name, attributes, bindings)

    def endElement(self, name: str) -> None:
        self._flush_text()
        self.writer.end_element(name)

    def characters(self, content: str) -> None:
        self._text.append(content)

    def ignorableWhitespace(self, whitespace: str) -> None:
        self._text.append(whitespace)

    def processingInstruction(self, target: str, data: str) -> None:
        self._flush_text()
        self.writer.processing_instruction(target, data or "")

    # --- LexicalHandler ---

    def comment(self, content: str) -> None:
        if self._in_dtd:
            return
        self._flush_text()
        self.writer.comment(content)

    def startDTD(
        self, name: str, public_id: str | None, system_id: str | None
    ) -> None:
        self._in_dtd = True
        self.writer.document_type(name, public_id or None, system_id or None)

    def endDTD(self) -> None:
        self._in_dtd = False

    def startCDATA(self) -> None:
        self._flush_text()
        self._in_cdata = True

    def endCDATA(self) -> None:
        self._flush_text()
        self._in_cdata = False


def make_parser(bridge: EventBridge) -> xml.sax.xmlreader.XMLReader:
    """Return a non-namespace-aware SAX parser wired to ``bridge``."""
    parser = xml.sax.make_parser()
    parser.setFeature(xml.sax.handler.feature_namespaces, False)
    parser.setFeature(xml.sax.handler.feature_external_ges, False)
    parser.setContentHandler(bridge)
    parser.setProperty(xml.sax.handler.property_lexical_handler, bridge)
    return parser


def serialize_xml_file(
    source: Any,
    serializer: Serializer,
    sink: Any,
    properties: Properties = None,
) -> Writer:
    """Parse an XML document and serialize it through ``serializer``.

    Args:
        source (Any): A path or a binary stream holding the XML document.
        serializer (Serializer): The dispatcher that selects and binds the writer.
        sink (Any): Destination stream or `OutputSink`.
        properties (Properties): Output properties (or a resolved configuration).

    Returns:
        Writer: The writer that received the document; it is left bound.

    Raises:
        xml.sax.SAXParseException: If the input is not well-formed XML.
    """
    writer: Writer = serializer.set_output(sink, properties)
    parser = make_parser(EventBridge(writer))
    logger.debug("Parsing %r into %s", source, type(writer).__name__)
    parser.parse(source)
    return writer
