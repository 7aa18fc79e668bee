# topmark:header:start
#
#   project      : MarkOut
#   file         : events.py
#   file_relpath : src/markout/core/events.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Structural document events.

A document is described as an ordered sequence of events produced by an
external collaborator (a query engine, a parser bridge, a test) and consumed in
order by a writer. Each event type maps one-to-one onto a writer operation, and
`replay()` performs that mapping.

Names are qualified-name strings (``"prefix:local"`` or ``"local"``). Namespace
bindings are ``(prefix, uri)`` pairs; the default namespace uses the empty prefix.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from collections.abc import Iterable

    from markout.writers.base import Writer

# Ordered attribute list and namespace bindings carried by StartElement
Attributes = tuple[tuple[str, str], ...]
NamespaceBindings = tuple[tuple[str, str], ...]


@dataclass(frozen=True, slots=True)
class StartDocument:
    """Start of a complete document (as opposed to a fragment)."""


@dataclass(frozen=True, slots=True)
class EndDocument:
    """End of the current document; terminal event of a serialization."""


@dataclass(frozen=True, slots=True)
class StartElement:
    """Start tag with its ordered attributes and the namespace bindings it declares."""

    name: str
    attributes: Attributes = ()
    namespaces: NamespaceBindings = ()


@dataclass(frozen=True, slots=True)
class EndElement:
    """End tag; ``name`` must match the innermost open StartElement."""

    name: str


@dataclass(frozen=True, slots=True)
class Characters:
    """Character content."""

    text: str


@dataclass(frozen=True, slots=True)
class CData:
    """Character content the producer marked as a CDATA section."""

    text: str


@dataclass(frozen=True, slots=True)
class Comment:
    """A comment."""

    text: str


@dataclass(frozen=True, slots=True)
class ProcessingInstruction:
    """A processing instruction."""

    target: str
    data: str = ""


@dataclass(frozen=True, slots=True)
class DocumentType:
    """A document type declaration."""

    name: str
    public_id: str | None = None
    system_id: str | None = None


DocumentEvent = Union[
    StartDocument,
    EndDocument,
    StartElement,
    EndElement,
    Characters,
    CData,
    Comment,
    ProcessingInstruction,
    DocumentType,
]


def split_qname(name: str) -> tuple[str, str]:
    """Split a qualified name into ``(prefix, local_name)``.

    Args:
        name (str): A name such as ``"xhtml:br"`` or ``"br"``.

    Returns:
        tuple[str, str]: The prefix (empty for unprefixed names) and the local name.
    """
    prefix, sep, local = name.partition(":")
    if not sep:
        return "", name
    return prefix, local


def replay(events: Iterable[DocumentEvent], writer: Writer) -> None:
    """Feed ``events`` to ``writer`` in order.

    Args:
        events (Iterable[DocumentEvent]): The events to deliver.
        writer (Writer): A writer bound to a sink.

    Raises:
        TypeError: If an item is not a known document event.
    """
    for event in events:
        if isinstance(event, StartElement):
            writer.start_element(event.name, event.attributes, event.namespaces)
        elif isinstance(event, EndElement):
            writer.end_element(event.name)
        elif isinstance(event, Characters):
            writer.characters(event.text)
        elif isinstance(event, CData):
            writer.cdata_section(event.text)
        elif isinstance(event, Comment):
            writer.comment(event.text)
        elif isinstance(event, ProcessingInstruction):
            writer.processing_instruction(event.target, event.data)
        elif isinstance(event, DocumentType):
            writer.document_type(event.name, event.public_id, event.system_id)
        elif isinstance(event, StartDocument):
            writer.start_document()
        elif isinstance(event, EndDocument):
            writer.end_document()
        else:
            raise TypeError(f"Not a document event: {event!r}")
