# topmark:header:start
#
#   project      : MarkOut
#   file         : __init__.py
#   file_relpath : src/markout/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""MarkOut: stream structural document events as XML, XHTML, HTML5, text, JSON or MicroXML.

Public API:
    - `Serializer`: selects and binds the writer for an output configuration.
    - `OutputConfiguration` / `resolve_output_configuration`: the resolved options.
    - `OutputFormat`: the closed set of supported formats.
    - `OutputSink`: adapter for text and binary output streams.
    - Event dataclasses (`StartElement`, `Characters`, ...) and `replay`.
    - The error taxonomy rooted at `MarkoutError`.

Example:
    ```python
    import io
    from markout import Serializer

    out = io.StringIO()
    writer = Serializer().set_output(out, {"method": "json"})
    writer.start_element("a")
    writer.characters("x")
    writer.end_element("a")
    writer.end_document()
    assert out.getvalue() == '{"a":"x"}'
    ```
"""

from __future__ import annotations

from markout.config.keys import OutputKeys
from markout.config.model import OutputConfiguration
from markout.config.resolver import resolve_output_configuration, select_format
from markout.core.errors import (
    FormatInvariantError,
    MarkoutError,
    SerializerUsageError,
    UnbalancedElementError,
    WriterStateError,
)
from markout.core.events import (
    CData,
    Characters,
    Comment,
    DocumentType,
    EndDocument,
    EndElement,
    ProcessingInstruction,
    StartDocument,
    StartElement,
    replay,
)
from markout.core.formats import OutputFormat
from markout.serializer import OutputSink, Serializer
from markout.writers import Writer, WriterState

__all__ = [
    "CData",
    "Characters",
    "Comment",
    "DocumentType",
    "EndDocument",
    "EndElement",
    "FormatInvariantError",
    "MarkoutError",
    "OutputConfiguration",
    "OutputFormat",
    "OutputKeys",
    "OutputSink",
    "ProcessingInstruction",
    "SerializerUsageError",
    "StartDocument",
    "StartElement",
    "Serializer",
    "UnbalancedElementError",
    "Writer",
    "WriterState",
    "WriterStateError",
    "replay",
    "resolve_output_configuration",
    "select_format",
]
