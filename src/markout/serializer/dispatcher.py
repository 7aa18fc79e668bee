# topmark:header:start
#
#   project      : MarkOut
#   file         : dispatcher.py
#   file_relpath : src/markout/serializer/dispatcher.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Serializer dispatcher.

`Serializer` owns one long-lived writer per `OutputFormat`, selects the writer
for a request's configuration and binds it to the caller's sink. It holds no
document state of its own: everything that describes an operation in progress
lives in the active writer.

Typical use::

    serializer = Serializer()
    writer = serializer.set_output(stream, {"method": "html", "html-version": "5"})
    writer.start_document()
    ...
    writer.end_document()
    serializer.reset()
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Union

from markout.config.logging import get_logger
from markout.config.model import OutputConfiguration
from markout.config.resolver import resolve_output_configuration
from markout.core.events import replay
from markout.core.formats import OutputFormat
from markout.serializer.sink import OutputSink
from markout.writers import (
    HTML5Writer,
    JSONWriter,
    MicroXmlWriter,
    TextWriter,
    WriterState,
    XHTML5Writer,
    XHTMLWriter,
    XMLWriter,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from markout.config.logging import MarkoutLogger
    from markout.core.events import DocumentEvent
    from markout.writers.base import Writer

logger: MarkoutLogger = get_logger(__name__)

# Properties accepted by `Serializer.set_output`
Properties = Union[Mapping[str, Any], OutputConfiguration, None]


class Serializer:
    """Dispatches serialization requests to format writers.

    Instances are not thread-safe; use one serializer per concurrent operation.
    """

    def __init__(self) -> None:
        self._writers: Mapping[OutputFormat, Writer] = MappingProxyType(
            {
                OutputFormat.XML: XMLWriter(),
                OutputFormat.XHTML: XHTMLWriter(),
                OutputFormat.XHTML5: XHTML5Writer(),
                OutputFormat.HTML5: HTML5Writer(),
                OutputFormat.TEXT: TextWriter(),
                OutputFormat.JSON: JSONWriter(),
                OutputFormat.MICROXML: MicroXmlWriter(),
            }
        )
        self._active: Writer = self._writers[OutputFormat.XML]
        self._configuration: OutputConfiguration | None = None

    def __repr__(self) -> str:
        return f"Serializer(active={self._active.format.value})"

    @property
    def receiver(self) -> Writer:
        """The active writer; the XML writer until `set_output` selects another."""
        return self._active

    @property
    def writers(self) -> Mapping[OutputFormat, Writer]:
        """Read-only view of the owned writers."""
        return self._writers

    @property
    def configuration(self) -> OutputConfiguration | None:
        """The configuration of the last `set_output` call, or None after `reset`."""
        return self._configuration

    def writer_for(self, fmt: OutputFormat) -> Writer:
        """Return the owned writer for ``fmt``."""
        return self._writers[fmt]

    def set_output(self, sink: Any, properties: Properties = None) -> Writer:
        """Select and bind the writer for a serialization request.

        Args:
            sink (Any): Destination stream (text or binary) or an `OutputSink`.
            properties (Properties): Raw property bag or an already resolved
                `OutputConfiguration`. ``None`` selects the XML defaults.

        Returns:
            Writer: The bound writer, ready to receive events.
        """
        config: OutputConfiguration = (
            properties
            if isinstance(properties, OutputConfiguration)
            else resolve_output_configuration(properties)
        )
        writer: Writer = self._writers[config.format]
        if writer is not self._active and self._active.state is not WriterState.UNBOUND:
            logger.debug("Resetting previously active %s", type(self._active).__name__)
            self._active.reset()
        writer.bind_sink(OutputSink.bind(sink, config), config)
        self._active = writer
        self._configuration = config
        logger.debug("Selected %s for method=%r", type(writer).__name__, config.method)
        return writer

    def reset(self) -> None:
        """Reset every owned writer and make the XML writer active again.

        Every writer is reset even if releasing one of the sinks fails; the first
        such error is re-raised afterwards.

        Raises:
            Exception: The first error raised while releasing a sink.
        """
        first_error: Exception | None = None
        for writer in self._writers.values():
            try:
                writer.reset()
            except Exception as exc:
                logger.debug("Releasing the sink of %r failed: %s", writer, exc)
                if first_error is None:
                    first_error = exc
        self._active = self._writers[OutputFormat.XML]
        self._configuration = None
        logger.trace("Serializer reset")
        if first_error is not None:
            raise first_error

    def serialize(
        self,
        events: Iterable[DocumentEvent],
        sink: Any,
        properties: Properties = None,
    ) -> Writer:
        """Bind a writer and replay ``events`` into it.

        The writer stays bound after the call; call `reset` before reusing the
        serializer for unrelated output.

        Returns:
            Writer: The writer that received the events.
        """
        writer: Writer = self.set_output(sink, properties)
        replay(events, writer)
        return writer
