# topmark:header:start
#
#   project      : MarkOut
#   file         : sink.py
#   file_relpath : src/markout/serializer/sink.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Output sink binding.

`OutputSink` adapts a caller-owned stream to the ``write(str)`` interface the
writers use, for the duration of one serialization operation.

Targets:
    - **Text streams** (anything with ``write(str)``): text is passed through. When
      the configured encoding is not a UTF encoding, characters it cannot
      represent are substituted the same way a binary target would do it, so
      the text stays encodable by whoever consumes it.
    - **Binary streams** (``io.RawIOBase`` / ``io.BufferedIOBase`` or anything
      that is not a text stream): text is encoded with the configured encoding.

Unencodable characters become numeric character references for markup formats
(``errors="xmlcharrefreplace"``); for TEXT and JSON they raise
``UnicodeEncodeError``. The sink never closes its target and never wraps I/O
errors.
"""

from __future__ import annotations

import codecs
import io
from typing import TYPE_CHECKING, Any

from markout.config.logging import get_logger
from markout.core.formats import is_markup_format

if TYPE_CHECKING:
    from markout.config.logging import MarkoutLogger
    from markout.config.model import OutputConfiguration

logger: MarkoutLogger = get_logger(__name__)


def _is_binary_target(target: Any) -> bool:
    if isinstance(target, io.TextIOBase):
        return False
    if isinstance(target, (io.RawIOBase, io.BufferedIOBase)):
        return True
    # Duck-typed targets: text unless they expose a binary ``mode``
    mode: Any = getattr(target, "mode", None)
    return isinstance(mode, str) and "b" in mode


class OutputSink:
    """Caller-owned output stream bound to one serialization operation.

    Attributes:
        encoding (str): Output encoding (from the configuration).
        errors (str): Codec error handler applied when encoding.
        binary (bool): Whether the target receives ``bytes``.
    """

    def __init__(self, target: Any, encoding: str = "UTF-8", errors: str = "strict") -> None:
        self._target: Any = target
        self.encoding: str = encoding
        self.errors: str = errors
        self.binary: bool = _is_binary_target(target)
        codec: codecs.CodecInfo = codecs.lookup(encoding)
        self._transcode: bool = not self.binary and not codec.name.startswith("utf")
        # One stateful encoder per binding so BOM-writing codecs emit a single BOM
        self._encoder: codecs.IncrementalEncoder = codec.incrementalencoder(errors)
        self._decoder: codecs.IncrementalDecoder = codec.incrementaldecoder("strict")
        self._released: bool = False

    @classmethod
    def bind(cls, target: Any, config: OutputConfiguration) -> OutputSink:
        """Create a sink for ``target`` using the encoding rules of ``config``.

        Args:
            target (Any): A text or binary stream, or an existing `OutputSink`
                (returned unchanged).
            config (OutputConfiguration): The resolved configuration.

        Returns:
            OutputSink: The bound sink.
        """
        if isinstance(target, OutputSink):
            return target
        errors: str = "xmlcharrefreplace" if is_markup_format(config.format) else "strict"
        sink = cls(target, encoding=config.encoding, errors=errors)
        logger.trace(
            "Bound %s sink (encoding=%s, errors=%s)",
            "binary" if sink.binary else "text",
            sink.encoding,
            sink.errors,
        )
        return sink

    @property
    def target(self) -> Any:
        """The wrapped stream."""
        return self._target

    @property
    def released(self) -> bool:
        """Whether `release()` was called."""
        return self._released

    def write(self, text: str) -> None:
        """Write ``text`` to the target, encoding it when required."""
        if self.binary:
            self._target.write(self._encoder.encode(text))
        elif self._transcode:
            self._target.write(self._decoder.decode(self._encoder.encode(text)))
        else:
            self._target.write(text)

    def flush(self) -> None:
        """Flush the target if it supports flushing and is still open."""
        if getattr(self._target, "closed", False):
            return
        flush = getattr(self._target, "flush", None)
        if callable(flush):
            flush()

    def release(self) -> None:
        """End the binding. The target is flushed but left open."""
        if self._released:
            return
        self._released = True
        self.flush()
