# topmark:header:start
#
#   project      : MarkOut
#   file         : base.py
#   file_relpath : src/markout/writers/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Writer base module: the capability contract shared by every format writer.

This module defines the `Writer` base class. A writer turns structural document
events into text for one concrete `OutputFormat` and writes it incrementally to
a bound `OutputSink`.

Responsibilities:
    - **Lifecycle:** An explicit state machine guards every event::

          UNBOUND --bind_sink--> BOUND --start_document--> IN_DOCUMENT
          BOUND / IN_DOCUMENT --end_document--> FINISHED
          any open --(error or out-of-order event)--> FAILED
          any --reset--> UNBOUND

      Events are only accepted in ``BOUND`` (fragment output) and ``IN_DOCUMENT``;
      anything else raises `WriterStateError`. A failed writer emits nothing
      more until it is reset or re-bound.
    - **Structure:** The open-element stack is maintained here. An end tag that
      does not match the innermost open element, or elements left open at
      `end_document`, raise `UnbalancedElementError`; the writer never repairs
      the stream.
    - **Start tags:** `attribute` / `namespace` are only legal while the start tag
      of the innermost element is still open, i.e. before any content event.

What this class does **not** do:
    - Produce any output. Subclasses implement the ``_on_*`` hooks and, where a
      format cannot express an event, raise `FormatInvariantError` from
      `_check_event` *before* anything is written.

Writer instances are long-lived: the dispatcher creates one per format and
re-binds it for every serialization operation.
"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, ClassVar

from markout.config.logging import get_logger
from markout.config.model import OutputConfiguration
from markout.core.errors import UnbalancedElementError, WriterStateError
from markout.core.events import split_qname
from markout.core.formats import OutputFormat

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from markout.config.logging import MarkoutLogger
    from markout.serializer.sink import OutputSink

logger: MarkoutLogger = get_logger(__name__)


class WriterState(Enum):
    """Lifecycle states of a writer."""

    UNBOUND = "unbound"
    BOUND = "bound"
    IN_DOCUMENT = "in_document"
    FINISHED = "finished"
    FAILED = "failed"


# States in which document events are accepted
_OPEN_STATES: frozenset[WriterState] = frozenset({WriterState.BOUND, WriterState.IN_DOCUMENT})


@dataclass(slots=True)
class ElementFrame:
    """Book-keeping for one open element.

    Attributes:
        name (str): The element name as received (used to match the end tag).
        depth (int): Nesting depth; the outermost element has depth 0.
        output_name (str): The name as written by the writer (may be normalized).
        namespaces (dict[str, str]): Namespace bindings declared on this element.
        has_element_children (bool): Whether child elements (or comments/PIs) were written.
        has_text (bool): Whether character content was written (mixed content).
        preserve_space (bool): Whether whitespace must be written verbatim below this element.
        raw_text (bool): Whether character content is written without escaping.
        void (bool): Whether the element can never have content.
        default_xmlns_written (bool): Whether the writer added a default namespace
            declaration on its own.
    """

    name: str
    depth: int
    output_name: str = ""
    namespaces: dict[str, str] = field(default_factory=dict)
    has_element_children: bool = False
    has_text: bool = False
    preserve_space: bool = False
    raw_text: bool = False
    void: bool = False
    default_xmlns_written: bool = False


class Writer:
    """Base class for format writers.

    Subclasses set `format` and override the ``_on_*`` hooks they need; every
    hook is a no-op here, so a subclass only handles the events its format can
    represent.
    """

    format: ClassVar[OutputFormat]

    def __init__(self) -> None:
        self._state: WriterState = WriterState.UNBOUND
        self._sink: OutputSink | None = None
        self._options: OutputConfiguration = OutputConfiguration(format=self.format)
        self._stack: list[ElementFrame] = []
        self._tag_open: bool = False
        self._has_content: bool = False

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(state={self._state.value}, depth={len(self._stack)})"

    # --- Lifecycle ---

    @property
    def state(self) -> WriterState:
        """Current lifecycle state."""
        return self._state

    @property
    def is_bound(self) -> bool:
        """Whether the writer currently holds a sink."""
        return self._sink is not None

    @property
    def options(self) -> OutputConfiguration:
        """The configuration the writer was bound with (defaults when unbound)."""
        return self._options

    @property
    def depth(self) -> int:
        """Number of currently open elements."""
        return len(self._stack)

    def bind_sink(self, sink: OutputSink, options: OutputConfiguration) -> None:
        """Bind the writer to a sink and resolved options.

        A writer that is still bound (or finished, or failed) is reset first, so
        re-binding never leaks state from a previous operation.

        Args:
            sink (OutputSink): Destination for the serialized text.
            options (OutputConfiguration): The resolved configuration.
        """
        if self._state is not WriterState.UNBOUND:
            self.reset()
        self._sink = sink
        self._options = options
        self._state = WriterState.BOUND
        self._on_bind()
        logger.debug("%s bound (encoding=%s)", self.__class__.__name__, options.encoding)

    def reset(self) -> None:
        """Return the writer to its initial, inert state.

        Clears the open-element stack and any pending start tag, releases the sink
        reference, and restores default options. Calling it repeatedly is harmless.

        The writer is inert afterwards even when flushing the sink fails; that
        I/O error is re-raised once the state has been cleared.
        """
        sink: OutputSink | None = self._sink
        self._sink = None
        try:
            if sink is not None:
                sink.release()
        finally:
            self._stack.clear()
            self._tag_open = False
            self._has_content = False
            self._options = OutputConfiguration(format=self.format)
            self._state = WriterState.UNBOUND
            self._on_reset()

    # --- Events ---

    def start_document(self) -> None:
        """Begin a complete document."""
        self._require_open("start_document")
        if self._state is WriterState.IN_DOCUMENT or self._has_content:
            self._state = WriterState.FAILED
            raise WriterStateError("start_document() must be the first event of an operation")
        with self._guard("start_document"):
            self._check_event("start_document")
            self._on_start_document()
            self._state = WriterState.IN_DOCUMENT

    def end_document(self) -> None:
        """Finish the current document (or fragment) and flush the sink."""
        self._require_open("end_document")
        if self._stack:
            self._state = WriterState.FAILED
            names = ", ".join(f.name for f in self._stack)
            raise UnbalancedElementError(f"end_document() with open elements: {names}")
        with self._guard("end_document"):
            self._check_event("end_document")
            self._close_pending_tag()
            self._on_end_document()
            if self._sink is not None:
                self._sink.flush()
            self._state = WriterState.FINISHED
        logger.debug("%s finished", self.__class__.__name__)

    def start_element(
        self,
        name: str,
        attributes: Iterable[tuple[str, str]] = (),
        namespaces: Iterable[tuple[str, str]] = (),
    ) -> None:
        """Open an element.

        Args:
            name (str): Qualified element name.
            attributes (Iterable[tuple[str, str]]): Ordered ``(name, value)`` pairs.
            namespaces (Iterable[tuple[str, str]]): ``(prefix, uri)`` bindings
                declared on the element; the default namespace uses prefix ``""``.
        """
        self._require_open("start_element")
        attrs: tuple[tuple[str, str], ...] = tuple(attributes)
        bindings: tuple[tuple[str, str], ...] = tuple(namespaces)
        with self._guard("start_element"):
            # Validate the whole start tag before writing any of it.
            self._check_event("start_element", name)
            for prefix, uri in bindings:
                self._check_event("namespace", prefix, uri)
            for attr_name, value in attrs:
                self._check_event("attribute", attr_name, value)

            self._close_pending_tag()
            parent: ElementFrame | None = self._stack[-1] if self._stack else None
            frame = ElementFrame(name=name, depth=len(self._stack), output_name=name)
            frame.namespaces.update(bindings)
            if parent is not None:
                parent.has_element_children = True
                frame.preserve_space = parent.preserve_space
            self._stack.append(frame)
            self._has_content = True
            self._tag_open = True
            self._on_start_element(frame, parent)
            for prefix, uri in bindings:
                self._on_namespace(frame, prefix, uri)
            for attr_name, value in attrs:
                self._on_attribute(frame, attr_name, value)

    def namespace(self, prefix: str, uri: str) -> None:
        """Declare a namespace binding on the element whose start tag is open."""
        self._require_start_tag("namespace")
        with self._guard("namespace"):
            self._check_event("namespace", prefix, uri)
            frame: ElementFrame = self._stack[-1]
            frame.namespaces[prefix] = uri
            self._on_namespace(frame, prefix, uri)

    def attribute(self, name: str, value: str) -> None:
        """Add an attribute to the element whose start tag is open."""
        self._require_start_tag("attribute")
        with self._guard("attribute"):
            self._check_event("attribute", name, value)
            self._on_attribute(self._stack[-1], name, value)

    def characters(self, text: str) -> None:
        """Write character content. Empty text is accepted and produces nothing."""
        self._require_open("characters")
        if not text:
            return
        with self._guard("characters"):
            self._check_event("characters", text)
            self._close_pending_tag()
            if self._stack:
                self._stack[-1].has_text = True
            self._has_content = True
            self._on_characters(text)

    def cdata_section(self, text: str) -> None:
        """Write character content marked as a CDATA section."""
        self._require_open("cdata_section")
        with self._guard("cdata_section"):
            self._check_event("cdata_section", text)
            self._close_pending_tag()
            if self._stack:
                self._stack[-1].has_text = True
            self._has_content = True
            self._on_cdata_section(text)

    def comment(self, text: str) -> None:
        """Write a comment."""
        self._require_open("comment")
        with self._guard("comment"):
            self._check_event("comment", text)
            self._close_pending_tag()
            self._has_content = True
            self._on_comment(text)

    def processing_instruction(self, target: str, data: str = "") -> None:
        """Write a processing instruction."""
        self._require_open("processing_instruction")
        with self._guard("processing_instruction"):
            self._check_event("processing_instruction", target, data)
            self._close_pending_tag()
            self._has_content = True
            self._on_processing_instruction(target, data)

    def document_type(
        self, name: str, public_id: str | None = None, system_id: str | None = None
    ) -> None:
        """Write a document type declaration."""
        self._require_open("document_type")
        with self._guard("document_type"):
            self._check_event("document_type", name)
            self._close_pending_tag()
            self._has_content = True
            self._on_document_type(name, public_id, system_id)

    def end_element(self, name: str) -> None:
        """Close the innermost open element.

        Args:
            name (str): Qualified element name; must equal the innermost open element.

        Raises:
            UnbalancedElementError: If no element is open or the name does not match.
        """
        self._require_open("end_element")
        if not self._stack:
            self._state = WriterState.FAILED
            raise UnbalancedElementError(f"end_element({name!r}) without an open element")
        frame: ElementFrame = self._stack[-1]
        if frame.name != name:
            self._state = WriterState.FAILED
            raise UnbalancedElementError(
                f"end_element({name!r}) does not match open element {frame.name!r}"
            )
        with self._guard("end_element"):
            self._check_event("end_element", name)
            empty: bool = self._tag_open
            self._tag_open = False
            self._stack.pop()
            self._on_end_element(frame, empty)

    # --- Helpers for subclasses ---

    def _write(self, text: str) -> None:
        if self._sink is None:
            raise WriterStateError(f"{self.__class__.__name__} is not bound to a sink")
        self._sink.write(text)

    def _lookup_namespace(self, prefix: str) -> str | None:
        """Return the namespace URI bound to ``prefix`` in the open-element scope."""
        for frame in reversed(self._stack):
            if prefix in frame.namespaces:
                return frame.namespaces[prefix]
        return None

    def _element_namespace(self, frame: ElementFrame) -> str | None:
        prefix, _ = split_qname(frame.name)
        return self._lookup_namespace(prefix)

    def _close_pending_tag(self) -> None:
        if self._tag_open:
            self._tag_open = False
            self._on_close_start_tag(self._stack[-1])

    def _require_open(self, event: str) -> None:
        if self._state not in _OPEN_STATES:
            raise WriterStateError(
                f"{event}() called on {self.__class__.__name__} in state {self._state.value!r}"
            )
        logger.trace("%s.%s()", self.__class__.__name__, event)

    def _require_start_tag(self, event: str) -> None:
        self._require_open(event)
        if not self._tag_open:
            self._state = WriterState.FAILED
            raise WriterStateError(f"{event}() is only allowed directly after start_element()")

    @contextmanager
    def _guard(self, event: str) -> Iterator[None]:
        """Move the writer to FAILED if handling ``event`` raises."""
        try:
            yield
        except Exception:
            logger.debug("%s failed while handling %s()", self.__class__.__name__, event)
            self._state = WriterState.FAILED
            raise

    # --- Hooks ---

    def _check_event(self, event: str, *payload: str) -> None:
        """Reject events the format cannot express; called before any output."""

    def _on_bind(self) -> None:
        pass

    def _on_reset(self) -> None:
        pass

    def _on_start_document(self) -> None:
        pass

    def _on_end_document(self) -> None:
        pass

    def _on_start_element(self, frame: ElementFrame, parent: ElementFrame | None) -> None:
        pass

    def _on_namespace(self, frame: ElementFrame, prefix: str, uri: str) -> None:
        pass

    def _on_attribute(self, frame: ElementFrame, name: str, value: str) -> None:
        pass

    def _on_close_start_tag(self, frame: ElementFrame) -> None:
        pass

    def _on_end_element(self, frame: ElementFrame, empty: bool) -> None:
        pass

    def _on_characters(self, text: str) -> None:
        pass

    def _on_cdata_section(self, text: str) -> None:
        pass

    def _on_comment(self, text: str) -> None:
        pass

    def _on_processing_instruction(self, target: str, data: str) -> None:
        pass

    def _on_document_type(self, name: str, public_id: str | None, system_id: str | None) -> None:
        pass
