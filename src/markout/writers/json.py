# topmark:header:start
#
#   project      : MarkOut
#   file         : json.py
#   file_relpath : src/markout/writers/json.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""JSON writer.

Mapping convention (stable; changing it is a breaking change):

- Every top-level element becomes one JSON object with a single key, the element
  name, and is written as soon as the element closes. Several top-level
  elements in one operation are written as newline-separated JSON values
  (NDJSON).
- An element without attributes and without child elements maps to its text
  (a string), or to ``null`` when it has no text at all.
- Any other element maps to an object with:
    - ``"@attributes"``: attribute name → value, in document order (omitted when
      there are no attributes);
    - ``"#children"``: an array of the element's content in document order, where
      text is a string and each child element is a single-key object
      (omitted when there is no content).
- Adjacent text and CDATA chunks are merged into one string.
- Whitespace-only text is dropped while ``json-ignore-whitespace-text-nodes`` is
  enabled (the default).
- Comments, processing instructions, document types and namespace declarations
  have no representation and are dropped.
- Non-whitespace text outside any element is written as a JSON string value.

Example:
    ``<a href="u">x<b>y</b></a>`` is written as
    ``{"a":{"@attributes":{"href":"u"},"#children":["x",{"b":"y"}]}}``.

Formatting: ``indent=yes`` pretty-prints with ``indent-spaces``; otherwise compact
separators are used. Non-ASCII characters are escaped unless the output encoding
is a UTF encoding. ``jsonp=name`` wraps each value as ``name(...)``.
"""

from __future__ import annotations

import codecs
import json
from dataclasses import dataclass, field
from typing import Any, Final, Union

from markout.config.logging import get_logger
from markout.core.formats import OutputFormat
from markout.writers.base import ElementFrame, Writer

logger = get_logger(__name__)

ATTRIBUTES_KEY: Final[str] = "@attributes"
CHILDREN_KEY: Final[str] = "#children"


@dataclass(slots=True)
class _JsonElement:
    name: str
    attributes: dict[str, str] = field(default_factory=dict)
    children: list[Union[str, _JsonElement]] = field(default_factory=list)

    def add_text(self, text: str) -> None:
        if self.children and isinstance(self.children[-1], str):
            self.children[-1] += text
        else:
            self.children.append(text)

    def to_value(self, ignore_whitespace: bool) -> Any:
        """Return the JSON value of this element (see the module docstring)."""
        children: list[Union[str, _JsonElement]] = [
            c for c in self.children if not (ignore_whitespace and isinstance(c, str) and not c.strip())
        ]
        if not self.attributes and not any(isinstance(c, _JsonElement) for c in children):
            return "".join(c for c in children if isinstance(c, str)) if children else None
        obj: dict[str, Any] = {}
        if self.attributes:
            obj[ATTRIBUTES_KEY] = dict(self.attributes)
        if children:
            obj[CHILDREN_KEY] = [
                c if isinstance(c, str) else {c.name: c.to_value(ignore_whitespace)}
                for c in children
            ]
        return obj


class JSONWriter(Writer):
    """Writer for the ``json`` output method."""

    format = OutputFormat.JSON

    def __init__(self) -> None:
        super().__init__()
        self._elements: list[_JsonElement] = []
        self._values_written: int = 0

    def _on_bind(self) -> None:
        self._elements = []
        self._values_written = 0

    def _on_reset(self) -> None:
        self._elements = []
        self._values_written = 0

    def _ascii_only(self) -> bool:
        return not codecs.lookup(self.options.encoding).name.startswith("utf")

    def _emit(self, value: Any) -> None:
        if self.options.indent:
            text: str = json.dumps(
                value, ensure_ascii=self._ascii_only(), indent=self.options.indent_spaces
            )
        else:
            text = json.dumps(value, ensure_ascii=self._ascii_only(), separators=(",", ":"))
        if self.options.jsonp:
            text = f"{self.options.jsonp}({text})"
        if self._values_written:
            text = "\n" + text
        self._write(text)
        self._values_written += 1

    def _on_start_element(self, frame: ElementFrame, parent: ElementFrame | None) -> None:
        element = _JsonElement(frame.name)
        if self._elements:
            self._elements[-1].children.append(element)
        self._elements.append(element)

    def _on_attribute(self, frame: ElementFrame, name: str, value: str) -> None:
        self._elements[-1].attributes[name] = value

    def _on_end_element(self, frame: ElementFrame, empty: bool) -> None:
        element: _JsonElement = self._elements.pop()
        if not self._elements:
            ignore: bool = self.options.json_ignore_whitespace_text_nodes
            self._emit({element.name: element.to_value(ignore)})

    def _on_characters(self, text: str) -> None:
        if self._elements:
            self._elements[-1].add_text(text)
        elif text.strip():
            self._emit(text)

    def _on_cdata_section(self, text: str) -> None:
        self._on_characters(text)

    def _on_comment(self, text: str) -> None:
        logger.trace("JSON output drops comment %r", text)

    def _on_processing_instruction(self, target: str, data: str) -> None:
        logger.trace("JSON output drops processing instruction %r", target)
