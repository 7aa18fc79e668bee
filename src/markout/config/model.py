# topmark:header:start
#
#   project      : MarkOut
#   file         : model.py
#   file_relpath : src/markout/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resolved output configuration.

`OutputConfiguration` is the immutable snapshot a writer is bound with. It is
produced once per serialization request by
`markout.config.resolver.resolve_output_configuration` and never mutated
afterwards; use `dataclasses.replace()` to derive a variant.

Immutability:
    - The dataclass is ``frozen=True``; ``extras`` is exposed as a
      ``MappingProxyType`` so pass-through keys cannot be edited in place.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from markout.config.keys import (
    DEFAULT_ENCODING,
    DEFAULT_HTML_VERSION,
    DEFAULT_INDENT,
    DEFAULT_INDENT_SPACES,
    DEFAULT_JSON_IGNORE_WHITESPACE_TEXT_NODES,
    DEFAULT_METHOD,
    DEFAULT_OMIT_XML_DECLARATION,
    OutputKeys,
)
from markout.core.formats import OutputFormat

if TYPE_CHECKING:
    from collections.abc import Mapping

_EMPTY: Mapping[str, str] = MappingProxyType({})


@dataclass(frozen=True, slots=True)
class OutputConfiguration:
    """Immutable, default-filled serialization options.

    Attributes:
        format (OutputFormat): The selected writer format.
        method (str): The normalized (lower-cased) ``method`` token as requested.
        html_version (float): The effective ``html-version`` (1.0 when absent or invalid).
        encoding (str): Output character encoding name.
        indent (bool): Whether writers insert indentation whitespace.
        indent_spaces (int): Spaces per indentation level.
        omit_xml_declaration (bool): Suppress the ``<?xml ...?>`` declaration.
        standalone (bool | None): ``standalone`` pseudo-attribute of the XML
            declaration; ``None`` omits it.
        doctype_public (str | None): Public identifier for the document type declaration.
        doctype_system (str | None): System identifier for the document type declaration.
        json_ignore_whitespace_text_nodes (bool): Drop whitespace-only text in JSON output.
        jsonp (str | None): Function name wrapping JSON values (JSONP).
        extras (Mapping[str, str]): Unrecognized keys, passed through unvalidated.
    """

    format: OutputFormat = OutputFormat.XML
    method: str = DEFAULT_METHOD
    html_version: float = DEFAULT_HTML_VERSION
    encoding: str = DEFAULT_ENCODING
    indent: bool = DEFAULT_INDENT
    indent_spaces: int = DEFAULT_INDENT_SPACES
    omit_xml_declaration: bool = DEFAULT_OMIT_XML_DECLARATION
    standalone: bool | None = None
    doctype_public: str | None = None
    doctype_system: str | None = None
    json_ignore_whitespace_text_nodes: bool = DEFAULT_JSON_IGNORE_WHITESPACE_TEXT_NODES
    jsonp: str | None = None
    extras: Mapping[str, str] = field(default_factory=lambda: _EMPTY)

    def get(self, key: str, default: str | None = None) -> str | None:
        """Return a pass-through property by key.

        Args:
            key (str): Property key, e.g. ``"media-type"``.
            default (str | None): Value returned when the key was not supplied.

        Returns:
            str | None: The raw property value, or ``default``.
        """
        return self.extras.get(key, default)

    def to_properties(self) -> dict[str, str]:
        """Render the configuration back into a string property bag.

        Resolving the returned mapping again yields an equal configuration.

        Returns:
            dict[str, str]: Property keys mapped to string values.
        """

        def _yes_no(flag: bool) -> str:
            return "yes" if flag else "no"

        props: dict[str, str] = dict(self.extras)
        props.update(
            {
                OutputKeys.METHOD: self.method,
                OutputKeys.HTML_VERSION: repr(self.html_version),
                OutputKeys.ENCODING: self.encoding,
                OutputKeys.INDENT: _yes_no(self.indent),
                OutputKeys.INDENT_SPACES: str(self.indent_spaces),
                OutputKeys.OMIT_XML_DECLARATION: _yes_no(self.omit_xml_declaration),
                OutputKeys.JSON_IGNORE_WHITESPACE_TEXT_NODES: _yes_no(
                    self.json_ignore_whitespace_text_nodes
                ),
            }
        )
        if self.standalone is not None:
            props[OutputKeys.STANDALONE] = _yes_no(self.standalone)
        if self.doctype_public is not None:
            props[OutputKeys.DOCTYPE_PUBLIC] = self.doctype_public
        if self.doctype_system is not None:
            props[OutputKeys.DOCTYPE_SYSTEM] = self.doctype_system
        if self.jsonp is not None:
            props[OutputKeys.JSONP] = self.jsonp
        return props

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly view of the configuration (for CLI output)."""
        return {
            "format": self.format.value,
            "method": self.method,
            "html_version": self.html_version,
            "encoding": self.encoding,
            "indent": self.indent,
            "indent_spaces": self.indent_spaces,
            "omit_xml_declaration": self.omit_xml_declaration,
            "standalone": self.standalone,
            "doctype_public": self.doctype_public,
            "doctype_system": self.doctype_system,
            "json_ignore_whitespace_text_nodes": self.json_ignore_whitespace_text_nodes,
            "jsonp": self.jsonp,
            "extras": dict(self.extras),
        }
