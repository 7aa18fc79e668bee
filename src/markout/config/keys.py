# topmark:header:start
#
#   project      : MarkOut
#   file         : keys.py
#   file_relpath : src/markout/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical output property keys and TOML section names.

This module defines the authoritative string constants used when reading
serialization properties from a property bag or from TOML sources
(``markout.toml`` and ``[tool.markout]`` in ``pyproject.toml``).

Design notes:
    - Keys defined here represent *external configuration API*.
    - Renaming or removing keys is a breaking change.
    - Property values are strings (as in a Java-style property bag); the resolver
      coerces them into typed fields of `OutputConfiguration`.
"""

from __future__ import annotations

from typing import Final


class OutputKeys:
    """Property bag keys recognized by the output configuration resolver."""

    METHOD: Final[str] = "method"
    HTML_VERSION: Final[str] = "html-version"
    ENCODING: Final[str] = "encoding"
    INDENT: Final[str] = "indent"
    INDENT_SPACES: Final[str] = "indent-spaces"
    OMIT_XML_DECLARATION: Final[str] = "omit-xml-declaration"
    STANDALONE: Final[str] = "standalone"
    DOCTYPE_PUBLIC: Final[str] = "doctype-public"
    DOCTYPE_SYSTEM: Final[str] = "doctype-system"
    JSON_IGNORE_WHITESPACE_TEXT_NODES: Final[str] = "json-ignore-whitespace-text-nodes"
    JSONP: Final[str] = "jsonp"

    @classmethod
    def recognized(cls) -> frozenset[str]:
        """Return every key the resolver maps onto a typed configuration field."""
        return frozenset(
            {
                cls.METHOD,
                cls.HTML_VERSION,
                cls.ENCODING,
                cls.INDENT,
                cls.INDENT_SPACES,
                cls.OMIT_XML_DECLARATION,
                cls.STANDALONE,
                cls.DOCTYPE_PUBLIC,
                cls.DOCTYPE_SYSTEM,
                cls.JSON_IGNORE_WHITESPACE_TEXT_NODES,
                cls.JSONP,
            }
        )


class Toml:
    """TOML section names used by property files."""

    # markout.toml
    SECTION_OUTPUT: Final[str] = "output"

    # pyproject.toml
    SECTION_TOOL: Final[str] = "tool"
    SECTION_MARKOUT: Final[str] = "markout"


# Defaults applied when a key is absent or its value cannot be used
DEFAULT_METHOD: Final[str] = "xml"
DEFAULT_HTML_VERSION: Final[float] = 1.0
DEFAULT_ENCODING: Final[str] = "UTF-8"
DEFAULT_INDENT: Final[bool] = False
DEFAULT_INDENT_SPACES: Final[int] = 4
DEFAULT_OMIT_XML_DECLARATION: Final[bool] = True
DEFAULT_JSON_IGNORE_WHITESPACE_TEXT_NODES: Final[bool] = True

# Threshold separating (X)HTML 1.x/4.x from HTML5 output
HTML5_VERSION_THRESHOLD: Final[float] = 5.0
