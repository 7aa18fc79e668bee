# topmark:header:start
#
#   project      : MarkOut
#   file         : formats.py
#   file_relpath : src/markout/core/formats.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared output format definitions.

This module centralizes the `OutputFormat` enum so the resolver, the writers,
the dispatcher and the CLI agree on the same closed format vocabulary.
"""

from __future__ import annotations

from markout.core.enum_mixins import KeyedStrEnum


class OutputFormat(KeyedStrEnum):
    """Serialization formats, one writer each.

    Attributes:
        XML: Canonical well-formed XML.
        XHTML: XHTML 1.0 (XML syntax, known-empty elements self-close).
        XHTML5: HTML5 vocabulary with XML syntax.
        HTML5: HTML5 syntax (void elements, no self-closing slash).
        TEXT: Character content only; markup is discarded.
        JSON: Elements mapped to JSON objects.
        MICROXML: The MicroXML subset of XML.

    Notes:
        - Which *method* token selects which format is decided by
          `markout.config.resolver.select_format`, not by `OutputFormat.parse`.
    """

    XML = ("xml", "Well-formed XML")
    XHTML = ("xhtml", "XHTML 1.0 in XML syntax")
    XHTML5 = ("xhtml5", "HTML5 vocabulary in XML syntax")
    HTML5 = ("html5", "HTML5 syntax")
    TEXT = ("text", "Character content only", ("txt", "plain"))
    JSON = ("json", "Elements as JSON objects")
    MICROXML = ("microxml", "MicroXML subset of XML", ("micro_xml",))


def is_markup_format(fmt: OutputFormat | None) -> bool:
    """Return True for formats whose output is angle-bracket markup.

    Markup formats can represent unencodable characters as numeric character
    references; TEXT and JSON cannot.

    Args:
        fmt: the output format to be checked.

    Returns:
        `True` if the format writes markup, else `False`.
    """
    return fmt in {
        OutputFormat.XML,
        OutputFormat.XHTML,
        OutputFormat.XHTML5,
        OutputFormat.HTML5,
        OutputFormat.MICROXML,
    }
