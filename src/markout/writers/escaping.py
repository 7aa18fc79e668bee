# topmark:header:start
#
#   project      : MarkOut
#   file         : escaping.py
#   file_relpath : src/markout/writers/escaping.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Character escaping for the markup writers.

XML family:
    - text: ``&`` and ``<`` become entity references, ``>`` only where it would
      close a ``]]>`` sequence, and CR becomes ``&#xD;`` so it survives
      end-of-line normalization.
    - attributes: ``& < > "`` become entity references; TAB, LF and CR become
      character references so attribute-value normalization keeps them.

HTML5:
    - text: ``& < >`` and NO-BREAK SPACE (``&nbsp;``).
    - attributes: ``&``, ``"`` and NO-BREAK SPACE.

MicroXML restricts the character set; `find_forbidden_microxml_char` locates
the first character outside it.
"""

from __future__ import annotations

import re
from typing import Final

XML_TEXT_TABLE: Final = str.maketrans(
    {
        "&": "&amp;",
        "<": "&lt;",
        "\r": "&#xD;",
    }
)
XML_ATTRIBUTE_TABLE: Final = str.maketrans(
    {
        "&": "&amp;",
        "<": "&lt;",
        ">": "&gt;",
        '"': "&quot;",
        "\t": "&#x9;",
        "\n": "&#xA;",
        "\r": "&#xD;",
    }
)
HTML_TEXT_TABLE: Final = str.maketrans(
    {
        "&": "&amp;",
        "<": "&lt;",
        ">": "&gt;",
        "\u00a0": "&nbsp;",
    }
)
HTML_ATTRIBUTE_TABLE: Final = str.maketrans(
    {
        "&": "&amp;",
        '"': "&quot;",
        "\u00a0": "&nbsp;",
    }
)

# C0/C1 controls (except TAB, LF, CR), surrogates and noncharacters
_MICROXML_FORBIDDEN: Final[re.Pattern[str]] = re.compile(
    "[\x00-\x08\x0b\x0c\x0e-\x1f\x7f-\x9f\ud800-\udfff\ufdd0-\ufdef\ufffe\uffff"
    + "".join(f"\\U{plane:04X}FFFE\\U{plane:04X}FFFF" for plane in range(1, 17))
    + "]"
)


def escape_xml_text(text: str) -> str:
    """Escape character content for XML output."""
    return text.translate(XML_TEXT_TABLE).replace("]]>", "]]&gt;")


def escape_xml_attribute(value: str) -> str:
    """Escape an attribute value for a double-quoted XML attribute."""
    return value.translate(XML_ATTRIBUTE_TABLE)


def escape_html_text(text: str) -> str:
    """Escape character content for HTML5 output."""
    return text.translate(HTML_TEXT_TABLE)


def escape_html_attribute(value: str) -> str:
    """Escape an attribute value for a double-quoted HTML5 attribute."""
    return value.translate(HTML_ATTRIBUTE_TABLE)


def cdata_sections(text: str) -> str:
    """Wrap ``text`` in CDATA sections, splitting around any ``]]>``."""
    return "<![CDATA[" + text.replace("]]>", "]]]]><![CDATA[>") + "]]>"


def comment_text(text: str) -> str:
    """Make ``text`` safe inside ``<!-- -->``.

    ``--`` may not appear in a comment and the comment may not end with ``-``;
    a space is inserted to break both.
    """
    safe: str = text
    while "--" in safe:
        safe = safe.replace("--", "- -")
    if safe.endswith("-"):
        safe += " "
    return safe


def find_forbidden_microxml_char(text: str) -> str | None:
    """Return the first character of ``text`` that MicroXML does not allow, if any."""
    match: re.Match[str] | None = _MICROXML_FORBIDDEN.search(text)
    return match.group(0) if match else None
