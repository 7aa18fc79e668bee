# topmark:header:start
#
#   project      : MarkOut
#   file         : __init__.py
#   file_relpath : src/markout/writers/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Format writers.

One `Writer` subclass per `OutputFormat`. All writers share the lifecycle and
structural checks of `markout.writers.base.Writer` and differ only in how they
render events.
"""

from __future__ import annotations

from markout.writers.base import Writer, WriterState
from markout.writers.html5 import HTML5Writer
from markout.writers.json import JSONWriter
from markout.writers.microxml import MicroXmlWriter
from markout.writers.text import TextWriter
from markout.writers.xhtml import XHTML5Writer, XHTMLWriter
from markout.writers.xml import XMLWriter

__all__ = [
    "HTML5Writer",
    "JSONWriter",
    "MicroXmlWriter",
    "TextWriter",
    "Writer",
    "WriterState",
    "XHTML5Writer",
    "XHTMLWriter",
    "XMLWriter",
]
