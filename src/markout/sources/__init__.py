# topmark:header:start
#
#   project      : MarkOut
#   file         : __init__.py
#   file_relpath : src/markout/sources/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Event producers that feed MarkOut writers from existing documents."""

from __future__ import annotations

from markout.sources.sax import EventBridge, serialize_xml_file

__all__ = ["EventBridge", "serialize_xml_file"]
