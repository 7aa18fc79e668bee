# topmark:header:start
#
#   project      : MarkOut
#   file         : __init__.py
#   file_relpath : src/markout/serializer/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Serializer dispatcher and output sink binding."""

from __future__ import annotations

from markout.serializer.dispatcher import Serializer
from markout.serializer.sink import OutputSink

__all__ = ["OutputSink", "Serializer"]
