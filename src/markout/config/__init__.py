# topmark:header:start
#
#   project      : MarkOut
#   file         : __init__.py
#   file_relpath : src/markout/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Output configuration for MarkOut.

This package turns a raw property bag (``method``, ``html-version``, ``encoding``,
``indent``, ...) into an immutable `OutputConfiguration`, loads property bags from
TOML files, and hosts the logging setup shared by all modules.
"""

from __future__ import annotations

from markout.config.keys import OutputKeys
from markout.config.model import OutputConfiguration
from markout.config.resolver import resolve_output_configuration, select_format

__all__ = [
    "OutputConfiguration",
    "OutputKeys",
    "resolve_output_configuration",
    "select_format",
]
