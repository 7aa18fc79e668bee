# topmark:header:start
#
#   project      : MarkOut
#   file         : __init__.py
#   file_relpath : src/markout/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core, UI-agnostic primitives shared across MarkOut.

The ``markout.core`` package provides small building blocks that are safe to
import from anywhere in the codebase (config, writers, serializer, CLI, tests)
without pulling in I/O or user-interface concerns.

Included modules:

- ``events``
  The structural document events (start/end element, characters, comment,
  ...) and `replay()`, which drives a writer from an event sequence.

- ``errors``
  The serialization error taxonomy (usage errors vs. format-invariant errors).

- ``formats``
  The closed `OutputFormat` vocabulary.

- ``enum_mixins``
  Typing-friendly Enum utilities (keyed enums with labels and aliases).
"""
