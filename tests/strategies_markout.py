# topmark:header:start
#
#   project      : MarkOut
#   file         : strategies_markout.py
#   file_relpath : tests/strategies_markout.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Hypothesis strategies for generating element trees and their event streams.

Trees are kept small and use only characters every format can carry, so the
same sample can be fed to any writer. `tree_events()` flattens a tree into the
event sequence a producer would send.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from hypothesis import strategies as st

from markout.core.events import (
    Characters,
    DocumentEvent,
    EndDocument,
    EndElement,
    StartDocument,
    StartElement,
)

# Characters allowed in XML 1.0 and MicroXML content (no controls, no surrogates,
# no noncharacters), excluding CR which XML parsers normalize away.
_TEXT_ALPHABET = st.characters(
    exclude_categories=("Cs", "Cc", "Co", "Cn"),
    include_characters="\t\n",
)

# Names starting with "xml" are reserved (and "xmlns" would declare a namespace)
NAMES = st.from_regex(r"[a-z][a-z0-9_-]{0,7}", fullmatch=True).filter(
    lambda n: not n.startswith("xml")
)
TEXTS = st.text(alphabet=_TEXT_ALPHABET, min_size=1, max_size=20)
ATTR_VALUES = st.text(alphabet=_TEXT_ALPHABET, max_size=12)


@dataclass
class Node:
    """A synthetic element: name, ordered attributes and mixed content."""

    name: str
    attributes: tuple[tuple[str, str], ...] = ()
    children: list[Union[Node, str]] = field(default_factory=list)

    def text_content(self) -> str:
        """Return the concatenated character content of the subtree."""
        return "".join(c if isinstance(c, str) else c.text_content() for c in self.children)


def _attributes() -> st.SearchStrategy[tuple[tuple[str, str], ...]]:
    return st.dictionaries(NAMES, ATTR_VALUES, max_size=3).map(lambda d: tuple(d.items()))


def _merge_text(children: list[Union[Node, str]]) -> list[Union[Node, str]]:
    merged: list[Union[Node, str]] = []
    for child in children:
        if isinstance(child, str) and merged and isinstance(merged[-1], str):
            merged[-1] = merged[-1] + child
        else:
            merged.append(child)
    return merged


def trees(max_leaves: int = 12) -> st.SearchStrategy[Node]:
    """Strategy for element trees with mixed content."""
    leaves: st.SearchStrategy[Node] = st.builds(Node, NAMES, _attributes())

    def extend(inner: st.SearchStrategy[Node]) -> st.SearchStrategy[Node]:
        content = st.lists(st.one_of(inner, TEXTS), max_size=4).map(_merge_text)
        return st.builds(Node, NAMES, _attributes(), content)

    return st.recursive(leaves, extend, max_leaves=max_leaves)


def element_events(node: Node) -> list[DocumentEvent]:
    """Flatten ``node`` into start/characters/end events."""
    events: list[DocumentEvent] = [StartElement(node.name, node.attributes)]
    for child in node.children:
        if isinstance(child, str):
            events.append(Characters(child))
        else:
            events.extend(element_events(child))
    events.append(EndElement(node.name))
    return events


def tree_events(node: Node) -> list[DocumentEvent]:
    """Flatten ``node`` into a complete document event stream."""
    return [StartDocument(), *element_events(node), EndDocument()]
