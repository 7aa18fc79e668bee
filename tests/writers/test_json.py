# topmark:header:start
#
#   project      : MarkOut
#   file         : test_json.py
#   file_relpath : tests/writers/test_json.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the JSON writer and its element mapping."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import pytest
from hypothesis import given, settings

from markout.core.events import (
    CData,
    Characters,
    Comment,
    EndDocument,
    EndElement,
    ProcessingInstruction,
    StartDocument,
    StartElement,
)
from tests.conftest import parametrize, render
from tests.strategies_markout import Node, tree_events, trees

if TYPE_CHECKING:
    from markout.core.events import DocumentEvent

pytestmark = pytest.mark.writers

JSON = {"method": "json"}


def _doc(*body: DocumentEvent) -> list[DocumentEvent]:
    return [StartDocument(), *body, EndDocument()]


def test_json_scenario() -> None:
    """``method=JSON`` with ``<a>x</a>`` yields ``{"a": "x"}``."""
    events = _doc(StartElement("a"), Characters("x"), EndElement("a"))
    out: str = render(events, {"method": "JSON"})
    assert json.loads(out) == {"a": "x"}
    assert out == '{"a":"x"}'


def test_empty_element_maps_to_null() -> None:
    """An element with no content and no attributes is ``null``."""
    assert json.loads(render(_doc(StartElement("a"), EndElement("a")), JSON)) == {"a": None}


def test_attributes_and_mixed_content() -> None:
    """Attributes go to ``@attributes``; content goes to ``#children`` in order."""
    out: str = render(
        _doc(
            StartElement("a", (("href", "u"),)),
            Characters("x"),
            StartElement("b"),
            Characters("y"),
            EndElement("b"),
            EndElement("a"),
        ),
        JSON,
    )
    assert out == '{"a":{"@attributes":{"href":"u"},"#children":["x",{"b":"y"}]}}'


def test_attributes_without_content() -> None:
    """An element with attributes only has no ``#children`` key."""
    value: Any = json.loads(render(_doc(StartElement("a", (("k", "v"),)), EndElement("a")), JSON))
    assert value == {"a": {"@attributes": {"k": "v"}}}


def test_text_chunks_and_cdata_are_merged() -> None:
    """Adjacent text and CDATA form a single string."""
    out: str = render(
        _doc(StartElement("a"), Characters("x"), CData("<y>"), Characters("z"), EndElement("a")),
        JSON,
    )
    assert json.loads(out) == {"a": "x<y>z"}


@parametrize(
    "ignore, expected",
    [
        ("yes", {"a": {"#children": [{"b": None}]}}),
        ("no", {"a": {"#children": ["\n  ", {"b": None}, "\n"]}}),
    ],
)
def test_whitespace_text_nodes(ignore: str, expected: dict[str, Any]) -> None:
    """Whitespace-only text is dropped unless the option is disabled."""
    events: list[DocumentEvent] = _doc(
        StartElement("a"),
        Characters("\n  "),
        StartElement("b"),
        EndElement("b"),
        Characters("\n"),
        EndElement("a"),
    )
    props = {**JSON, "json-ignore-whitespace-text-nodes": ignore}
    assert json.loads(render(events, props)) == expected


def test_comments_and_pis_are_dropped() -> None:
    """Events without a JSON representation produce nothing."""
    out: str = render(
        _doc(
            StartElement("a"),
            Comment("c"),
            ProcessingInstruction("p", "d"),
            Characters("x"),
            EndElement("a"),
        ),
        JSON,
    )
    assert out == '{"a":"x"}'


def test_several_top_level_elements_are_newline_delimited() -> None:
    """Each top-level element is one JSON value on its own line."""
    out: str = render(
        [
            StartElement("a"),
            EndElement("a"),
            Characters("  "),
            StartElement("b"),
            Characters("1"),
            EndElement("b"),
            EndDocument(),
        ],
        JSON,
    )
    assert [json.loads(line) for line in out.splitlines()] == [{"a": None}, {"b": "1"}]


def test_jsonp_wraps_each_value() -> None:
    """``jsonp`` wraps the value in a function call."""
    events = _doc(StartElement("a"), Characters("x"), EndElement("a"))
    out: str = render(events, {**JSON, "jsonp": "cb"})
    assert out == 'cb({"a":"x"})'


def test_indent_pretty_prints() -> None:
    """``indent=yes`` pretty-prints with ``indent-spaces``."""
    events = _doc(StartElement("a", (("k", "v"),)), EndElement("a"))
    out: str = render(events, {**JSON, "indent": "yes", "indent-spaces": "2"})
    assert out == json.dumps({"a": {"@attributes": {"k": "v"}}}, indent=2)


@parametrize(
    "encoding, expected",
    [
        ("UTF-8", '{"a":"café"}'),
        ("ISO-8859-1", '{"a":"caf\\u00e9"}'),
    ],
)
def test_non_ascii_escaping_follows_encoding(encoding: str, expected: str) -> None:
    """Non-ASCII characters are escaped unless the output encoding is a UTF encoding."""
    events = _doc(StartElement("a"), Characters("café"), EndElement("a"))
    assert render(events, {**JSON, "encoding": encoding}) == expected


def _expected_value(node: Node) -> Any:
    elements = [c for c in node.children if isinstance(c, Node)]
    if not node.attributes and not elements:
        return node.text_content() if node.children else None
    obj: dict[str, Any] = {}
    if node.attributes:
        obj["@attributes"] = dict(node.attributes)
    if node.children:
        obj["#children"] = [
            c if isinstance(c, str) else {c.name: _expected_value(c)} for c in node.children
        ]
    return obj


@settings(max_examples=50, deadline=None)
@given(tree=trees())
def test_json_output_follows_the_mapping(tree: Node) -> None:
    """The JSON value of any tree follows the documented mapping."""
    props = {**JSON, "json-ignore-whitespace-text-nodes": "no"}
    assert json.loads(render(tree_events(tree), props)) == {tree.name: _expected_value(tree)}
