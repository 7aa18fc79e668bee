# topmark:header:start
#
#   project      : MarkOut
#   file         : test_sax.py
#   file_relpath : tests/sources/test_sax.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for re-serializing parsed XML through the SAX event bridge."""

from __future__ import annotations

import io
from typing import TYPE_CHECKING, Any
from xml.sax import SAXParseException

import pytest

from markout.sources import serialize_xml_file
from markout.writers.base import WriterState
from tests.conftest import mark_integration

if TYPE_CHECKING:
    from markout.serializer import Serializer


def _convert(serializer: Serializer, data: bytes, properties: dict[str, Any] | None = None) -> str:
    out = io.StringIO()
    try:
        serialize_xml_file(io.BytesIO(data), serializer, out, properties)
    finally:
        serializer.reset()
    return out.getvalue()


@mark_integration
def test_xml_round_trip(serializer: Serializer) -> None:
    """Elements, attributes, CDATA, comments and PIs survive unchanged."""
    out: str = _convert(
        serializer,
        b'<?xml version="1.0"?><r a="1"><!--c--><?pi d?>t<![CDATA[<x>]]><e/></r>',
    )
    assert out == '<r a="1"><!--c--><?pi d?>t<![CDATA[<x>]]><e/></r>'


@mark_integration
def test_namespace_attributes_become_bindings(serializer: Serializer) -> None:
    """``xmlns`` attributes are re-declared by the writer, not copied as attributes."""
    out: str = _convert(serializer, b'<p:r xmlns:p="urn:p" xmlns="urn:d"><c/></p:r>')
    assert out.startswith("<p:r ")
    assert 'xmlns:p="urn:p"' in out
    assert 'xmlns="urn:d"' in out
    assert out.endswith("><c/></p:r>")


@mark_integration
def test_dtd_comments_are_dropped(serializer: Serializer) -> None:
    """The document type is forwarded; comments in the internal subset are not."""
    out: str = _convert(serializer, b"<!DOCTYPE r [<!-- inner -->]><r/>")
    assert out == "<!DOCTYPE r>\n<r/>"


@mark_integration
def test_html5_output(serializer: Serializer) -> None:
    """An XHTML-ish document becomes HTML5 with a doctype and void elements."""
    out: str = _convert(
        serializer,
        b"<html><body><br/><p/></body></html>",
        {"method": "html", "html-version": "5"},
    )
    assert out == "<!DOCTYPE html>\n<html><body><br><p></p></body></html>"


@mark_integration
def test_json_output_merges_text(serializer: Serializer) -> None:
    """Text split across parser callbacks reaches the writer as one chunk."""
    out: str = _convert(
        serializer,
        b'<a href="u">x&amp;y<b>z</b></a>',
        {"method": "json"},
    )
    assert out == '{"a":{"@attributes":{"href":"u"},"#children":["x&y",{"b":"z"}]}}'


@mark_integration
def test_text_output(serializer: Serializer) -> None:
    """Text output keeps character content only."""
    out: str = _convert(serializer, b"<a>one <b>two</b><!--x--> three</a>", {"method": "text"})
    assert out == "one two three"


def test_writer_is_left_bound(serializer: Serializer) -> None:
    """The returned writer is finished but still bound until reset."""
    writer = serialize_xml_file(io.BytesIO(b"<r/>"), serializer, io.StringIO())
    assert writer.state is WriterState.FINISHED
    serializer.reset()
    assert writer.state is WriterState.UNBOUND


def test_malformed_input_raises(serializer: Serializer) -> None:
    """Parse errors propagate as SAXParseException."""
    with pytest.raises(SAXParseException):
        _convert(serializer, b"<r><unclosed></r>")
