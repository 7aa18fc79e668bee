# topmark:header:start
#
#   project      : MarkOut
#   file         : test_xhtml.py
#   file_relpath : tests/writers/test_xhtml.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the XHTML 1.0 and XHTML5 writers."""

from __future__ import annotations

import io
import xml.etree.ElementTree as ET

import pytest

from markout.core.errors import FormatInvariantError
from markout.core.events import (
    Characters,
    EndDocument,
    EndElement,
    StartDocument,
    StartElement,
)
from markout.core.formats import OutputFormat
from markout.serializer import Serializer
from markout.writers import Writer, WriterState
from markout.writers.xhtml import XHTML_NAMESPACE
from tests.conftest import render

pytestmark = pytest.mark.writers

XHTML_4 = {"method": "xhtml", "html-version": "4.0"}
XHTML_5 = {"method": "xhtml", "html-version": "5"}


def test_xhtml_scenario_lower_cases_names_and_self_closes_empty_elements() -> None:
    """``method=xhtml, html-version=4.0``: lower-case names, ``<br/>``, ``<p></p>``."""
    out: str = render(
        [
            StartDocument(),
            StartElement("HTML"),
            StartElement("Body"),
            StartElement("BR"),
            EndElement("BR"),
            StartElement("P"),
            EndElement("P"),
            EndElement("Body"),
            EndElement("HTML"),
            EndDocument(),
        ],
        XHTML_4,
    )
    assert out == "<html><body><br/><p></p></body></html>"


def test_xhtml_keeps_foreign_names() -> None:
    """Elements outside the XHTML namespace are not renamed."""
    out: str = render(
        [
            StartElement("html"),
            StartElement("m:Math", (), (("m", "http://www.w3.org/1998/Math/MathML"),)),
            EndElement("m:Math"),
            EndElement("html"),
            EndDocument(),
        ],
        XHTML_4,
    )
    assert out == '<html><m:Math xmlns:m="http://www.w3.org/1998/Math/MathML"/></html>'


def test_xhtml_output_is_well_formed_xml() -> None:
    """XHTML output parses as XML."""
    out: str = render(
        [
            StartElement("div", (("class", "a&b"),)),
            Characters("x < y"),
            StartElement("img", (("src", "i.png"),)),
            EndElement("img"),
            EndElement("div"),
            EndDocument(),
        ],
        XHTML_4,
    )
    parsed = ET.fromstring(out)
    assert parsed.get("class") == "a&b"
    assert parsed.find("img") is not None


def test_xhtml5_document_gets_doctype_and_namespace() -> None:
    """An XHTML5 document starts with ``<!DOCTYPE html>`` and binds the XHTML namespace."""
    out: str = render(
        [
            StartDocument(),
            StartElement("html"),
            StartElement("body"),
            StartElement("wbr"),
            EndElement("wbr"),
            StartElement("textarea"),
            EndElement("textarea"),
            EndElement("body"),
            EndElement("html"),
            EndDocument(),
        ],
        XHTML_5,
    )
    assert out == (
        "<!DOCTYPE html>\n"
        f'<html xmlns="{XHTML_NAMESPACE}"><body><wbr/><textarea></textarea></body></html>'
    )


def test_xhtml5_keeps_explicit_default_namespace() -> None:
    """An explicit default namespace is written once."""
    out: str = render(
        [
            StartElement("html", (), (("", XHTML_NAMESPACE),)),
            EndElement("html"),
            EndDocument(),
        ],
        {"method": "xhtml5"},
    )
    assert out == f'<html xmlns="{XHTML_NAMESPACE}"></html>'


def test_xhtml5_rejects_a_conflicting_default_namespace() -> None:
    """A second default namespace on the root ``html`` element fails the writer."""
    out = io.StringIO()
    writer: Writer = Serializer().set_output(out, {"method": "xhtml5"})
    writer.start_element("html")
    with pytest.raises(FormatInvariantError) as excinfo:
        writer.namespace("", "urn:other")
    assert excinfo.value.format is OutputFormat.XHTML5
    assert excinfo.value.event == "namespace"
    assert writer.state is WriterState.FAILED
    assert out.getvalue() == f'<html xmlns="{XHTML_NAMESPACE}"'


def test_xhtml5_fragment_has_no_doctype() -> None:
    """Fragments (no start_document) are written without a DOCTYPE."""
    out: str = render([StartElement("p"), EndElement("p"), EndDocument()], XHTML_5)
    assert out == "<p></p>"


def test_xhtml_indentation_skips_preformatted_elements() -> None:
    """Content of ``pre`` is never re-indented."""
    out: str = render(
        [
            StartElement("div"),
            StartElement("pre"),
            StartElement("b"),
            EndElement("b"),
            EndElement("pre"),
            EndElement("div"),
            EndDocument(),
        ],
        {**XHTML_4, "indent": "yes", "indent-spaces": "2"},
    )
    assert out == "<div>\n  <pre><b></b></pre>\n</div>"
