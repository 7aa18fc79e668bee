# topmark:header:start
#
#   project      : MarkOut
#   file         : test_formats.py
#   file_relpath : tests/core/test_formats.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the `OutputFormat` vocabulary."""

from __future__ import annotations

from markout.core.formats import OutputFormat, is_markup_format
from tests.conftest import parametrize


@parametrize(
    "raw, expected",
    [
        ("xml", OutputFormat.XML),
        ("XHTML5", OutputFormat.XHTML5),
        ("micro-xml", OutputFormat.MICROXML),
        ("Micro XML", OutputFormat.MICROXML),
        ("txt", OutputFormat.TEXT),
        ("plain", OutputFormat.TEXT),
        (" json ", OutputFormat.JSON),
        ("yaml", None),
        (None, None),
    ],
)
def test_parse(raw: str | None, expected: OutputFormat | None) -> None:
    """Keys, member names and aliases parse case-insensitively."""
    assert OutputFormat.parse(raw) is expected


def test_members_are_strings() -> None:
    """Members compare equal to, and print as, their stable key."""
    assert OutputFormat.HTML5 == "html5"
    assert str(OutputFormat.HTML5) == "html5"
    assert OutputFormat.HTML5.key == "html5"
    assert OutputFormat.HTML5.label == "HTML5 syntax"


@parametrize("fmt", list(OutputFormat))
def test_is_markup_format(fmt: OutputFormat) -> None:
    """Only TEXT and JSON are not markup."""
    assert is_markup_format(fmt) is (fmt not in (OutputFormat.TEXT, OutputFormat.JSON))


def test_is_markup_format_none() -> None:
    """No format is not a markup format."""
    assert is_markup_format(None) is False
