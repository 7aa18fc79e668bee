# topmark:header:start
#
#   project      : MarkOut
#   file         : test_model.py
#   file_relpath : tests/config/test_model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the immutable `OutputConfiguration`."""

from __future__ import annotations

import dataclasses

import pytest

from markout.config.model import OutputConfiguration
from markout.config.resolver import resolve_output_configuration
from markout.core.formats import OutputFormat


def test_configuration_is_frozen() -> None:
    """Fields and extras cannot be modified in place."""
    config = resolve_output_configuration({"media-type": "text/plain"})
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.indent = True  # type: ignore[misc]
    with pytest.raises(TypeError):
        config.extras["media-type"] = "x"  # type: ignore[index]


def test_replace_derives_a_variant() -> None:
    """`dataclasses.replace` is the way to change a field."""
    config = OutputConfiguration()
    variant = dataclasses.replace(config, format=OutputFormat.JSON)
    assert config.format is OutputFormat.XML
    assert variant.format is OutputFormat.JSON


def test_to_properties_resolves_to_an_equal_configuration() -> None:
    """Rendering back to a property bag and resolving again is lossless."""
    config = resolve_output_configuration(
        {
            "method": "html",
            "html-version": "5",
            "indent": "yes",
            "standalone": "no",
            "doctype-system": "about:legacy-compat",
            "jsonp": "cb",
            "media-type": "text/html",
        }
    )
    assert resolve_output_configuration(config.to_properties()) == config


def test_to_dict_is_json_friendly() -> None:
    """to_dict() uses plain values only."""
    data = resolve_output_configuration({"method": "text"}).to_dict()
    assert data["format"] == "text"
    assert data["extras"] == {}
    assert isinstance(data["html_version"], float)
