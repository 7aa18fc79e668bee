# topmark:header:start
#
#   project      : MarkOut
#   file         : resolver.py
#   file_relpath : src/markout/config/resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resolve a raw property bag into an `OutputConfiguration`.

The resolver never raises. Missing or unusable values fall back to documented
defaults and the fallback is logged at DEBUG level:

    - ``method`` absent → ``"xml"``; unknown methods resolve to XML.
    - ``html-version`` unparsable (or not finite) → ``1.0``.
    - ``encoding`` unknown to the codec registry → ``"UTF-8"``.
    - boolean flags accept ``yes/no/true/false/1/0/on/off`` in any case.

Format selection (`select_format`):

    | method   | html-version | format   |
    |----------|--------------|----------|
    | xhtml    | < 5.0        | XHTML    |
    | xhtml    | >= 5.0       | XHTML5   |
    | html     | < 5.0        | XHTML    |
    | html     | >= 5.0       | HTML5    |
    | text     | any          | TEXT     |
    | json     | any          | JSON     |
    | xhtml5   | any          | XHTML5   |
    | html5    | any          | HTML5    |
    | microxml | any          | MICROXML |
    | other    | any          | XML      |

Resolving unknown methods to XML is intentional: callers probe methods
speculatively and rely on getting XML output instead of an error.
"""

from __future__ import annotations

import math
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from markout.config.keys import (
    DEFAULT_ENCODING,
    DEFAULT_HTML_VERSION,
    DEFAULT_INDENT,
    DEFAULT_INDENT_SPACES,
    DEFAULT_JSON_IGNORE_WHITESPACE_TEXT_NODES,
    DEFAULT_METHOD,
    DEFAULT_OMIT_XML_DECLARATION,
    HTML5_VERSION_THRESHOLD,
    OutputKeys,
)
from markout.config.logging import get_logger
from markout.config.model import OutputConfiguration
from markout.core.formats import OutputFormat

if TYPE_CHECKING:
    from collections.abc import Mapping

    from markout.config.logging import MarkoutLogger

logger: MarkoutLogger = get_logger(__name__)

_TRUE_TOKENS: frozenset[str] = frozenset({"yes", "true", "1", "on"})
_FALSE_TOKENS: frozenset[str] = frozenset({"no", "false", "0", "off"})

# Methods whose format does not depend on html-version
_FIXED_METHODS: Mapping[str, OutputFormat] = MappingProxyType(
    {
        "text": OutputFormat.TEXT,
        "json": OutputFormat.JSON,
        "xhtml5": OutputFormat.XHTML5,
        "html5": OutputFormat.HTML5,
        "microxml": OutputFormat.MICROXML,
    }
)


def parse_html_version(raw: object) -> float:
    """Parse an ``html-version`` value, falling back to 1.0.

    Args:
        raw (object): The raw property value (usually a string); ``None`` means absent.

    Returns:
        float: The parsed version, or `DEFAULT_HTML_VERSION` when the value is
            absent, unparsable, or not a finite number.
    """
    if raw is None:
        return DEFAULT_HTML_VERSION
    token: str = str(raw).strip()
    # float() also accepts digit separators ("5_0"), which are not a version
    if "_" in token:
        logger.debug("Unparsable html-version %r, using %s", raw, DEFAULT_HTML_VERSION)
        return DEFAULT_HTML_VERSION
    try:
        version = float(token)
    except ValueError:
        logger.debug("Unparsable html-version %r, using %s", raw, DEFAULT_HTML_VERSION)
        return DEFAULT_HTML_VERSION
    if not math.isfinite(version):
        logger.debug("Non-finite html-version %r, using %s", raw, DEFAULT_HTML_VERSION)
        return DEFAULT_HTML_VERSION
    return version


def select_format(method: str | None, html_version: float = DEFAULT_HTML_VERSION) -> OutputFormat:
    """Map a ``method`` token and HTML version onto an output format.

    Args:
        method (str | None): The requested method; matched case-insensitively.
            ``None`` selects the default method.
        html_version (float): The effective ``html-version``.

    Returns:
        OutputFormat: The selected format. Unknown methods silently yield
            `OutputFormat.XML`.
    """
    token: str = (method or DEFAULT_METHOD).strip().lower()
    if token == "xhtml":
        if html_version < HTML5_VERSION_THRESHOLD:
            return OutputFormat.XHTML
        return OutputFormat.XHTML5
    if token == "html":
        if html_version < HTML5_VERSION_THRESHOLD:
            return OutputFormat.XHTML
        return OutputFormat.HTML5
    fmt: OutputFormat | None = _FIXED_METHODS.get(token)
    if fmt is not None:
        return fmt
    if token != "xml":
        # Deliberate compatibility behavior, not an error.
        logger.debug("Unknown output method %r, serializing as XML", method)
    return OutputFormat.XML


def parse_bool(raw: object, default: bool) -> bool:
    """Coerce a property value to a boolean.

    Args:
        raw (object): The raw value; ``None`` means absent.
        default (bool): Returned when the value is absent or not recognized.

    Returns:
        bool: The parsed flag.
    """
    if raw is None:
        return default
    if isinstance(raw, bool):
        return raw
    token: str = str(raw).strip().lower()
    if token in _TRUE_TOKENS:
        return True
    if token in _FALSE_TOKENS:
        return False
    logger.debug("Cannot interpret %r as a boolean, using %s", raw, default)
    return default


def _parse_standalone(raw: object) -> bool | None:
    if raw is None:
        return None
    token: str = str(raw).strip().lower()
    if token == "omit":
        return None
    if token in _TRUE_TOKENS:
        return True
    if token in _FALSE_TOKENS:
        return False
    logger.debug("Invalid standalone value %r, omitting", raw)
    return None


def _parse_indent_spaces(raw: object) -> int:
    if raw is None:
        return DEFAULT_INDENT_SPACES
    try:
        spaces = int(str(raw).strip())
    except ValueError:
        logger.debug("Invalid indent-spaces %r, using %d", raw, DEFAULT_INDENT_SPACES)
        return DEFAULT_INDENT_SPACES
    if spaces < 0:
        logger.debug("Negative indent-spaces %r, using %d", raw, DEFAULT_INDENT_SPACES)
        return DEFAULT_INDENT_SPACES
    return spaces


def _parse_encoding(raw: object) -> str:
    if raw is None:
        return DEFAULT_ENCODING
    name: str = str(raw).strip()
    if not name:
        return DEFAULT_ENCODING
    try:
        # Also rejects bytes-to-bytes and str-to-str codecs such as hex or rot13
        "".encode(name)
    except (LookupError, ValueError):
        logger.debug("Unknown or non-text encoding %r, using %s", raw, DEFAULT_ENCODING)
        return DEFAULT_ENCODING
    return name


def _optional_str(raw: object) -> str | None:
    if raw is None:
        return None
    value: str = str(raw)
    return value or None


def resolve_output_configuration(
    properties: Mapping[str, Any] | None = None,
) -> OutputConfiguration:
    """Resolve a property bag into an immutable `OutputConfiguration`.

    Args:
        properties (Mapping[str, Any] | None): Raw key/value properties. ``None``
            applies all defaults.

    Returns:
        OutputConfiguration: The resolved configuration. Unrecognized keys are
            kept (as strings) in ``extras``.
    """
    props: Mapping[str, Any] = properties or {}

    raw_method: object = props.get(OutputKeys.METHOD)
    method: str = (
        str(raw_method).strip().lower() if raw_method is not None else DEFAULT_METHOD
    ) or DEFAULT_METHOD
    html_version: float = parse_html_version(props.get(OutputKeys.HTML_VERSION))
    fmt: OutputFormat = select_format(method, html_version)

    recognized: frozenset[str] = OutputKeys.recognized()
    extras: dict[str, str] = {
        str(k): str(v) for k, v in props.items() if k not in recognized and v is not None
    }

    config = OutputConfiguration(
        format=fmt,
        method=method,
        html_version=html_version,
        encoding=_parse_encoding(props.get(OutputKeys.ENCODING)),
        indent=parse_bool(props.get(OutputKeys.INDENT), DEFAULT_INDENT),
        indent_spaces=_parse_indent_spaces(props.get(OutputKeys.INDENT_SPACES)),
        omit_xml_declaration=parse_bool(
            props.get(OutputKeys.OMIT_XML_DECLARATION), DEFAULT_OMIT_XML_DECLARATION
        ),
        standalone=_parse_standalone(props.get(OutputKeys.STANDALONE)),
        doctype_public=_optional_str(props.get(OutputKeys.DOCTYPE_PUBLIC)),
        doctype_system=_optional_str(props.get(OutputKeys.DOCTYPE_SYSTEM)),
        json_ignore_whitespace_text_nodes=parse_bool(
            props.get(OutputKeys.JSON_IGNORE_WHITESPACE_TEXT_NODES),
            DEFAULT_JSON_IGNORE_WHITESPACE_TEXT_NODES,
        ),
        jsonp=_optional_str(props.get(OutputKeys.JSONP)),
        extras=MappingProxyType(extras),
    )
    logger.debug("Resolved output configuration: %s", config)
    return config
