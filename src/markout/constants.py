# topmark:header:start
#
#   project      : MarkOut
#   file         : constants.py
#   file_relpath : src/markout/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""MarkOut Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

MARKOUT_VERSION: str = get_version("markout")

# Default property file name looked up by the CLI
DEFAULT_PROPERTIES_FILE_NAME: str = "markout.toml"
