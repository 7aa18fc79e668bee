# topmark:header:start
#
#   project      : MarkOut
#   file         : __main__.py
#   file_relpath : src/markout/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running MarkOut via ``python -m markout``.

Delegates to `markout.cli.main.cli`, the same entry point as the ``markout``
console script.

Examples:
    Convert an XML file to HTML5::

        python -m markout convert page.xml -p method=html -p html-version=5
"""

from __future__ import annotations

from markout.cli.main import cli

if __name__ == "__main__":
    cli()
