# topmark:header:start
#
#   project      : MarkOut
#   file         : __init__.py
#   file_relpath : src/markout/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""MarkOut CLI commands, one module per command."""
