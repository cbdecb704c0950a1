# topmark:header:start
#
#   project      : Classmix
#   file         : __init__.py
#   file_relpath : src/classmix/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2026 The Classmix Authors
#
# topmark:header:end

"""Subcommands of the ``classmix`` CLI."""
