# topmark:header:start
#
#   project      : Classmix
#   file         : __init__.py
#   file_relpath : src/classmix/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2026 The Classmix Authors
#
# topmark:header:end

"""Command-line interface for inspecting units and previewing mixins."""
