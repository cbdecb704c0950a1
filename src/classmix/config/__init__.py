# topmark:header:start
#
#   project      : Classmix
#   file         : __init__.py
#   file_relpath : src/classmix/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2026 The Classmix Authors
#
# topmark:header:end

"""Ambient configuration: logging setup and TOML-backed composition defaults."""

from __future__ import annotations
