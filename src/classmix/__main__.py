# topmark:header:start
#
#   project      : Classmix
#   file         : __main__.py
#   file_relpath : src/classmix/__main__.py
#   license      : MIT
#   copyright    : (c) 2026 The Classmix Authors
#
# topmark:header:end

"""Module entry point for running Classmix via ``python -m classmix``.

Delegates to :func:`classmix.cli.main.cli`, the single CLI entry point.

Examples:
    Preview a mixin application::

        python -m classmix plan myapp.models:Widget myapp.mixins:Taggable
"""

from __future__ import annotations

from classmix.cli.main import cli

if __name__ == "__main__":
    cli()
