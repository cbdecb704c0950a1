# topmark:header:start
#
#   project      : Classmix
#   file         : exit_codes.py
#   file_relpath : src/classmix/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2026 The Classmix Authors
#
# topmark:header:end

"""Exit codes for the Classmix CLI.

Values follow the BSD ``sysexits`` convention where one applies. ``WOULD_CHANGE``
(2) is the exception: ``classmix plan`` uses it to report that applying the
mixin would modify the target. Click also exits with 2 on usage errors, so
tests must check ``result.exception is None`` to tell the two apart.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the Classmix CLI.

    Attributes:
        SUCCESS: Successful execution; for ``plan``, nothing would change.
        FAILURE: Generic failure.
        WOULD_CHANGE: ``plan`` found work to do.
        USAGE_ERROR: Bad invocation, including unresolvable unit references.
            Mirrors BSD ``EX_USAGE (64)``.
        CONFIG_ERROR: Missing, unreadable or invalid configuration. Mirrors
            BSD ``EX_CONFIG (78)``.
        UNEXPECTED_ERROR: Unhandled error (last resort).
    """

    SUCCESS = 0
    FAILURE = 1
    WOULD_CHANGE = 2

    USAGE_ERROR = 64  # EX_USAGE
    CONFIG_ERROR = 78  # EX_CONFIG

    UNEXPECTED_ERROR = 255
