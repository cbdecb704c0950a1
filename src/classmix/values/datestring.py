# topmark:header:start
#
#   project      : Classmix
#   file         : datestring.py
#   file_relpath : src/classmix/values/datestring.py
#   license      : MIT
#   copyright    : (c) 2026 The Classmix Authors
#
# topmark:header:end

"""A string that is guaranteed to hold a valid date.

Use [`DateString`][classmix.values.datestring.DateString] when the original
textual form of a date must be preserved (for round-tripping through storage
or JSON) while still rejecting garbage at construction time.

Example:
    ```python
    from classmix.values.datestring import DateString

    dt = DateString("2001-01-01")
    str(dt)           # '2001-01-01'
    dt.date.isoformat()  # '2001-01-01T00:00:00+00:00'
    dt.to_json()      # '{"when": "2001-01-01"}'
    ```
"""

from __future__ import annotations

import json
import re
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from typing import Final

_YEAR_MONTH_RE: Final[re.Pattern[str]] = re.compile(r"^(?P<year>\d{4})(?:-(?P<month>\d{2}))?$")


class InvalidDateError(ValueError):
    """Raised when a string cannot be parsed as a date."""


def parse_date(value: str) -> datetime:
    """Parse the date forms accepted by `DateString`.

    Accepted forms:
        - ISO 8601 dates and date-times, with or without offset; a trailing
          ``Z`` means UTC.
        - Bare years (``"2001"``) and year-months (``"2001-02"``).
        - RFC 2822 dates (``"Mon, 25 Dec 1995 13:30:00 GMT"``).

    Date-only and naive values are taken as UTC.

    Args:
        value (str): Text to parse.

    Returns:
        datetime: A timezone-aware datetime.

    Raises:
        InvalidDateError: If ``value`` matches none of the accepted forms.
    """
    text: str = value.strip()
    if not text:
        raise InvalidDateError("Invalid date: empty string")

    parsed: datetime | None = None
    m: re.Match[str] | None = _YEAR_MONTH_RE.match(text)
    if m is not None:
        month: int = int(m.group("month") or 1)
        try:
            parsed = datetime(int(m.group("year")), month, 1)
        except ValueError:
            parsed = None
    else:
        iso_text: str = text[:-1] + "+00:00" if text.endswith(("Z", "z")) else text
        try:
            parsed = datetime.fromisoformat(iso_text)
        except ValueError:
            try:
                parsed = parsedate_to_datetime(text)
            except (TypeError, ValueError, IndexError):
                parsed = None

    if parsed is None:
        raise InvalidDateError(f"Invalid date: {value!r}")
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


class DateString:
    """A date-valued string that keeps its original text.

    Args:
        value (str | DateString): The date text, or another `DateString`
            whose text is reused.

    Raises:
        TypeError: If ``value`` is neither a string nor a `DateString`.
        InvalidDateError: If the text cannot be parsed.
    """

    __slots__ = ("_date", "_when")

    def __init__(self, value: str | DateString) -> None:
        if isinstance(value, DateString):
            value = value.when
        if not isinstance(value, str):
            raise TypeError(f"DateString input must be a string, got {type(value).__name__}")
        self.when = value

    @property
    def when(self) -> str:
        """The original date text."""
        return self._when

    @when.setter
    def when(self, value: str) -> None:
        parsed: datetime = parse_date(value)
        self._when: str = value
        self._date: datetime = parsed

    @property
    def date(self) -> datetime:
        """The parsed date (timezone-aware)."""
        return self._date

    def __str__(self) -> str:
        return self._when

    def __repr__(self) -> str:
        return f"DateString(when={self._when!r}, date={self._date.isoformat()!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, DateString):
            return self._when == other._when
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._when)

    def to_dict(self) -> dict[str, str]:
        """Return the serializable form ``{"when": <original text>}``."""
        return {"when": self._when}

    def to_json(self) -> str:
        """Return `to_dict` rendered as JSON text."""
        return json.dumps(self.to_dict())
