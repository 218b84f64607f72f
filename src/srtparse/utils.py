"""Timecode value type and the ``HH:MM:SS,mmm`` parser used by the SRT reader."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import timedelta

_DIGITS = re.compile(r"[0-9]+")


class TimecodeError(ValueError):
    """Raised when a timecode string cannot be parsed."""

    def __init__(self, value: str, reason: str) -> None:
        super().__init__(f"Invalid timecode {value!r}: {reason}")
        self.value = value
        self.reason = reason


@dataclass(frozen=True, slots=True)
class Time:
    """A point in subtitle playback time with millisecond resolution.

    Fields are kept exactly as parsed, so ``Time(0, 0, 75, 0)`` is a valid
    value. Equality compares the fields, ordering compares the total number
    of milliseconds, so ``Time(0, 0, 60, 0)`` and ``Time(0, 1, 0, 0)`` sort as
    equals without comparing ``==``.
    """

    hours: int
    minutes: int
    seconds: int
    milliseconds: int

    @classmethod
    def from_milliseconds(cls, total: int) -> Time:
        """Build a normalized :class:`Time` from a millisecond count."""

        if total < 0:
            raise ValueError(f"Time cannot be negative: {total}")
        seconds, milliseconds = divmod(total, 1000)
        minutes, seconds = divmod(seconds, 60)
        hours, minutes = divmod(minutes, 60)
        return cls(hours, minutes, seconds, milliseconds)

    def to_milliseconds(self) -> int:
        """Return the total number of milliseconds represented by the time."""

        return ((self.hours * 60 + self.minutes) * 60 + self.seconds) * 1000 + self.milliseconds

    def to_timedelta(self) -> timedelta:
        """Convert the time into :class:`datetime.timedelta`."""

        return timedelta(milliseconds=self.to_milliseconds())

    def to_seconds(self) -> float:
        """Return the total seconds represented by the time."""

        return self.to_milliseconds() / 1000

    def to_string(self) -> str:
        """Render the time as ``HH:MM:SS,mmm`` string."""

        return f"{self.hours:02d}:{self.minutes:02d}:{self.seconds:02d},{self.milliseconds:03d}"

    def __str__(self) -> str:
        return self.to_string()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self.to_milliseconds() < other.to_milliseconds()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self.to_milliseconds() <= other.to_milliseconds()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self.to_milliseconds() > other.to_milliseconds()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self.to_milliseconds() >= other.to_milliseconds()


def _parse_field(value: str, raw: str, name: str, width: int | None) -> int:
    if not _DIGITS.fullmatch(raw):
        raise TimecodeError(value, f"{name} is not a number: {raw!r}")
    if width is not None and len(raw) != width:
        raise TimecodeError(value, f"{name} must have {width} digits: {raw!r}")
    try:
        return int(raw)
    except ValueError as exc:
        raise TimecodeError(value, f"{name} is too large") from exc


def parse_timecode(value: str) -> Time:
    """Parse a timecode string into a :class:`Time` instance.

    Args:
        value: An already trimmed ``HH:MM:SS,mmm`` string. Hours take one or
            more digits; minutes and seconds exactly two; milliseconds exactly
            three.

    Raises:
        TimecodeError: If the value does not follow the grammar.
    """

    parts = value.split(":")
    if len(parts) != 3:
        raise TimecodeError(value, f"expected 3 ':'-separated fields, got {len(parts)}")
    raw_hours, raw_minutes, raw_rest = parts

    sub_parts = raw_rest.split(",")
    if len(sub_parts) != 2:
        raise TimecodeError(value, "expected seconds and milliseconds separated by ','")
    raw_seconds, raw_millis = sub_parts

    return Time(
        hours=_parse_field(value, raw_hours, "hours", None),
        minutes=_parse_field(value, raw_minutes, "minutes", 2),
        seconds=_parse_field(value, raw_seconds, "seconds", 2),
        milliseconds=_parse_field(value, raw_millis, "milliseconds", 3),
    )
