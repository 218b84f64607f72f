"""Data models representing parsed subtitles."""

from __future__ import annotations

from dataclasses import dataclass

from .utils import Time


@dataclass(frozen=True, slots=True)
class Item:
    """Represents a single parsed SRT subtitle block."""

    index: int
    start_time: Time
    end_time: Time
    text: str

    @property
    def duration(self) -> int:
        """Display duration in milliseconds; negative when the end precedes the start."""
        return self.end_time.to_milliseconds() - self.start_time.to_milliseconds()
