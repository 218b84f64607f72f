"""SRT (SubRip) subtitle parser.

Text is split into blank-line delimited blocks, and every block is parsed into
an :class:`~srtparse.models.Item`. A block is expected to look like::

    12
    00:01:04,565 --> 00:01:08,986
    first text line
    optional further lines

Failures are reported through the :class:`SrtParseError` hierarchy. Every
error carries the 1-based number of the source line it refers to.
"""

from __future__ import annotations

import logging
import re
from typing import Iterator, List, NamedTuple, Union

from .models import Item
from .utils import Time, TimecodeError, parse_timecode

logger = logging.getLogger(__name__)

_INDEX_PATTERN = re.compile(r"[0-9]+")
_ARROW_PATTERN = re.compile(r"\s+-->\s+")


class SrtParseError(RuntimeError):
    """Raised when SRT text cannot be parsed."""

    def __init__(self, line_number: int, message: str) -> None:
        super().__init__(f"line {line_number}: {message}")
        self.line_number = line_number


class InvalidBlock(SrtParseError):
    """A block is missing the index or the time range line."""

    def __init__(self, line_number: int, line_count: int) -> None:
        super().__init__(
            line_number,
            f"subtitle block needs an index and a time range line, found {line_count} line(s)",
        )
        self.line_count = line_count


class InvalidIndex(SrtParseError):
    """The index line is not a decimal number."""

    def __init__(self, line_number: int, text: str) -> None:
        super().__init__(line_number, f"invalid subtitle index {text!r}")
        self.text = text


class InvalidTimeRange(SrtParseError):
    """The time range line does not hold two timecodes joined by ``-->``."""

    def __init__(self, line_number: int, text: str) -> None:
        super().__init__(
            line_number,
            f"invalid time range {text!r}, expected 'HH:MM:SS,mmm --> HH:MM:SS,mmm'",
        )
        self.text = text


class InvalidTime(SrtParseError):
    """One side of the time range is not a valid ``HH:MM:SS,mmm`` timecode."""

    def __init__(self, line_number: int, text: str, field: str, reason: str = "") -> None:
        message = f"invalid {field} time {text!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(line_number, message)
        self.text = text
        self.field = field
        self.reason = reason


class MissingText(SrtParseError):
    """A block ends right after its time range line."""

    def __init__(self, line_number: int) -> None:
        super().__init__(line_number, "subtitle text is missing after the time range")


class RawBlock(NamedTuple):
    """One blank-line delimited chunk of source text."""

    line_number: int
    lines: List[str]


ParseResult = Union[Item, SrtParseError]


def split_blocks(text: str) -> Iterator[RawBlock]:
    """Yield the non-blank runs of lines in ``text`` with their first line number.

    Lines that are empty or contain only whitespace separate blocks. ``\\r\\n``
    and lone ``\\r`` line endings are treated like ``\\n``.
    """

    normalized = text.replace("\r\n", "\n").replace("\r", "\n")
    chunk: list[str] = []
    start = 0
    for number, line in enumerate(normalized.split("\n"), start=1):
        if not line.strip():
            if chunk:
                yield RawBlock(start, chunk)
                chunk = []
            continue
        if not chunk:
            start = number
        chunk.append(line)
    if chunk:
        yield RawBlock(start, chunk)


def _parse_time_range(line: str, line_number: int) -> tuple[Time, Time]:
    parts = _ARROW_PATTERN.split(line.strip())
    if len(parts) != 2 or any("-->" in part for part in parts):
        raise InvalidTimeRange(line_number, line)

    times = []
    for field, raw in zip(("start", "end"), parts):
        raw = raw.strip()
        try:
            times.append(parse_timecode(raw))
        except TimecodeError as exc:
            raise InvalidTime(line_number, raw, field, exc.reason) from exc
    return times[0], times[1]


def parse_block(block: RawBlock) -> Item:
    """Parse a single block into an :class:`Item`.

    Raises:
        InvalidBlock: Fewer than two lines in the block.
        InvalidIndex: The first line is not made of decimal digits.
        InvalidTimeRange: The second line has no ``-->`` between two timecodes.
        InvalidTime: A timecode does not follow ``HH:MM:SS,mmm``.
        MissingText: No text lines follow the time range.
    """

    line_number, lines = block
    if len(lines) < 2:
        raise InvalidBlock(line_number, len(lines))

    index_line = lines[0].strip()
    if not _INDEX_PATTERN.fullmatch(index_line):
        raise InvalidIndex(line_number, lines[0])
    try:
        index = int(index_line)
    except ValueError as exc:
        raise InvalidIndex(line_number, lines[0]) from exc

    time_line_number = line_number + 1
    start, end = _parse_time_range(lines[1], time_line_number)

    text = "\n".join(lines[2:]).strip()
    if not text:
        raise MissingText(time_line_number)

    return Item(index=index, start_time=start, end_time=end, text=text)


def iter_srt_items(text: str) -> Iterator[Item]:
    """Lazily parse ``text`` and yield items in source order.

    The first malformed block raises its :class:`SrtParseError` and ends the
    iteration; items of the preceding blocks have already been yielded.
    """

    for block in split_blocks(text):
        item = parse_block(block)
        logger.debug("Parsed subtitle %d at line %d", item.index, block.line_number)
        yield item


def iter_srt_results(text: str) -> Iterator[ParseResult]:
    """Yield one result per block: the parsed item or the error it produced.

    Unlike :func:`iter_srt_items` this never stops early, so callers can
    collect every malformed block in one pass.
    """

    for block in split_blocks(text):
        try:
            yield parse_block(block)
        except SrtParseError as exc:
            logger.debug("Skipping malformed block at line %d: %s", block.line_number, exc)
            yield exc


def parse_srt_text(text: str) -> List[Item]:
    """Parse SRT text and return a list of items.

    Raises:
        SrtParseError: For the first malformed block.
    """

    items = list(iter_srt_items(text))
    logger.debug("Parsed %d subtitle items", len(items))
    return items
