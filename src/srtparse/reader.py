"""Helpers that load SRT files and streams and hand their text to the parser."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import IO, List, Union

from .models import Item
from .srt import parse_srt_text

logger = logging.getLogger(__name__)

UTF8_BOM = "\ufeff"


class SrtReadError(RuntimeError):
    """Raised when an SRT file cannot be opened or decoded."""


@dataclass(slots=True)
class ReaderOptions:
    """Decoding settings used when reading subtitle bytes."""

    encoding: str = "utf-8-sig"
    errors: str = "strict"


DEFAULT_READER_OPTIONS = ReaderOptions()


def _strip_bom(text: str) -> str:
    return text[len(UTF8_BOM):] if text.startswith(UTF8_BOM) else text


def read_srt_text(path: str | Path, options: ReaderOptions = DEFAULT_READER_OPTIONS) -> str:
    """Read ``path`` and return its decoded text without a leading BOM."""

    path = Path(path)
    try:
        data = path.read_bytes()
    except FileNotFoundError as exc:
        raise SrtReadError(f"SRT file not found: {path}") from exc
    except OSError as exc:
        raise SrtReadError(f"Could not read SRT file {path}: {exc}") from exc

    try:
        text = data.decode(options.encoding, options.errors)
    except (UnicodeDecodeError, LookupError) as exc:
        raise SrtReadError(f"Could not decode {path} as {options.encoding}: {exc}") from exc

    logger.debug("Read %d bytes from %s", len(data), path)
    return _strip_bom(text)


def parse_srt(path: str | Path, options: ReaderOptions = DEFAULT_READER_OPTIONS) -> List[Item]:
    """Parse an SRT file and return a list of items."""

    items = parse_srt_text(read_srt_text(path, options))
    logger.info("Loaded %d subtitle items from %s", len(items), path)
    return items


def parse_srt_stream(
    stream: IO[Union[str, bytes]], options: ReaderOptions = DEFAULT_READER_OPTIONS
) -> List[Item]:
    """Parse SRT content from an open text or binary file object."""

    data = stream.read()
    if isinstance(data, bytes):
        try:
            data = data.decode(options.encoding, options.errors)
        except (UnicodeDecodeError, LookupError) as exc:
            raise SrtReadError(f"Could not decode stream as {options.encoding}: {exc}") from exc
    return parse_srt_text(_strip_bom(data))
