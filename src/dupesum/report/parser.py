"""Streaming parser for duplicate-file reports in the fdupes --size text format.

A report is a sequence of blocks separated by blank lines:

    104857600 bytes each:
    /a/x.bin
    /a/y.bin

    2097152 bytes each:
    /b/p.txt
    /b/q.txt
"""

import io
import logging
import re
import sys
from collections.abc import Iterable, Iterator
from enum import Enum
from pathlib import Path

from .group import DuplicateGroup

logger = logging.getLogger(__name__)

HEADER_SUFFIX = 'bytes each:'

_UNSIGNED_INTEGER = re.compile(r'^\+?[0-9]+$')


class ParserState(Enum):
    """State of the report parser."""
    IDLE = "idle"  # Waiting for the next header
    IN_BLOCK = "in_block"  # Collecting paths of an open group


def parse_header(line: str) -> int | None:
    """Extract the per-file size from a header line.

    Args:
        line: A line already stripped of surrounding whitespace

    Returns:
        The size in bytes, or None if the line is not a well-formed header
    """
    if not line.endswith(HEADER_SUFFIX):
        return None
    tokens = line.split()
    if not tokens or not _UNSIGNED_INTEGER.match(tokens[0]):
        return None
    return int(tokens[0])


class ReportParser:
    """Line-by-line state machine turning report text into DuplicateGroup records.

    Feed lines with feed() and call finish() at end of input. Both return the group that was
    finalized by that call, if any.

    Lines ending with "bytes each:" are always treated as headers. When the leading token of such a
    line is not an unsigned integer the line is dropped and counted in malformed_headers; the parser
    state does not change. A well-formed header met while a block is still open finalizes that
    block before the new one starts.
    """

    def __init__(self) -> None:
        self._current: DuplicateGroup | None = None
        self.malformed_headers: int = 0

    @property
    def state(self) -> ParserState:
        return ParserState.IDLE if self._current is None else ParserState.IN_BLOCK

    def feed(self, line: str) -> DuplicateGroup | None:
        line = line.strip()

        if not line:
            return self._flush()

        if line.endswith(HEADER_SUFFIX):
            per_file_bytes = parse_header(line)
            if per_file_bytes is None:
                self.malformed_headers += 1
                logger.debug(f"Ignoring malformed header: {line!r}")
                return None
            finished = self._flush()
            self._current = DuplicateGroup(per_file_bytes)
            return finished

        if self._current is not None:
            self._current.paths.append(line)
        return None

    def finish(self) -> DuplicateGroup | None:
        return self._flush()

    def _flush(self) -> DuplicateGroup | None:
        group = self._current
        self._current = None
        return group


def parse_report(lines: Iterable[str]) -> Iterator[DuplicateGroup]:
    """Parse report lines, yielding each group as soon as its block ends.

    Args:
        lines: Report lines, with or without trailing newlines

    Yields:
        DuplicateGroup records in order of appearance
    """
    parser = ReportParser()
    for line in lines:
        group = parser.feed(line)
        if group is not None:
            yield group

    group = parser.finish()
    if group is not None:
        yield group

    if parser.malformed_headers:
        logger.warning(f"Dropped {parser.malformed_headers} malformed header line(s)")


def read_report(path: str | Path) -> list[DuplicateGroup]:
    """Read and parse a report file.

    Lines end at line feeds only, so a carriage return inside a file name stays part of the path.

    Args:
        path: Report file path, or "-" for standard input

    Returns:
        All groups of the report in order of appearance

    Raises:
        OSError: The report cannot be opened or read
        UnicodeDecodeError: The report is not valid UTF-8
    """
    if str(path) == '-':
        logger.info("Reading report from standard input")
        stream = io.TextIOWrapper(sys.stdin.buffer, encoding='utf-8', newline='\n')
        try:
            return list(parse_report(stream))
        finally:
            stream.detach()

    logger.info(f"Reading report: {path}")
    with open(path, 'r', encoding='utf-8', newline='\n') as f:
        groups = list(parse_report(f))
    logger.info(f"Parsed {len(groups)} duplicate group(s) from {path}")
    return groups
