"""Markdown primitives: headings, sections and pipe tables.

Only the subset of Markdown used by component API docs is understood:
ATX headings (``### Title``) and pipe tables with a dash separator row.
"""

from __future__ import annotations

import enum
import re
from collections.abc import Iterable, Sequence

from .models import RawTable, SourceDocument

DELIMITER = "|"
ESCAPED_DELIMITER = "\\|"
_PLACEHOLDER = "\x00ESCAPED_PIPE\x00"

_HEADING_RE = re.compile(r"^(#{1,6})\s+(.*)$")
_SEPARATOR_CHARS_RE = re.compile(r"^[|:\-\s]+$")
_SEPARATOR_CELL_RE = re.compile(r"\|\s*:?-{2,}")


def parse_heading(line: str) -> tuple[int, str] | None:
    """Return (level, text) for an ATX heading line, or None."""
    match = _HEADING_RE.match(line.strip())
    if not match:
        return None
    return len(match.group(1)), match.group(2).strip()


def split_row(line: str) -> list[str]:
    """Split one table row into trimmed cells.

    Escaped pipes (``\\|``) are swapped for a placeholder before splitting so
    they stay inside their cell, then restored as a literal ``|``.

    Example:
        split_row("| a | b \\| c |")  # ["a", "b | c"]
    """
    text = line.replace(ESCAPED_DELIMITER, _PLACEHOLDER).strip()
    if text.startswith(DELIMITER):
        text = text[1:]
    if text.endswith(DELIMITER):
        text = text[:-1]
    return [
        cell.strip().replace(_PLACEHOLDER, DELIMITER)
        for cell in text.split(DELIMITER)
    ]


def is_candidate_header(line: str) -> bool:
    """A line that could open a table: has a pipe and is not a heading."""
    text = line.strip()
    if DELIMITER not in text:
        return False
    return text.startswith(DELIMITER) or parse_heading(text) is None


def is_separator(line: str) -> bool:
    """Match a separator row such as ``| -- | :---: |``."""
    text = line.strip()
    return bool(_SEPARATOR_CHARS_RE.match(text)) and bool(
        _SEPARATOR_CELL_RE.search(text)
    )


class LocatorState(enum.Enum):
    SEEKING_HEADER = "seeking_header"
    CONFIRMING_SEPARATOR = "confirming_separator"
    COLLECTING_ROWS = "collecting_rows"
    DONE = "done"


class TableLocator:
    """Line-by-line state machine isolating the first pipe table.

    SEEKING_HEADER -> CONFIRMING_SEPARATOR -> COLLECTING_ROWS -> DONE

    A candidate header is only confirmed when the very next line is a
    separator row. Rows are then collected until the first blank line or
    the first line without a pipe.

    Example:
        locator = TableLocator()
        for line in lines:
            if locator.feed(line) is LocatorState.DONE:
                break
        table = locator.result()
    """

    def __init__(self) -> None:
        self.state = LocatorState.SEEKING_HEADER
        self._pending: str | None = None
        self._table: list[str] = []

    def feed(self, line: str) -> LocatorState:
        line = line.rstrip()

        if self.state is LocatorState.SEEKING_HEADER:
            if is_candidate_header(line):
                self._pending = line
                self.state = LocatorState.CONFIRMING_SEPARATOR

        elif self.state is LocatorState.CONFIRMING_SEPARATOR:
            if is_separator(line):
                self._table = [self._pending, line]
                self._pending = None
                self.state = LocatorState.COLLECTING_ROWS
            elif is_candidate_header(line):
                # The previous candidate was not a header; try this one
                self._pending = line
            else:
                self._pending = None
                self.state = LocatorState.SEEKING_HEADER

        elif self.state is LocatorState.COLLECTING_ROWS:
            if not line.strip() or DELIMITER not in line:
                self.state = LocatorState.DONE
            else:
                self._table.append(line)

        return self.state

    def result(self) -> RawTable:
        if self.state in (LocatorState.COLLECTING_ROWS, LocatorState.DONE):
            return tuple(self._table)
        return ()


def locate_table(lines: Iterable[str]) -> RawTable:
    """Return the lines of the first table in ``lines``, or () if none."""
    locator = TableLocator()
    for line in lines:
        if locator.feed(line) is LocatorState.DONE:
            break
    return locator.result()


def extract_section(
    lines: Sequence[str], label: str, level: int = 3
) -> SourceDocument:
    """Return the lines under the first heading whose text starts with ``label``.

    The heading must be at ``level``; matching is case-insensitive. The
    section ends at the next heading of the same or a coarser level. A
    missing heading gives an empty section.
    """
    target = label.strip().lower()

    start = None
    for i, line in enumerate(lines):
        heading = parse_heading(line)
        if heading and heading[0] == level and heading[1].lower().startswith(target):
            start = i
            break
    if start is None:
        return ()

    section: list[str] = []
    for line in lines[start + 1 :]:
        heading = parse_heading(line)
        if heading and heading[0] <= level:
            break
        section.append(line)
    return tuple(section)
