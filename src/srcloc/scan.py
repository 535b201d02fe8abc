from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from .config import MAX_COORD, SOURCE_ENCODING, TAB_WIDTH
from .diagnostics import WarningCategory
from .spans import Boundary, Location
from .width import add_width


logger = logging.getLogger(__name__)

Complain = Callable[[Location, WarningCategory, str], None]


@dataclass(slots=True)
class ScanCursor:
    """Scanner position, advanced in place as tokens are consumed."""

    file: str | None
    line: int = 1
    column: int = 1

    def boundary(self) -> Boundary:
        return Boundary.at(self.file, self.line, self.column)


def _log_complaint(loc: Location, category: WarningCategory, message: str) -> None:
    logger.warning("%s: %s [-W%s]", loc, message, category.value)


def compute_location(
    cursor: ScanCursor,
    token: bytes | str,
    *,
    complain: Complain | None = None,
) -> Location:
    """Return the location of ``token`` and move ``cursor`` past it.

    Newlines start a new line at column 1, tabs advance to the next tab stop,
    and runs of other characters advance by their display width. Line and
    column saturate at ``MAX_COORD``; the first saturation of each is
    reported through ``complain`` as a warning.
    """
    if isinstance(token, str):
        token = token.encode(SOURCE_ENCODING)
    start = cursor.boundary()
    line = cursor.line
    column = cursor.column

    # Plain text is measured a run at a time so multibyte sequences stay whole.
    p0 = 0
    for p, byte in enumerate(token):
        if byte == 0x0A:
            line += line < MAX_COORD
            column = 1
            p0 = p + 1
        elif byte == 0x09:
            column = add_width(column, token[p0:p])
            column = add_width(column, TAB_WIDTH - ((column - 1) % TAB_WIDTH))
            p0 = p + 1

    column = add_width(column, token[p0:])
    cursor.line = line
    cursor.column = column
    loc = Location(start=start, end=cursor.boundary())

    report = complain or _log_complaint
    if line == MAX_COORD and not start.line.overflowed:
        report(loc, WarningCategory.OTHER, "line number overflow")
    if column == MAX_COORD and not start.column.overflowed:
        report(loc, WarningCategory.OTHER, "column number overflow")
    return loc


def locate(file: str | None, source: bytes, start: int, end: int) -> Location:
    """Location of ``source[start:end]`` when scanning starts at line 1, column 1."""
    cursor = ScanCursor(file)
    compute_location(cursor, source[:start])
    return compute_location(cursor, source[start:end])
