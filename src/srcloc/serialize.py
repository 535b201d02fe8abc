from __future__ import annotations

import sys

from .errors import InternalError
from .spans import Boundary, Coord


def intern_file(name: str) -> str:
    return sys.intern(name)


def format_boundary(b: Boundary) -> str:
    """Serialize ``b`` as ``FILE:LINE.COLUMN``; an unset file is written empty."""
    return f"{b.file or ''}:{b.line.value}.{b.column.value}"


def _coord(field: str, text: str, whole: str) -> Coord:
    try:
        return Coord.of(int(text))
    except ValueError:
        raise InternalError(f"malformed boundary {field}", whole) from None


def parse_boundary(text: str) -> Boundary:
    """Inverse of :func:`format_boundary`.

    The file name may itself contain ``.`` and ``:``, so both delimiters are
    searched from the right. Only machine-written text is expected here; a
    missing delimiter or a non-numeric field raises :class:`InternalError`.
    """
    rest, dot, column = text.rpartition(".")
    if not dot:
        raise InternalError("boundary has no column delimiter", text)
    file, colon, line = rest.rpartition(":")
    if not colon:
        raise InternalError("boundary has no line delimiter", text)
    return Boundary(
        file=intern_file(file) if file else None,
        line=_coord("line", line, text),
        column=_coord("column", column, text),
    )
