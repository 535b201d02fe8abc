from __future__ import annotations

from wcwidth import wcwidth

from .config import MAX_COORD, SOURCE_ENCODING


def _is_control(ch: str) -> bool:
    return ch < " " or "\x7f" <= ch < "\xa0"


def display_width(text: str | bytes) -> int:
    """Number of terminal columns taken by ``text``.

    Bytes are decoded as UTF-8; each byte of an invalid sequence counts as one
    column. Control characters take no room, other unprintable characters
    take one.
    """
    if isinstance(text, bytes):
        text = text.decode(SOURCE_ENCODING, errors="surrogateescape")
    width = 0
    for ch in text:
        if "\udc80" <= ch <= "\udcff":
            width += 1
            continue
        w = wcwidth(ch)
        if w < 0:
            w = 0 if _is_control(ch) else 1
        width += w
    return width


def add_width(column: int, width: int | str | bytes) -> int:
    """Add ``width`` columns to ``column``, saturating at ``MAX_COORD``.

    ``width`` is either a plain count or a text buffer whose display width is
    measured. Buffers too large to measure safely saturate at once.
    """
    remaining = MAX_COORD - column
    if isinstance(width, int):
        n = width
    else:
        if MAX_COORD // 2 <= len(width):
            return MAX_COORD
        n = display_width(width)
    return column + n if n <= remaining else MAX_COORD
