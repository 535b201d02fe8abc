from __future__ import annotations

import logging
from typing import BinaryIO, Callable

from .config import SOURCE_ENCODING, TAB_WIDTH
from .sink import Sink
from .spans import Location
from .width import display_width


logger = logging.getLogger(__name__)

Opener = Callable[[str], BinaryIO]


def open_binary(path: str) -> BinaryIO:
    return open(path, "rb")


class CaretCache:
    """Read position in the last quoted source file.

    Remembers the start of the last line quoted so that diagnostics reported
    in source order never rescan the file from the top. Only one file is
    kept open at a time. Call :meth:`reset` when the diagnostics are done.
    """

    def __init__(self, opener: Opener = open_binary) -> None:
        self.opener = opener
        self.path: str | None = None
        self.source: BinaryIO | None = None
        self.line = 1
        self.offset = 0

    def reset(self) -> None:
        if self.source is not None:
            logger.debug("closing caret source %s", self.path)
            self.source.close()
        self.path = None
        self.source = None
        self.line = 1
        self.offset = 0

    def open(self, path: str) -> BinaryIO | None:
        """Make ``path`` the cached file, or return None if it cannot be read."""
        if self.source is not None and self.path == path:
            return self.source
        self.reset()
        try:
            self.source = self.opener(path)
        except OSError as e:
            logger.debug("cannot quote %s: %s", path, e)
            return None
        self.path = path
        return self.source

    def seek_line(self, line: int) -> BinaryIO | None:
        """Position the open source at the start of ``line`` and return it.

        Returns None when the file ends before that line.
        """
        source = self.source
        if source is None:
            raise RuntimeError("caret cache has no open source")
        if self.line <= line:
            logger.debug("caret cache hit: %s line %d from line %d", self.path, line, self.line)
        else:
            logger.debug("caret cache miss: %s line %d, rescanning", self.path, line)
            self.line = 1
            self.offset = 0
        source.seek(self.offset)

        while self.line < line:
            chunk = source.readline()
            if not chunk.endswith(b"\n"):
                # Short file; keep the cache at the last complete line start.
                source.seek(self.offset)
                return None
            self.line += 1
            self.offset = source.tell()
        return source

    def __enter__(self) -> CaretCache:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.reset()


def _advance(column: int, ch: str) -> int:
    if ch == "\t":
        return column + TAB_WIDTH - ((column - 1) % TAB_WIDTH)
    return column + display_width(ch)


def _shown(ch: str, column: int, nxt: int) -> str:
    if ch == "\t":
        return " " * (nxt - column)
    # Undecodable bytes take one column each, like in compute_location.
    if "\udc80" <= ch <= "\udcff":
        return "\ufffd"
    return ch


def render_caret(loc: Location, style: str, sink: Sink, cache: CaretCache) -> None:
    """Quote the first line of ``loc`` and underline the located text.

    Nothing is written when the start position is unknown or overflowed, the
    file cannot be opened or the line lies past the end of the file.
    """
    start, end = loc.start, loc.end
    if start.file is None:
        return
    for coord in (start.line, start.column):
        if not coord.known or coord.overflowed:
            return
    if cache.open(start.file) is None:
        return
    source = cache.seek_line(start.line.value)
    if source is None:
        return

    raw = source.readline()
    if not raw:
        return
    # The cache stays on the start of the quoted line.
    text = raw.rstrip(b"\r\n").decode(SOURCE_ENCODING, errors="surrogateescape")

    first = start.column.value
    # Without a usable end column on the same line, underline to end of line.
    bounded = start.line == end.line and not end.column.overflowed
    last = end.column.value

    sink.write(" ")
    col = 1
    styled = False
    for ch in text:
        nxt = _advance(col, ch)
        if not styled and col <= first < nxt:
            sink.begin_style(style)
            styled = True
        sink.write(_shown(ch, col, nxt))
        if styled and bounded and nxt >= last:
            sink.end_style(style)
            styled = False
        col = nxt
    if styled:
        sink.end_style(style)
    sink.write("\n")

    width = last if bounded else col
    sink.write(" " + " " * (first - 1))
    sink.begin_style(style)
    sink.write("^" + "~" * max(0, width - first - 1))
    sink.end_style(style)
    sink.write("\n")
