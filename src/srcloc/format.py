from __future__ import annotations

from .config import SOURCE_ENCODING
from .sink import Sink, StringSink
from .spans import Location


_ESCAPES = {
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
    "\\": "\\\\",
}


def quote_file(name: str | None) -> str:
    """Escape a file name for diagnostics, C style, without surrounding quotes."""
    if name is None:
        return "(null)"
    out: list[str] = []
    for ch in name:
        esc = _ESCAPES.get(ch)
        if esc is not None:
            out.append(esc)
        elif ch.isprintable():
            out.append(ch)
        else:
            raw = ch.encode(SOURCE_ENCODING, errors="surrogateescape")
            out.append("".join(f"\\{b:03o}" for b in raw))
    return "".join(out)


def print_location(loc: Location, sink: Sink) -> int:
    """Write ``loc`` to ``sink`` and return the number of characters written.

    Start is always written in full as ``FILE:LINE.COLUMN``. The end only
    carries what differs from the start: another file is written in full, a
    later line as ``-LINE.COLUMN``, a later column on the same line as
    ``-COLUMN``, and a point location gets no suffix at all.
    """
    start, end = loc.start, loc.end
    end_col = end.column.value - 1 if end.column.value != 0 else 0

    res = sink.write(quote_file(start.file))
    if start.line.value >= 0:
        res += sink.write(f":{start.line.value}")
        if start.column.value >= 0:
            res += sink.write(f".{start.column.value}")

    if start.file != end.file:
        res += sink.write(f"-{quote_file(end.file)}")
        if end.line.value >= 0:
            res += sink.write(f":{end.line.value}")
            if end_col >= 0:
                res += sink.write(f".{end_col}")
    elif end.line.value >= 0:
        if start.line.value < end.line.value:
            res += sink.write(f"-{end.line.value}")
            if end_col >= 0:
                res += sink.write(f".{end_col}")
        elif end_col >= 0 and start.column.value < end_col:
            res += sink.write(f"-{end_col}")

    return res


def format_location(loc: Location) -> str:
    sink = StringSink()
    print_location(loc, sink)
    return sink.getvalue()
