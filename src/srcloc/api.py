from __future__ import annotations

from typing import TextIO

from .caret import CaretCache, Opener, open_binary, render_caret
from .config import DEFAULT_CARET_STYLE
from .diagnostics import Reporter
from .format import print_location
from .scan import ScanCursor, compute_location
from .sink import Sink, make_sink
from .spans import Location


class DiagnosticSession:
    """Owns the output sink, caret cache and warning reporter of one run.

    Use it as a context manager so the quoted source file is closed at the
    end::

        with DiagnosticSession() as session:
            loc = session.compute(cursor, token)
            session.show(loc)
    """

    def __init__(
        self,
        stream: TextIO | None = None,
        *,
        color: str | None = None,
        sink: Sink | None = None,
        opener: Opener = open_binary,
    ) -> None:
        self.sink = sink if sink is not None else make_sink(stream, color)
        self.cache = CaretCache(opener)
        self.reporter = Reporter(self.sink, self.cache)

    def compute(self, cursor: ScanCursor, token: bytes | str) -> Location:
        return compute_location(cursor, token, complain=self.reporter.complain)

    def print_location(self, loc: Location) -> int:
        return print_location(loc, self.sink)

    def caret(self, loc: Location, style: str = DEFAULT_CARET_STYLE) -> None:
        render_caret(loc, style, self.sink, self.cache)

    def show(self, loc: Location, style: str = DEFAULT_CARET_STYLE) -> None:
        """Print ``loc`` on its own line followed by the quoted snippet."""
        self.print_location(loc)
        self.sink.write("\n")
        self.caret(loc, style)

    def reset(self) -> None:
        self.cache.reset()

    def __enter__(self) -> DiagnosticSession:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.reset()
