from __future__ import annotations

import io
import sys
from typing import TextIO

from .config import color_mode


class Sink:
    """Diagnostics output: plain text plus named style regions.

    Subclasses decide what a style region looks like; the base class ignores
    styles entirely.
    """

    def __init__(self, stream: TextIO) -> None:
        self.stream = stream

    def write(self, text: str) -> int:
        self.stream.write(text)
        return len(text)

    def begin_style(self, name: str) -> None:
        pass

    def end_style(self, name: str) -> None:
        pass


_RESET = "\033[0m"

DEFAULT_STYLES: dict[str, str] = {
    "error": "\033[1;31m",
    "warning": "\033[1;35m",
    "note": "\033[1;36m",
    "location": "\033[1m",
}


class AnsiSink(Sink):
    def __init__(self, stream: TextIO, styles: dict[str, str] | None = None) -> None:
        super().__init__(stream)
        self.styles = DEFAULT_STYLES if styles is None else styles

    def begin_style(self, name: str) -> None:
        code = self.styles.get(name)
        if code:
            self.stream.write(code)

    def end_style(self, name: str) -> None:
        if self.styles.get(name):
            self.stream.write(_RESET)


class MarkupSink(Sink):
    """Brackets style regions as ``<name>...</name>``."""

    def begin_style(self, name: str) -> None:
        self.stream.write(f"<{name}>")

    def end_style(self, name: str) -> None:
        self.stream.write(f"</{name}>")


class StringSink(Sink):
    def __init__(self, markup: bool = False) -> None:
        super().__init__(io.StringIO())
        self.markup = markup

    def begin_style(self, name: str) -> None:
        if self.markup:
            self.stream.write(f"<{name}>")

    def end_style(self, name: str) -> None:
        if self.markup:
            self.stream.write(f"</{name}>")

    def getvalue(self) -> str:
        return self.stream.getvalue()


def make_sink(stream: TextIO | None = None, color: str | None = None) -> Sink:
    """Pick a sink for ``stream`` (stderr by default).

    ``color`` is one of ``auto``, ``always``, ``never`` or ``debug``; ``None``
    and ``auto`` defer to the environment.
    """
    if stream is None:
        stream = sys.stderr
    mode = color_mode(stream) if color in (None, "auto") else color
    if mode == "debug":
        return MarkupSink(stream)
    if mode == "always":
        return AnsiSink(stream)
    return Sink(stream)
