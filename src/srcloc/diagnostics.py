from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from .caret import CaretCache, render_caret
from .format import format_location, print_location
from .sink import Sink
from .spans import Location


logger = logging.getLogger(__name__)


class WarningCategory(str, Enum):
    OTHER = "other"


@dataclass(frozen=True, slots=True)
class Complaint:
    location: Location
    category: WarningCategory
    message: str

    def __str__(self) -> str:
        return f"{format_location(self.location)}: warning: {self.message} [-W{self.category.value}]"


class Reporter:
    """Collects warnings and optionally prints them with a quoted snippet.

    ``complain`` has the signature expected by
    :func:`srcloc.scan.compute_location`.
    """

    def __init__(
        self,
        sink: Sink | None = None,
        cache: CaretCache | None = None,
        *,
        style: str = "warning",
    ) -> None:
        self.sink = sink
        self.cache = cache
        self.style = style
        self.complaints: list[Complaint] = []

    def complain(self, location: Location, category: WarningCategory, message: str) -> None:
        complaint = Complaint(location, category, message)
        self.complaints.append(complaint)
        logger.log(logging.DEBUG if self.sink is not None else logging.WARNING, "%s", complaint)
        if self.sink is None:
            return
        sink = self.sink
        print_location(location, sink)
        sink.write(": ")
        sink.begin_style(self.style)
        sink.write("warning")
        sink.end_style(self.style)
        sink.write(f": {message} [-W{category.value}]\n")
        if self.cache is not None:
            render_caret(location, self.style, sink, self.cache)

    def __len__(self) -> int:
        return len(self.complaints)
