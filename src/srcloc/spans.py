from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .config import MAX_COORD


class CoordKind(str, Enum):
    PRESENT = "present"
    UNKNOWN = "unknown"
    OVERFLOWED = "overflowed"


@dataclass(frozen=True, slots=True)
class Coord:
    """A line or column number.

    ``value`` is always usable for ordering: -1 when unknown, ``MAX_COORD``
    once overflowed, and the number itself otherwise. Build instances with
    :meth:`Coord.of` rather than by hand.
    """

    kind: CoordKind
    value: int

    def __post_init__(self) -> None:
        if self.kind is CoordKind.UNKNOWN:
            ok = self.value == -1
        elif self.kind is CoordKind.OVERFLOWED:
            ok = self.value == MAX_COORD
        else:
            ok = 0 <= self.value < MAX_COORD
        if not ok:
            raise ValueError(f"invalid {self.kind.value} coordinate: {self.value}")

    @classmethod
    def of(cls, n: int) -> Coord:
        if n < 0:
            return UNKNOWN
        if n >= MAX_COORD:
            return OVERFLOWED
        return cls(CoordKind.PRESENT, n)

    @property
    def known(self) -> bool:
        return self.kind is not CoordKind.UNKNOWN

    @property
    def overflowed(self) -> bool:
        return self.kind is CoordKind.OVERFLOWED

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)


UNKNOWN = Coord(CoordKind.UNKNOWN, -1)
OVERFLOWED = Coord(CoordKind.OVERFLOWED, MAX_COORD)
ZERO = Coord(CoordKind.PRESENT, 0)


@dataclass(frozen=True, slots=True)
class Boundary:
    """A point in a source file.

    Lines and columns are 1-based; zero is the "not set" state used by
    :data:`EMPTY_LOCATION`.
    """

    file: str | None = None
    line: Coord = ZERO
    column: Coord = ZERO

    @classmethod
    def at(cls, file: str | None, line: int, column: int) -> Boundary:
        return cls(file=file, line=Coord.of(line), column=Coord.of(column))

    def __str__(self) -> str:
        from .serialize import format_boundary

        return format_boundary(self)


@dataclass(frozen=True, slots=True)
class Location:
    """Span from ``start`` to ``end``; ``end.column`` is one past the last column."""

    start: Boundary = Boundary()
    end: Boundary = Boundary()

    @classmethod
    def point(cls, boundary: Boundary) -> Location:
        return cls(start=boundary, end=boundary)

    def __str__(self) -> str:
        from .format import format_location

        return format_location(self)


EMPTY_LOCATION = Location()


def is_empty(loc: Location) -> bool:
    """True only for a location with every field unset (see ``EMPTY_LOCATION``)."""
    return (
        loc.start.file is None
        and loc.start.line == ZERO
        and loc.start.column == ZERO
        and loc.end.file is None
        and loc.end.line == ZERO
        and loc.end.column == ZERO
    )
