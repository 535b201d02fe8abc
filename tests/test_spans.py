from __future__ import annotations

import pytest

from srcloc import EMPTY_LOCATION, OVERFLOWED, UNKNOWN, Boundary, Coord, CoordKind, Location, is_empty
from srcloc.config import MAX_COORD


def test_coord_of_normalizes_sentinels() -> None:
    assert Coord.of(-1) is UNKNOWN
    assert Coord.of(-7) is UNKNOWN
    assert Coord.of(MAX_COORD) is OVERFLOWED
    c = Coord.of(12)
    assert c.kind is CoordKind.PRESENT
    assert int(c) == 12
    assert c.known and not c.overflowed
    assert not UNKNOWN.known
    assert OVERFLOWED.overflowed


def test_inconsistent_coord_is_rejected() -> None:
    with pytest.raises(ValueError):
        Coord(CoordKind.PRESENT, -3)
    with pytest.raises(ValueError):
        Coord(CoordKind.UNKNOWN, 4)
    with pytest.raises(ValueError):
        Coord(CoordKind.PRESENT, MAX_COORD)


def test_empty_location() -> None:
    assert is_empty(EMPTY_LOCATION)
    assert is_empty(Location())
    assert EMPTY_LOCATION.start.file is None


def test_location_with_unknown_sentinel_is_not_empty() -> None:
    b = Boundary(file=None, line=UNKNOWN, column=Coord.of(0))
    assert not is_empty(Location(start=b, end=Boundary()))
    assert not is_empty(Location(start=Boundary(), end=Boundary(column=UNKNOWN)))


def test_location_with_a_file_is_not_empty() -> None:
    b = Boundary(file="a.y")
    assert not is_empty(Location.point(b))


def test_string_forms() -> None:
    b = Boundary.at("a.y", 3, 7)
    assert str(b) == "a.y:3.7"
    assert str(Location.point(b)) == "a.y:3.7"
