from __future__ import annotations

from srcloc import UNKNOWN, Boundary, Location, StringSink, format_location, print_location, quote_file


def _loc(start: Boundary, end: Boundary) -> Location:
    return Location(start=start, end=end)


def test_point_location_has_no_suffix() -> None:
    b = Boundary.at("file", 3, 7)
    assert format_location(Location.point(b)) == "file:3.7"


def test_single_column_token_collapses_to_a_point() -> None:
    assert format_location(_loc(Boundary.at("g.y", 1, 5), Boundary.at("g.y", 1, 6))) == "g.y:1.5"


def test_column_range_on_one_line() -> None:
    assert format_location(_loc(Boundary.at("g.y", 1, 5), Boundary.at("g.y", 1, 9))) == "g.y:1.5-8"


def test_range_over_lines() -> None:
    assert format_location(_loc(Boundary.at("g.y", 1, 5), Boundary.at("g.y", 3, 2))) == "g.y:1.5-3.1"
    # An end column of zero is printed as zero, not -1.
    assert format_location(_loc(Boundary.at("g.y", 1, 1), Boundary.at("g.y", 2, 0))) == "g.y:1.1-2.0"


def test_range_over_files() -> None:
    loc = _loc(Boundary.at("a.y", 1, 2), Boundary.at("b.y", 3, 5))
    assert format_location(loc) == "a.y:1.2-b.y:3.4"


def test_unknown_fields_are_left_out() -> None:
    unknown = Boundary(file="g.y", line=UNKNOWN, column=UNKNOWN)
    assert format_location(Location.point(unknown)) == "g.y"
    no_col = Boundary.at("g.y", 4, -1)
    assert format_location(Location.point(no_col)) == "g.y:4"
    other = Boundary(file="h.y", line=UNKNOWN, column=UNKNOWN)
    assert format_location(_loc(Boundary.at("g.y", 4, 1), other)) == "g.y:4.1-h.y"


def test_print_location_returns_characters_written() -> None:
    sink = StringSink()
    n = print_location(_loc(Boundary.at("a.y", 10, 2), Boundary.at("a.y", 12, 30)), sink)
    assert sink.getvalue() == "a.y:10.2-12.29"
    assert n == len(sink.getvalue())


def test_file_names_are_escaped() -> None:
    assert quote_file("plain.y") == "plain.y"
    assert quote_file("a\tb\\c") == "a\\tb\\\\c"
    assert quote_file("new\nline") == "new\\nline"
    assert quote_file("bell\x01") == "bell\\001"
    assert quote_file("grammaire-é.y") == "grammaire-é.y"
    assert format_location(Location.point(Boundary.at("x\ny", 1, 1))) == "x\\ny:1.1"
