from __future__ import annotations

from .api import DiagnosticSession
from .caret import CaretCache, render_caret
from .diagnostics import Complaint, Reporter, WarningCategory
from .errors import InternalError
from .format import format_location, print_location, quote_file
from .scan import ScanCursor, compute_location, locate
from .serialize import format_boundary, parse_boundary
from .sink import AnsiSink, MarkupSink, Sink, StringSink, make_sink
from .spans import (
    EMPTY_LOCATION,
    OVERFLOWED,
    UNKNOWN,
    Boundary,
    Coord,
    CoordKind,
    Location,
    is_empty,
)
from .width import add_width, display_width

__all__ = [
    "AnsiSink",
    "Boundary",
    "CaretCache",
    "Complaint",
    "Coord",
    "CoordKind",
    "DiagnosticSession",
    "EMPTY_LOCATION",
    "InternalError",
    "Location",
    "MarkupSink",
    "OVERFLOWED",
    "Reporter",
    "ScanCursor",
    "Sink",
    "StringSink",
    "UNKNOWN",
    "WarningCategory",
    "add_width",
    "compute_location",
    "display_width",
    "format_boundary",
    "format_location",
    "is_empty",
    "locate",
    "make_sink",
    "parse_boundary",
    "print_location",
    "quote_file",
    "render_caret",
]
