from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from .api import DiagnosticSession
from .config import DEFAULT_CARET_STYLE
from .format import format_location
from .scan import locate
from .serialize import format_boundary, parse_boundary
from .spans import Location


def _show(args: argparse.Namespace) -> int:
    start = parse_boundary(args.start)
    end = parse_boundary(args.end) if args.end else start
    with DiagnosticSession(sys.stdout, color=args.color) as session:
        session.show(Location(start=start, end=end), args.style)
    return 0


def _span(args: argparse.Namespace) -> int:
    path = Path(args.file)
    data = path.read_bytes()
    loc = locate(str(path), data, args.start, args.end)
    if args.json:
        payload = {
            "start": format_boundary(loc.start),
            "end": format_boundary(loc.end),
            "location": format_location(loc),
        }
        print(json.dumps(payload, indent=2, sort_keys=True))
        return 0
    print(format_boundary(loc.start))
    print(format_boundary(loc.end))
    with DiagnosticSession(sys.stdout, color=args.color) as session:
        session.show(loc, args.style)
    return 0


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="srcloc", description="Inspect and quote source locations")
    ap.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    ap.add_argument(
        "--color",
        choices=["auto", "always", "never", "debug"],
        default="auto",
        help="Highlight quoted text (default: from SRCLOC_COLOR / terminal)",
    )
    ap.add_argument("--style", default=DEFAULT_CARET_STYLE, help="Style name for the underline")
    sub = ap.add_subparsers(dest="command", required=True)

    show = sub.add_parser("show", help="Quote a serialized FILE:LINE.COLUMN location")
    show.add_argument("start", help="Start boundary, FILE:LINE.COLUMN")
    show.add_argument("end", nargs="?", help="End boundary (default: same as start)")
    show.set_defaults(func=_show)

    span = sub.add_parser("span", help="Locate a byte range of a file")
    span.add_argument("file")
    span.add_argument("start", type=int, help="Start byte offset")
    span.add_argument("end", type=int, help="End byte offset (exclusive)")
    span.add_argument("--json", action="store_true", help="Print boundaries as JSON")
    span.set_defaults(func=_span)

    args = ap.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return args.func(args)
