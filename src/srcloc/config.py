from __future__ import annotations

import os
from typing import TextIO


# Saturation point for line and column numbers (C ``INT_MAX``); serialized
# boundaries carry this value for overflowed coordinates.
MAX_COORD = 2**31 - 1

TAB_WIDTH = 8

SOURCE_ENCODING = "utf-8"

# Style name used for caret highlighting when the caller does not pick one.
DEFAULT_CARET_STYLE = "error"

COLOR_ENV = "SRCLOC_COLOR"
NO_COLOR_ENV = "NO_COLOR"

_ON = ("1", "true", "yes", "always")
_OFF = ("0", "false", "no", "never")


def color_mode(stream: TextIO | None = None) -> str:
    """Resolve the color policy from the environment.

    Returns one of ``"always"``, ``"never"`` or ``"debug"``.
    """
    if os.environ.get(NO_COLOR_ENV):
        return "never"
    explicit = os.environ.get(COLOR_ENV, "").lower()
    if explicit == "debug":
        return "debug"
    if explicit in _ON:
        return "always"
    if explicit in _OFF:
        return "never"
    isatty = getattr(stream, "isatty", None)
    return "always" if isatty is not None and isatty() else "never"


def color_enabled(stream: TextIO | None = None) -> bool:
    return color_mode(stream) != "never"
