from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class InternalError(Exception):
    """A broken invariant in machine-generated input; never a user mistake."""

    message: str
    text: str | None = None

    def __str__(self) -> str:
        if self.text is not None:
            return f"internal error: {self.message}: {self.text!r}"
        return f"internal error: {self.message}"
