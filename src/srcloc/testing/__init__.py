from __future__ import annotations

from .corpus import generate_sources, generate_token_splits

__all__ = ["generate_sources", "generate_token_splits"]
