"""calendar-rich: turn title tags like ``:run:`` into emoji and event colors."""

from __future__ import annotations

from .cli import main as main
from .enrichment import color_for, enrich_title

__all__ = ["color_for", "enrich_title", "main"]
