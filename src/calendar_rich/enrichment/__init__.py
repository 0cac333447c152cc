"""Title tag parsing, classification and color policy."""

from __future__ import annotations

from .colors import CATEGORY_COLORS, color_for
from .enricher import TAG_PATTERN, enrich_title, scan_tags
from .tags import TAG_TABLE, known_tags, lookup

__all__ = [
    "CATEGORY_COLORS",
    "TAG_PATTERN",
    "TAG_TABLE",
    "color_for",
    "enrich_title",
    "known_tags",
    "lookup",
    "scan_tags",
]
