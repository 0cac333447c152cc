from __future__ import annotations

import logging
import re
from typing import Dict, List

from ..domain import EnrichmentResult, EventCategory, TagEntry
from .tags import lookup

logger = logging.getLogger(__name__)

TAG_PATTERN = re.compile(r":[a-z$]+:")


def scan_tags(title: str) -> List[str]:
    """Every tag-shaped token in ``title``, left to right, duplicates included."""

    return TAG_PATTERN.findall(title)


def enrich_title(title: str) -> EnrichmentResult:
    """Swap known tags for their emoji and classify the title.

    The category comes from the leftmost known tag that carries one. Replacement
    is a plain substitution of each distinct tag's text across the whole title,
    so it does not depend on where the scan matched.
    """

    category = EventCategory.NONE
    known: Dict[str, TagEntry] = {}
    for token in scan_tags(title):
        entry = lookup(token)
        if entry is None:
            continue
        known.setdefault(token, entry)
        if category is EventCategory.NONE and not entry.is_cosmetic:
            category = entry.category

    new_title = title
    for token, entry in known.items():
        new_title = new_title.replace(token, entry.emoji)

    logger.debug("Title %r -> %r (category: %s)", title, new_title, category.value)
    return EnrichmentResult(
        original_title=title,
        title=new_title,
        category=category,
        replacements=tuple(known.values()),
    )
