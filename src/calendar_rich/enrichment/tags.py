from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, List, Mapping, Optional, Tuple

from ..domain import EventCategory, TagEntry

RUN = "\U0001F3C3\u200d\u2642\ufe0f"
BIKE = "\U0001F6B4\u200d\u2642\ufe0f"
PARTY = "\U0001F389"
DRUMSTICK = "\U0001F357"
HOSPITAL = "\U0001F3E5"
MUSCLE = "\U0001F4AA"
STAR = "\u2b50"
CHECK = "\u2705"
ITALY = "\U0001F1EE\U0001F1F9"
CROSS = "\u271d\ufe0f"
MONEY = "\U0001F4B0"


def _entries(tags: Iterable[str], emoji: str, category: EventCategory = EventCategory.NONE) -> List[Tuple[str, TagEntry]]:
    return [(tag, TagEntry(tag=tag, emoji=emoji, category=category)) for tag in tags]


TAG_TABLE: Mapping[str, TagEntry] = MappingProxyType(
    dict(
        _entries([":run:"], RUN, EventCategory.RUN)
        + _entries([":bike:"], BIKE, EventCategory.BIKE)
        + _entries([":birthday:", ":birth:", ":compleanno:", ":comple:"], PARTY, EventCategory.BIRTHDAY)
        + _entries([":dinner:", ":lunch:", ":cena:", ":pranzo:"], DRUMSTICK, EventCategory.DINNER)
        + _entries([":hospital:", ":hosp:", ":ospedale:", ":osp:"], HOSPITAL, EventCategory.HEALTH)
        + _entries([":workout:", ":gym:", ":muscle:", ":bicep:", ":biceps:"], MUSCLE, EventCategory.GYM)
        # Cosmetic only.
        + _entries([":star:"], STAR)
        + _entries([":check:"], CHECK)
        + _entries([":ita:"], ITALY)
        + _entries([":party:"], PARTY)
        + _entries([":chicken:"], DRUMSTICK)
        + _entries([":cross:", ":death:"], CROSS)
        + _entries([":$:", ":money:", ":dollar:"], MONEY)
    )
)


def lookup(tag: str) -> Optional[TagEntry]:
    """Return the entry for an exact ``:word:`` tag, or ``None`` on a miss."""

    return TAG_TABLE.get(tag)


def known_tags() -> List[str]:
    return sorted(TAG_TABLE)
