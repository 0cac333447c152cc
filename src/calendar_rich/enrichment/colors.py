from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from ..domain import EventCategory, EventColor

CATEGORY_COLORS: Mapping[EventCategory, EventColor] = MappingProxyType(
    {
        EventCategory.RUN: EventColor.GRAY,
        EventCategory.BIKE: EventColor.GRAY,
        EventCategory.BIRTHDAY: EventColor.YELLOW,
        EventCategory.DINNER: EventColor.BLUE,
        EventCategory.HEALTH: EventColor.RED,
        EventCategory.GYM: EventColor.PALE_RED,
    }
)


def color_for(category: EventCategory) -> EventColor:
    """Display color for ``category``; ``EventColor.NONE`` keeps the current one."""

    return CATEGORY_COLORS.get(category, EventColor.NONE)
