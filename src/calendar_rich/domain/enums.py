from __future__ import annotations

from enum import Enum
from typing import Optional


class EventCategory(str, Enum):
    RUN = "RUN"
    BIKE = "BIKE"
    BIRTHDAY = "BIRTHDAY"
    DINNER = "DINNER"
    HEALTH = "HEALTH"
    GYM = "GYM"
    NONE = "none"


class EventColor(str, Enum):
    """Google Calendar event colors, valued by their API ``colorId``."""

    NONE = ""
    PALE_BLUE = "1"
    PALE_GREEN = "2"
    MAUVE = "3"
    PALE_RED = "4"
    YELLOW = "5"
    ORANGE = "6"
    CYAN = "7"
    GRAY = "8"
    BLUE = "9"
    GREEN = "10"
    RED = "11"

    @property
    def color_id(self) -> Optional[str]:
        return self.value or None

    @classmethod
    def from_color_id(cls, value: Optional[str]) -> "EventColor":
        if not value:
            return cls.NONE
        return cls(str(value))


class UpdateStatus(str, Enum):
    NO_EVENT = "no_event"
    SKIPPED = "skipped"
    UNCHANGED = "unchanged"
    UPDATED = "updated"
    FAILED = "failed"
