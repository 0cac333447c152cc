from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional, Tuple, Union

from .enums import EventCategory, EventColor, UpdateStatus


@dataclass(frozen=True, slots=True)
class TagEntry:
    tag: str
    emoji: str
    category: EventCategory = EventCategory.NONE

    @property
    def is_cosmetic(self) -> bool:
        return self.category is EventCategory.NONE


@dataclass(slots=True)
class CalendarEvent:
    id: str
    calendar_id: str
    title: str
    description: str = ""
    color: EventColor = EventColor.NONE

    @classmethod
    def from_record(cls, record: Dict[str, Any], *, calendar_id: str) -> "CalendarEvent":
        return cls(
            id=str(record["id"]),
            calendar_id=calendar_id,
            title=record.get("summary") or "",
            description=record.get("description") or "",
            color=EventColor.from_color_id(record.get("colorId")),
        )


@dataclass(frozen=True, slots=True)
class EnrichmentResult:
    original_title: str
    title: str
    category: EventCategory = EventCategory.NONE
    replacements: Tuple[TagEntry, ...] = ()

    @property
    def changed(self) -> bool:
        return self.title != self.original_title


@dataclass(frozen=True, slots=True)
class CalendarTrigger:
    """A single "calendar changed" notification; it never names the event."""

    calendar_id: str
    fired_at: datetime
    trigger_uid: Optional[str] = None


@dataclass(frozen=True, slots=True)
class EventResolved:
    event: CalendarEvent


@dataclass(frozen=True, slots=True)
class NoEventFound:
    reason: str


ResolveResult = Union[EventResolved, NoEventFound]


@dataclass(frozen=True, slots=True)
class UpdateOutcome:
    status: UpdateStatus
    event_id: Optional[str] = None
    title: Optional[str] = None
    category: EventCategory = EventCategory.NONE
    color: EventColor = EventColor.NONE
    detail: str = ""
