"""Domain models for calendar event enrichment."""

from __future__ import annotations

from .enums import EventCategory, EventColor, UpdateStatus
from .models import (
    CalendarEvent,
    CalendarTrigger,
    EnrichmentResult,
    EventResolved,
    NoEventFound,
    ResolveResult,
    TagEntry,
    UpdateOutcome,
)

__all__ = [
    "CalendarEvent",
    "CalendarTrigger",
    "EnrichmentResult",
    "EventCategory",
    "EventColor",
    "EventResolved",
    "NoEventFound",
    "ResolveResult",
    "TagEntry",
    "UpdateOutcome",
    "UpdateStatus",
]
