"""Data access layer."""

from __future__ import annotations

from .google import GoogleCalendarGateway, GoogleCalendarNotConfiguredError
from .repositories import EventRepository

__all__ = [
    "EventRepository",
    "GoogleCalendarGateway",
    "GoogleCalendarNotConfiguredError",
]
