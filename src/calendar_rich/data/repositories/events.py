from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from ...domain import CalendarEvent, EventColor
from ..google import GoogleCalendarGateway

logger = logging.getLogger(__name__)


def _rfc3339(value: datetime) -> str:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


@dataclass(slots=True)
class EventRepository:
    gateway: GoogleCalendarGateway

    def list_recently_updated(
        self,
        calendar_id: str,
        updated_min: datetime,
        *,
        max_results: int = 50,
    ) -> List[Optional[Dict[str, Any]]]:
        """Ids of events updated since ``updated_min``, oldest change first.

        Slots are returned as the API sends them; a slot may be ``None``.
        """

        response = (
            self.gateway.events()
            .list(
                calendarId=calendar_id,
                updatedMin=_rfc3339(updated_min),
                maxResults=max_results,
                orderBy="updated",
                singleEvents=True,
                showDeleted=False,
                fields="items(id)",
            )
            .execute()
        )
        return list((response or {}).get("items") or [])

    def fetch(self, calendar_id: str, event_id: str) -> CalendarEvent:
        record = self.gateway.events().get(calendarId=calendar_id, eventId=event_id).execute()
        return CalendarEvent.from_record(record, calendar_id=calendar_id)

    def _patch(self, event: CalendarEvent, body: Dict[str, Any]) -> None:
        self.gateway.events().patch(calendarId=event.calendar_id, eventId=event.id, body=body).execute()

    def set_title(self, event: CalendarEvent, title: str) -> bool:
        if event.title == title:
            return False
        logger.info("Setting title of %s to: %s", event.id, title)
        self._patch(event, {"summary": title})
        event.title = title
        return True

    def set_color(self, event: CalendarEvent, color: EventColor) -> bool:
        if color is EventColor.NONE or event.color is color:
            return False
        logger.info("Setting color of %s to %s", event.id, color.name)
        self._patch(event, {"colorId": color.color_id})
        event.color = color
        return True
