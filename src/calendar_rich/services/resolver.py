from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta

from ..data import EventRepository
from ..domain import EventResolved, NoEventFound, ResolveResult

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class LastChangedEventResolver:
    """Find the event behind a "calendar changed" trigger.

    The trigger only names the calendar, so the most recently updated event
    inside a short look-back window is taken to be the one that changed.
    """

    events: EventRepository
    window: timedelta = timedelta(seconds=60)
    max_results: int = 50

    def resolve_last_changed(self, calendar_id: str, now: datetime) -> ResolveResult:
        updated_min = now - self.window
        items = self.events.list_recently_updated(calendar_id, updated_min, max_results=self.max_results)
        if not items:
            return NoEventFound(f"no events updated since {updated_min.isoformat()}")

        # A deletion shows up as an empty trailing slot.
        candidate = items[-1]
        if not candidate or not candidate.get("id"):
            return NoEventFound("the most recently updated slot is empty")

        logger.debug("Resolved last changed event %s out of %d", candidate["id"], len(items))
        return EventResolved(self.events.fetch(calendar_id, candidate["id"]))
