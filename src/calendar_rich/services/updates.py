from __future__ import annotations

import logging
from dataclasses import dataclass

from ..domain import (
    CalendarEvent,
    CalendarTrigger,
    EventCategory,
    EventColor,
    NoEventFound,
    UpdateOutcome,
    UpdateStatus,
)
from ..enrichment import color_for, enrich_title
from .context import ServiceContext
from .resolver import LastChangedEventResolver

logger = logging.getLogger(__name__)

SKIP_MARKER = ":skip:"


@dataclass(slots=True)
class UpdateHandler:
    context: ServiceContext

    @property
    def resolver(self) -> LastChangedEventResolver:
        return LastChangedEventResolver(
            events=self.context.events,
            window=self.context.settings.resolver.window,
            max_results=self.context.settings.resolver.max_results,
        )

    def handle(self, trigger: CalendarTrigger) -> UpdateOutcome:
        logger.info("Calendar update on %s (trigger %s)", trigger.calendar_id, trigger.trigger_uid or "-")
        result = self.resolver.resolve_last_changed(trigger.calendar_id, trigger.fired_at)
        if isinstance(result, NoEventFound):
            logger.info("No event found, probably the update was a delete: %s", result.reason)
            return UpdateOutcome(status=UpdateStatus.NO_EVENT, detail=result.reason)

        event = result.event
        logger.info("Last changed event %s: %r", event.id, event.title)
        if SKIP_MARKER in event.description:
            logger.info("Event %s is marked %s, leaving it untouched", event.id, SKIP_MARKER)
            return UpdateOutcome(status=UpdateStatus.SKIPPED, event_id=event.id, title=event.title)

        return self.enrich(event)

    def enrich(self, event: CalendarEvent) -> UpdateOutcome:
        enrichment = enrich_title(event.title)
        logger.info("Event type: %s", enrichment.category.value)
        changed = False
        if enrichment.changed:
            changed = self.context.events.set_title(event, enrichment.title)

        color = EventColor.NONE
        if enrichment.category is not EventCategory.NONE:
            color = color_for(enrichment.category)
            changed = self.context.events.set_color(event, color) or changed

        return UpdateOutcome(
            status=UpdateStatus.UPDATED if changed else UpdateStatus.UNCHANGED,
            event_id=event.id,
            title=event.title,
            category=enrichment.category,
            color=color,
        )
