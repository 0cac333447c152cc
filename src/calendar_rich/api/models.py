from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ..domain import CalendarTrigger, EnrichmentResult, UpdateOutcome


class TriggerPayload(BaseModel):
    """Body of a calendar-update trigger, e.g. ``{"calendarId": "me@gmail.com"}``."""

    model_config = ConfigDict(populate_by_name=True)

    calendar_id: str = Field(alias="calendarId", min_length=1)
    trigger_uid: Optional[str] = Field(default=None, alias="triggerUid")
    auth_mode: Optional[str] = Field(default=None, alias="authMode")

    def to_domain(self, fired_at: datetime) -> CalendarTrigger:
        return CalendarTrigger(calendar_id=self.calendar_id, fired_at=fired_at, trigger_uid=self.trigger_uid)


class OutcomePayload(BaseModel):
    status: str
    event_id: Optional[str] = Field(default=None)
    title: Optional[str] = Field(default=None)
    category: str
    color: Optional[str] = Field(default=None)
    detail: str = Field(default="")

    @classmethod
    def from_domain(cls, outcome: UpdateOutcome) -> "OutcomePayload":
        return cls(
            status=outcome.status.value,
            event_id=outcome.event_id,
            title=outcome.title,
            category=outcome.category.value,
            color=outcome.color.name if outcome.color.color_id else None,
            detail=outcome.detail,
        )


class EnrichmentPayload(BaseModel):
    original_title: str
    title: str
    category: str
    tags: list[str] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, result: EnrichmentResult) -> "EnrichmentPayload":
        return cls(
            original_title=result.original_title,
            title=result.title,
            category=result.category.value,
            tags=[entry.tag for entry in result.replacements],
        )
