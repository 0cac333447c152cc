from __future__ import annotations

from dataclasses import dataclass, field

from ..config import AppSettings, get_settings
from ..data import EventRepository, GoogleCalendarGateway


@dataclass(slots=True)
class ServiceContext:
    """Aggregate root for services to share settings, gateway, and repositories."""

    settings: AppSettings = field(default_factory=get_settings)
    gateway: GoogleCalendarGateway = field(init=False)
    events: EventRepository = field(init=False)

    def __post_init__(self) -> None:
        self.gateway = GoogleCalendarGateway(self.settings.google)
        self.events = EventRepository(gateway=self.gateway)
