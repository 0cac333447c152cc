"""Tests for the Google Calendar event repository and gateway."""

import pytest

from calendar_rich.config import GoogleSettings
from calendar_rich.data import GoogleCalendarGateway, GoogleCalendarNotConfiguredError
from calendar_rich.domain import CalendarEvent, EventColor

from conftest import CALENDAR_ID, event_record, patch_bodies


def _event(**kwargs):
    defaults = {"id": "evt-1", "calendar_id": CALENDAR_ID, "title": "Morning run"}
    defaults.update(kwargs)
    return CalendarEvent(**defaults)


class TestFetch:
    def test_maps_google_record(self, context, service):
        service.events.return_value.get.return_value.execute.return_value = event_record(
            "evt-1", summary="Bike :bike:", description="notes", color_id="8"
        )

        event = context.events.fetch(CALENDAR_ID, "evt-1")

        assert event.id == "evt-1"
        assert event.title == "Bike :bike:"
        assert event.description == "notes"
        assert event.color is EventColor.GRAY

    def test_missing_fields(self, context, service):
        service.events.return_value.get.return_value.execute.return_value = {"id": "evt-2"}

        event = context.events.fetch(CALENDAR_ID, "evt-2")

        assert event.title == ""
        assert event.description == ""
        assert event.color is EventColor.NONE


class TestWrites:
    def test_set_title(self, context, service):
        event = _event()

        assert context.events.set_title(event, "Morning 🏃‍♂️")

        assert event.title == "Morning 🏃‍♂️"
        service.events.return_value.patch.assert_called_once_with(
            calendarId=CALENDAR_ID, eventId="evt-1", body={"summary": "Morning 🏃‍♂️"}
        )

    def test_set_same_title_is_a_no_op(self, context, service):
        assert not context.events.set_title(_event(), "Morning run")
        service.events.return_value.patch.assert_not_called()

    def test_set_color(self, context, service):
        event = _event(color=EventColor.BLUE)

        assert context.events.set_color(event, EventColor.RED)

        assert event.color is EventColor.RED
        assert patch_bodies(service) == [{"colorId": "11"}]

    @pytest.mark.parametrize("current, new", [(EventColor.GRAY, EventColor.GRAY), (EventColor.BLUE, EventColor.NONE)])
    def test_set_color_no_op(self, context, service, current, new):
        assert not context.events.set_color(_event(color=current), new)
        service.events.return_value.patch.assert_not_called()


class TestGateway:
    def test_missing_credentials(self, tmp_path):
        gateway = GoogleCalendarGateway(GoogleSettings(credentials_file=tmp_path / "nope.json", auth_mode="authorized_user"))

        with pytest.raises(GoogleCalendarNotConfiguredError):
            gateway.events()
