"""Tests for resolving the event behind a calendar trigger."""

from datetime import timedelta

from calendar_rich.domain import EventResolved, NoEventFound
from calendar_rich.services import LastChangedEventResolver

from conftest import CALENDAR_ID, NOW, event_record, stub_calendar


class TestResolveLastChanged:
    def _resolver(self, context, **kwargs):
        return LastChangedEventResolver(events=context.events, **kwargs)

    def test_returns_the_last_updated_event(self, context, service):
        stub_calendar(
            service,
            items=[{"id": "evt-1"}, {"id": "evt-2"}, {"id": "evt-3"}],
            record=event_record("evt-3", summary="Swim"),
        )

        result = self._resolver(context).resolve_last_changed(CALENDAR_ID, NOW)

        assert isinstance(result, EventResolved)
        assert result.event.id == "evt-3"
        assert result.event.title == "Swim"
        assert result.event.calendar_id == CALENDAR_ID
        service.events.return_value.get.assert_called_once_with(calendarId=CALENDAR_ID, eventId="evt-3")

    def test_list_query(self, context, service):
        stub_calendar(service, items=[{"id": "evt-1"}], record=event_record("evt-1"))

        self._resolver(context).resolve_last_changed(CALENDAR_ID, NOW)

        service.events.return_value.list.assert_called_once_with(
            calendarId=CALENDAR_ID,
            updatedMin="2026-10-17T09:29:00Z",
            maxResults=50,
            orderBy="updated",
            singleEvents=True,
            showDeleted=False,
            fields="items(id)",
        )

    def test_window_and_cap_are_configurable(self, context, service):
        stub_calendar(service, items=[{"id": "evt-1"}], record=event_record("evt-1"))

        self._resolver(context, window=timedelta(seconds=300), max_results=5).resolve_last_changed(CALENDAR_ID, NOW)

        kwargs = service.events.return_value.list.call_args.kwargs
        assert kwargs["updatedMin"] == "2026-10-17T09:25:00Z"
        assert kwargs["maxResults"] == 5

    def test_empty_listing(self, context, service):
        stub_calendar(service, items=[])

        result = self._resolver(context).resolve_last_changed(CALENDAR_ID, NOW)

        assert isinstance(result, NoEventFound)
        service.events.return_value.get.assert_not_called()

    def test_listing_without_items_key(self, context, service):
        stub_calendar(service, items=None)

        assert isinstance(self._resolver(context).resolve_last_changed(CALENDAR_ID, NOW), NoEventFound)

    def test_trailing_null_slot_is_a_deletion(self, context, service):
        stub_calendar(service, items=[{"id": "evt-1"}, {"id": "evt-2"}, None])

        result = self._resolver(context).resolve_last_changed(CALENDAR_ID, NOW)

        assert isinstance(result, NoEventFound)
        assert "empty" in result.reason
        service.events.return_value.get.assert_not_called()

    def test_null_slot_before_the_last_is_ignored(self, context, service):
        stub_calendar(service, items=[None, {"id": "evt-2"}], record=event_record("evt-2"))

        result = self._resolver(context).resolve_last_changed(CALENDAR_ID, NOW)

        assert isinstance(result, EventResolved)
        assert result.event.id == "evt-2"
