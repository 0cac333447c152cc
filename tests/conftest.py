from __future__ import annotations

from datetime import datetime, timedelta, timezone
from unittest import mock

import pytest

from calendar_rich.config import AppSettings, GoogleSettings, LogSettings, ResolverSettings, ServerSettings
from calendar_rich.services import ServiceContext, UpdateHandler

CALENDAR_ID = "someone@gmail.com"
NOW = datetime(2026, 10, 17, 9, 30, 0, tzinfo=timezone.utc)


def make_settings(tmp_path, *, webhook_token=None) -> AppSettings:
    return AppSettings(
        google=GoogleSettings(credentials_file=tmp_path / "token.json", auth_mode="authorized_user"),
        resolver=ResolverSettings(window=timedelta(seconds=60), max_results=50),
        server=ServerSettings(host="127.0.0.1", port=8080, webhook_token=webhook_token),
        logging=LogSettings(level="INFO", directory=tmp_path),
    )


def event_record(event_id="evt-1", summary="", description="", color_id=None) -> dict:
    record = {
        "id": event_id,
        "summary": summary,
        "description": description,
        "updated": "2026-10-17T09:29:45.000Z",
    }
    if color_id:
        record["colorId"] = color_id
    return record


def stub_calendar(service, *, items, record=None) -> None:
    """Answer ``events().list`` with ``items`` and ``events().get`` with ``record``."""

    events = service.events.return_value
    events.list.return_value.execute.return_value = {"items": items} if items is not None else {}
    if record is not None:
        events.get.return_value.execute.return_value = record


def patch_bodies(service) -> list[dict]:
    return [call.kwargs["body"] for call in service.events.return_value.patch.call_args_list]


@pytest.fixture
def settings(tmp_path) -> AppSettings:
    return make_settings(tmp_path)


@pytest.fixture
def service() -> mock.MagicMock:
    return mock.MagicMock(name="calendar_v3")


@pytest.fixture
def context(settings, service) -> ServiceContext:
    ctx = ServiceContext(settings=settings)
    ctx.gateway._service = service
    return ctx


@pytest.fixture
def handler(context) -> UpdateHandler:
    return UpdateHandler(context)
