from __future__ import annotations

import hmac
import logging
import threading
from datetime import datetime, timezone
from functools import lru_cache
from typing import Optional
from urllib.parse import unquote, urlparse

from fastapi import Depends, FastAPI, Header, HTTPException
from fastapi.responses import ORJSONResponse

from ...api import OutcomePayload, TriggerPayload
from ...data import GoogleCalendarNotConfiguredError
from ...domain import CalendarTrigger, UpdateOutcome, UpdateStatus
from ..context import ServiceContext
from ..updates import UpdateHandler


logger = logging.getLogger(__name__)

app = FastAPI(title="calendar-rich", version="0.1.0", default_response_class=ORJSONResponse)

# One trigger at a time through the shared discovery client.
_HANDLE_LOCK = threading.Lock()


@lru_cache(maxsize=1)
def get_handler() -> UpdateHandler:
    return UpdateHandler(ServiceContext())


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _check_token(handler: UpdateHandler, token: Optional[str]) -> None:
    expected = handler.context.settings.server.webhook_token
    if expected and not hmac.compare_digest(token or "", expected):
        logger.warning("Rejected trigger with a bad token")
        raise HTTPException(status_code=401, detail="invalid webhook token")


def calendar_id_from_resource_uri(resource_uri: str) -> Optional[str]:
    """``.../calendar/v3/calendars/<id>/events?alt=json`` -> ``<id>``."""

    parts = urlparse(resource_uri).path.split("/")
    try:
        index = parts.index("calendars")
    except ValueError:
        return None
    if index + 1 >= len(parts) or not parts[index + 1]:
        return None
    return unquote(parts[index + 1])


def _handle(handler: UpdateHandler, trigger: CalendarTrigger) -> UpdateOutcome:
    with _HANDLE_LOCK:
        return handler.handle(trigger)


def _run(handler: UpdateHandler, trigger: CalendarTrigger) -> OutcomePayload:
    try:
        outcome = _handle(handler, trigger)
    except GoogleCalendarNotConfiguredError as exc:
        logger.error("Calendar client is not configured: %s", exc)
        raise HTTPException(status_code=503, detail=str(exc)) from exc
    except Exception as exc:  # noqa: BLE001
        logger.exception("Calendar update on %s failed", trigger.calendar_id)
        raise HTTPException(status_code=502, detail=str(exc)) from exc
    logger.info("Calendar update on %s: %s", trigger.calendar_id, outcome.status.value)
    return OutcomePayload.from_domain(outcome)


@app.get("/health")
async def health() -> dict:
    return {"status": "ok"}


@app.post("/triggers/calendar-update", response_model=OutcomePayload)
def calendar_update(
    payload: TriggerPayload,
    handler: UpdateHandler = Depends(get_handler),
    x_calendar_rich_token: Optional[str] = Header(default=None),
) -> OutcomePayload:
    _check_token(handler, x_calendar_rich_token)
    return _run(handler, payload.to_domain(_utcnow()))


@app.post("/triggers/google-push", response_model=Optional[OutcomePayload])
def google_push(
    handler: UpdateHandler = Depends(get_handler),
    x_goog_resource_state: str = Header(...),
    x_goog_resource_uri: str = Header(default=""),
    x_goog_channel_id: Optional[str] = Header(default=None),
    x_goog_channel_token: Optional[str] = Header(default=None),
) -> Optional[OutcomePayload]:
    _check_token(handler, x_goog_channel_token)
    if x_goog_resource_state == "sync":
        logger.info("Push channel %s is now active", x_goog_channel_id)
        return None

    calendar_id = calendar_id_from_resource_uri(x_goog_resource_uri)
    if not calendar_id:
        raise HTTPException(status_code=400, detail="cannot read a calendar id from X-Goog-Resource-URI")
    trigger = CalendarTrigger(calendar_id=calendar_id, fired_at=_utcnow(), trigger_uid=x_goog_channel_id)
    try:
        outcome = _handle(handler, trigger)
    except Exception as exc:  # noqa: BLE001
        # Any non-2xx answer makes Google redeliver the notification.
        logger.exception("Calendar update on %s failed", calendar_id)
        outcome = UpdateOutcome(status=UpdateStatus.FAILED, detail=str(exc))
    logger.info("Calendar update on %s: %s", calendar_id, outcome.status.value)
    return OutcomePayload.from_domain(outcome)


def run_local_server(host: str = "127.0.0.1", port: int = 8080) -> None:
    import asyncio
    from hypercorn.asyncio import serve
    from hypercorn.config import Config

    config = Config()
    config.bind = [f"{host}:{port}"]
    asyncio.run(serve(app, config))
