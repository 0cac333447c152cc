from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from google.auth.transport.requests import Request
from google.oauth2 import service_account
from google.oauth2.credentials import Credentials
from googleapiclient.discovery import build

from ..config.settings import GoogleSettings


class GoogleCalendarNotConfiguredError(RuntimeError):
    """Raised when the calendar client is needed but no credentials are available."""


@dataclass
class GoogleCalendarGateway:
    """Thin wrapper around the Google Calendar v3 discovery client."""

    settings: GoogleSettings
    _service: Optional[Any] = None

    def _load_credentials(self):
        if not self.settings.is_configured:
            raise GoogleCalendarNotConfiguredError(
                f"Google Calendar credentials file not found: {self.settings.credentials_file}"
            )
        path = str(self.settings.credentials_file)
        scopes = list(self.settings.scopes)
        if self.settings.uses_service_account:
            return service_account.Credentials.from_service_account_file(path, scopes=scopes)
        credentials = Credentials.from_authorized_user_file(path, scopes)
        if credentials.expired and credentials.refresh_token:
            credentials.refresh(Request())
        return credentials

    def ensure_client(self) -> Any:
        if self._service is not None:
            return self._service
        self._service = build("calendar", "v3", credentials=self._load_credentials(), cache_discovery=False)
        return self._service

    def events(self) -> Any:
        return self.ensure_client().events()
