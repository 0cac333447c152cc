from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import timedelta
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from platformdirs import user_config_dir, user_log_dir

load_dotenv()

APP_NAME = "calendar-rich"
APP_AUTHOR = "CalendarRich"

CALENDAR_SCOPES = ("https://www.googleapis.com/auth/calendar.events",)


@dataclass(frozen=True)
class GoogleSettings:
    credentials_file: Optional[Path]
    auth_mode: str
    scopes: tuple[str, ...] = CALENDAR_SCOPES

    @property
    def is_configured(self) -> bool:
        return self.credentials_file is not None and self.credentials_file.exists()

    @property
    def uses_service_account(self) -> bool:
        return self.auth_mode == "service_account"


@dataclass(frozen=True)
class ResolverSettings:
    window: timedelta
    max_results: int


@dataclass(frozen=True)
class ServerSettings:
    host: str
    port: int
    webhook_token: Optional[str]


@dataclass(frozen=True)
class LogSettings:
    level: str
    directory: Path


@dataclass(frozen=True)
class AppSettings:
    google: GoogleSettings
    resolver: ResolverSettings
    server: ServerSettings
    logging: LogSettings


def _int_from_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value > 0 else default


def _path_from_env(name: str, default: Optional[Path] = None) -> Optional[Path]:
    raw = os.getenv(name)
    if not raw:
        return default
    return Path(raw).expanduser()


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    google = GoogleSettings(
        credentials_file=_path_from_env(
            "GOOGLE_CALENDAR_CREDENTIALS_FILE",
            Path(user_config_dir(APP_NAME, APP_AUTHOR)) / "token.json",
        ),
        auth_mode=os.getenv("GOOGLE_CALENDAR_AUTH_MODE", "authorized_user").lower(),
    )

    resolver = ResolverSettings(
        window=timedelta(seconds=_int_from_env("CALENDAR_RICH_WINDOW_SECONDS", 60)),
        max_results=_int_from_env("CALENDAR_RICH_MAX_RESULTS", 50),
    )

    server = ServerSettings(
        host=os.getenv("CALENDAR_RICH_HOST", "127.0.0.1"),
        port=_int_from_env("CALENDAR_RICH_PORT", 8080),
        webhook_token=os.getenv("CALENDAR_RICH_WEBHOOK_TOKEN") or None,
    )

    log = LogSettings(
        level=os.getenv("CALENDAR_RICH_LOG_LEVEL", "INFO").upper(),
        directory=_path_from_env("CALENDAR_RICH_LOG_DIR", Path(user_log_dir(APP_NAME, APP_AUTHOR))),
    )

    return AppSettings(google=google, resolver=resolver, server=server, logging=log)
