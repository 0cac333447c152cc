"""Configuration models and helpers."""

from __future__ import annotations

from .settings import (
    AppSettings,
    GoogleSettings,
    LogSettings,
    ResolverSettings,
    ServerSettings,
    get_settings,
)

__all__ = [
    "AppSettings",
    "GoogleSettings",
    "LogSettings",
    "ResolverSettings",
    "ServerSettings",
    "get_settings",
]
