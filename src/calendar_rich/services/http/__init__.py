"""HTTP trigger endpoints for calendar-rich."""

from .server import app, calendar_id_from_resource_uri, get_handler, run_local_server

__all__ = [
    "app",
    "calendar_id_from_resource_uri",
    "get_handler",
    "run_local_server",
]
