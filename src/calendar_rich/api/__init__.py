"""Request and response payloads shared by the HTTP server and the CLI."""

from __future__ import annotations

from .models import EnrichmentPayload, OutcomePayload, TriggerPayload

__all__ = ["EnrichmentPayload", "OutcomePayload", "TriggerPayload"]
