"""Application services orchestrating data access and enrichment."""

from __future__ import annotations

from .context import ServiceContext
from .resolver import LastChangedEventResolver
from .updates import SKIP_MARKER, UpdateHandler

__all__ = ["LastChangedEventResolver", "SKIP_MARKER", "ServiceContext", "UpdateHandler"]
