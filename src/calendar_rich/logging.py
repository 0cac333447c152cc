from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import List, Optional

from .config import get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
HANDLER_PREFIX = "calendar_rich."


def _owned_handlers(root: logging.Logger) -> List[logging.Handler]:
    return [handler for handler in root.handlers if (handler.get_name() or "").startswith(HANDLER_PREFIX)]


def configure_logging(level: Optional[str] = None, *, log_path: Optional[Path] = None) -> Path:
    """Attach a console handler and a rotating file handler to the root logger.

    Calling it again only adjusts the level; the handlers are attached once per
    process. Returns the log file in use.
    """

    settings = get_settings().logging
    root = logging.getLogger()
    root.setLevel(getattr(logging, (level or settings.level).upper(), logging.INFO))

    existing = _owned_handlers(root)
    if existing:
        return Path(next(h.baseFilename for h in existing if isinstance(h, RotatingFileHandler)))

    log_file = log_path or settings.directory / "calendar_rich.log"
    log_file.parent.mkdir(parents=True, exist_ok=True)
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    file_handler = RotatingFileHandler(str(log_file), maxBytes=1_000_000, backupCount=5, encoding="utf-8")
    file_handler.set_name(HANDLER_PREFIX + "file")
    console_handler = logging.StreamHandler()
    console_handler.set_name(HANDLER_PREFIX + "console")
    for handler in (file_handler, console_handler):
        handler.setFormatter(formatter)
        root.addHandler(handler)

    logging.getLogger(__name__).debug("Logging configured. Output file: %s", log_file)
    return log_file


def reset_logging() -> None:
    """Detach and close the handlers added by :func:`configure_logging`."""

    root = logging.getLogger()
    for handler in _owned_handlers(root):
        root.removeHandler(handler)
        handler.close()


__all__ = ["configure_logging", "reset_logging"]
