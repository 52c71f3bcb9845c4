from __future__ import annotations

import logging

from .config import settings

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Idempotent; scripts and the API both call this once at startup."""
    lvl = (level or settings.LOG_LEVEL or "INFO").upper()
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=lvl, format=_FORMAT)
    root.setLevel(lvl)
