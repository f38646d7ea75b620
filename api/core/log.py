"""
Process-wide logging setup.

Modules log through `logging.getLogger(__name__)`; this only installs the
handler and level once, from `LOG_LEVEL`.
"""

from __future__ import annotations

import logging

from . import settings

LOG_FORMAT = "[birdbook] %(asctime)s %(levelname)s %(name)s %(message)s"

_handler: logging.Handler | None = None


def log_level_name() -> str:
    return settings.env_str("LOG_LEVEL", "INFO").upper()


def configure_logging() -> None:
    global _handler
    root = logging.getLogger()
    root.setLevel(getattr(logging, log_level_name(), logging.INFO))
    if _handler is not None:
        return None

    _handler = logging.StreamHandler()
    _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(_handler)
