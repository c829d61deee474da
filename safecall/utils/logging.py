from __future__ import annotations
"""Package logger backed by a Rich handler.

Chains only ever log at DEBUG, so nothing shows up unless the level is
lowered with :func:`get` or the ``SAFECALL_LOG_LEVEL`` environment variable.
"""
import os
from logging import DEBUG, ERROR, INFO, WARNING, Logger, getLogger

from rich.logging import RichHandler

__all__ = ["get", "log", "LEVEL_ENV_VAR"]

LEVEL_ENV_VAR = "SAFECALL_LOG_LEVEL"

_LEVEL_MAP = {
    "info": INFO,
    "debug": DEBUG,
    "warning": WARNING,
    "error": ERROR,
}

log: Logger = getLogger("safecall")


def _ensure_handler(logger: Logger) -> None:
    # messages go to the Rich handler only
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(RichHandler(rich_tracebacks=True, markup=True, show_path=False))
    logger.propagate = False


def get(level: str = "info") -> Logger:  # noqa: D401
    """Return the safecall logger set to *level* (str)."""
    lvl = _LEVEL_MAP.get(level.lower(), INFO)
    lg = getLogger("safecall")
    _ensure_handler(lg)
    lg.setLevel(lvl)
    return lg


_env_level = os.environ.get(LEVEL_ENV_VAR)
if _env_level:
    get(_env_level)
