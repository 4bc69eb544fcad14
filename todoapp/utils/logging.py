"""Root logger setup for the task app.

``TODOAPP_LOG_LEVEL`` (a level name or number) wins over everything else and
a truthy ``TODOAPP_DEBUG`` forces DEBUG. Without either, the saved
``debug_logging`` setting picks DEBUG or INFO. HTTP and websocket transport
loggers stay at WARNING unless the app itself runs at DEBUG, so a REST
repository with retries does not flood the console.
"""

from __future__ import annotations

import logging
import os
from typing import Mapping, Optional, Union

LEVEL_ENV = "TODOAPP_LOG_LEVEL"
DEBUG_ENV = "TODOAPP_DEBUG"

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_DATEFMT = "%H:%M:%S"
_TRUTHY = frozenset({"1", "true", "yes", "on"})
_TRANSPORT_LOGGERS = ("urllib3", "engineio", "socketio", "uvicorn.access")


def env_level(environ: Optional[Mapping[str, str]] = None) -> Optional[int]:
    """Level forced by the environment, or ``None`` when nothing is set."""
    env = os.environ if environ is None else environ
    raw = (env.get(LEVEL_ENV) or "").strip()
    if raw:
        return _parse_level(raw, logging.INFO)
    if (env.get(DEBUG_ENV) or "").strip().lower() in _TRUTHY:
        return logging.DEBUG
    return None


def env_forces_debug(environ: Optional[Mapping[str, str]] = None) -> bool:
    level = env_level(environ)
    return level is not None and level <= logging.DEBUG


def configure_root(
    default_level: Union[int, str] = logging.INFO,
    environ: Optional[Mapping[str, str]] = None,
) -> int:
    """Install the console handler once and return the effective root level."""
    if isinstance(default_level, str):
        default_level = _parse_level(default_level, logging.INFO)
    level = env_level(environ)
    if level is None:
        level = default_level
    if not logging.getLogger().handlers:
        logging.basicConfig(format=_FORMAT, datefmt=_DATEFMT)
    _set_levels(level)
    return level


def apply_preferences(debug_enabled: bool, environ: Optional[Mapping[str, str]] = None) -> int:
    """Apply the saved debug preference unless the environment overrides it."""
    level = env_level(environ)
    if level is None:
        level = logging.DEBUG if debug_enabled else logging.INFO
    _set_levels(level)
    return level


def _parse_level(text: str, fallback: int) -> int:
    text = text.strip()
    if text.isdigit():
        return int(text)
    level = logging.getLevelName(text.upper())
    return level if isinstance(level, int) else fallback


def _set_levels(level: int) -> None:
    logging.getLogger().setLevel(level)
    transport = level if level <= logging.DEBUG else max(level, logging.WARNING)
    for name in _TRANSPORT_LOGGERS:
        logging.getLogger(name).setLevel(transport)


__all__ = ["apply_preferences", "configure_root", "env_forces_debug", "env_level"]
