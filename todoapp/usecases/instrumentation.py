"""Idling counter and timing hook wrapped around every use-case call.

UI tests wait on :data:`IDLING_RESOURCE` until no repository work is in
flight. The same hook emits DEBUG timing lines so slow repository calls show
up in the log without touching view-model code.
"""

from __future__ import annotations

import logging
import threading
import time
from contextlib import contextmanager
from typing import Iterator

LOGGER = logging.getLogger(__name__)


class IdlingResource:
    """Thread-safe counter of in-flight operations."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._count = 0
        self._lock = threading.Lock()
        self._idle = threading.Condition(self._lock)

    def increment(self) -> None:
        with self._lock:
            self._count += 1

    def decrement(self) -> None:
        with self._lock:
            if self._count <= 0:
                raise RuntimeError(f"{self.name}: counter has been corrupted")
            self._count -= 1
            if self._count == 0:
                self._idle.notify_all()

    @property
    def is_idle(self) -> bool:
        with self._lock:
            return self._count == 0

    def wait_for_idle(self, timeout: float | None = None) -> bool:
        """Block until no operation is in flight; ``False`` on timeout."""
        with self._lock:
            return self._idle.wait_for(lambda: self._count == 0, timeout=timeout)


IDLING_RESOURCE = IdlingResource("todoapp.usecases")


@contextmanager
def track_usecase(name: str) -> Iterator[None]:
    """Count the wrapped block as busy work and log its duration."""
    IDLING_RESOURCE.increment()
    started = time.perf_counter()
    LOGGER.debug("%s: start", name)
    try:
        yield
    finally:
        elapsed_ms = (time.perf_counter() - started) * 1000.0
        LOGGER.debug("%s: done in %.1f ms", name, elapsed_ms)
        IDLING_RESOURCE.decrement()


__all__ = ["IDLING_RESOURCE", "IdlingResource", "track_usecase"]
