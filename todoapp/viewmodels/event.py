"""One-shot payload wrapper for effects exposed through ``LiveData``.

Navigation requests and snackbar messages are published as ``Event``
instances. ``LiveData`` replays its latest value to every new observer (a
view re-created after a rotation, a second widget on the same field), so the
effect itself must be guarded: only the first consumer of a given ``Event``
acts on it.
"""

from __future__ import annotations

import threading
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")


class Event(Generic[T]):
    """Payload that can be consumed at most once across all observers."""

    def __init__(self, content: T) -> None:
        self._content = content
        self._handled = False
        self._lock = threading.Lock()

    @property
    def has_been_handled(self) -> bool:
        return self._handled

    def try_consume(self) -> bool:
        """Mark the event handled; ``True`` only for the first caller."""
        with self._lock:
            if self._handled:
                return False
            self._handled = True
            return True

    def get_content_if_not_handled(self) -> Optional[T]:
        """Return the content once, then ``None`` for every later call.

        Ambiguous for ``Event(None)`` payloads (navigation requests); use
        :meth:`try_consume` followed by :meth:`peek_content` there, as
        :class:`EventObserver` does.
        """
        if self.try_consume():
            return self._content
        return None

    def peek_content(self) -> T:
        """Return the content even if it has already been handled."""
        return self._content

    def __repr__(self) -> str:
        state = "handled" if self._handled else "pending"
        return f"Event({self._content!r}, {state})"


class EventObserver(Generic[T]):
    """``LiveData`` observer that runs ``on_content`` only for unhandled events."""

    def __init__(self, on_content: Callable[[T], None]) -> None:
        self._on_content = on_content

    def __call__(self, event: Optional[Event[T]]) -> None:
        if event is not None and event.try_consume():
            self._on_content(event.peek_content())


__all__ = ["Event", "EventObserver"]
