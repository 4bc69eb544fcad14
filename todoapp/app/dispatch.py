"""UI-thread dispatchers used to resume view-model work.

``ViewModelScope`` hands each continuation to one of these so it runs on the
thread owning the ``LiveData`` holders. Worker threads only ever enqueue;
draining happens on the UI thread.
"""

from __future__ import annotations

import queue
from typing import Callable, Optional

Callback = Callable[[], None]


class ImmediateDispatcher:
    """Run callbacks inline; for single-threaded executors and scripts."""

    def post(self, callback: Callback) -> None:
        callback()


class QueueDispatcher:
    """Thread-safe FIFO of callbacks drained by the UI thread.

    The NiceGUI runtime calls :meth:`drain` from a page timer; tests call it
    to step the UI thread deterministically.
    """

    def __init__(self) -> None:
        self._queue: "queue.SimpleQueue[Callback]" = queue.SimpleQueue()

    def post(self, callback: Callback) -> None:
        self._queue.put(callback)

    @property
    def pending(self) -> int:
        return self._queue.qsize()

    def drain(self, limit: Optional[int] = None) -> int:
        """Run queued callbacks in FIFO order; return how many ran.

        Callbacks posted while draining are run in the same pass unless
        ``limit`` stops it first.
        """
        ran = 0
        while limit is None or ran < limit:
            try:
                callback = self._queue.get_nowait()
            except queue.Empty:
                break
            callback()
            ran += 1
        return ran


__all__ = ["ImmediateDispatcher", "QueueDispatcher"]
