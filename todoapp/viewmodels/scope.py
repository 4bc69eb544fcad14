"""Lifetime scope tying background repository work to a view model.

Work submitted through :meth:`ViewModelScope.launch` runs on an executor; its
continuation is handed to a :class:`UiDispatcher` so it executes on the UI
thread, the only thread allowed to touch ``LiveData``. Once the scope is
cancelled (screen destroyed) pending work is cancelled and late results are
dropped without reaching the now-dead holders.
"""

from __future__ import annotations

import logging
from concurrent.futures import Executor, Future
from typing import Callable, List, Optional, Protocol, Set, TypeVar

from .live_data import LiveData, MappedLiveData, map_live_data

T = TypeVar("T")
R = TypeVar("R")

LOGGER = logging.getLogger(__name__)


class UiDispatcher(Protocol):
    """Runs callbacks on the thread that owns the UI state."""

    def post(self, callback: Callable[[], None]) -> None: ...


class ViewModelScope:
    """Track futures launched by one view model and resume them on the UI thread."""

    def __init__(self, executor: Executor, dispatcher: UiDispatcher, *, name: str = "viewmodel") -> None:
        self.name = name
        self._executor = executor
        self._dispatcher = dispatcher
        self._pending: Set[Future] = set()
        self._cancelled = False

    @property
    def is_active(self) -> bool:
        return not self._cancelled

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    def launch(self, work: Callable[[], T], on_result: Callable[[T], None]) -> Optional[Future]:
        """Run ``work`` off the UI thread, then ``on_result`` on it.

        Returns the underlying future, or ``None`` when no work was started:
        the scope is already cancelled or the executor has shut down.
        """
        if self._cancelled:
            LOGGER.debug("%s: launch ignored, scope cancelled", self.name)
            return None
        try:
            future = self._executor.submit(work)
        except RuntimeError as exc:
            LOGGER.warning("%s: launch rejected by executor: %s", self.name, exc)
            return None
        self._pending.add(future)
        future.add_done_callback(
            lambda done: self._dispatcher.post(lambda: self._resume(done, on_result))
        )
        return future

    def cancel(self) -> None:
        """Cancel pending work and drop every result that arrives later."""
        self._cancelled = True
        for future in list(self._pending):
            future.cancel()
        self._pending.clear()

    def _resume(self, future: Future, on_result: Callable[[T], None]) -> None:
        self._pending.discard(future)
        if self._cancelled or future.cancelled():
            LOGGER.debug("%s: dropping result of cancelled scope", self.name)
            return
        # Re-raises unexpected failures on the UI thread.
        on_result(future.result())


class ViewModel:
    """Base class owning a :class:`ViewModelScope`."""

    def __init__(self, scope: ViewModelScope) -> None:
        self.scope = scope
        self._derived: List[MappedLiveData] = []

    def derive(self, source: LiveData[T], transform: Callable[[T], R]) -> LiveData[R]:
        """Map ``source`` into a holder that is detached on :meth:`clear`."""
        mapped = map_live_data(source, transform)
        self._derived.append(mapped)
        return mapped

    def clear(self) -> None:
        """Release the view model; in-flight results are discarded."""
        self.scope.cancel()
        for mapped in self._derived:
            mapped.detach()
        self._derived.clear()
        self.on_cleared()

    def on_cleared(self) -> None:
        """Hook for subclasses releasing extra resources."""


__all__ = ["UiDispatcher", "ViewModel", "ViewModelScope"]
