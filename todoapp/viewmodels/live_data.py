"""Replay-latest observable state holders owned by view models.

A view model keeps :class:`MutableLiveData` fields private to itself and
hands the same objects to views typed as :class:`LiveData`, which has no
setter. Values are published synchronously, in registration order, on the
thread that owns the holder (the UI thread). Holders are not thread-safe;
background work reaches them only through a ``UiDispatcher``.
"""

from __future__ import annotations

import threading
from typing import Any, Callable, Generic, List, TypeVar, Union

T = TypeVar("T")
R = TypeVar("R")


class _Unset:
    """Sentinel type for holders that were never assigned."""

    _instance: "_Unset | None" = None

    def __new__(cls) -> "_Unset":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET = _Unset()

Observer = Callable[[T], None]


class Observation:
    """Handle returned by :meth:`LiveData.observe`; dispose to detach."""

    def __init__(self, source: "LiveData[Any]", observer: Observer) -> None:
        self._source = source
        self._observer = observer

    def dispose(self) -> None:
        self._source.remove_observer(self._observer)


class LiveData(Generic[T]):
    """Read-only view of an observable value with replay-latest semantics."""

    def __init__(self, value: Union[T, _Unset] = UNSET) -> None:
        self._value: Union[T, _Unset] = value
        self._observers: List[Observer] = []
        self._owner_thread = threading.get_ident()

    @property
    def value(self) -> Union[T, _Unset]:
        """Latest published value, or ``UNSET`` before the first publish."""
        return self._value

    @property
    def is_set(self) -> bool:
        return self._value is not UNSET

    def get(self, default: Any = None) -> Any:
        """Return the latest value, or ``default`` while unset."""
        return default if self._value is UNSET else self._value

    def observe(self, observer: Observer) -> Observation:
        """Register ``observer``; it immediately receives the latest value."""
        if observer not in self._observers:
            self._observers.append(observer)
            if self._value is not UNSET:
                observer(self._value)
        return Observation(self, observer)

    def remove_observer(self, observer: Observer) -> None:
        if observer in self._observers:
            self._observers.remove(observer)

    def has_observers(self) -> bool:
        return bool(self._observers)

    def _publish(self, value: T) -> None:
        if threading.get_ident() != self._owner_thread:
            raise RuntimeError("LiveData can only be updated from the thread that created it")
        self._value = value
        for observer in list(self._observers):
            # Observers removed by an earlier callback of this round are skipped.
            if observer in self._observers:
                observer(value)


class MutableLiveData(LiveData[T]):
    """Writable holder; only the owning view model calls :meth:`set_value`."""

    def set_value(self, value: T) -> None:
        self._publish(value)


class MappedLiveData(LiveData[R]):
    """Holder derived from another; :meth:`detach` stops following the source."""

    def __init__(self, source: LiveData[T], transform: Callable[[T], R]) -> None:
        super().__init__()
        self._transform = transform
        self._source_observation = source.observe(self._on_source)

    def detach(self) -> None:
        self._source_observation.dispose()

    def _on_source(self, value: T) -> None:
        self._publish(self._transform(value))


def map_live_data(source: LiveData[T], transform: Callable[[T], R]) -> MappedLiveData[R]:
    """Derive a read-only holder whose value is ``transform(source.value)``.

    Recomputed on every publish of ``source``; ``transform`` must be pure.
    The derived holder stays unset until ``source`` has a value and keeps
    ``source`` observed until detached.
    """
    return MappedLiveData(source, transform)


__all__ = [
    "LiveData",
    "MappedLiveData",
    "MutableLiveData",
    "Observation",
    "Observer",
    "UNSET",
    "map_live_data",
]
