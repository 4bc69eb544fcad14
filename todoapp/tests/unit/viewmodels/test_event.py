from __future__ import annotations

import threading
from typing import List

from todoapp.viewmodels.event import Event, EventObserver
from todoapp.viewmodels.live_data import MutableLiveData


def test_event_content_is_delivered_once() -> None:
    event = Event("task_marked_complete")

    assert event.get_content_if_not_handled() == "task_marked_complete"
    assert event.get_content_if_not_handled() is None
    assert event.has_been_handled
    assert event.peek_content() == "task_marked_complete"


def test_try_consume_succeeds_exactly_once_across_threads() -> None:
    event = Event(42)
    results: List[bool] = []
    lock = threading.Lock()
    start = threading.Barrier(8)

    def consume() -> None:
        start.wait()
        outcome = event.try_consume()
        with lock:
            results.append(outcome)

    threads = [threading.Thread(target=consume) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert results.count(True) == 1
    assert results.count(False) == 7


def test_only_first_observer_shows_replayed_snackbar() -> None:
    snackbar: MutableLiveData[Event[str]] = MutableLiveData()
    snackbar.set_value(Event("completed_tasks_cleared"))

    shown_first: List[str] = []
    shown_second: List[str] = []
    snackbar.observe(EventObserver(shown_first.append))
    snackbar.observe(EventObserver(shown_second.append))

    assert shown_first == ["completed_tasks_cleared"]
    assert shown_second == []


def test_event_observer_ignores_missing_event() -> None:
    seen: List[str] = []

    EventObserver(seen.append)(None)

    assert seen == []


def test_none_payload_is_consumed_through_try_consume() -> None:
    event: Event[None] = Event(None)

    assert event.try_consume()
    assert event.peek_content() is None
    assert not event.try_consume()
    assert event.has_been_handled


def test_event_observer_delivers_none_payload_once() -> None:
    navigation: MutableLiveData[Event[None]] = MutableLiveData()
    opened: List[None] = []
    navigation.observe(EventObserver(opened.append))

    navigation.set_value(Event(None))
    navigation.observe(EventObserver(opened.append))

    assert opened == [None]
