from __future__ import annotations

import logging
import threading

import pytest

from todoapp.usecases.instrumentation import IDLING_RESOURCE, IdlingResource, track_usecase


def test_counter_tracks_nested_work() -> None:
    resource = IdlingResource("test")
    resource.increment()
    resource.increment()
    resource.decrement()

    assert not resource.is_idle

    resource.decrement()
    assert resource.is_idle


def test_decrement_below_zero_is_an_error() -> None:
    with pytest.raises(RuntimeError):
        IdlingResource("test").decrement()


def test_wait_for_idle_unblocks_when_work_finishes() -> None:
    resource = IdlingResource("test")
    resource.increment()
    timer = threading.Timer(0.05, resource.decrement)
    timer.start()

    assert resource.wait_for_idle(timeout=5)
    timer.join()


def test_wait_for_idle_times_out() -> None:
    resource = IdlingResource("test")
    resource.increment()

    assert resource.wait_for_idle(timeout=0.01) is False


def test_track_usecase_logs_timing_and_releases_on_error(caplog) -> None:
    caplog.set_level(logging.DEBUG, logger="todoapp.usecases.instrumentation")

    with pytest.raises(ValueError):
        with track_usecase("SampleUseCase"):
            assert not IDLING_RESOURCE.is_idle
            raise ValueError("fail")

    assert IDLING_RESOURCE.is_idle
    assert any("SampleUseCase: done in" in record.getMessage() for record in caplog.records)
