"""Aggregate helpers for the statistics screen."""

from __future__ import annotations

from typing import Optional, Sequence

from .entities import Task, TaskStats


def get_active_and_completed_stats(tasks: Optional[Sequence[Task]]) -> TaskStats:
    """Return percentages of active and completed tasks.

    An empty or missing list yields ``0.0`` for both values.
    """
    if not tasks:
        return TaskStats()
    total = len(tasks)
    active = sum(1 for task in tasks if task.is_active)
    return TaskStats(
        active_percent=100.0 * active / total,
        completed_percent=100.0 * (total - active) / total,
    )


__all__ = ["get_active_and_completed_stats"]
