"""Task entity and filtering primitives shared by use-cases and view models."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from enum import Enum


def new_task_id() -> str:
    """Return a fresh, externally unique task identifier."""
    return uuid.uuid4().hex


@dataclass(frozen=True)
class Task:
    """Immutable task record as returned by the repository port."""

    title: str = ""
    """Short title shown in lists; may be empty when a description exists."""
    description: str = ""
    """Free-form body text of the task."""
    completed: bool = False
    """Single completion flag; there is no soft-delete state."""
    id: str = field(default_factory=new_task_id)
    """Stable identifier assigned once at creation."""

    @property
    def title_for_list(self) -> str:
        return self.title if self.title else self.description

    @property
    def is_active(self) -> bool:
        return not self.completed

    @property
    def is_empty(self) -> bool:
        return not self.title.strip() or not self.description.strip()


class FilterKind(Enum):
    """Task visibility filter selected on the list screen."""

    ALL = "all"
    ACTIVE = "active"
    COMPLETED = "completed"

    def matches(self, task: Task) -> bool:
        if self is FilterKind.ACTIVE:
            return task.is_active
        if self is FilterKind.COMPLETED:
            return task.completed
        return True


@dataclass(frozen=True)
class TaskStats:
    """Share of active vs. completed tasks, expressed in percent."""

    active_percent: float = 0.0
    completed_percent: float = 0.0
