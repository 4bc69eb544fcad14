"""View-facing task projection and its mapping to/from the domain entity.

Call context:
    List and detail view models map repository results with :func:`to_view`
    and convert user actions back with :func:`to_entity` before calling a
    use-case.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List

from ..domain.entities import Task


@dataclass(frozen=True)
class PresenterTask:
    """Display row for one task.

    Derived flags are properties over the stored fields, so they always
    agree with the task the row was mapped from.
    """

    entry_id: str
    title: str = ""
    description: str = ""
    completed: bool = False

    @property
    def title_for_list(self) -> str:
        return self.title if self.title else self.description

    @property
    def is_active(self) -> bool:
        return not self.completed

    @property
    def is_empty(self) -> bool:
        return not self.title.strip() or not self.description.strip()


def to_view(task: Task) -> PresenterTask:
    return PresenterTask(
        entry_id=task.id,
        title=task.title,
        description=task.description,
        completed=task.completed,
    )


def to_entity(item: PresenterTask) -> Task:
    return Task(
        title=item.title,
        description=item.description,
        completed=item.completed,
        id=item.entry_id,
    )


def to_view_list(tasks: Iterable[Task]) -> List[PresenterTask]:
    return [to_view(task) for task in tasks]


def to_entity_list(items: Iterable[PresenterTask]) -> List[Task]:
    return [to_entity(item) for item in items]


__all__ = ["PresenterTask", "to_entity", "to_entity_list", "to_view", "to_view_list"]
