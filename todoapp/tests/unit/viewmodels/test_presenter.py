from __future__ import annotations

import pytest

from todoapp.domain.entities import Task
from todoapp.viewmodels.presenter import (
    PresenterTask,
    to_entity,
    to_entity_list,
    to_view,
    to_view_list,
)


@pytest.mark.parametrize(
    "task",
    [
        Task(),
        Task(title="Title", description="Body", completed=True, id="1"),
        Task(title="", description="Only body", id="abc"),
        Task(title="Only title", completed=False),
    ],
)
def test_entity_survives_view_mapping(task: Task) -> None:
    assert to_entity(to_view(task)) == task


def test_view_fields_follow_entity() -> None:
    item = to_view(Task(title="", description="Walk dog", completed=True, id="7"))

    assert item == PresenterTask(entry_id="7", title="", description="Walk dog", completed=True)
    assert item.title_for_list == "Walk dog"
    assert not item.is_active
    assert item.is_empty


def test_list_mapping_preserves_order_and_length() -> None:
    tasks = [Task(title=str(i), id=str(i)) for i in range(5)]

    views = to_view_list(tasks)

    assert [view.entry_id for view in views] == ["0", "1", "2", "3", "4"]
    assert to_entity_list(views) == tasks
