"""Message codes and filter presentation tokens used by view models.

View models publish stable codes; views turn them into text with
:func:`message_text` so wording can change without touching view-model
logic or tests.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

from ..domain.entities import FilterKind

TASK_MARKED_COMPLETE = "task_marked_complete"
TASK_MARKED_ACTIVE = "task_marked_active"
COMPLETED_TASKS_CLEARED = "completed_tasks_cleared"
LOADING_TASKS_ERROR = "loading_tasks_error"
SUCCESSFULLY_SAVED_TASK = "successfully_saved_task_message"
SUCCESSFULLY_ADDED_TASK = "successfully_added_task_message"
SUCCESSFULLY_DELETED_TASK = "successfully_deleted_task_message"
EMPTY_TASK = "empty_task_message"
NO_TASK_FOUND = "no_task_found"
SAVING_TASK_ERROR = "saving_task_error"
TASK_UPDATE_ERROR = "task_update_error"

# Result codes handed back to the list screen after add/edit/detail closes.
EDIT_RESULT_OK = 1
DELETE_RESULT_OK = 2
ADD_EDIT_RESULT_OK = 3

_TEXTS: Dict[str, str] = {
    TASK_MARKED_COMPLETE: "Task marked complete",
    TASK_MARKED_ACTIVE: "Task marked active",
    COMPLETED_TASKS_CLEARED: "Completed tasks cleared",
    LOADING_TASKS_ERROR: "Error while loading tasks",
    SUCCESSFULLY_SAVED_TASK: "Task saved",
    SUCCESSFULLY_ADDED_TASK: "Task added",
    SUCCESSFULLY_DELETED_TASK: "Task was deleted",
    EMPTY_TASK: "Tasks cannot be empty",
    NO_TASK_FOUND: "Task not found",
    SAVING_TASK_ERROR: "Error while saving task",
    TASK_UPDATE_ERROR: "Error while updating task",
    "label_all": "All Tasks",
    "label_active": "Active Tasks",
    "label_completed": "Completed Tasks",
    "no_tasks_all": "You have no tasks!",
    "no_tasks_active": "You have no active tasks!",
    "no_tasks_completed": "You have no completed tasks!",
}


@dataclass(frozen=True)
class FilterPresentation:
    """Label/icon tokens shown for the selected filter."""

    label: str
    no_tasks_label: str
    no_tasks_icon: str
    add_view_visible: bool


FILTER_PRESENTATION: Dict[FilterKind, FilterPresentation] = {
    FilterKind.ALL: FilterPresentation("label_all", "no_tasks_all", "logo_no_fill", True),
    FilterKind.ACTIVE: FilterPresentation(
        "label_active", "no_tasks_active", "check_circle", False
    ),
    FilterKind.COMPLETED: FilterPresentation(
        "label_completed", "no_tasks_completed", "verified_user", False
    ),
}


def message_text(code: str) -> str:
    """Resolve a message code to display text, falling back to the code."""
    return _TEXTS.get(code, code.replace("_", " ").capitalize())


__all__ = [
    "ADD_EDIT_RESULT_OK",
    "COMPLETED_TASKS_CLEARED",
    "DELETE_RESULT_OK",
    "EDIT_RESULT_OK",
    "EMPTY_TASK",
    "FILTER_PRESENTATION",
    "FilterPresentation",
    "LOADING_TASKS_ERROR",
    "NO_TASK_FOUND",
    "SAVING_TASK_ERROR",
    "SUCCESSFULLY_ADDED_TASK",
    "SUCCESSFULLY_DELETED_TASK",
    "SUCCESSFULLY_SAVED_TASK",
    "TASK_MARKED_ACTIVE",
    "TASK_MARKED_COMPLETE",
    "TASK_UPDATE_ERROR",
    "message_text",
]
