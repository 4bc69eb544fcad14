"""Domain-level error types for use-case and adapter mapping.

Adapters wrap transport failures into these types so that ``Error`` results
carry no ``requests`` or filesystem specifics into view models.
"""

from __future__ import annotations

from typing import Optional


class TaskError(Exception):
    """Base class for task repository failures."""


class TaskNotFoundError(TaskError):
    """The requested task id is absent from the repository."""

    def __init__(self, task_id: str) -> None:
        super().__init__(f"Task '{task_id}' not found")
        self.task_id = task_id


class RepositoryError(TaskError):
    """Underlying fetch/save failure.

    ``status`` and ``code`` are set when a remote service rejected the call.
    """

    def __init__(
        self,
        message: str,
        *,
        cause: Optional[BaseException] = None,
        status: Optional[int] = None,
        code: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.cause = cause
        self.status = status
        self.code = code


class TaskValidationError(TaskError):
    """Task content rejected before it reaches the repository."""


__all__ = ["RepositoryError", "TaskError", "TaskNotFoundError", "TaskValidationError"]
