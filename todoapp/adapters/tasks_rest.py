"""REST implementation of the ``TasksRepository`` port.

Endpoints (relative to ``base_url``):
    ``GET /tasks``, ``GET /tasks/{id}``, ``PUT /tasks/{id}``,
    ``POST /tasks/{id}/complete``, ``POST /tasks/{id}/activate``,
    ``DELETE /tasks/{id}``, ``POST /tasks/clear-completed``.

Task objects travel as ``{"id", "title", "description", "completed"}``.
Transport and HTTP failures never escape: each method returns ``Error``
carrying ``TaskNotFoundError`` (HTTP 404 on a single task) or
``RepositoryError``.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, TypeVar
from urllib.parse import quote

import requests

from todoapp.domain.entities import Task
from todoapp.domain.errors import RepositoryError, TaskNotFoundError
from todoapp.domain.ports import TaskId, TasksRepository
from todoapp.domain.result import Error, Result, Success

from .api_errors import ApiError, error_from_response
from .http_client import HttpConfig, RetryingSession

LOGGER = logging.getLogger(__name__)

T = TypeVar("T")


class TasksRestAdapter(TasksRepository):
    """Task repository backed by a JSON HTTP service.

    The service is the source of truth, so ``force_update`` has no effect
    here: every read goes to the network.
    """

    def __init__(
        self,
        base_url: str,
        *,
        api_key: str | None = None,
        request_timeout_s: int = 10,
        retries: int = 2,
    ) -> None:
        if not base_url or not base_url.strip():
            raise ValueError("TasksRestAdapter requires a base URL")
        self.base_url = base_url.strip().rstrip("/")
        self.cfg = HttpConfig(request_timeout_s=request_timeout_s, retries=retries)
        self.session = RetryingSession(api_key, self.cfg)

    # ------------------------------------------------------------------
    # Port implementation
    # ------------------------------------------------------------------
    def get_tasks(self, force_update: bool = False) -> Result[List[Task]]:
        def fetch() -> List[Task]:
            resp = self.session.get(self._url("/tasks"))
            self._ensure_ok(resp, "tasks")
            data = self._json_any(resp)
            if isinstance(data, dict):
                data = data.get("tasks")
            if not isinstance(data, list):
                raise RepositoryError("tasks: expected list response")
            return [self._task_from_payload(entry) for entry in data if isinstance(entry, dict)]

        return self._call("get_tasks", fetch)

    def get_task(self, task_id: TaskId, force_update: bool = False) -> Result[Task]:
        def fetch() -> Task:
            resp = self.session.get(self._task_url(task_id))
            if resp.status_code == 404:
                raise TaskNotFoundError(task_id)
            self._ensure_ok(resp, f"task[{task_id}]")
            data = self._json_any(resp)
            if not isinstance(data, dict):
                raise RepositoryError(f"task[{task_id}]: expected object response")
            return self._task_from_payload(data)

        return self._call("get_task", fetch)

    def save_task(self, task: Task) -> Result[None]:
        def send() -> None:
            resp = self.session.put(self._task_url(task.id), json_body=self._task_to_payload(task))
            self._ensure_ok(resp, f"save[{task.id}]")

        return self._call("save_task", send)

    def complete_task(self, task: Task) -> Result[None]:
        return self._post_action(task.id, "complete")

    def activate_task(self, task: Task) -> Result[None]:
        return self._post_action(task.id, "activate")

    def delete_task(self, task_id: TaskId) -> Result[None]:
        def send() -> None:
            resp = self.session.delete(self._task_url(task_id))
            if resp.status_code == 404:
                raise TaskNotFoundError(task_id)
            self._ensure_ok(resp, f"delete[{task_id}]")

        return self._call("delete_task", send)

    def clear_completed_tasks(self) -> Result[None]:
        def send() -> None:
            resp = self.session.post(self._url("/tasks/clear-completed"))
            self._ensure_ok(resp, "clear-completed")

        return self._call("clear_completed_tasks", send)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _post_action(self, task_id: TaskId, action: str) -> Result[None]:
        def send() -> None:
            resp = self.session.post(f"{self._task_url(task_id)}/{action}")
            if resp.status_code == 404:
                raise TaskNotFoundError(task_id)
            self._ensure_ok(resp, f"{action}[{task_id}]")

        return self._call(f"{action}_task", send)

    def _call(self, ctx: str, operation: Callable[[], T]) -> Result[T]:
        try:
            return Success(operation())
        except TaskNotFoundError as exc:
            return Error(exc)
        except RepositoryError as exc:
            LOGGER.warning("%s: %s", ctx, exc)
            return Error(exc)
        except ApiError as exc:
            LOGGER.warning("%s: %s (status=%s code=%s)", ctx, exc, exc.status, exc.code)
            return Error(RepositoryError(str(exc), cause=exc, status=exc.status, code=exc.code))
        except (requests.RequestException, ValueError) as exc:
            LOGGER.warning("%s: %s", ctx, exc)
            return Error(RepositoryError(str(exc), cause=exc))

    def _url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def _task_url(self, task_id: TaskId) -> str:
        return self._url(f"/tasks/{quote(str(task_id), safe='')}")

    @staticmethod
    def _task_to_payload(task: Task) -> Dict[str, Any]:
        return {
            "id": task.id,
            "title": task.title,
            "description": task.description,
            "completed": task.completed,
        }

    @staticmethod
    def _task_from_payload(payload: Dict[str, Any]) -> Task:
        task_id = payload.get("id")
        if not isinstance(task_id, str) or not task_id.strip():
            raise RepositoryError(f"task payload without id: {payload!r}")
        completed = payload.get("completed", False)
        if not isinstance(completed, bool):
            raise RepositoryError(f"task[{task_id}]: completed must be a boolean, got {completed!r}")
        return Task(
            title=str(payload.get("title") or ""),
            description=str(payload.get("description") or ""),
            completed=completed,
            id=task_id,
        )

    @staticmethod
    def _ensure_ok(resp: requests.Response, ctx: str) -> None:
        if 200 <= resp.status_code < 300:
            return
        raise error_from_response(resp, ctx)

    @staticmethod
    def _json_any(resp: requests.Response) -> Any:
        try:
            return resp.json()
        except ValueError as exc:
            snippet = getattr(resp, "text", "")[:400]
            raise RepositoryError(f"Invalid JSON response: {snippet}") from exc


__all__ = ["TasksRestAdapter"]
