"""Shared invocation wrapper used by every task use-case."""

from __future__ import annotations

import logging
from typing import Callable, TypeVar

from ..domain.errors import RepositoryError
from ..domain.result import Error, Result
from .instrumentation import track_usecase

LOGGER = logging.getLogger(__name__)

T = TypeVar("T")


def call_repository(name: str, operation: Callable[[], "Result[T]"]) -> "Result[T]":
    """Run ``operation`` under instrumentation and return its ``Result``.

    Ports are expected to return ``Error`` for failures. An exception that
    still escapes an adapter is logged and converted to ``RepositoryError``
    so the view model never sees a raised error.
    """
    with track_usecase(name):
        try:
            return operation()
        except Exception as exc:
            LOGGER.exception("%s: repository raised unexpectedly", name)
            return Error(RepositoryError(f"{name} failed: {exc}", cause=exc))


__all__ = ["call_repository"]
