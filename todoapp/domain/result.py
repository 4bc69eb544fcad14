"""Two-variant outcome returned across the repository boundary.

Repository ports and use-cases never raise for expected failures; they return
either :class:`Success` carrying the value or :class:`Error` carrying the
exception that describes the failure.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    data: T

    @property
    def succeeded(self) -> bool:
        return True


@dataclass(frozen=True)
class Error:
    exception: Exception

    @property
    def succeeded(self) -> bool:
        return False

    @property
    def message(self) -> str:
        return str(self.exception) or type(self.exception).__name__


Result = Union[Success[T], Error]


def data_or_none(result: "Result[T]") -> Optional[T]:
    """Return the success payload or ``None`` for errors."""
    if isinstance(result, Success):
        return result.data
    return None


__all__ = ["Error", "Result", "Success", "data_or_none"]
