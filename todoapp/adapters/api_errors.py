"""Failures raised inside the REST adapter before they become domain errors.

The task service answers errors with ``{"code": ..., "detail": ...}``; FastAPI
style bodies carry only ``detail``, which may be a list of validation items.
Non-JSON bodies are kept as a short text detail.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

_DETAIL_LIMIT = 200


class ApiError(RuntimeError):
    """Non-2xx answer from the task service."""

    def __init__(
        self,
        message: str,
        *,
        status: Optional[int] = None,
        code: Optional[str] = None,
        context: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.status = status
        self.code = code
        self.context = context


class ApiTimeoutError(ApiError):
    """Timeout or connection failure that outlasted every retry."""


def error_from_response(resp: Any, context: str) -> ApiError:
    """Build the :class:`ApiError` describing a failed response."""
    status = int(resp.status_code)
    body = _error_body(resp)
    code = body.get("code")
    detail = _detail_text(body.get("detail", body.get("message")))
    if detail:
        message = f"{context}: {detail} (HTTP {status})"
    else:
        message = f"{context}: HTTP {status}"
    return ApiError(
        message,
        status=status,
        code=str(code) if code is not None else None,
        context=context,
    )


def _error_body(resp: Any) -> Dict[str, Any]:
    try:
        payload = resp.json()
    except ValueError:
        text = str(getattr(resp, "text", "") or "").strip()
        return {"detail": text} if text else {}
    return payload if isinstance(payload, dict) else {}


def _detail_text(detail: Any) -> Optional[str]:
    if detail is None:
        return None
    if isinstance(detail, list):
        # FastAPI validation errors: [{"loc": [...], "msg": "..."}, ...]
        parts = [str(item.get("msg", item)) if isinstance(item, dict) else str(item) for item in detail]
        detail = "; ".join(part for part in parts if part)
    text = str(detail).strip()
    return text[:_DETAIL_LIMIT] or None


__all__ = ["ApiError", "ApiTimeoutError", "error_from_response"]
