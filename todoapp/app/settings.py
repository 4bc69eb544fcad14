from __future__ import annotations

from dataclasses import asdict, dataclass, fields, replace
from typing import Any, Dict, Mapping, Optional

from ..adapters.storage_local import StorageLocal
from ..utils.logging import env_forces_debug

REPOSITORY_KINDS: tuple[str, ...] = ("memory", "rest")


def _default_debug_logging() -> bool:
    return env_forces_debug()


@dataclass(frozen=True)
class AppSettings:
    """Typed runtime settings that persist via StorageLocal."""

    repository: str = "memory"
    api_base_url: str = ""
    api_key: str = ""
    request_timeout_s: int = 10
    retries: int = 2
    max_workers: int = 4
    memory_latency_ms: int = 0
    seed_demo_tasks: bool = True
    debug_logging: bool = False

    @classmethod
    def defaults(cls) -> "AppSettings":
        return cls(debug_logging=_default_debug_logging())

    @property
    def uses_rest(self) -> bool:
        return self.repository == "rest"

    def is_valid(self) -> bool:
        if self.repository not in REPOSITORY_KINDS:
            return False
        if self.uses_rest and not self.api_base_url:
            return False
        return self.max_workers > 0

    def apply_dict(self, payload: Mapping[str, Any]) -> "AppSettings":
        """Return a copy updated from a persisted flat payload."""
        if not isinstance(payload, Mapping):
            raise ValueError("Settings payload must be a mapping of flat keys.")

        known = {f.name for f in fields(self)}
        unknown = set(payload.keys()) - known
        if unknown:
            raise ValueError(f"Unsupported settings keys: {', '.join(sorted(str(key) for key in unknown))}")

        updates: Dict[str, Any] = {}
        for key, raw in payload.items():
            updates[key] = self._coerce_value(key, raw)
        return replace(self, **updates)

    def to_dict(self) -> dict:
        return asdict(self)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _coerce_value(self, key: str, raw: Any) -> Any:
        if key == "repository":
            kind = self._coerce_optional_str(raw).lower()
            if kind not in REPOSITORY_KINDS:
                raise ValueError(f"repository must be one of: {', '.join(REPOSITORY_KINDS)}.")
            return kind
        if key == "api_base_url":
            return self._coerce_optional_str(raw).rstrip("/")
        if key == "api_key":
            return self._coerce_optional_str(raw)
        if key in {"request_timeout_s", "retries", "memory_latency_ms"}:
            return self._coerce_int(key, raw, allow_negative=False)
        if key == "max_workers":
            value = self._coerce_int(key, raw, allow_negative=False)
            if value == 0:
                raise ValueError("max_workers must be at least 1.")
            return value
        if key in {"seed_demo_tasks", "debug_logging"}:
            return self._coerce_bool(raw)
        raise ValueError(f"Unhandled settings field: {key}")

    @staticmethod
    def _coerce_optional_str(value: Any) -> str:
        if value is None:
            return ""
        return str(value).strip()

    @staticmethod
    def _coerce_bool(value: Any) -> bool:
        if isinstance(value, bool):
            return value
        if isinstance(value, (int, float)):
            return bool(value)
        if isinstance(value, str):
            return value.strip().lower() in {"1", "true", "yes", "on"}
        return bool(value)

    @staticmethod
    def _coerce_int(name: str, value: Any, *, allow_negative: bool = True) -> int:
        if isinstance(value, bool):
            raise ValueError(f"{name} must be an integer.")
        if isinstance(value, (int, float)):
            coerced = int(value)
        elif isinstance(value, str):
            try:
                coerced = int(value.strip())
            except (TypeError, ValueError) as exc:
                raise ValueError(f"{name} must be an integer.") from exc
        else:
            raise ValueError(f"{name} must be an integer.")
        if not allow_negative and coerced < 0:
            raise ValueError(f"{name} must be non-negative.")
        return coerced


def load_settings(storage: Optional[StorageLocal]) -> AppSettings:
    """Load persisted settings on top of the defaults."""
    settings = AppSettings.defaults()
    if storage is None:
        return settings
    payload = storage.load_user_settings()
    if payload is None:
        return settings
    return settings.apply_dict(payload)


__all__ = ["AppSettings", "REPOSITORY_KINDS", "load_settings"]
