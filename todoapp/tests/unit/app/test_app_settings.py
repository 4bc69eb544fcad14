from __future__ import annotations

from pathlib import Path

import pytest

from todoapp.adapters.storage_local import StorageLocal
from todoapp.app.settings import AppSettings, load_settings


def test_defaults_use_memory_repository(monkeypatch) -> None:
    monkeypatch.delenv("TODOAPP_LOG_LEVEL", raising=False)
    monkeypatch.delenv("TODOAPP_DEBUG", raising=False)

    settings = AppSettings.defaults()

    assert settings.repository == "memory"
    assert not settings.uses_rest
    assert settings.is_valid()
    assert settings.debug_logging is False


def test_debug_env_flag_enables_debug_logging(monkeypatch) -> None:
    monkeypatch.delenv("TODOAPP_LOG_LEVEL", raising=False)
    monkeypatch.setenv("TODOAPP_DEBUG", "1")

    assert AppSettings.defaults().debug_logging is True


def test_apply_dict_coerces_values() -> None:
    settings = AppSettings().apply_dict(
        {
            "repository": " REST ",
            "api_base_url": "http://tasks.local/",
            "request_timeout_s": "15",
            "seed_demo_tasks": "no",
            "debug_logging": 1,
        }
    )

    assert settings.repository == "rest"
    assert settings.api_base_url == "http://tasks.local"
    assert settings.request_timeout_s == 15
    assert settings.seed_demo_tasks is False
    assert settings.debug_logging is True
    assert settings.is_valid()


@pytest.mark.parametrize(
    "payload",
    [
        {"unknown": 1},
        {"repository": "sqlite"},
        {"retries": -1},
        {"max_workers": 0},
        {"request_timeout_s": "soon"},
        {"retries": True},
    ],
)
def test_apply_dict_rejects_bad_values(payload) -> None:
    with pytest.raises(ValueError):
        AppSettings().apply_dict(payload)


def test_rest_without_url_is_invalid() -> None:
    assert not AppSettings(repository="rest").is_valid()


def test_to_dict_roundtrip() -> None:
    settings = AppSettings(repository="rest", api_base_url="http://x", retries=5)

    assert AppSettings().apply_dict(settings.to_dict()) == settings


def test_load_settings_from_storage(tmp_path: Path) -> None:
    storage = StorageLocal(root_dir=str(tmp_path))
    assert load_settings(storage).repository == "memory"

    storage.save_user_settings({"memory_latency_ms": 25, "seed_demo_tasks": False})
    settings = load_settings(storage)

    assert settings.memory_latency_ms == 25
    assert settings.seed_demo_tasks is False
    assert load_settings(None).memory_latency_ms == 0
