from __future__ import annotations

import pytest

from fileorganizer.config import DEFAULT_STATIC_DIR, Settings


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("PORT", "FILE_ORGANIZER_PORT", "FILE_ORGANIZER_HOST"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings()

    assert settings.host == "127.0.0.1"
    assert settings.port == 3000
    assert settings.static_dir == DEFAULT_STATIC_DIR


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FILE_ORGANIZER_HOST", "0.0.0.0")
    monkeypatch.setenv("FILE_ORGANIZER_PORT", "8080")

    settings = Settings()

    assert settings.host == "0.0.0.0"
    assert settings.port == 8080


def test_plain_port_variable(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("FILE_ORGANIZER_PORT", raising=False)
    monkeypatch.setenv("PORT", "5050")

    assert Settings().port == 5050
