"""Tests for settings loading."""

from __future__ import annotations

import json

import pytest

from shukujitsu.config import LOCALE_ENV_VAR, Settings
from shukujitsu.errors import ConfigError, UnknownLocaleError


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(LOCALE_ENV_VAR, raising=False)
    assert Settings.from_env() is None
    assert Settings.resolve().locale == "en_US"


def test_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(LOCALE_ENV_VAR, "ja_JP")
    assert Settings.from_env() == Settings(locale="ja_JP")
    assert Settings.resolve().locale == "ja_JP"


def test_file_takes_precedence_over_env(tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(LOCALE_ENV_VAR, "en_US")
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"locale": "ja_JP"}), encoding="utf-8")
    assert Settings.resolve(path).locale == "ja_JP"


def test_load_missing_file(tmp_path) -> None:
    assert Settings.load(tmp_path / "missing.json") is None
    with pytest.raises(ConfigError):
        Settings.resolve(tmp_path / "missing.json")


def test_load_without_locale_uses_default(tmp_path) -> None:
    path = tmp_path / "settings.json"
    path.write_text("{}", encoding="utf-8")
    assert Settings.load(path) == Settings()


def test_load_rejects_bad_content(tmp_path) -> None:
    path = tmp_path / "settings.json"
    path.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(ConfigError):
        Settings.load(path)

    path.write_text('{"locale": 3}', encoding="utf-8")
    with pytest.raises(ConfigError):
        Settings.load(path)

    path.write_text("not json", encoding="utf-8")
    with pytest.raises(ConfigError):
        Settings.load(path)


def test_resolve_validates_locale(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(LOCALE_ENV_VAR, "japanese")
    with pytest.raises(UnknownLocaleError):
        Settings.resolve()
