"""Configuration management."""

from __future__ import annotations

import json
import os
import pathlib
from dataclasses import dataclass

from shukujitsu.errors import ConfigError
from shukujitsu.locales import DEFAULT_LOCALE, validate_locale

LOCALE_ENV_VAR = "SHUKUJITSU_LOCALE"


@dataclass
class Settings:
    """Presentation settings for the command line."""

    locale: str = DEFAULT_LOCALE

    @classmethod
    def from_env(cls) -> Settings | None:
        """Load settings from environment variables."""
        try:
            return cls(locale=os.environ[LOCALE_ENV_VAR])
        except KeyError:
            return None

    @classmethod
    def load(cls, path: str | pathlib.Path) -> Settings | None:
        """Load settings from a JSON file, or None if the file does not exist."""
        p = pathlib.Path(path)
        if not p.is_file():
            return None

        try:
            data = json.loads(p.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise ConfigError(f"Invalid JSON in config file {p}: {exc}") from None

        if not isinstance(data, dict):
            raise ConfigError(f"Config file {p} must contain a JSON object.")

        locale = data.get("locale", DEFAULT_LOCALE)
        if not isinstance(locale, str):
            raise ConfigError(f"'locale' in {p} must be a string.")
        return cls(locale=locale)

    @classmethod
    def resolve(cls, path: str | pathlib.Path | None = None) -> Settings:
        """Settings from *path*, else the environment, else the defaults."""
        settings = None
        if path is not None:
            settings = cls.load(path)
            if settings is None:
                raise ConfigError(f"Config file not found: {path}")
        if settings is None:
            settings = cls.from_env()
        if settings is None:
            settings = cls()
        validate_locale(settings.locale)
        return settings
