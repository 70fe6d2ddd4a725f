"""Locale identifiers and holiday name translations."""

from __future__ import annotations

import re
from collections.abc import Mapping
from types import MappingProxyType

from shukujitsu.errors import UnknownLocaleError

DEFAULT_LOCALE = "en_US"
JAPANESE_LOCALE = "ja_JP"

_LOCALE_RE = re.compile(r"^[a-z]{2}_[A-Z]{2}$")


def validate_locale(locale: str) -> str:
    """Return *locale* unchanged, or raise ``UnknownLocaleError``.

    Any ``ll_CC`` identifier is accepted; names without a translation for it
    fall back to :data:`DEFAULT_LOCALE`.
    """
    if not isinstance(locale, str) or not _LOCALE_RE.match(locale):
        msg = f"Unknown locale {locale!r}. Expected a form like 'en_US' or 'ja_JP'."
        raise UnknownLocaleError(msg)
    return locale


def translations(**names: str) -> Mapping[str, str]:
    """Build a read-only locale -> name mapping.

    Keyword names use the locale identifier, e.g.
    ``translations(en_US="Culture Day", ja_JP="文化の日")``.
    """
    return MappingProxyType(dict(names))


def translate(names: Mapping[str, str], locale: str, default: str) -> str:
    """Pick the name for *locale*, then :data:`DEFAULT_LOCALE`, then *default*."""
    if locale in names:
        return names[locale]
    return names.get(DEFAULT_LOCALE, default)


def observed_names(names: Mapping[str, str]) -> Mapping[str, str]:
    """Names of the substitute holiday observed in place of a holiday named *names*."""
    observed = {locale: f"{name} Observed" for locale, name in names.items()}
    if JAPANESE_LOCALE in names:
        observed[JAPANESE_LOCALE] = f"振替休日 ({names[JAPANESE_LOCALE]})"
    return MappingProxyType(observed)
