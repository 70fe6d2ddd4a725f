"""Exceptions raised by shukujitsu."""

from __future__ import annotations


class ShukujitsuError(Exception):
    """Base exception for shukujitsu."""


class InvalidInputError(ShukujitsuError, ValueError):
    """Raised when a year or date range is outside what the calculator accepts."""


class UnknownLocaleError(ShukujitsuError, KeyError):
    """Raised when a locale identifier is not of the ``ll_CC`` form."""


class DuplicateHolidayError(ShukujitsuError, KeyError):
    """Raised when two rules emit the same holiday key for one year."""


class ConfigError(ShukujitsuError):
    """Raised when a configuration file cannot be used."""
