"""Typer CLI for the Japanese holiday calculator."""

from __future__ import annotations

import datetime
import json
import logging
import sys

import typer

from shukujitsu.config import Settings
from shukujitsu.errors import ShukujitsuError
from shukujitsu.holidays import holiday_name, holidays_between, is_working_day, japan_holidays
from shukujitsu.locales import validate_locale
from shukujitsu.models import Holiday

app = typer.Typer(
    name="shukujitsu",
    help="Japanese public holidays, including substitute holidays.",
    add_completion=False,
)


def _parse_date(value: str) -> datetime.date:
    """Parse a YYYY-MM-DD date string."""
    try:
        return datetime.date.fromisoformat(value)
    except ValueError:
        raise typer.BadParameter(f"Invalid date format {value!r}. Use YYYY-MM-DD.") from None


def _current_year() -> int:
    return datetime.date.today().year


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _fail(exc: ShukujitsuError) -> typer.Exit:
    # KeyError subclasses quote their message in str()
    message = exc.args[0] if exc.args else str(exc)
    typer.echo(f"Error: {message}", err=True)
    return typer.Exit(code=1)


def _resolve_locale(locale: str | None, config: str | None) -> str:
    if locale is not None:
        return validate_locale(locale)
    return Settings.resolve(config).locale


def _print_holidays(holidays: list[Holiday], locale: str, output_json: bool) -> None:
    if output_json:
        output = [
            {"key": h.key, "date": h.date.isoformat(), "name": h.name(locale)} for h in holidays
        ]
        json.dump(output, sys.stdout, indent=2, ensure_ascii=False)
        typer.echo()
        return

    for h in holidays:
        typer.echo(f"    {h.date.strftime('%a, %b %d'):>12}  {h.name(locale)}")


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

LOCALE_OPTION = typer.Option(
    None,
    "--locale",
    "-l",
    help="Locale for holiday names, e.g. en_US or ja_JP.",
)
CONFIG_OPTION = typer.Option(
    None,
    "--config",
    help="Path to a JSON settings file.",
)
JSON_OPTION = typer.Option(
    False,
    "--json",
    help="Output results as JSON.",
)
VERBOSE_OPTION = typer.Option(
    False,
    "--verbose",
    "-v",
    help="Log how the holidays were computed.",
)


@app.command()
def holidays(
    year: int = typer.Option(
        None,
        "--year",
        "-y",
        help="Year to list holidays for. Defaults to the current year.",
    ),
    locale: str | None = LOCALE_OPTION,
    config: str | None = CONFIG_OPTION,
    output_json: bool = JSON_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """List the public holidays of a year."""
    _configure_logging(verbose)
    resolved_year = year if year is not None else _current_year()

    try:
        resolved_locale = _resolve_locale(locale, config)
        holiday_set = japan_holidays(resolved_year)
    except ShukujitsuError as exc:
        raise _fail(exc) from None

    if not output_json:
        typer.echo(f"  Japanese public holidays — {resolved_year}")
        typer.echo()
    _print_holidays(holiday_set.sorted_by_date(), resolved_locale, output_json)


@app.command()
def check(
    date: str = typer.Argument(..., help="Date to check (YYYY-MM-DD)."),
    locale: str | None = LOCALE_OPTION,
    config: str | None = CONFIG_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Tell whether a date is a holiday or a working day."""
    _configure_logging(verbose)
    target = _parse_date(date)

    try:
        resolved_locale = _resolve_locale(locale, config)
        name = holiday_name(target, resolved_locale)
        working = is_working_day(target)
    except ShukujitsuError as exc:
        raise _fail(exc) from None

    label = target.strftime("%a, %b %d %Y")
    if name is not None:
        typer.echo(f"{label}: holiday ({name})")
    elif working:
        typer.echo(f"{label}: working day")
    else:
        typer.echo(f"{label}: weekend")


@app.command()
def between(
    start: str = typer.Argument(..., help="First date (YYYY-MM-DD)."),
    end: str = typer.Argument(..., help="Last date (YYYY-MM-DD)."),
    locale: str | None = LOCALE_OPTION,
    config: str | None = CONFIG_OPTION,
    output_json: bool = JSON_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """List the holidays between two dates, both included."""
    _configure_logging(verbose)
    start_date = _parse_date(start)
    end_date = _parse_date(end)

    try:
        resolved_locale = _resolve_locale(locale, config)
        found = holidays_between(start_date, end_date)
    except ShukujitsuError as exc:
        raise _fail(exc) from None

    if not output_json:
        typer.echo(f"  {len(found)} holiday{'s' if len(found) != 1 else ''} from {start_date} to {end_date}")
        typer.echo()
    _print_holidays(found, resolved_locale, output_json)


def main() -> None:
    """Entry point for the CLI."""
    app()
