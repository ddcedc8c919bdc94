"""Datetime parsing: lax front matter input -> timezone-aware datetimes."""

from __future__ import annotations

from datetime import date, datetime, timezone

import pendulum

DISPLAY_FORMAT = "MMMM D, YYYY"


def parse_datetime(value: str | date | datetime, default_tz: str = "UTC") -> datetime:
    """Parse a lax date value into a timezone-aware datetime.

    Accepts what authors actually write in front matter:
    - 2024-03-01
    - 2024-03-01 09:30
    - 2024-03-01T09:30:00+02:00
    - March 1, 2024
    - ``date``/``datetime`` objects produced by the YAML loader

    Missing timezone defaults to default_tz.
    Missing time components default to zeros.
    Raises ValueError if the value cannot be parsed.
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            tz = pendulum.timezone(default_tz)
            value = value.replace(tzinfo=tz)  # type: ignore[arg-type]
        return value
    if isinstance(value, date):
        return pendulum.datetime(value.year, value.month, value.day, tz=default_tz)

    value_str = value.strip()
    if not value_str:
        raise ValueError("Empty date")

    try:
        parsed = pendulum.parse(value_str, tz=default_tz, strict=False)
    except (ValueError, OverflowError) as exc:
        raise ValueError(f"Unrecognized date: {value_str!r}") from exc
    if isinstance(parsed, pendulum.DateTime):
        return parsed
    if isinstance(parsed, pendulum.Date):
        # pendulum.parse returns Date for date-only strings
        return pendulum.datetime(parsed.year, parsed.month, parsed.day, tz=default_tz)
    raise ValueError(f"Not a calendar date: {value_str!r}")


def format_date_string(value: str | date | datetime) -> str:
    """Normalize a front matter date value to the string stored on a post.

    Strings are kept as authored; YAML-parsed dates become ISO 8601.
    """
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    return str(value).strip()


def format_display_date(dt: datetime) -> str:
    """Format a datetime for display, e.g. ``March 1, 2024``."""
    return pendulum.instance(dt).format(DISPLAY_FORMAT)


def format_iso(dt: datetime) -> str:
    """Format datetime as ISO 8601 for JSON serialization."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.isoformat()
