"""Light/dark theme preference.

The preference lives on the client (a cookie); the server only resolves and
flips it, so it is passed around as a plain value rather than held as state.
"""

from __future__ import annotations

from enum import StrEnum

THEME_COOKIE = "theme"
THEME_COOKIE_MAX_AGE = 60 * 60 * 24 * 365


class Theme(StrEnum):
    LIGHT = "light"
    DARK = "dark"


def parse_theme(value: str | None) -> Theme | None:
    """Parse a stored theme value, ignoring anything unrecognized."""
    if value is None:
        return None
    try:
        return Theme(value.strip().lower())
    except ValueError:
        return None


def resolve_theme(saved: str | None, *, prefers_dark: bool = False) -> Theme:
    """Pick the theme to render.

    A valid saved preference wins; otherwise follow the client's color
    scheme preference, defaulting to light.
    """
    theme = parse_theme(saved)
    if theme is not None:
        return theme
    return Theme.DARK if prefers_dark else Theme.LIGHT


def toggle_theme(theme: Theme) -> Theme:
    return Theme.LIGHT if theme is Theme.DARK else Theme.DARK
