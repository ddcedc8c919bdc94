"""Theme preference endpoints.

The preference is stored in a cookie; these endpoints are the only place it
is read or written.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Cookie, Header, Query, Response

from folio.rendering.renderer import pygments_css
from folio.schemas.theme import ThemeResponse, ThemeUpdate
from folio.services.theme_service import (
    THEME_COOKIE,
    THEME_COOKIE_MAX_AGE,
    Theme,
    resolve_theme,
    toggle_theme,
)

router = APIRouter(prefix="/api/theme", tags=["theme"])


def _current_theme(theme_cookie: str | None, color_scheme_hint: str | None) -> Theme:
    prefers_dark = (color_scheme_hint or "").strip().strip('"').lower() == "dark"
    return resolve_theme(theme_cookie, prefers_dark=prefers_dark)


def _store_theme(response: Response, theme: Theme) -> None:
    response.set_cookie(
        THEME_COOKIE,
        theme.value,
        max_age=THEME_COOKIE_MAX_AGE,
        samesite="lax",
    )


@router.get("", response_model=ThemeResponse)
def get_theme_endpoint(
    theme: Annotated[str | None, Cookie(alias=THEME_COOKIE)] = None,
    color_scheme: Annotated[str | None, Header(alias="Sec-CH-Prefers-Color-Scheme")] = None,
) -> ThemeResponse:
    """Get the effective theme from the stored preference or the client hint."""
    return ThemeResponse(theme=_current_theme(theme, color_scheme))


@router.put("", response_model=ThemeResponse)
def set_theme_endpoint(body: ThemeUpdate, response: Response) -> ThemeResponse:
    """Store a theme preference."""
    _store_theme(response, body.theme)
    return ThemeResponse(theme=body.theme)


@router.post("/toggle", response_model=ThemeResponse)
def toggle_theme_endpoint(
    response: Response,
    theme: Annotated[str | None, Cookie(alias=THEME_COOKIE)] = None,
    color_scheme: Annotated[str | None, Header(alias="Sec-CH-Prefers-Color-Scheme")] = None,
) -> ThemeResponse:
    """Flip the effective theme and store the result."""
    new_theme = toggle_theme(_current_theme(theme, color_scheme))
    _store_theme(response, new_theme)
    return ThemeResponse(theme=new_theme)


@router.get("/code.css")
def code_stylesheet_endpoint(theme: Annotated[Theme, Query()] = Theme.LIGHT) -> Response:
    """Stylesheet for highlighted code blocks in the given theme."""
    return Response(content=pygments_css(theme.value), media_type="text/css")
