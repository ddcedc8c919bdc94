"""Theme preference schemas."""

from __future__ import annotations

from pydantic import BaseModel

from folio.services.theme_service import Theme


class ThemeResponse(BaseModel):
    theme: Theme


class ThemeUpdate(BaseModel):
    """Request to store a theme preference."""

    theme: Theme
