"""Health check endpoint."""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from folio import __version__
from folio.api.deps import get_content_manager
from folio.filesystem.content_manager import ContentManager

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    status: str
    version: str
    content: str
    post_files: int


@router.get("/api/health", response_model=HealthResponse)
def health_check(
    content_manager: Annotated[ContentManager, Depends(get_content_manager)],
) -> HealthResponse:
    """Health check endpoint for monitoring and load balancers."""
    content_status = "ok"
    post_files = 0
    try:
        if content_manager.posts_dir.is_dir():
            post_files = len(content_manager.list_slugs())
        else:
            content_status = "missing"
    except OSError:
        logger.warning("Health check could not read posts directory", exc_info=True)
        content_status = "error"

    return HealthResponse(
        status="ok" if content_status == "ok" else "degraded",
        version=__version__,
        content=content_status,
        post_files=post_files,
    )
