"""Tag API endpoints."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends

from folio.api.deps import get_content_manager
from folio.filesystem.content_manager import ContentManager
from folio.schemas.post import PostSummary, TagResponse
from folio.services.post_service import posts_by_tag, tag_counts

router = APIRouter(prefix="/api/tags", tags=["tags"])


@router.get("", response_model=list[TagResponse])
def list_tags_endpoint(
    content_manager: Annotated[ContentManager, Depends(get_content_manager)],
) -> list[TagResponse]:
    """List all tags in sorted order with post counts."""
    return [
        TagResponse(name=name, post_count=count)
        for name, count in tag_counts(content_manager).items()
    ]


@router.get("/{tag}/posts", response_model=list[PostSummary])
def tag_posts_endpoint(
    tag: str,
    content_manager: Annotated[ContentManager, Depends(get_content_manager)],
) -> list[PostSummary]:
    """List posts carrying exactly this tag, newest first."""
    return [PostSummary.from_post(p) for p in posts_by_tag(content_manager, tag)]
