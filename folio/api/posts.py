"""Post API endpoints."""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query

from folio.api.deps import get_content_manager, get_settings
from folio.config import Settings
from folio.filesystem.content_manager import ContentManager
from folio.schemas.post import PostDetail, PostListResponse, PostSummary
from folio.services.post_service import featured_posts, latest_post, paginate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/posts", tags=["posts"])

MAX_PER_PAGE = 100


@router.get("", response_model=PostListResponse)
def list_posts_endpoint(
    content_manager: Annotated[ContentManager, Depends(get_content_manager)],
    settings: Annotated[Settings, Depends(get_settings)],
    page: Annotated[int, Query(ge=1)] = 1,
    per_page: Annotated[int | None, Query(ge=1, le=MAX_PER_PAGE)] = None,
) -> PostListResponse:
    """List posts newest first, one page at a time.

    Page 1 always exists, even for an empty blog; any other page past the
    last one is a 404.
    """
    result = paginate(content_manager, page=page, per_page=per_page or settings.posts_per_page)
    if page > 1 and page > result.metadata.total_pages:
        raise HTTPException(status_code=404, detail="Page not found")
    return PostListResponse.from_page(result)


@router.get("/latest", response_model=PostDetail)
def latest_post_endpoint(
    content_manager: Annotated[ContentManager, Depends(get_content_manager)],
) -> PostDetail:
    """Get the most recent post."""
    post = latest_post(content_manager)
    if post is None:
        raise HTTPException(status_code=404, detail="No posts yet")
    return PostDetail.from_post(post)


@router.get("/featured", response_model=list[PostSummary])
def featured_posts_endpoint(
    content_manager: Annotated[ContentManager, Depends(get_content_manager)],
) -> list[PostSummary]:
    """List featured posts, newest first."""
    return [PostSummary.from_post(p) for p in featured_posts(content_manager)]


@router.get("/{slug}", response_model=PostDetail)
def get_post_endpoint(
    slug: str,
    content_manager: Annotated[ContentManager, Depends(get_content_manager)],
) -> PostDetail:
    """Get a single post with rendered HTML."""
    post = content_manager.load_post(slug)
    if post is None:
        raise HTTPException(status_code=404, detail="Post not found")
    return PostDetail.from_post(post)
