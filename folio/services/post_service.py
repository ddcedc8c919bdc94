"""Post service: listing, filtering and pagination over the content directory."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from folio.filesystem.content_manager import ContentManager
    from folio.filesystem.frontmatter import PostData


@dataclass
class PageMetadata:
    """Pagination numbers reported alongside a page of posts."""

    total_posts: int
    total_pages: int
    current_page: int
    posts_per_page: int


@dataclass
class PaginatedPosts:
    """One page of the date-sorted post collection."""

    metadata: PageMetadata
    posts: list[PostData] = field(default_factory=list)


def sort_posts(posts: list[PostData]) -> list[PostData]:
    """Sort posts newest first; posts with equal dates keep their input order."""
    return sorted(posts, key=lambda p: p.published_at, reverse=True)


def list_all_posts(content_manager: ContentManager) -> list[PostData]:
    """Load every valid post, newest first."""
    return sort_posts(content_manager.scan_posts())


def latest_post(content_manager: ContentManager) -> PostData | None:
    """Return the most recent post, or None for an empty blog."""
    posts = list_all_posts(content_manager)
    return posts[0] if posts else None


def featured_posts(content_manager: ContentManager) -> list[PostData]:
    """Return posts marked ``featured``, newest first."""
    return [post for post in list_all_posts(content_manager) if post.featured]


def posts_by_tag(content_manager: ContentManager, tag: str) -> list[PostData]:
    """Return posts carrying exactly ``tag`` (case-sensitive), newest first."""
    return [post for post in list_all_posts(content_manager) if tag in post.tags]


def all_tags(content_manager: ContentManager) -> list[str]:
    """Return every tag used by a visible post, deduplicated and sorted.

    Tags are compared case-sensitively and ordered by code point, so
    ``"AI"``, ``"Data"`` and ``"ai"`` are three distinct tags in that order.
    """
    tags: set[str] = set()
    for post in content_manager.scan_posts():
        tags.update(post.tags)
    return sorted(tags)


def tag_counts(content_manager: ContentManager) -> dict[str, int]:
    """Return the number of visible posts per tag, in ``all_tags`` order."""
    counts: dict[str, int] = {}
    for post in content_manager.scan_posts():
        for tag in set(post.tags):
            counts[tag] = counts.get(tag, 0) + 1
    return {tag: counts[tag] for tag in sorted(counts)}


def paginate_posts(posts: list[PostData], page: int, per_page: int) -> PaginatedPosts:
    """Slice an already sorted post list into one page.

    A page past the end yields no posts but still reports valid metadata;
    deciding that such a page is "not found" is up to the caller.
    """
    if page < 1:
        raise ValueError(f"Page must be >= 1, got {page}")
    if per_page < 1:
        raise ValueError(f"Posts per page must be >= 1, got {per_page}")

    total = len(posts)
    total_pages = math.ceil(total / per_page)
    start = (page - 1) * per_page
    end = start + per_page

    return PaginatedPosts(
        posts=posts[start:end],
        metadata=PageMetadata(
            total_posts=total,
            total_pages=total_pages,
            current_page=page,
            posts_per_page=per_page,
        ),
    )


def paginate(content_manager: ContentManager, page: int = 1, per_page: int = 10) -> PaginatedPosts:
    """Return one page of all posts, newest first."""
    return paginate_posts(list_all_posts(content_manager), page, per_page)
