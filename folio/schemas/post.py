"""Post-related schemas."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

from folio.services.datetime_service import format_display_date, format_iso

if TYPE_CHECKING:
    from folio.filesystem.frontmatter import PostData
    from folio.services.post_service import PaginatedPosts


class PostSummary(BaseModel):
    """Post summary for blog cards and listings."""

    slug: str
    title: str
    date: str
    display_date: str
    published_at: str
    excerpt: str
    tags: list[str] = Field(default_factory=list)
    reading_time: str
    image: str | None = None
    author: str
    featured: bool = False

    @classmethod
    def from_post(cls, post: PostData) -> PostSummary:
        return cls(
            slug=post.slug,
            title=post.title,
            date=post.date,
            display_date=format_display_date(post.published_at),
            published_at=format_iso(post.published_at),
            excerpt=post.excerpt,
            tags=list(post.tags),
            reading_time=post.reading_time,
            image=post.image,
            author=post.author,
            featured=post.featured,
        )


class PostDetail(PostSummary):
    """Full post with rendered HTML."""

    content: str

    @classmethod
    def from_post(cls, post: PostData) -> PostDetail:
        summary = PostSummary.from_post(post)
        return cls(**summary.model_dump(), content=post.content)


class PaginationMetadata(BaseModel):
    total_posts: int = Field(ge=0)
    total_pages: int = Field(ge=0)
    current_page: int = Field(ge=1)
    posts_per_page: int = Field(ge=1)


class PostListResponse(BaseModel):
    """Paginated post list response."""

    posts: list[PostSummary]
    metadata: PaginationMetadata

    @classmethod
    def from_page(cls, page: PaginatedPosts) -> PostListResponse:
        return cls(
            posts=[PostSummary.from_post(p) for p in page.posts],
            metadata=PaginationMetadata(
                total_posts=page.metadata.total_posts,
                total_pages=page.metadata.total_pages,
                current_page=page.metadata.current_page,
                posts_per_page=page.metadata.posts_per_page,
            ),
        )


class TagResponse(BaseModel):
    """A tag with the number of posts carrying it."""

    name: str
    post_count: int = Field(ge=0)
