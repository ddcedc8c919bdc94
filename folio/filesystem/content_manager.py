"""Content directory scanner and post loader."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import yaml

from folio.exceptions import InvalidFrontmatterError, RenderError
from folio.filesystem.frontmatter import (
    WORDS_PER_MINUTE,
    PostData,
    calculate_reading_time,
    split_frontmatter,
    validate_metadata,
)
from folio.filesystem.toml_manager import SiteConfig, parse_site_config
from folio.rendering.renderer import render_markdown

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)

POST_EXTENSION = ".md"
DEFAULT_AUTHOR = "Herman Teng"

# Failures that drop a single post without affecting the others.
POST_LOAD_ERRORS: tuple[type[Exception], ...] = (
    OSError,
    UnicodeDecodeError,
    yaml.YAMLError,
    InvalidFrontmatterError,
    RenderError,
)


@dataclass
class ContentManager:
    """Reads posts and site configuration from the content directory.

    Posts are re-read from disk on every call; nothing is cached.
    """

    content_dir: Path
    default_author: str = DEFAULT_AUTHOR
    default_tz: str = "UTC"
    words_per_minute: int = WORDS_PER_MINUTE
    _site_config: SiteConfig | None = field(default=None, repr=False)

    @property
    def posts_dir(self) -> Path:
        return self.content_dir / "posts"

    @property
    def site_config(self) -> SiteConfig:
        """Get site configuration, loading if needed."""
        if self._site_config is None:
            self._site_config = parse_site_config(self.content_dir)
        return self._site_config

    def list_slugs(self) -> list[str]:
        """List post slugs in directory enumeration order.

        The order is whatever the filesystem yields; callers that display
        slugs must sort them.
        """
        if not self.posts_dir.is_dir():
            return []
        with os.scandir(self.posts_dir) as entries:
            return [
                entry.name.removesuffix(POST_EXTENSION)
                for entry in entries
                if entry.name.endswith(POST_EXTENSION) and entry.is_file()
            ]

    def post_path(self, slug: str) -> Path | None:
        """Return the file path for a slug, or None if the slug is not a plain file name."""
        if not slug or "/" in slug or "\\" in slug or slug.startswith("."):
            return None
        full_path = (self.posts_dir / f"{slug}{POST_EXTENSION}").resolve()
        if not full_path.is_relative_to(self.posts_dir.resolve()):
            return None
        return full_path

    def read_post(self, slug: str) -> PostData:
        """Read, validate and render a single post.

        Raises FileNotFoundError for unknown slugs and any of
        ``POST_LOAD_ERRORS`` for unreadable or invalid posts.
        """
        full_path = self.post_path(slug)
        if full_path is None:
            raise FileNotFoundError(f"Invalid post slug: {slug!r}")
        # utf-8-sig drops a leading byte-order mark so the front matter block is found.
        raw_content = full_path.read_text(encoding="utf-8-sig")
        metadata, body = split_frontmatter(raw_content)
        meta = validate_metadata(metadata, slug, default_tz=self.default_tz)
        content = render_markdown(body)
        return PostData(
            slug=slug,
            title=meta.title,
            date=meta.date,
            excerpt=meta.excerpt,
            content=content,
            reading_time=calculate_reading_time(body, self.words_per_minute),
            published_at=meta.published_at,
            tags=meta.tags,
            image=meta.image,
            author=meta.author or self.default_author,
            featured=meta.featured,
        )

    def load_post(self, slug: str) -> PostData | None:
        """Load a post by slug, or None if it is missing or invalid.

        Failures are logged, never raised.
        """
        full_path = self.post_path(slug)
        if full_path is None or not full_path.is_file():
            logger.debug("Post %r not found", slug)
            return None
        try:
            return self.read_post(slug)
        except InvalidFrontmatterError as exc:
            logger.warning("Skipping post %s: %s", slug, exc.reason)
        except POST_LOAD_ERRORS:
            logger.exception("Skipping post %s due to load error", slug)
        return None

    def scan_posts(self) -> list[PostData]:
        """Load every valid post, in directory enumeration order."""
        posts: list[PostData] = []
        for slug in self.list_slugs():
            post = self.load_post(slug)
            if post is not None:
                posts.append(post)
        return posts
