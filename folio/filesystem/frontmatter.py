"""YAML front matter parsing and post validation."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any

import frontmatter
import yaml

from folio.exceptions import InvalidFrontmatterError
from folio.services.datetime_service import format_date_string, parse_datetime

logger = logging.getLogger(__name__)

REQUIRED_FIELDS: tuple[str, ...] = ("title", "date", "excerpt")

WORDS_PER_MINUTE = 200


@dataclass
class PostData:
    """A fully loaded blog post."""

    slug: str
    title: str
    date: str
    excerpt: str
    content: str
    reading_time: str
    published_at: datetime
    tags: list[str] = field(default_factory=list)
    image: str | None = None
    author: str = ""
    featured: bool = False


@dataclass
class PostMetadata:
    """Validated front matter of a post, before the body is rendered."""

    title: str
    date: str
    excerpt: str
    published_at: datetime
    tags: list[str] = field(default_factory=list)
    image: str | None = None
    author: str | None = None
    featured: bool = False


def split_frontmatter(raw_content: str) -> tuple[dict[str, Any], str]:
    """Split a leading ``---`` YAML block from the markdown body.

    Returns ``({}, raw_content)`` when there is no front matter block.
    Raises ``yaml.YAMLError`` if a block is present but is not valid YAML.
    """
    handler = frontmatter.YAMLHandler()
    if not handler.detect(raw_content):
        return {}, raw_content
    try:
        fm_text, body = handler.split(raw_content)
    except ValueError:
        # Opening delimiter without a closing one: not a front matter block.
        return {}, raw_content
    metadata = yaml.safe_load(fm_text) if fm_text.strip() else {}
    if metadata is None:
        metadata = {}
    if not isinstance(metadata, dict):
        raise yaml.YAMLError(f"Front matter must be a mapping, got {type(metadata).__name__}")
    return metadata, body


def calculate_reading_time(body: str, words_per_minute: int = WORDS_PER_MINUTE) -> str:
    """Estimate reading time of an unrendered markdown body.

    Rounds up to whole minutes and never reports less than one minute.
    """
    words = len(body.split())
    minutes = max(1, math.ceil(words / words_per_minute))
    return f"{minutes} min read"


def parse_tags(raw_tags: object | None, slug: str = "") -> list[str]:
    """Parse the ``tags`` field, preserving authored order and case.

    A single scalar is treated as a one-tag list. Anything else that is not
    a list is ignored with a warning; tags never hide a post.
    """
    if raw_tags is None:
        return []
    if isinstance(raw_tags, (str, int, float)):
        raw_tags = [raw_tags]
    if not isinstance(raw_tags, list):
        logger.warning("Ignoring tags of post %s: expected a list, got %r", slug, raw_tags)
        return []
    result: list[str] = []
    for tag in raw_tags:
        if tag is None:
            continue
        tag_str = str(tag).strip()
        if tag_str:
            result.append(tag_str)
    return result


def _required_string(metadata: dict[str, Any], key: str, slug: str) -> str:
    value = metadata.get(key)
    if value is None:
        raise InvalidFrontmatterError(slug, f"missing required field '{key}'")
    if isinstance(value, (date, datetime)):
        text = format_date_string(value)
    else:
        text = str(value).strip()
    if not text:
        raise InvalidFrontmatterError(slug, f"required field '{key}' is empty")
    return text


def _optional_string(raw: object) -> str | None:
    if raw is None:
        return None
    text = str(raw).strip()
    return text or None


def _parse_featured(raw: object, slug: str) -> bool:
    if raw is None:
        return False
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, str) and raw.strip().lower() in {"true", "yes", "1"}:
        return True
    if isinstance(raw, str) and raw.strip().lower() in {"false", "no", "0", ""}:
        return False
    logger.warning("Ignoring featured flag of post %s: not a boolean: %r", slug, raw)
    return False


def validate_metadata(
    metadata: dict[str, Any],
    slug: str,
    default_tz: str = "UTC",
) -> PostMetadata:
    """Validate required fields and normalize optional ones.

    Raises InvalidFrontmatterError on the first problem found.
    """
    title = _required_string(metadata, "title", slug)
    date_str = _required_string(metadata, "date", slug)
    excerpt = _required_string(metadata, "excerpt", slug)

    raw_date = metadata["date"]
    try:
        published_at = parse_datetime(
            raw_date if isinstance(raw_date, (date, datetime)) else date_str,
            default_tz=default_tz,
        )
    except ValueError as exc:
        raise InvalidFrontmatterError(slug, f"unparseable date {date_str!r}") from exc

    return PostMetadata(
        title=title,
        date=date_str,
        excerpt=excerpt,
        published_at=published_at,
        tags=parse_tags(metadata.get("tags"), slug),
        image=_optional_string(metadata.get("image")),
        author=_optional_string(metadata.get("author")),
        featured=_parse_featured(metadata.get("featured"), slug),
    )
