"""CLI content checker: report posts that would be hidden from the blog."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from folio.config import Settings
from folio.filesystem.content_manager import POST_LOAD_ERRORS, ContentManager
from folio.main import build_content_manager
from folio.services.post_service import all_tags, sort_posts


def _content_manager(content_dir: Path) -> ContentManager:
    """Build a manager honoring the author, timezone and reading speed settings."""
    return build_content_manager(Settings(content_dir=content_dir))


def check_content(content_dir: Path) -> tuple[int, list[tuple[str, str]]]:
    """Load every post under content_dir.

    Returns the number of valid posts and a ``(slug, reason)`` pair for each
    post that failed to load, sorted by slug.
    """
    cm = _content_manager(content_dir)
    valid = 0
    failures: list[tuple[str, str]] = []
    for slug in sorted(cm.list_slugs()):
        try:
            cm.read_post(slug)
        except POST_LOAD_ERRORS as exc:
            failures.append((slug, str(exc) or type(exc).__name__))
        else:
            valid += 1
    return valid, failures


def main(argv: list[str] | None = None) -> None:
    """Entry point for folio-check."""
    parser = argparse.ArgumentParser(
        description="Validate blog posts in a Folio content directory",
    )
    parser.add_argument(
        "--dir", "-d", default="./content", help="Content directory (default: ./content)"
    )
    parser.add_argument("--list", action="store_true", help="List valid posts, newest first")
    args = parser.parse_args(argv)

    content_dir = Path(args.dir).resolve()
    if not (content_dir / "posts").is_dir():
        print(f"Error: no posts directory in {content_dir}")
        sys.exit(1)

    valid, failures = check_content(content_dir)

    if args.list:
        cm = _content_manager(content_dir)
        for post in sort_posts(cm.scan_posts()):
            print(f"  {post.date}  {post.slug}  ({post.reading_time})")
        tags = all_tags(cm)
        print(f"Tags: {', '.join(tags) if tags else '(none)'}")

    print(f"Valid posts:   {valid}")
    print(f"Invalid posts: {len(failures)}")
    for slug, reason in failures:
        print(f"    ! {slug}.md: {reason}")

    if failures:
        sys.exit(1)


if __name__ == "__main__":
    main()
