"""Application-level exception types.

Convention:
- ``InvalidFrontmatterError`` and ``RenderError`` are per-post failures.  The
  content manager catches them, logs the offending slug and drops the post;
  they never abort a listing.
- ``ValueError`` is for validation errors that are safe to forward to
  clients; the global handler returns ``str(exc)`` as the 422 detail.
"""

from __future__ import annotations


class InvalidFrontmatterError(ValueError):
    """Raised when a post's front matter lacks a required field or has a bad value."""

    def __init__(self, slug: str, reason: str) -> None:
        super().__init__(f"Invalid front matter in {slug}.md: {reason}")
        self.slug = slug
        self.reason = reason


class RenderError(RuntimeError):
    """Raised when a markdown body cannot be converted to HTML."""

