"""Slug generation for heading anchors and tag URLs."""

from __future__ import annotations

import re
import unicodedata

MAX_SLUG_LENGTH = 80


def slugify(text: str, separator: str = "-") -> str:
    """Generate a URL-safe slug from arbitrary text.

    - Normalize unicode to ASCII (NFKD)
    - Lowercase, strip
    - Replace runs of non-alphanumeric chars with the separator
    - Strip leading/trailing separators
    - Truncate to 80 chars (don't cut mid-word if possible)
    - Return "section" for empty/whitespace-only input
    """
    text = unicodedata.normalize("NFKD", text).encode("ascii", "ignore").decode("ascii")
    text = text.lower().strip()
    text = re.sub(r"[^a-z0-9]+", separator, text)
    text = text.strip(separator)

    if not text:
        return "section"

    if len(text) > MAX_SLUG_LENGTH:
        truncated = text[:MAX_SLUG_LENGTH]
        last_sep = truncated.rfind(separator)
        if last_sep > 0:
            truncated = truncated[:last_sep]
        text = truncated.rstrip(separator)

    return text
