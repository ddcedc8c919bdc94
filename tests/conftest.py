"""Shared test fixtures for Folio."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, Any

import frontmatter
import pytest
from httpx import ASGITransport, AsyncClient

from folio.config import Settings
from folio.filesystem.content_manager import ContentManager
from folio.main import create_app

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Callable
    from pathlib import Path

INDEX_TOML = """\
[site]
title = "Test Portfolio"
description = "Notes and projects"
owner = "Test Owner"
timezone = "UTC"
featured_project = "dashboard"

[profile]
name = "Test Owner"
title = "Front-end Architect"
subtitle = "Building things"
profile_image = "https://example.com/me.jpg"

[profile.bio]
intro = "Hello there."
personal = "I like hiking."

[[projects]]
id = "shop"
title = "E-commerce Platform"
description = "Full-stack shop."
technologies = ["React", "Node.js"]
featured = true

[[projects]]
id = "tasks"
title = "Task App"
technologies = ["Next.js"]

[[projects]]
id = "dashboard"
title = "Analytics Dashboard"
technologies = ["D3.js", "PostgreSQL"]
featured = true

[[tech_stack]]
name = "Python"
short_name = "Py"
color = "bg-yellow-500"

[[tech_stack]]
name = "SQL"
"""


def make_post_text(
    title: str | None = "Hello World",
    date: str | None = "2024-01-15",
    excerpt: str | None = "A short excerpt.",
    body: str = "Some body text.",
    **extra: Any,
) -> str:
    """Build a markdown document with front matter; ``None`` omits a field."""
    metadata: dict[str, Any] = {}
    for key, value in (("title", title), ("date", date), ("excerpt", excerpt)):
        if value is not None:
            metadata[key] = value
    metadata.update(extra)
    return str(frontmatter.dumps(frontmatter.Post(body, **metadata))) + "\n"


@pytest.fixture
def tmp_content_dir(tmp_path: Path) -> Path:
    """Create a temporary content directory with default structure."""
    content = tmp_path / "content"
    content.mkdir()
    (content / "posts").mkdir()
    (content / "index.toml").write_text(INDEX_TOML, encoding="utf-8")
    return content


@pytest.fixture
def write_post(tmp_content_dir: Path) -> Callable[..., Path]:
    """Return a helper that writes ``posts/{slug}.md`` and returns its path."""

    def _write(slug: str, **fields: Any) -> Path:
        path = tmp_content_dir / "posts" / f"{slug}.md"
        path.write_text(make_post_text(**fields), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def content_manager(tmp_content_dir: Path) -> ContentManager:
    return ContentManager(content_dir=tmp_content_dir)


@pytest.fixture
def test_settings(tmp_content_dir: Path) -> Settings:
    """Create test settings with temporary paths."""
    return Settings(
        _env_file=None,
        debug=True,
        content_dir=tmp_content_dir,
    )


@asynccontextmanager
async def create_test_client(settings: Settings) -> AsyncGenerator[AsyncClient]:
    """Create an HTTP test client for a freshly created app.

    ASGITransport does not run the lifespan; ``create_app`` already wires
    the content manager, which is all the endpoints need.
    """
    app = create_app(settings)
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


@pytest.fixture
async def client(test_settings: Settings) -> AsyncGenerator[AsyncClient]:
    """Create test HTTP client."""
    async with create_test_client(test_settings) as ac:
        yield ac
