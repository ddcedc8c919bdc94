"""TOML configuration reader for index.toml (site, profile and portfolio data)."""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass
class ProfileConfig:
    """Site owner profile shown on the home and about pages."""

    name: str = ""
    title: str = ""
    subtitle: str = ""
    profile_image: str | None = None
    about_image: str | None = None
    bio: dict[str, str] = field(default_factory=dict)


@dataclass
class ProjectConfig:
    """A portfolio project."""

    id: str
    title: str
    description: str = ""
    image: str | None = None
    technologies: list[str] = field(default_factory=list)
    link: str | None = None
    github: str | None = None
    featured: bool = False


@dataclass
class TechStackEntry:
    """A technology shown in the tech carousel."""

    name: str
    short_name: str
    color: str = ""
    icon: str | None = None
    logo: str | None = None


@dataclass
class SiteConfig:
    """Parsed site configuration from index.toml."""

    title: str = "My Portfolio"
    description: str = ""
    owner: str = ""
    timezone: str = "UTC"
    profile: ProfileConfig = field(default_factory=ProfileConfig)
    projects: list[ProjectConfig] = field(default_factory=list)
    tech_stack: list[TechStackEntry] = field(default_factory=list)
    featured_project: str | None = None


def _table(data: dict[str, Any], key: str) -> dict[str, Any]:
    value = data.get(key, {})
    if not isinstance(value, dict):
        msg = f"'{key}' must be a table"
        raise ValueError(msg)
    return value


def _array_of_tables(data: dict[str, Any], key: str) -> list[dict[str, Any]]:
    value = data.get(key, [])
    if not isinstance(value, list) or not all(isinstance(v, dict) for v in value):
        msg = f"'{key}' must be an array of tables"
        raise ValueError(msg)
    return value


def _optional_str(data: dict[str, Any], key: str) -> str | None:
    value = data.get(key)
    return str(value) if value else None


def _parse_profile(data: dict[str, Any]) -> ProfileConfig:
    bio_data = _table(data, "bio")
    return ProfileConfig(
        name=str(data.get("name", "")),
        title=str(data.get("title", "")),
        subtitle=str(data.get("subtitle", "")),
        profile_image=_optional_str(data, "profile_image"),
        about_image=_optional_str(data, "about_image"),
        bio={str(k): str(v) for k, v in bio_data.items()},
    )


def _parse_projects(entries: list[dict[str, Any]]) -> list[ProjectConfig]:
    projects: list[ProjectConfig] = []
    for project_data in entries:
        if "id" not in project_data:
            msg = f"Project entry missing required 'id' field: {project_data}"
            raise ValueError(msg)
        projects.append(
            ProjectConfig(
                id=str(project_data["id"]),
                title=str(project_data.get("title", project_data["id"])),
                description=str(project_data.get("description", "")),
                image=_optional_str(project_data, "image"),
                technologies=[str(t) for t in project_data.get("technologies", [])],
                link=_optional_str(project_data, "link"),
                github=_optional_str(project_data, "github"),
                featured=bool(project_data.get("featured", False)),
            )
        )
    return projects


def _parse_tech_stack(entries: list[dict[str, Any]]) -> list[TechStackEntry]:
    stack: list[TechStackEntry] = []
    for entry in entries:
        if "name" not in entry:
            msg = f"Tech stack entry missing required 'name' field: {entry}"
            raise ValueError(msg)
        name = str(entry["name"])
        stack.append(
            TechStackEntry(
                name=name,
                short_name=str(entry.get("short_name", name)),
                color=str(entry.get("color", "")),
                icon=_optional_str(entry, "icon"),
                logo=_optional_str(entry, "logo"),
            )
        )
    return stack


def parse_site_config(content_dir: Path) -> SiteConfig:
    """Parse index.toml from the content directory.

    A missing, corrupted or structurally invalid file yields the defaults.
    """
    index_path = content_dir / "index.toml"
    if not index_path.exists():
        return SiteConfig()

    try:
        data = tomllib.loads(index_path.read_text(encoding="utf-8"))
        site_data = _table(data, "site")
        return SiteConfig(
            title=site_data.get("title", "My Portfolio"),
            description=site_data.get("description", ""),
            owner=site_data.get("owner", ""),
            timezone=site_data.get("timezone", "UTC"),
            profile=_parse_profile(_table(data, "profile")),
            projects=_parse_projects(_array_of_tables(data, "projects")),
            tech_stack=_parse_tech_stack(_array_of_tables(data, "tech_stack")),
            featured_project=site_data.get("featured_project"),
        )
    except (tomllib.TOMLDecodeError, ValueError) as exc:
        logger.error("Invalid site configuration in %s: %s", index_path, exc)
        return SiteConfig()
