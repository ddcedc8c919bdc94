"""Site, profile and portfolio schemas."""

from __future__ import annotations

from pydantic import BaseModel, Field


class SiteConfigResponse(BaseModel):
    """Site configuration response."""

    title: str
    description: str
    owner: str


class ProfileResponse(BaseModel):
    """Owner profile for the home and about pages."""

    name: str
    title: str
    subtitle: str
    profile_image: str | None = None
    about_image: str | None = None
    bio: dict[str, str] = Field(default_factory=dict)


class ProjectResponse(BaseModel):
    """Portfolio project."""

    id: str
    title: str
    description: str
    image: str | None = None
    technologies: list[str] = Field(default_factory=list)
    link: str | None = None
    github: str | None = None
    featured: bool = False


class TechStackResponse(BaseModel):
    name: str
    short_name: str
    color: str
    icon: str | None = None
    logo: str | None = None
