"""Page service: profile and portfolio data for the static pages."""

from __future__ import annotations

from typing import TYPE_CHECKING

from folio.schemas.page import (
    ProfileResponse,
    ProjectResponse,
    SiteConfigResponse,
    TechStackResponse,
)

if TYPE_CHECKING:
    from folio.filesystem.content_manager import ContentManager
    from folio.filesystem.toml_manager import ProjectConfig


def _project_response(project: ProjectConfig) -> ProjectResponse:
    return ProjectResponse(
        id=project.id,
        title=project.title,
        description=project.description,
        image=project.image,
        technologies=list(project.technologies),
        link=project.link,
        github=project.github,
        featured=project.featured,
    )


def get_site_config(content_manager: ContentManager) -> SiteConfigResponse:
    """Get the site configuration for the frontend."""
    cfg = content_manager.site_config
    return SiteConfigResponse(
        title=cfg.title,
        description=cfg.description,
        owner=cfg.owner or content_manager.default_author,
    )


def get_profile(content_manager: ContentManager) -> ProfileResponse:
    """Get the owner profile shown on the home and about pages."""
    profile = content_manager.site_config.profile
    return ProfileResponse(
        name=profile.name or content_manager.default_author,
        title=profile.title,
        subtitle=profile.subtitle,
        profile_image=profile.profile_image,
        about_image=profile.about_image,
        bio=dict(profile.bio),
    )


def list_projects(
    content_manager: ContentManager, *, featured_only: bool = False
) -> list[ProjectResponse]:
    """List portfolio projects in configured order."""
    projects = content_manager.site_config.projects
    if featured_only:
        projects = [p for p in projects if p.featured]
    return [_project_response(p) for p in projects]


def get_featured_project(content_manager: ContentManager) -> ProjectResponse | None:
    """Get the highlighted project.

    Uses ``site.featured_project`` when it names a known project, otherwise
    the first configured project.
    """
    cfg = content_manager.site_config
    if not cfg.projects:
        return None
    chosen = next((p for p in cfg.projects if p.id == cfg.featured_project), cfg.projects[0])
    return _project_response(chosen)


def list_tech_stack(content_manager: ContentManager) -> list[TechStackResponse]:
    """List technologies for the tech carousel."""
    return [
        TechStackResponse(
            name=t.name,
            short_name=t.short_name,
            color=t.color,
            icon=t.icon,
            logo=t.logo,
        )
        for t in content_manager.site_config.tech_stack
    ]
