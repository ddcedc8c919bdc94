"""Site, profile and portfolio API endpoints."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException

from folio.api.deps import get_content_manager
from folio.filesystem.content_manager import ContentManager
from folio.schemas.page import (
    ProfileResponse,
    ProjectResponse,
    SiteConfigResponse,
    TechStackResponse,
)
from folio.services.page_service import (
    get_featured_project,
    get_profile,
    get_site_config,
    list_projects,
    list_tech_stack,
)

router = APIRouter(prefix="/api", tags=["pages"])


@router.get("/site", response_model=SiteConfigResponse)
def site_config_endpoint(
    content_manager: Annotated[ContentManager, Depends(get_content_manager)],
) -> SiteConfigResponse:
    """Get site configuration."""
    return get_site_config(content_manager)


@router.get("/profile", response_model=ProfileResponse)
def profile_endpoint(
    content_manager: Annotated[ContentManager, Depends(get_content_manager)],
) -> ProfileResponse:
    return get_profile(content_manager)


@router.get("/projects", response_model=list[ProjectResponse])
def projects_endpoint(
    content_manager: Annotated[ContentManager, Depends(get_content_manager)],
    featured: bool = False,
) -> list[ProjectResponse]:
    """List portfolio projects, optionally only the featured ones."""
    return list_projects(content_manager, featured_only=featured)


@router.get("/projects/featured", response_model=ProjectResponse)
def featured_project_endpoint(
    content_manager: Annotated[ContentManager, Depends(get_content_manager)],
) -> ProjectResponse:
    project = get_featured_project(content_manager)
    if project is None:
        raise HTTPException(status_code=404, detail="No projects configured")
    return project


@router.get("/tech-stack", response_model=list[TechStackResponse])
def tech_stack_endpoint(
    content_manager: Annotated[ContentManager, Depends(get_content_manager)],
) -> list[TechStackResponse]:
    return list_tech_stack(content_manager)
