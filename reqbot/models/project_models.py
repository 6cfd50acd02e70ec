"""Response envelopes for the project endpoints."""

from typing import List

from pydantic import BaseModel

from reqbot.repositories.interactions.schemas.projects_schema import ProjectRead


class ProjectResponse(BaseModel):
    """Data model for a single project."""

    success: bool = True
    data: ProjectRead


class ProjectListResponse(BaseModel):
    """Data model for every project."""

    success: bool = True
    data: List[ProjectRead]
