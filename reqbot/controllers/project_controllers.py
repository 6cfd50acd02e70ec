"""Project endpoints used by the interview: create, read, reopen."""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from reqbot.models.conversation_models import ErrorResponse
from reqbot.models.project_models import ProjectListResponse, ProjectResponse
from reqbot.repositories.interactions.dependencies import get_db
from reqbot.repositories.interactions.schemas.projects_schema import (
    ProjectCreate,
    ProjectRead,
)
from reqbot.services.exceptions import ProjectNotFoundError
from reqbot.services.interactions.projects_services import (
    ProjectService,
    get_project_service,
)

project_router = APIRouter(prefix="/projects", tags=["Projects"])


@project_router.post("", status_code=status.HTTP_201_CREATED)
def create_project(
    data: ProjectCreate,
    db: Session = Depends(get_db),
    project_service: ProjectService = Depends(get_project_service),
) -> ProjectResponse:
    project = project_service.create(db, data)
    return ProjectResponse(data=ProjectRead.model_validate(project))


@project_router.get("")
def list_projects(
    db: Session = Depends(get_db),
    project_service: ProjectService = Depends(get_project_service),
) -> ProjectListResponse:
    projects = project_service.list(db)
    return ProjectListResponse(data=[ProjectRead.model_validate(p) for p in projects])


@project_router.get("/{project_id}", responses={404: {"model": ErrorResponse}})
def get_project(
    project_id: int,
    db: Session = Depends(get_db),
    project_service: ProjectService = Depends(get_project_service),
) -> ProjectResponse:
    try:
        project = project_service.get(db, project_id)
    except ProjectNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ProjectResponse(data=ProjectRead.model_validate(project))


@project_router.post("/{project_id}/reopen", responses={404: {"model": ErrorResponse}})
def reopen_project(
    project_id: int,
    db: Session = Depends(get_db),
    project_service: ProjectService = Depends(get_project_service),
) -> ProjectResponse:
    """Return a summarized project to an open interview so new turns are accepted."""
    try:
        project = project_service.reopen(db, project_id)
    except ProjectNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ProjectResponse(data=ProjectRead.model_validate(project))
