"""This module provides the ProjectService class, the thin project boundary used by the interview."""

from typing import List

from fastapi import Depends
from sqlalchemy.orm import Session

from reqbot.repositories.interactions.crud.projects_crud import CRUDProject
from reqbot.repositories.interactions.models.projects_model import (
    INTERVIEW_OPEN,
    Project,
)
from reqbot.repositories.interactions.schemas.projects_schema import ProjectCreate
from reqbot.services.exceptions import ProjectNotFoundError


class ProjectService:
    """Service layer for handling project-related operations."""

    def __init__(self, project_repository: CRUDProject):
        """
        Initialize the ProjectService with a CRUD repository.

        Args:
            project_repository (CRUDProject): Repository for project database operations.
        """
        self.project_repository = project_repository

    def get(self, db: Session, project_id: int) -> Project:
        """
        Retrieve a project or raise.

        Raises:
            ProjectNotFoundError: If the ID is unknown.
        """
        project = self.project_repository.get(db, project_id)
        if project is None:
            raise ProjectNotFoundError(project_id)
        return project

    def list(self, db: Session) -> List[Project]:
        """Return every project."""
        return self.project_repository.get_all(db)

    def create(self, db: Session, project_in: ProjectCreate) -> Project:
        """Create a project with an open interview."""
        return self.project_repository.create(db, project_in)

    def reopen(self, db: Session, project_id: int) -> Project:
        """
        Move a summarized project back to an open interview.

        The stored summary is kept; it is overwritten by the next summary commit.
        """
        project = self.get(db, project_id)
        self.project_repository.set_status(db, project, INTERVIEW_OPEN)
        db.commit()
        db.refresh(project)
        return project


# Dependency for FastAPI
def get_project_service(project_repository: CRUDProject = Depends()) -> ProjectService:
    """Retrieve an instance of ProjectService with the provided repository."""
    return ProjectService(project_repository)
