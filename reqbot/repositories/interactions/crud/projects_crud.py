"""
CRUD operations for managing projects in the database.

This module provides a `CRUDProject` class with methods to:
- Retrieve a project by ID, or list all projects.
- Create a project.
- Stage a summary overwrite or a status change without committing.
"""

from typing import List, Optional

from sqlalchemy import desc
from sqlalchemy.orm import Session

from reqbot.repositories.interactions.models.projects_model import Project
from reqbot.repositories.interactions.schemas.projects_schema import ProjectCreate


class CRUDProject:
    """
    Repository class for handling database operations related to projects.

    Staging methods (`set_summary`, `set_status`) only flush: the caller owns
    the transaction so several writes can commit or roll back together.
    """

    def __init__(self) -> None:
        """Init class."""
        pass

    def get(self, db: Session, project_id: int) -> Optional[Project]:
        """
        Retrieve a project by its ID.

        Args:
            db (Session): The database session.
            project_id (int): The ID of the project.

        Returns:
            Optional[Project]: The project if found, otherwise None.
        """
        return db.query(Project).filter(Project.id == project_id).first()

    def get_all(self, db: Session) -> List[Project]:
        """Return every project, newest first."""
        return db.query(Project).order_by(desc(Project.created_at), desc(Project.id)).all()

    def create(self, db: Session, project_in: ProjectCreate) -> Project:
        """
        Create a new project in the database.

        Args:
            db (Session): The database session.
            project_in (ProjectCreate): The project data to be inserted.

        Returns:
            Project: The newly created project.
        """
        db_project = Project(**project_in.model_dump())
        db.add(db_project)
        db.commit()
        db.refresh(db_project)
        return db_project

    def set_summary(self, db: Session, project: Project, summary_json: str) -> Project:
        """Overwrite the stored summary and flush, leaving the commit to the caller."""
        project.summary = summary_json
        db.flush()
        return project

    def set_status(self, db: Session, project: Project, status: str) -> Project:
        """Change the interview status and flush, leaving the commit to the caller."""
        project.interview_status = status
        db.flush()
        return project
