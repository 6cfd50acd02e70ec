"""Atomically store a project's summary and close its interview."""

from __future__ import annotations

from fastapi import Depends
from sqlalchemy.orm import Session

from reqbot.logger_config import get_logger
from reqbot.models.summary_models import CanonicalSummary
from reqbot.repositories.interactions.crud.chat_messages_crud import CRUDChatMessages
from reqbot.repositories.interactions.crud.projects_crud import CRUDProject
from reqbot.repositories.interactions.models.projects_model import (
    INTERVIEW_SUMMARIZED,
)
from reqbot.services.exceptions import ProjectNotFoundError, SummaryPersistenceError

logger = get_logger("summary.persistence")


class SummaryPersistence:
    """Sole writer of ``projects.summary`` and sole mass-deleter of turns.

    Summary overwrite, transcript deletion and the Open -> Summarized status
    change share one transaction. A turn appended concurrently by another
    request either lands before the delete (and is removed) or after the
    commit (and starts a transcript the next append will reject).
    """

    def __init__(
        self,
        project_repository: CRUDProject,
        chat_message_repository: CRUDChatMessages,
    ) -> None:
        self.project_repository = project_repository
        self.chat_message_repository = chat_message_repository

    def commit_summary(
        self, db: Session, project_id: int, summary: CanonicalSummary
    ) -> None:
        """
        Overwrite the stored summary and clear the transcript, all or nothing.

        Raises:
            ProjectNotFoundError: The project does not exist; nothing is written.
            SummaryPersistenceError: A database step failed; the transaction was rolled back.
        """
        project = self.project_repository.get(db, project_id)
        if project is None:
            raise ProjectNotFoundError(project_id)

        try:
            self.project_repository.set_summary(db, project, summary.to_json())
            deleted = self.chat_message_repository.delete_by_project_id(db, project_id)
            self.project_repository.set_status(db, project, INTERVIEW_SUMMARIZED)
            db.commit()
        except Exception as exc:
            db.rollback()
            logger.error("Summary commit for project %s rolled back: %s", project_id, exc)
            raise SummaryPersistenceError(
                f"Failed to store summary for project {project_id}: {exc}"
            ) from exc

        logger.info(
            "Stored summary for project %s and cleared %d turn(s)", project_id, deleted
        )


def get_summary_persistence(
    project_repository: CRUDProject = Depends(),
    chat_message_repository: CRUDChatMessages = Depends(),
) -> SummaryPersistence:
    """FastAPI dependency for SummaryPersistence."""
    return SummaryPersistence(project_repository, chat_message_repository)
