"""This module provides the ChatMessageService class, the transcript store of an interview."""

from typing import List

from fastapi import Depends
from sqlalchemy.orm import Session

from reqbot.models.conversation_models import ConversationMessage
from reqbot.repositories.interactions.crud.chat_messages_crud import CRUDChatMessages
from reqbot.repositories.interactions.crud.projects_crud import CRUDProject
from reqbot.repositories.interactions.models.chat_messages_model import ChatMessage
from reqbot.repositories.interactions.models.projects_model import (
    INTERVIEW_SUMMARIZED,
)
from reqbot.repositories.interactions.schemas.chat_messages_schema import (
    ChatMessageCreate,
    TurnRole,
)
from reqbot.services.exceptions import InterviewClosedError, ProjectNotFoundError


class ChatMessageService:
    """Service layer for the append-only transcript of each project."""

    def __init__(
        self,
        chat_message_repository: CRUDChatMessages,
        project_repository: CRUDProject,
    ):
        """
        Initialize the ChatMessageService with its repositories.

        Args:
            chat_message_repository (CRUDChatMessages): Turn persistence.
            project_repository (CRUDProject): Used to check that the project exists and is open.
        """
        self.chat_message_repository = chat_message_repository
        self.project_repository = project_repository

    def transcript(self, db: Session, project_id: int) -> List[ChatMessage]:
        """
        Retrieve the ordered turns of a project.

        Args:
            db (Session): The database session.
            project_id (int): The ID of the project.

        Returns:
            List[ChatMessage]: Turns in chronological order; empty after a summary commit.
        """
        return self.chat_message_repository.get_by_project_id(db, project_id)

    def conversation(self, db: Session, project_id: int) -> List[ConversationMessage]:
        """Return the transcript mapped to provider-agnostic conversation messages."""
        return [
            ConversationMessage.from_turn(turn.role, turn.content)
            for turn in self.transcript(db, project_id)
        ]

    def append(
        self, db: Session, project_id: int, role: TurnRole, content: str
    ) -> ChatMessage:
        """
        Append one turn to an open interview.

        Raises:
            ProjectNotFoundError: If the project does not exist.
            InterviewClosedError: If the project was summarized and not reopened.
        """
        project = self.project_repository.get(db, project_id)
        if project is None:
            raise ProjectNotFoundError(project_id)
        if project.interview_status == INTERVIEW_SUMMARIZED:
            raise InterviewClosedError(project_id)

        message_in = ChatMessageCreate(project_id=project_id, role=role, content=content)
        return self.chat_message_repository.create(db, message_in)


# Dependency Injection for FastAPI
def get_chat_messages_service(
    chat_message_repository: CRUDChatMessages = Depends(),
    project_repository: CRUDProject = Depends(),
) -> ChatMessageService:
    """Retrieve an instance of ChatMessageService with the provided repositories."""
    return ChatMessageService(chat_message_repository, project_repository)
