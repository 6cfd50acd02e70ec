"""
CRUD operations for managing transcript turns in the database.

This module provides a `CRUDChatMessages` class with methods to:
- Retrieve the ordered transcript of a project.
- Append a turn.
- Delete every turn of a project.
"""

from typing import List

from sqlalchemy.orm import Session

from reqbot.repositories.interactions.models.chat_messages_model import ChatMessage
from reqbot.repositories.interactions.schemas.chat_messages_schema import (
    ChatMessageCreate,
)


class CRUDChatMessages:
    """
    Repository class for handling database operations related to transcript turns.

    This class provides methods to interact with the database, including
    fetching, creating, and mass-deleting turns.
    """

    def __init__(self) -> None:
        """Init class."""
        pass

    def get_by_project_id(self, db: Session, project_id: int) -> List[ChatMessage]:
        """
        Retrieve every turn of a project in chronological order.

        Args:
            db (Session): The database session.
            project_id (int): The ID of the project.

        Returns:
            List[ChatMessage]: Turns ordered by creation time, then by ID.
        """
        return (
            db.query(ChatMessage)
            .filter(ChatMessage.project_id == project_id)
            .order_by(ChatMessage.created_at.asc(), ChatMessage.id.asc())
            .all()
        )

    def create(self, db: Session, message_in: ChatMessageCreate) -> ChatMessage:
        """
        Append a new turn.

        Args:
            db (Session): The database session.
            message_in (ChatMessageCreate): The turn data to be inserted.

        Returns:
            ChatMessage: The newly created turn.
        """
        db_message = ChatMessage(**message_in.model_dump())
        db.add(db_message)
        db.commit()
        db.refresh(db_message)
        return db_message

    def delete_by_project_id(self, db: Session, project_id: int) -> int:
        """
        Delete every turn of a project inside the caller's transaction.

        Args:
            db (Session): The database session.
            project_id (int): The ID of the project.

        Returns:
            int: Number of deleted turns.
        """
        deleted: int = (
            db.query(ChatMessage)
            .filter(ChatMessage.project_id == project_id)
            .delete(synchronize_session=False)
        )
        db.flush()
        return deleted
