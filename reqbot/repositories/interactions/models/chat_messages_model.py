"""This module defines the ChatMessage model, one stored turn of an interview."""

from sqlalchemy import (
    Column,
    Integer,
    String,
    TIMESTAMP,
    Text,
    ForeignKey,
    CheckConstraint,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from reqbot.repositories.interactions.database import Base


class ChatMessage(Base):  # type: ignore[misc]
    """
    Represents a transcript turn in the database.

    Attributes:
        id (int): Primary key, breaks ties between turns with the same timestamp.
        project_id (int): ID of the owning project.
        role (str): Who spoke ("user" or "bot").
        content (str): The text of the turn.
        created_at (timestamp): When the turn was stored.
    """

    __tablename__ = "chat_messages"

    id = Column(Integer, primary_key=True, autoincrement=True)
    project_id = Column(
        Integer, ForeignKey("projects.id", ondelete="CASCADE"), nullable=False
    )
    role = Column(String(4), nullable=False)
    content = Column(Text, nullable=False)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())

    project = relationship("Project", back_populates="chat_messages")

    __table_args__ = (
        CheckConstraint("role IN ('user', 'bot')", name="ck_chat_messages_role"),
    )
    __mapper_args__ = {"eager_defaults": True}
