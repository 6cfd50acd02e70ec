"""This module defines the Project model, owner of a transcript and a summary."""

from sqlalchemy import Column, Integer, String, Text, TIMESTAMP
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from reqbot.repositories.interactions.database import Base

INTERVIEW_OPEN = "open"
INTERVIEW_SUMMARIZED = "summarized"


class Project(Base):  # type: ignore[misc]
    """
    Represents a requirements-gathering project.

    Attributes:
        id (int): Primary key.
        name (str): Display name, interpolated into the interview prompt.
        description (str): Optional free text.
        summary (str): Serialized canonical summary (JSON), overwritten on each generation.
        interview_status (str): "open" while the interview runs, "summarized" after a summary commit.
        created_at (timestamp): Creation time.
    """

    __tablename__ = "projects"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    description = Column(Text, nullable=True)
    summary = Column(Text, nullable=True)
    interview_status = Column(String(12), nullable=False, default=INTERVIEW_OPEN)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())

    chat_messages = relationship(
        "ChatMessage", back_populates="project", cascade="all, delete"
    )

    __mapper_args__ = {"eager_defaults": True}
