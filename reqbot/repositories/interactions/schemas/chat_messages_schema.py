"""
This module defines Pydantic models for transcript turns.

It includes base validation for turn attributes, as well as models for creating
and reading turns.
"""

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict

TurnRole = Literal["user", "bot"]


class ChatMessageBase(BaseModel):
    """
    Represents the base structure for a turn.

    Attributes:
        project_id (int): ID of the owning project.
        role (str): "user" or "bot".
        content (str): The turn text.
    """

    project_id: int
    role: TurnRole
    content: str


class ChatMessageCreate(ChatMessageBase):
    """
    Represents the data required to append a turn.

    Inherits all fields from ChatMessageBase.
    """

    pass


class ChatMessageRead(ChatMessageBase):
    """A stored turn as returned by ``GET /chat``."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    created_at: Optional[datetime] = None
