"""Request/response models for the chat endpoints and the provider-agnostic message shape."""

from typing import Any, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from reqbot.repositories.interactions.schemas.chat_messages_schema import (
    ChatMessageRead,
)

# Storage role -> conversation role, and back.
TURN_TO_CONVERSATION_ROLE = {"user": "user", "bot": "model"}
CONVERSATION_TO_TURN_ROLE = {"user": "user", "model": "bot"}


class MessagePart(BaseModel):
    """One text fragment of a conversation message."""

    text: str = ""


class ConversationMessage(BaseModel):
    """A message exchanged with the provider gateway.

    ``parts`` are concatenated with newlines to obtain the message text. The
    assistant side is always called ``model``; ``assistant`` and ``bot`` are
    accepted on input and folded into it.
    """

    role: Literal["user", "model"]
    parts: List[MessagePart] = Field(default_factory=list)

    @field_validator("role", mode="before")
    @classmethod
    def _fold_assistant_role(cls, value: Any) -> Any:
        if value in ("assistant", "bot"):
            return "model"
        return value

    @property
    def text(self) -> str:
        """Return the non-empty parts joined by newlines."""
        return "\n".join(part.text for part in self.parts if part.text)

    @classmethod
    def from_text(cls, role: str, text: str) -> "ConversationMessage":
        return cls(role=role, parts=[MessagePart(text=text)])

    @classmethod
    def from_turn(cls, turn_role: str, content: str) -> "ConversationMessage":
        """Map a stored turn (``user``/``bot``) to a conversation message."""
        return cls.from_text(TURN_TO_CONVERSATION_ROLE.get(turn_role, "user"), content)


class CamelModel(BaseModel):
    """Base for payloads exchanged with the web client in camelCase."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ChatRequest(CamelModel):
    """Body of ``POST /chat``.

    ``role="conversation"`` asks the bot for its next turn; ``user``/``bot``
    stores one turn in the transcript.
    """

    project_id: int = Field(..., gt=0, description="Project owning the interview.")
    role: Literal["conversation", "user", "bot"]
    content: str = Field(..., description="Latest user text, or the turn to store.")
    conversation_history: Optional[List[ConversationMessage]] = Field(
        default=None, description="Full transcript, required for role=conversation."
    )
    project_name: Optional[str] = None


class ConversationResponse(BaseModel):
    """Data model for the bot's next turn."""

    success: bool = True
    response: str = Field(..., description="Bot text produced by the conversation driver.")


class TurnResponse(BaseModel):
    """Data model for a stored turn."""

    success: bool = True
    data: ChatMessageRead


class TranscriptResponse(BaseModel):
    """Data model for an ordered transcript."""

    success: bool = True
    data: List[ChatMessageRead]


class ErrorResponse(BaseModel):
    """Data model for every error returned by the API."""

    success: bool = False
    error: str
